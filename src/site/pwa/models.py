"""Data models for the web-app manifest."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

MANIFEST_CONTENT_TYPE = "application/manifest+json"
MANIFEST_CACHE_CONTROL = "public, max-age=86400"  # One day

# Icon sizes generated when pwa.icons is "auto"
AUTO_ICON_SIZES_FROM_LOGO = (64, 128, 192)
AUTO_ICON_SIZES_FROM_TOUCH_ICON = (256, 384, 512)
SHORTCUT_ICON_SIZES = "96x96"
MAX_SHORTCUTS = 4


@dataclass
class ManifestResponse:
    """What the /manifest.json endpoint serves."""

    status: int
    body: dict[str, Any]
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == 200

    def to_json(self) -> str:
        # The manifest itself is pretty-printed, error bodies are compact
        if self.ok:
            return json.dumps(self.body, ensure_ascii=False, indent=2)
        return json.dumps(self.body, ensure_ascii=False)
