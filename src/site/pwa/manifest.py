"""Web-app manifest generation from a brand configuration.

Unset manifest fields fall back to site identity and theme colours:

    name              pwa.name        → site.name
    short_name        pwa.short_name  → first 12 characters of site.name
    description       pwa.description → site.description
    theme_color       pwa.theme_color → primary["500"] → #3B82F6
    background_color  pwa.background_color → primary["50"] → #F8FAFC

icons: "auto" yields seven icons built from the branding images, and
shortcuts: "auto" yields up to four shortcuts from the header navigation
topped up with common pages.

Usage:
    from src.site.pwa import render_manifest_response

    response = render_manifest_response(config)
    if response.ok:
        Path("dist/manifest.json").write_text(response.to_json())
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from src.common.blog_config import BlogConfig, PWAShortcut

from .models import (
    AUTO_ICON_SIZES_FROM_LOGO,
    AUTO_ICON_SIZES_FROM_TOUCH_ICON,
    MANIFEST_CACHE_CONTROL,
    MANIFEST_CONTENT_TYPE,
    MAX_SHORTCUTS,
    SHORTCUT_ICON_SIZES,
    ManifestResponse,
)

logger = logging.getLogger(__name__)

DEFAULT_THEME_COLOR = "#3B82F6"
DEFAULT_BACKGROUND_COLOR = "#F8FAFC"
SHORT_NAME_LENGTH = 12


def generate_manifest(config: BlogConfig) -> dict[str, Any]:
    """Build the manifest document.

    Raises:
        ValueError: PWA is not configured or not enabled for the brand.
    """
    pwa = config.pwa
    if pwa is None or not pwa.enabled:
        raise ValueError("PWA is not enabled in the blog configuration")

    primary = config.theme.colors.primary if config.theme.colors else {}
    icons = (
        _default_icons(config)
        if pwa.icons == "auto"
        else [_drop_none(icon.model_dump()) for icon in pwa.icons]
    )

    manifest: dict[str, Any] = {
        "name": pwa.name or config.site.name,
        "short_name": pwa.short_name or config.site.name[:SHORT_NAME_LENGTH],
        "description": pwa.description or config.site.description,
        "start_url": pwa.start_url or "/",
        "scope": pwa.scope or "/",
        "display": pwa.display or "minimal-ui",
        "orientation": pwa.orientation or "any",
        "theme_color": pwa.theme_color or primary.get("500") or DEFAULT_THEME_COLOR,
        "background_color": (
            pwa.background_color or primary.get("50") or DEFAULT_BACKGROUND_COLOR
        ),
        "icons": icons,
    }

    if pwa.categories:
        manifest["categories"] = list(pwa.categories)

    shortcuts = _default_shortcuts(config) if pwa.shortcuts == "auto" else pwa.shortcuts
    if shortcuts:
        manifest["shortcuts"] = [_shortcut_entry(s) for s in shortcuts]

    if pwa.screenshots:
        manifest["screenshots"] = [
            _drop_none({
                "src": shot.src,
                "sizes": shot.sizes,
                "type": shot.type,
                "label": shot.label,
                "form_factor": "wide",
            })
            for shot in pwa.screenshots
        ]

    return manifest


def validate_pwa_config(config: BlogConfig) -> list[str]:
    """Problems that keep the manifest from being served; [] when valid."""
    pwa = config.pwa
    if pwa is None:
        return ["PWA configuration is missing"]
    if not pwa.enabled:
        return ["PWA is disabled"]

    errors = []
    if not pwa.name and not config.site.name:
        errors.append("PWA name is required (either pwa.name or site.name)")
    if not pwa.description and not config.site.description:
        errors.append(
            "PWA description is required (either pwa.description or site.description)"
        )

    logo = config.branding.logo.light if config.branding.logo else None
    if not logo and not config.branding.favicon:
        errors.append(
            "At least one icon is required (branding.logo.light or branding.favicon)"
        )
    if isinstance(pwa.icons, list) and not pwa.icons:
        errors.append("At least one PWA icon is required")

    return errors


def is_pwa_enabled(config: BlogConfig) -> bool:
    """True when PWA is switched on and the configuration validates."""
    return bool(config.pwa and config.pwa.enabled and not validate_pwa_config(config))


def render_manifest_response(config: BlogConfig) -> ManifestResponse:
    """Serve the manifest: 200 with the document, 404 when off, 500 on failure."""
    try:
        if not is_pwa_enabled(config):
            return ManifestResponse(
                status=404,
                body={"error": "PWA is not enabled or properly configured"},
                headers={"Content-Type": "application/json"},
            )

        manifest = generate_manifest(config)
        return ManifestResponse(
            status=200,
            body=manifest,
            headers={
                "Content-Type": MANIFEST_CONTENT_TYPE,
                "Cache-Control": MANIFEST_CACHE_CONTROL,
            },
        )
    except Exception as e:
        logger.error("Error generating PWA manifest: %s", e)
        return ManifestResponse(
            status=500,
            body={"error": "Failed to generate PWA manifest", "details": str(e)},
            headers={"Content-Type": "application/json"},
        )


# --- Defaults ---

def _default_icons(config: BlogConfig) -> list[dict[str, str]]:
    """Seven PNG icons: small sizes from the best logo, large ones from the touch icon."""
    branding = config.branding
    logo = (
        branding.og_image
        or (branding.logo.light if branding.logo else None)
        or branding.favicon
    )
    touch_icon = branding.apple_touch_icon or logo

    icons = [_icon(logo, size, "any") for size in AUTO_ICON_SIZES_FROM_LOGO]
    icons += [_icon(touch_icon, size, "any") for size in AUTO_ICON_SIZES_FROM_TOUCH_ICON]
    icons.append(_icon(touch_icon, 512, "maskable"))
    return icons


def _icon(src: str, size: int, purpose: str) -> dict[str, str]:
    return {
        "src": src,
        "sizes": f"{size}x{size}",
        "type": "image/png",
        "purpose": purpose,
    }


def _default_shortcuts(config: BlogConfig) -> list[PWAShortcut]:
    """Header navigation first, then common pages not already linked."""
    shortcuts = [
        PWAShortcut(name=item.label, url=item.href, description=f"Navigate to {item.label}")
        for item in config.navigation.header[:MAX_SHORTCUTS]
    ]

    common = [
        PWAShortcut(name="Latest Posts", url="/posts/page/1",
                    description="View the latest posts"),
        PWAShortcut(name="Categories", url="/categories",
                    description="Browse posts by category"),
        PWAShortcut(name="About", url="/about",
                    description=f"Learn more about {config.site.name}"),
    ]
    for shortcut in common:
        if len(shortcuts) >= MAX_SHORTCUTS:
            break
        if all(s.url != shortcut.url for s in shortcuts):
            shortcuts.append(shortcut)

    return shortcuts[:MAX_SHORTCUTS]


def _shortcut_entry(shortcut: PWAShortcut) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "name": shortcut.name,
        "url": shortcut.url,
        "description": shortcut.description,
    }
    if shortcut.icon:
        entry["icons"] = [{"src": shortcut.icon, "sizes": SHORTCUT_ICON_SIZES}]
    return _drop_none(entry)


def _drop_none(data: dict[str, Optional[Any]]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}
