# PWA: web-app manifest generation, validation and endpoint response

from .manifest import (
    generate_manifest,
    is_pwa_enabled,
    render_manifest_response,
    validate_pwa_config,
)
from .models import ManifestResponse

__all__ = [
    "ManifestResponse",
    "generate_manifest",
    "is_pwa_enabled",
    "render_manifest_response",
    "validate_pwa_config",
]
