"""Colour scale presets shared by all brand configurations."""

from __future__ import annotations

ColorScale = dict[str, str]

THEME_PRESETS: dict[str, dict[str, ColorScale]] = {
    "teal": {
        "primary": {
            "50": "#f0fdfa", "100": "#ccfbf1", "200": "#99f6e4", "300": "#5eead4",
            "400": "#2dd4bf", "500": "#14b8a6", "600": "#0d9488", "700": "#0f766e",
            "800": "#115e59", "900": "#134e4a", "950": "#042f2e",
        },
        "secondary": {
            "50": "#f1f5f9", "100": "#e2e8f0", "200": "#cbd5e1", "300": "#94a3b8",
            "400": "#64748b", "500": "#475569", "600": "#334155", "700": "#1e293b",
            "800": "#0f172a", "900": "#020617", "950": "#000c13",
        },
    },
    "blue": {
        "primary": {
            "50": "#eff6ff", "100": "#dbeafe", "200": "#bfdbfe", "300": "#93c5fd",
            "400": "#60a5fa", "500": "#3b82f6", "600": "#2563eb", "700": "#1d4ed8",
            "800": "#1e40af", "900": "#1e3a8a", "950": "#172554",
        },
        "secondary": {
            "50": "#f8fafc", "100": "#f1f5f9", "200": "#e2e8f0", "300": "#cbd5e1",
            "400": "#94a3b8", "500": "#64748b", "600": "#475569", "700": "#334155",
            "800": "#1e293b", "900": "#0f172a", "950": "#020617",
        },
    },
    "green": {
        "primary": {
            "50": "#f0fdf4", "100": "#dcfce7", "200": "#bbf7d0", "300": "#86efac",
            "400": "#4ade80", "500": "#22c55e", "600": "#16a34a", "700": "#15803d",
            "800": "#166534", "900": "#14532d", "950": "#052e16",
        },
        "secondary": {
            "50": "#fafaf9", "100": "#f5f5f4", "200": "#e7e5e4", "300": "#d6d3d1",
            "400": "#a8a29e", "500": "#78716c", "600": "#57534e", "700": "#44403c",
            "800": "#292524", "900": "#1c1917", "950": "#0c0a09",
        },
    },
    "purple": {
        "primary": {
            "50": "#faf5ff", "100": "#f3e8ff", "200": "#e9d5ff", "300": "#d8b4fe",
            "400": "#c084fc", "500": "#a855f7", "600": "#9333ea", "700": "#7c3aed",
            "800": "#6b21b6", "900": "#581c87", "950": "#3b0764",
        },
        "secondary": {
            "50": "#fdf4ff", "100": "#fae8ff", "200": "#f5d0fe", "300": "#f0abfc",
            "400": "#e879f9", "500": "#d946ef", "600": "#c026d3", "700": "#a21caf",
            "800": "#86198f", "900": "#701a75", "950": "#4a044e",
        },
    },
    "orange": {
        "primary": {
            "50": "#fff7ed", "100": "#ffedd5", "200": "#fed7aa", "300": "#fdba74",
            "400": "#fb923c", "500": "#f97316", "600": "#ea580c", "700": "#c2410c",
            "800": "#9a3412", "900": "#7c2d12", "950": "#431407",
        },
        "secondary": {
            "50": "#fefce8", "100": "#fef9c3", "200": "#fef08a", "300": "#fde047",
            "400": "#facc15", "500": "#eab308", "600": "#ca8a04", "700": "#a16207",
            "800": "#854d0e", "900": "#713f12", "950": "#422006",
        },
    },
}


def get_preset(name: str) -> dict[str, ColorScale]:
    """Return a copy of the named preset. Raises ValueError for unknown names."""
    try:
        preset = THEME_PRESETS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown theme preset '{name}'. Available: {', '.join(sorted(THEME_PRESETS))}"
        ) from None
    return {scale: dict(colors) for scale, colors in preset.items()}
