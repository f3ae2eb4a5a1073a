"""
    Named colours and the palettes the DOT template is filled from.
"""
from typing import Dict

COLORS: Dict[str, str] = {
    "julep": "#73DBE6",
    "pacifica": "#2BBDCB",
    "lemonade": "#FFDD99",
    "bright_sun": "#FFBB16",
    "athens": "#F8F8FA",
    "linkwater": "#E6EBF8",
    "ghost": "#DFE2EB",
    "comet": "#485478",
    "martinique": "#242D48",
    "iris": "#C882D9",
    "orchid": "#B25DC6",
    "empire": "#821499",
    "rain": "#A136B4",
}

# role -> colour name
PALETTES: Dict[str, Dict[str, str]] = {
    "default": {
        "node": "lemonade",
        "node_font": "martinique",
        "node_border": "comet",
        "highlight": "julep",
        "edge": "comet",
    },
    "orchid": {
        "node": "linkwater",
        "node_font": "martinique",
        "node_border": "empire",
        "highlight": "iris",
        "edge": "orchid",
    },
}

DEFAULT_PALETTE = "default"


def resolve_palette(name: str) -> Dict[str, str]:
    """
    Resolve a palette name to role -> hex colour.

    Raises:
        ValueError: If the palette is unknown.
    """
    if name not in PALETTES:
        raise ValueError(f"Unknown palette: '{name}'. Available: {sorted(PALETTES)}")
    return {role: COLORS[color] for role, color in PALETTES[name].items()}
