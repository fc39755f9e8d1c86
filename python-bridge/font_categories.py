"""
Roblox Font Search: static style categories for Creator Store fonts.
None of the upstream services expose a style, so the table is curated by hand.
"""

from types import MappingProxyType
from typing import Literal, Mapping, get_args

FontCategory = Literal[
    "sans-serif",
    "serif",
    "cursive",
    "monospace",
    "handwriting",
    "special",
    "unknown",
]

CATEGORIES: tuple[str, ...] = get_args(FontCategory)

UNKNOWN_CATEGORY: FontCategory = "unknown"

# Keyed by exact display name as returned by the item details service.
FONT_CATEGORIES: Mapping[str, FontCategory] = MappingProxyType({
    "Mulish": "sans-serif",
    "Cairo": "sans-serif",
    "Damion": "cursive",
    "Mukta": "sans-serif",
    "Montserrat": "sans-serif",
    "Tangerine": "cursive",
    "Noto Serif SC": "serif",
    "Noto Sans": "sans-serif",
    "Barlow": "sans-serif",
    "Roboto Slab": "serif",
    "Tajawal": "sans-serif",
    "Prompt": "sans-serif",
    "Hind": "sans-serif",
    "Rubik": "sans-serif",
    "Rajdhani": "sans-serif",
    "Sono": "monospace",
    "Bungee Inline": "special",
    "Rubik Marker Hatch": "special",
    "Are You Serious": "special",
    "Kings": "special",
    "Noto Serif HK": "serif",
    "Raleway": "sans-serif",
    "Rubik Burned": "special",
    "Bungee Shade": "special",
    "Fuzzy Bubbles": "handwriting",
    "Noto Serif JP": "serif",
    "IBM Plex Sans JP": "sans-serif",
    "Parisienne": "cursive",
    "Rubik Maze": "special",
    "Open Sans": "sans-serif",
    "Eater": "special",
    "Barrio": "special",
    "Finger Paint": "handwriting",
    "Sedgwick Ave Display": "special",
    "Work Sans": "sans-serif",
    "Caesar Dressing": "special",
    "Arimo": "sans-serif",
    "Hind Siliguri": "sans-serif",
    "Rubik Iso": "special",
    "Kanit": "sans-serif",
    "Lobster": "cursive",
    "Playfair Display": "serif",
    "PT Serif": "serif",
    "Italianno": "cursive",
    "Silkscreen": "special",
    "Shadows Into Light": "handwriting",
    "Noto Serif TC": "serif",
    "Yellowtail": "cursive",
    "Pacifico": "cursive",
    "Blaka": "special",
    "Nosifer": "special",
    "Codystar": "special",
    "Caveat": "handwriting",
    "La Belle Aurore": "cursive",
    "Marhey": "special",
    "Sono Monospace": "monospace",
    "M PLUS Rounded 1c": "sans-serif",
    "Great Vibes": "cursive",
    "Frijole": "special",
    "Builder Extended": "sans-serif",
    "Nunito Sans": "sans-serif",
    "Lato": "sans-serif",
    "Monoton": "special",
    "Builder Mono": "monospace",
    "Teko": "sans-serif",
    "Rye": "special",
    "Audiowide": "special",
    "Dancing Script": "cursive",
    "Irish Grover": "special",
    "Nothing You Could Do": "handwriting",
    "Akronim": "special",
    "Fira Sans": "sans-serif",
    "Faster One": "special",
    "Poppins": "sans-serif",
    "Libre Baskerville": "serif",
    "Lora": "serif",
    "Nanum Gothic": "sans-serif",
    "Rubik Wet Paint": "special",
    "Quicksand": "sans-serif",
    "Noto Sans HK": "sans-serif",
    "PT Sans": "sans-serif",
    "Builder Sans": "sans-serif",
    "Inter": "sans-serif",
    "Unica One": "special",
    "Monofett": "special",
})


def classify(name: str) -> FontCategory:
    """Style category for a font display name; `unknown` when not in the table."""
    return FONT_CATEGORIES.get(name, UNKNOWN_CATEGORY)
