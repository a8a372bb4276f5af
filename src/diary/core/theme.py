"""Deterministic per-day color themes.

Each date key hashes to a background color, paired with black or white text
chosen to meet a WCAG contrast ratio of at least 4.5.
"""

import re
from dataclasses import dataclass

FNV_OFFSET = 0x811C9DC5
FNV_PRIME = 0x01000193

SATURATION = 0.62
TARGET_CONTRAST = 4.5
LIGHTNESS_STEP = 0.03
MAX_ADJUSTMENTS = 30

WHITE = "#ffffff"
BLACK = "#000000"

RGB = tuple[int, int, int]

_HEX_RE = re.compile(r"[0-9a-fA-F]{6}")


@dataclass(frozen=True)
class Theme:
    """Background and text colors for a diary day."""

    background_color: str
    text_color: str

    def to_dict(self) -> dict[str, str]:
        return {"background_color": self.background_color, "text_color": self.text_color}


def fnv1a_32(text: str) -> int:
    """32-bit FNV-1a hash over UTF-16 code units."""
    h = FNV_OFFSET
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        h ^= data[i] | (data[i + 1] << 8)
        h = (h * FNV_PRIME) & 0xFFFFFFFF
    return h


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGB:
    c = (1 - abs(2 * lightness - 1)) * saturation
    hp = (hue % 360) / 60
    x = c * (1 - abs(hp % 2 - 1))
    if hp < 1:
        r1, g1, b1 = c, x, 0.0
    elif hp < 2:
        r1, g1, b1 = x, c, 0.0
    elif hp < 3:
        r1, g1, b1 = 0.0, c, x
    elif hp < 4:
        r1, g1, b1 = 0.0, x, c
    elif hp < 5:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x
    m = lightness - c / 2
    return (_round_channel(r1 + m), _round_channel(g1 + m), _round_channel(b1 + m))


def _round_channel(value: float) -> int:
    # Half-up rounding, Python's round() would round half to even
    return int(value * 255 + 0.5)


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(value: str) -> RGB:
    """Parse #rrggbb (leading # optional). Malformed input yields black."""
    value = value.removeprefix("#")
    if not _HEX_RE.fullmatch(value):
        return (0, 0, 0)
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


def _srgb_to_linear(channel: int) -> float:
    v = channel / 255
    return v / 12.92 if v <= 0.04045 else ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB) -> float:
    r, g, b = (_srgb_to_linear(c) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(l1: float, l2: float) -> float:
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def best_text_color(background: RGB) -> str:
    lum = relative_luminance(background)
    if contrast_ratio(1, lum) >= contrast_ratio(0, lum):
        return WHITE
    return BLACK


def generate_theme(key: str) -> Theme:
    """Build the theme for a date key."""
    seed = fnv1a_32(key)
    hue = seed % 360
    lightness = 0.42 + ((seed >> 8) % 20) / 100
    background = hsl_to_rgb(hue, SATURATION, lightness)
    text = best_text_color(background)

    for _ in range(MAX_ADJUSTMENTS):
        text_lum = 1.0 if text == WHITE else 0.0
        if contrast_ratio(text_lum, relative_luminance(background)) >= TARGET_CONTRAST:
            break
        if text == WHITE:
            lightness = max(0.0, lightness - LIGHTNESS_STEP)
        else:
            lightness = min(1.0, lightness + LIGHTNESS_STEP)
        background = hsl_to_rgb(hue, SATURATION, lightness)
        text = best_text_color(background)

    return Theme(background_color=rgb_to_hex(background), text_color=text)
