"""RGBA colours in 8-bit and floating point form, plus named colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from aigames.core.rng import range_int


def _to_byte(component: float) -> int:
    return int(component * 255) & 0xFF


@dataclass(frozen=True)
class Color32:
    """An RGBA colour with one byte per component (0..255).

    The packed 32-bit form stores alpha in the top byte, then blue, green,
    and red in the lowest byte.
    """

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"component {name}={value} is outside 0..255")

    @classmethod
    def from_packed(cls, packed: int) -> Color32:
        """Unpack a 32-bit ``0xAABBGGRR`` value."""
        packed &= 0xFFFFFFFF
        return cls(
            r=packed & 0xFF,
            g=(packed >> 8) & 0xFF,
            b=(packed >> 16) & 0xFF,
            a=(packed >> 24) & 0xFF,
        )

    @classmethod
    def from_colorf(cls, color: Colorf) -> Color32:
        """Scale float components by 255, truncating towards zero."""
        return cls(
            r=_to_byte(color.r),
            g=_to_byte(color.g),
            b=_to_byte(color.b),
            a=_to_byte(color.a),
        )

    @classmethod
    def random_color(cls, minimum: int = 0, maximum: int = 255) -> Color32:
        """An opaque colour whose r, g and b are drawn from ``[minimum, maximum]``."""
        return cls(
            range_int(minimum, maximum),
            range_int(minimum, maximum),
            range_int(minimum, maximum),
            255,
        )

    def packed(self) -> int:
        """The colour as a 32-bit ``0xAABBGGRR`` value."""
        return self.a << 24 | self.b << 16 | self.g << 8 | self.r

    def __getitem__(self, index: int) -> int:
        """Components in the order a, r, g, b; index 4 also yields alpha."""
        if index < 0 or index > 4:
            raise IndexError("Out of color range")
        return (self.a, self.r, self.g, self.b, self.a)[index]

    def __iter__(self) -> Iterator[int]:
        return iter((self.a, self.r, self.g, self.b))

    def light(self) -> Color32:
        """Halfway between this colour and white, fully opaque."""
        return Color32((self.r + 255) // 2, (self.g + 255) // 2, (self.b + 255) // 2)

    def dark(self) -> Color32:
        """Each component halved, fully opaque."""
        return Color32(self.r // 2, self.g // 2, self.b // 2)


@dataclass
class Colorf:
    """An RGBA colour with float components nominally in ``[0, 1]``."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def from_packed(cls, packed: int) -> Colorf:
        """Read a packed value: alpha from bits 24-31, red from bits 16-23,
        and both green and blue from bits 8-15."""
        packed &= 0xFFFFFFFF
        return cls(
            r=((packed >> 16) & 0xFF) / 255,
            g=((packed >> 8) & 0xFF) / 255,
            b=((packed >> 8) & 0xFF) / 255,
            a=((packed >> 24) & 0xFF) / 255,
        )

    @classmethod
    def from_color32(cls, color: Color32) -> Colorf:
        return cls(color.r / 255, color.g / 255, color.b / 255, color.a / 255)

    @staticmethod
    def hsv_to_rgb(h: float, s: float, v: float, hdr: bool = True) -> Colorf:
        """Create an RGB colour from hue, saturation and value.

        Alpha of the result is 1. Without ``hdr`` the chromatic result is
        clamped to ``[0, 1]``. Raises ``ValueError`` when the hue falls
        outside ``[-1/6, 7/6)``.
        """
        if s == 0.0:
            return Colorf(v, v, v, 1.0)
        if v == 0.0:
            return Colorf(0.0, 0.0, 0.0, 1.0)

        f = h * 6.0
        sector = math.floor(f)
        fraction = f - sector
        p = v * (1.0 - s)
        q = v * (1.0 - s * fraction)
        t = v * (1.0 - s * (1.0 - fraction))

        table = {
            -1: (v, p, q),
            0: (v, t, p),
            1: (q, v, p),
            2: (p, v, t),
            3: (p, q, v),
            4: (t, p, v),
            5: (v, p, q),
            6: (v, t, p),
        }
        try:
            r, g, b = table[sector]
        except KeyError:
            raise ValueError(f"hue {h} is out of range") from None

        if not hdr:
            r, g, b = (min(max(c, 0.0), 1.0) for c in (r, g, b))
        return Colorf(r, g, b, 1.0)


_c = Color32.from_packed


class Color:
    """Named colours."""

    TRANSPARENT_BLACK = _c(0)
    TRANSPARENT = _c(0)
    ALICE_BLUE = _c(0xFFFFF8F0)
    ANTIQUE_WHITE = _c(0xFFD7EBFA)
    AQUA = _c(0xFFFFFF00)
    AQUAMARINE = _c(0xFFD4FF7F)
    AZURE = _c(0xFFFFFFF0)
    BEIGE = _c(0xFFDCF5F5)
    BISQUE = _c(0xFFC4E4FF)
    BLACK = _c(0xFF000000)
    BLANCHED_ALMOND = _c(0xFFCDEBFF)
    BLUE = _c(0xFFFF0000)
    BLUE_VIOLET = _c(0xFFE22B8A)
    BROWN = _c(0xFF2A2AA5)
    BURLY_WOOD = _c(0xFF87B8DE)
    CADET_BLUE = _c(0xFFA09E5F)
    CHARTREUSE = _c(0xFF00FF7F)
    CHOCOLATE = _c(0xFF1E69D2)
    CORAL = _c(0xFF507FFF)
    CORNFLOWER_BLUE = _c(0xFFED9564)
    CORNSILK = _c(0xFFDCF8FF)
    CRIMSON = _c(0xFF3C14DC)
    CYAN = _c(0xFFFFFF00)
    DARK_BLUE = _c(0xFF8B0000)
    DARK_CYAN = _c(0xFF8B8B00)
    DARK_GOLDENROD = _c(0xFF0B86B8)
    DARK_GRAY = _c(0xFFA9A9A9)
    DARK_GREEN = _c(0xFF006400)
    DARK_KHAKI = _c(0xFF6BB7BD)
    DARK_MAGENTA = _c(0xFF8B008B)
    DARK_OLIVE_GREEN = _c(0xFF2F6B55)
    DARK_ORANGE = _c(0xFF008CFF)
    DARK_ORCHID = _c(0xFFCC3299)
    DARK_RED = _c(0xFF00008B)
    DARK_SALMON = _c(0xFF7A96E9)
    DARK_SEA_GREEN = _c(0xFF8BBC8F)
    DARK_SLATE_BLUE = _c(0xFF8B3D48)
    DARK_SLATE_GRAY = _c(0xFF4F4F2F)
    DARK_TURQUOISE = _c(0xFFD1CE00)
    DARK_VIOLET = _c(0xFFD30094)
    DEEP_PINK = _c(0xFF9314FF)
    DEEP_SKY_BLUE = _c(0xFFFFBF00)
    DIM_GRAY = _c(0xFF696969)
    DODGER_BLUE = _c(0xFFFF901E)
    FIREBRICK = _c(0xFF2222B2)
    FLORAL_WHITE = _c(0xFFF0FAFF)
    FOREST_GREEN = _c(0xFF228B22)
    FUCHSIA = _c(0xFFFF00FF)
    GAINSBORO = _c(0xFFDCDCDC)
    GHOST_WHITE = _c(0xFFFFF8F8)
    GOLD = _c(0xFF00D7FF)
    GOLDENROD = _c(0xFF20A5DA)
    GRAY = _c(0xFF808080)
    GREEN = _c(0xFF008000)
    GREEN_YELLOW = _c(0xFF2FFFAD)
    HONEYDEW = _c(0xFFF0FFF0)
    HOT_PINK = _c(0xFFB469FF)
    INDIAN_RED = _c(0xFF5C5CCD)
    INDIGO = _c(0xFF82004B)
    IVORY = _c(0xFFF0FFFF)
    KHAKI = _c(0xFF8CE6F0)
    LAVENDER = _c(0xFFFAE6E6)
    LAVENDER_BLUSH = _c(0xFFF5F0FF)
    LAWN_GREEN = _c(0xFF00FC7C)
    LEMON_CHIFFON = _c(0xFFCDFAFF)
    LIGHT_BLUE = _c(0xFFE6D8AD)
    LIGHT_CORAL = _c(0xFF8080F0)
    LIGHT_CYAN = _c(0xFFFFFFE0)
    LIGHT_GOLDENROD_YELLOW = _c(0xFFD2FAFA)
    LIGHT_GRAY = _c(0xFFD3D3D3)
    LIGHT_GREEN = _c(0xFF90EE90)
    LIGHT_PINK = _c(0xFFC1B6FF)
    LIGHT_SALMON = _c(0xFF7AA0FF)
    LIGHT_SEA_GREEN = _c(0xFFAAB220)
    LIGHT_SKY_BLUE = _c(0xFFFACE87)
    LIGHT_SLATE_GRAY = _c(0xFF998877)
    LIGHT_STEEL_BLUE = _c(0xFFDEC4B0)
    LIGHT_YELLOW = _c(0xFFE0FFFF)
    LIME = _c(0xFF00FF00)
    LIME_GREEN = _c(0xFF32CD32)
    LINEN = _c(0xFFE6F0FA)
    MAGENTA = _c(0xFFFF00FF)
    MAROON = _c(0xFF000080)
    MEDIUM_AQUAMARINE = _c(0xFFAACD66)
    MEDIUM_BLUE = _c(0xFFCD0000)
    MEDIUM_ORCHID = _c(0xFFD355BA)
    MEDIUM_PURPLE = _c(0xFFDB7093)
    MEDIUM_SEA_GREEN = _c(0xFF71B33C)
    MEDIUM_SLATE_BLUE = _c(0xFFEE687B)
    MEDIUM_SPRING_GREEN = _c(0xFF9AFA00)
    MEDIUM_TURQUOISE = _c(0xFFCCD148)
    MEDIUM_VIOLET_RED = _c(0xFF8515C7)
    MIDNIGHT_BLUE = _c(0xFF701919)
    MINT_CREAM = _c(0xFFFAFFF5)
    MISTY_ROSE = _c(0xFFE1E4FF)
    MOCCASIN = _c(0xFFB5E4FF)
    NAVAJO_WHITE = _c(0xFFADDEFF)
    NAVY = _c(0xFF800000)
    OLD_LACE = _c(0xFFE6F5FD)
    OLIVE = _c(0xFF008080)
    OLIVE_DRAB = _c(0xFF238E6B)
    ORANGE = _c(0xFF00A5FF)
    ORANGE_RED = _c(0xFF0045FF)
    ORCHID = _c(0xFFD670DA)
    PALE_GOLDENROD = _c(0xFFAAE8EE)
    PALE_GREEN = _c(0xFF98FB98)
    PALE_TURQUOISE = _c(0xFFEEEEAF)
    PALE_VIOLET_RED = _c(0xFF9370DB)
    PAPAYA_WHIP = _c(0xFFD5EFFF)
    PEACH_PUFF = _c(0xFFB9DAFF)
    PERU = _c(0xFF3F85CD)
    PINK = _c(0xFFCBC0FF)
    PLUM = _c(0xFFDDA0DD)
    POWDER_BLUE = _c(0xFFE6E0B0)
    PURPLE = _c(0xFF800080)
    RED = _c(0xFF0000FF)
    ROSY_BROWN = _c(0xFF8F8FBC)
    ROYAL_BLUE = _c(0xFFE16941)
    SADDLE_BROWN = _c(0xFF13458B)
    SALMON = _c(0xFF7280FA)
    SANDY_BROWN = _c(0xFF60A4F4)
    SEA_GREEN = _c(0xFF578B2E)
    SEA_SHELL = _c(0xFFEEF5FF)
    SIENNA = _c(0xFF2D52A0)
    SILVER = _c(0xFFC0C0C0)
    SKY_BLUE = _c(0xFFEBCE87)
    SLATE_BLUE = _c(0xFFCD5A6A)
    SLATE_GRAY = _c(0xFF908070)
    SNOW = _c(0xFFFAFAFF)
    SPRING_GREEN = _c(0xFF7FFF00)
    STEEL_BLUE = _c(0xFFB48246)
    TAN = _c(0xFF8CB4D2)
    TEAL = _c(0xFF808000)
    THISTLE = _c(0xFFD8BFD8)
    TOMATO = _c(0xFF4763FF)
    TURQUOISE = _c(0xFFD0E040)
    VIOLET = _c(0xFFEE82EE)
    WHEAT = _c(0xFFB3DEF5)
    WHITE = _c(0xFFFFFFFF)
    WHITE_SMOKE = _c(0xFFF5F5F5)
    YELLOW = _c(0xFF00FFFF)
    YELLOW_GREEN = _c(0xFF32CD9A)


del _c