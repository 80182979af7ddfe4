"""RGB colours and the named palette used for drawing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit components; the default is black."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(
                    f"{name} component must be an integer in 0..255, got {value!r}"
                )

    @classmethod
    def from_floats(cls, red: float, green: float, blue: float) -> Color:
        """Build a colour from intensities in 0.0..1.0, truncating to 8 bits."""
        components = []
        for value in (red, green, blue):
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"intensity must be in 0.0..1.0, got {value!r}")
            components.append(int(value * 255))
        return cls(*components)

    def as_floats(self) -> tuple[float, float, float]:
        """Return the components as intensities in 0.0..1.0."""
        return (self.red / 255.0, self.green / 255.0, self.blue / 255.0)


SNOW = Color(255, 250, 250)
GHOSTWHITE = Color(248, 248, 255)
WHITESMOKE = Color(245, 245, 245)
GAINSBORO = Color(220, 220, 220)
FLORALWHITE = Color(255, 250, 240)
OLDLACE = Color(253, 245, 230)
LINEN = Color(250, 240, 230)
ANTIQUEWHITE = Color(250, 235, 215)
PAPAYAWHIP = Color(255, 239, 213)
BLANCHEDALMOND = Color(255, 235, 205)
BISQUE = Color(255, 228, 196)
PEACHPUFF = Color(255, 218, 185)
NAVAJOWHITE = Color(255, 222, 173)
MOCCASIN = Color(255, 228, 181)
CORNSILK = Color(255, 248, 220)
IVORY = Color(255, 255, 240)
LEMONCHIFFON = Color(255, 250, 205)
SEASHELL = Color(255, 245, 238)
HONEYDEW = Color(240, 255, 240)
MINTCREAM = Color(245, 255, 250)
AZURE = Color(240, 255, 255)
ALICEBLUE = Color(240, 248, 255)
LAVENDER = Color(230, 230, 250)
LAVENDERBLUSH = Color(255, 240, 245)
MISTYROSE = Color(255, 228, 225)
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
DARKSLATEGRAY = Color(47, 79, 79)
DARKSLATEGREY = Color(47, 79, 79)
DIMGRAY = Color(105, 105, 105)
DIMGREY = Color(105, 105, 105)
SLATEGRAY = Color(112, 128, 144)
SLATEGREY = Color(112, 128, 144)
LIGHTSLATEGRAY = Color(119, 136, 153)
LIGHTSLATEGREY = Color(119, 136, 153)
GRAY = Color(190, 190, 190)
GREY = Color(190, 190, 190)
LIGHTGREY = Color(211, 211, 211)
LIGHTGRAY = Color(211, 211, 211)
MIDNIGHTBLUE = Color(25, 25, 112)
NAVY = Color(0, 0, 128)
NAVYBLUE = Color(0, 0, 128)
CORNFLOWERBLUE = Color(100, 149, 237)
DARKSLATEBLUE = Color(72, 61, 139)
SLATEBLUE = Color(106, 90, 205)
MEDIUMSLATEBLUE = Color(123, 104, 238)
LIGHTSLATEBLUE = Color(132, 112, 255)
MEDIUMBLUE = Color(0, 0, 205)
ROYALBLUE = Color(65, 105, 225)
BLUE = Color(0, 0, 255)
DODGERBLUE = Color(30, 144, 255)
DEEPSKYBLUE = Color(0, 191, 255)
SKYBLUE = Color(135, 206, 235)
LIGHTSKYBLUE = Color(135, 206, 250)
STEELBLUE = Color(70, 130, 180)
LIGHTSTEELBLUE = Color(176, 196, 222)
LIGHTBLUE = Color(173, 216, 230)
POWDERBLUE = Color(176, 224, 230)
PALETURQUOISE = Color(175, 238, 238)
DARKTURQUOISE = Color(0, 206, 209)
MEDIUMTURQUOISE = Color(72, 209, 204)
TURQUOISE = Color(64, 224, 208)
CYAN = Color(0, 255, 255)
LIGHTCYAN = Color(224, 255, 255)
CADETBLUE = Color(95, 158, 160)
MEDIUMAQUAMARINE = Color(102, 205, 170)
AQUAMARINE = Color(127, 255, 212)
DARKGREEN = Color(0, 100, 0)
DARKOLIVEGREEN = Color(85, 107, 47)
DARKSEAGREEN = Color(143, 188, 143)
SEAGREEN = Color(46, 139, 87)
MEDIUMSEAGREEN = Color(60, 179, 113)
LIGHTSEAGREEN = Color(32, 178, 170)
PALEGREEN = Color(152, 251, 152)
SPRINGGREEN = Color(0, 255, 127)
LAWNGREEN = Color(124, 252, 0)
GREEN = Color(0, 255, 0)
CHARTREUSE = Color(127, 255, 0)
MEDIUMSPRINGGREEN = Color(0, 250, 154)
GREENYELLOW = Color(173, 255, 47)
LIMEGREEN = Color(50, 205, 50)
YELLOWGREEN = Color(154, 205, 50)
FORESTGREEN = Color(34, 139, 34)
OLIVEDRAB = Color(107, 142, 35)
DARKKHAKI = Color(189, 183, 107)
KHAKI = Color(240, 230, 140)
PALEGOLDENROD = Color(238, 232, 170)
LIGHTGOLDENRODYELLOW = Color(250, 250, 210)
LIGHTYELLOW = Color(255, 255, 224)
YELLOW = Color(255, 255, 0)
GOLD = Color(255, 215, 0)
LIGHTGOLDENROD = Color(238, 221, 130)
GOLDENROD = Color(218, 165, 32)
DARKGOLDENROD = Color(184, 134, 11)
ROSYBROWN = Color(188, 143, 143)
INDIAN = Color(205, 92, 92)
INDIANRED = Color(205, 92, 92)
SADDLEBROWN = Color(139, 69, 19)
SIENNA = Color(160, 82, 45)
PERU = Color(205, 133, 63)
BURLYWOOD = Color(222, 184, 135)
BEIGE = Color(245, 245, 220)
WHEAT = Color(245, 222, 179)
SANDYBROWN = Color(244, 164, 96)
TAN = Color(210, 180, 140)
CHOCOLATE = Color(210, 105, 30)
FIREBRICK = Color(178, 34, 34)
BROWN = Color(165, 42, 42)
DARKSALMON = Color(233, 150, 122)
SALMON = Color(250, 128, 114)
LIGHTSALMON = Color(255, 160, 122)
ORANGE = Color(255, 165, 0)
DARKORANGE = Color(255, 140, 0)
CORAL = Color(255, 127, 80)
LIGHTCORAL = Color(240, 128, 128)
TOMATO = Color(255, 99, 71)
ORANGERED = Color(255, 69, 0)
RED = Color(255, 0, 0)
HOTPINK = Color(255, 105, 180)
DEEPPINK = Color(255, 20, 147)
PINK = Color(255, 192, 203)
LIGHTPINK = Color(255, 182, 193)
PALEVIOLETRED = Color(219, 112, 147)
MAROON = Color(176, 48, 96)
MEDIUMVIOLETRED = Color(199, 21, 133)
VIOLETRED = Color(208, 32, 144)
MAGENTA = Color(255, 0, 255)
VIOLET = Color(238, 130, 238)
PLUM = Color(221, 160, 221)
ORCHID = Color(218, 112, 214)
MEDIUMORCHID = Color(186, 85, 211)
DARKORCHID = Color(153, 50, 204)
DARKVIOLET = Color(148, 0, 211)
BLUEVIOLET = Color(138, 43, 226)
PURPLE = Color(160, 32, 240)
MEDIUMPURPLE = Color(147, 112, 219)
THISTLE = Color(216, 191, 216)
DARKGREY = Color(169, 169, 169)
DARKGRAY = Color(169, 169, 169)
DARKBLUE = Color(0, 0, 139)
DARKCYAN = Color(0, 139, 139)
DARKMAGENTA = Color(139, 0, 139)
DARKRED = Color(139, 0, 0)
LIGHTGREEN = Color(144, 238, 144)