"""
Color value.

A color is a 32-bit ARGB integer. Text forms accepted by ``parse_color``:
``#AARRGGBB``, ``#RRGGBB``, ``#ARGB``, ``#RGB``, ``rgb(r,g,b)``,
``rgba(r,g,b,a)`` and the CSS named colors.
"""

from ..core.errors import InvalidFormatError, report_error

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class Color(int):
    """ARGB color packed into an unsigned 32-bit integer."""

    def __new__(cls, value: int = 0) -> "Color":
        return super().__new__(cls, int(value) & 0xFFFFFFFF)

    @classmethod
    def argb(cls, alpha: int, red: int, green: int, blue: int) -> "Color":
        """Create a color from its components (each masked to 0..255)."""
        return cls(
            ((alpha & 0xFF) << 24) | ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)
        )

    @property
    def alpha(self) -> int:
        return (self >> 24) & 0xFF

    @property
    def red(self) -> int:
        return (self >> 16) & 0xFF

    @property
    def green(self) -> int:
        return (self >> 8) & 0xFF

    @property
    def blue(self) -> int:
        return self & 0xFF

    def components(self) -> tuple[int, int, int, int]:
        """Return (alpha, red, green, blue)."""
        return self.alpha, self.red, self.green, self.blue

    def __str__(self) -> str:
        return f"#{int(self):08X}"

    def __repr__(self) -> str:
        return f"Color({self})"

    def rgb_string(self) -> str:
        """``#RRGGBB`` without the alpha channel."""
        return f"#{int(self) & 0xFFFFFF:06X}"

    def css_string(self) -> str:
        """``rgb(r,g,b)`` when opaque, ``rgba(r,g,b,.aa)`` otherwise."""
        if self.alpha < 255:
            alpha = f"{self.alpha / 255.0:.2f}"[1:]
            return f"rgba({self.red},{self.green},{self.blue},{alpha})"
        return f"rgb({self.red},{self.green},{self.blue})"


def _parse_rgb_args(args: str) -> list[int]:
    args = args.strip()
    if len(args) < 3 or args[0] != "(" or args[-1] != ")":
        return []

    result = []
    for arg in args[1:-1].split(","):
        arg = arg.strip()
        if not arg:
            return []
        if arg.endswith("%"):
            if not arg[:-1].isdigit() or int(arg[:-1]) > 100:
                return []
            result.append(int(arg[:-1]) * 255 // 100)
        elif "." in arg:
            try:
                number = float("0" + arg if arg.startswith(".") else arg)
            except ValueError:
                return []
            if not 0 <= number <= 1:
                return []
            result.append(int(number * 255))
        else:
            if not arg.isdigit() or int(arg) > 255:
                return []
            result.append(int(arg))
    return result


def parse_color(text: str) -> Color:
    """
    Parse a color from text.

    Args:
        text: Color text

    Returns:
        Parsed color

    Raises:
        InvalidFormatError: If the text is not a color
    """
    text = text.strip()
    if not text:
        raise InvalidFormatError('invalid color value: ""', value=text)

    if text[0] == "#":
        digits = text[1:]
        if not digits or any(ch not in _HEX_DIGITS for ch in digits):
            raise InvalidFormatError(f'invalid color value: "{text}"', value=text)
        code = int(digits, 16)

        if len(digits) == 8:
            return Color(code)
        if len(digits) == 6:
            return Color(code | 0xFF000000)
        if len(digits) == 4:
            a, r, g, b = (code >> 12) & 0xF, (code >> 8) & 0xF, (code >> 4) & 0xF, code & 0xF
            return Color.argb(a * 17, r * 17, g * 17, b * 17)
        if len(digits) == 3:
            r, g, b = (code >> 8) & 0xF, (code >> 4) & 0xF, code & 0xF
            return Color.argb(255, r * 17, g * 17, b * 17)
        raise InvalidFormatError(
            f'invalid color format: "{text}". Valid formats: #AARRGGBB, #RRGGBB, #ARGB, #RGB',
            value=text,
        )

    lower = text.lower()
    if lower.startswith("rgba"):
        args = _parse_rgb_args(lower[4:])
        if len(args) == 4:
            return Color.argb(args[3], args[0], args[1], args[2])
    elif lower.startswith("rgb"):
        args = _parse_rgb_args(lower[3:])
        if len(args) == 3:
            return Color.argb(255, args[0], args[1], args[2])

    if lower in NAMED_COLORS:
        return Color(NAMED_COLORS[lower])

    raise InvalidFormatError(f'invalid color format: "{text}"', value=text)


def string_to_color(text: str) -> Color | None:
    """Parse a color, logging and returning None on failure."""
    try:
        return parse_color(text)
    except InvalidFormatError as e:
        report_error(e)
        return None


# ============================================================================
# Named Colors
# ============================================================================

NAMED_COLORS: dict[str, int] = {
    "black": 0xFF000000,
    "silver": 0xFFC0C0C0,
    "gray": 0xFF808080,
    "white": 0xFFFFFFFF,
    "maroon": 0xFF800000,
    "red": 0xFFFF0000,
    "purple": 0xFF800080,
    "fuchsia": 0xFFFF00FF,
    "green": 0xFF008000,
    "lime": 0xFF00FF00,
    "olive": 0xFF808000,
    "yellow": 0xFFFFFF00,
    "navy": 0xFF000080,
    "blue": 0xFF0000FF,
    "teal": 0xFF008080,
    "aqua": 0xFF00FFFF,
    "orange": 0xFFFFA500,
    "aliceblue": 0xFFF0F8FF,
    "antiquewhite": 0xFFFAEBD7,
    "aquamarine": 0xFF7FFFD4,
    "azure": 0xFFF0FFFF,
    "beige": 0xFFF5F5DC,
    "bisque": 0xFFFFE4C4,
    "blanchedalmond": 0xFFFFEBCD,
    "blueviolet": 0xFF8A2BE2,
    "brown": 0xFFA52A2A,
    "burlywood": 0xFFDEB887,
    "cadetblue": 0xFF5F9EA0,
    "chartreuse": 0xFF7FFF00,
    "chocolate": 0xFFD2691E,
    "coral": 0xFFFF7F50,
    "cornflowerblue": 0xFF6495ED,
    "cornsilk": 0xFFFFF8DC,
    "crimson": 0xFFDC143C,
    "cyan": 0xFF00FFFF,
    "darkblue": 0xFF00008B,
    "darkcyan": 0xFF008B8B,
    "darkgoldenrod": 0xFFB8860B,
    "darkgray": 0xFFA9A9A9,
    "darkgreen": 0xFF006400,
    "darkgrey": 0xFFA9A9A9,
    "darkkhaki": 0xFFBDB76B,
    "darkmagenta": 0xFF8B008B,
    "darkolivegreen": 0xFF556B2F,
    "darkorange": 0xFFFF8C00,
    "darkorchid": 0xFF9932CC,
    "darkred": 0xFF8B0000,
    "darksalmon": 0xFFE9967A,
    "darkseagreen": 0xFF8FBC8F,
    "darkslateblue": 0xFF483D8B,
    "darkslategray": 0xFF2F4F4F,
    "darkslategrey": 0xFF2F4F4F,
    "darkturquoise": 0xFF00CED1,
    "darkviolet": 0xFF9400D3,
    "deeppink": 0xFFFF1493,
    "deepskyblue": 0xFF00BFFF,
    "dimgray": 0xFF696969,
    "dimgrey": 0xFF696969,
    "dodgerblue": 0xFF1E90FF,
    "firebrick": 0xFFB22222,
    "floralwhite": 0xFFFFFAF0,
    "forestgreen": 0xFF228B22,
    "gainsboro": 0xFFDCDCDC,
    "ghostwhite": 0xFFF8F8FF,
    "gold": 0xFFFFD700,
    "goldenrod": 0xFFDAA520,
    "greenyellow": 0xFFADFF2F,
    "grey": 0xFF808080,
    "honeydew": 0xFFF0FFF0,
    "hotpink": 0xFFFF69B4,
    "indianred": 0xFFCD5C5C,
    "indigo": 0xFF4B0082,
    "ivory": 0xFFFFFFF0,
    "khaki": 0xFFF0E68C,
    "lavender": 0xFFE6E6FA,
    "lavenderblush": 0xFFFFF0F5,
    "lawngreen": 0xFF7CFC00,
    "lemonchiffon": 0xFFFFFACD,
    "lightblue": 0xFFADD8E6,
    "lightcoral": 0xFFF08080,
    "lightcyan": 0xFFE0FFFF,
    "lightgoldenrodyellow": 0xFFFAFAD2,
    "lightgray": 0xFFD3D3D3,
    "lightgreen": 0xFF90EE90,
    "lightgrey": 0xFFD3D3D3,
    "lightpink": 0xFFFFB6C1,
    "lightsalmon": 0xFFFFA07A,
    "lightseagreen": 0xFF20B2AA,
    "lightskyblue": 0xFF87CEFA,
    "lightslategray": 0xFF778899,
    "lightslategrey": 0xFF778899,
    "lightsteelblue": 0xFFB0C4DE,
    "lightyellow": 0xFFFFFFE0,
    "limegreen": 0xFF32CD32,
    "linen": 0xFFFAF0E6,
    "magenta": 0xFFFF00FF,
    "mediumaquamarine": 0xFF66CDAA,
    "mediumblue": 0xFF0000CD,
    "mediumorchid": 0xFFBA55D3,
    "mediumpurple": 0xFF9370DB,
    "mediumseagreen": 0xFF3CB371,
    "mediumslateblue": 0xFF7B68EE,
    "mediumspringgreen": 0xFF00FA9A,
    "mediumturquoise": 0xFF48D1CC,
    "mediumvioletred": 0xFFC71585,
    "midnightblue": 0xFF191970,
    "mintcream": 0xFFF5FFFA,
    "mistyrose": 0xFFFFE4E1,
    "moccasin": 0xFFFFE4B5,
    "navajowhite": 0xFFFFDEAD,
    "oldlace": 0xFFFDF5E6,
    "olivedrab": 0xFF6B8E23,
    "orangered": 0xFFFF4500,
    "orchid": 0xFFDA70D6,
    "palegoldenrod": 0xFFEEE8AA,
    "palegreen": 0xFF98FB98,
    "paleturquoise": 0xFFAFEEEE,
    "palevioletred": 0xFFDB7093,
    "papayawhip": 0xFFFFEFD5,
    "peachpuff": 0xFFFFDAB9,
    "peru": 0xFFCD853F,
    "pink": 0xFFFFC0CB,
    "plum": 0xFFDDA0DD,
    "powderblue": 0xFFB0E0E6,
    "rosybrown": 0xFFBC8F8F,
    "royalblue": 0xFF4169E1,
    "saddlebrown": 0xFF8B4513,
    "salmon": 0xFFFA8072,
    "sandybrown": 0xFFF4A460,
    "seagreen": 0xFF2E8B57,
    "seashell": 0xFFFFF5EE,
    "sienna": 0xFFA0522D,
    "skyblue": 0xFF87CEEB,
    "slateblue": 0xFF6A5ACD,
    "slategray": 0xFF708090,
    "slategrey": 0xFF708090,
    "snow": 0xFFFFFAFA,
    "springgreen": 0xFF00FF7F,
    "steelblue": 0xFF4682B4,
    "tan": 0xFFD2B48C,
    "thistle": 0xFFD8BFD8,
    "tomato": 0xFFFF6347,
    "turquoise": 0xFF40E0D0,
    "violet": 0xFFEE82EE,
    "wheat": 0xFFF5DEB3,
    "whitesmoke": 0xFFF5F5F5,
    "yellowgreen": 0xFF9ACD32,
    "transparent": 0x00000000,
}

BLACK = Color(0xFF000000)
WHITE = Color(0xFFFFFFFF)
RED = Color(0xFFFF0000)
GREEN = Color(0xFF008000)
BLUE = Color(0xFF0000FF)
GRAY = Color(0xFF808080)
TRANSPARENT = Color(0)
