"""CSSカラーリテラルの文法。

受け付ける表記:

- CSS Color Module Level 4 の名前付きカラーキーワード（大文字小文字を区別しない）と ``transparent``
- ``#RGB`` / ``#RGBA`` / ``#RRGGBB`` / ``#RRGGBBAA``
- ``rgb(r, g, b)`` / ``rgba(r, g, b, a)``: 各チャネルは0-255の整数、または3つとも0-100%
- ``hsl(h, s%, l%)`` / ``hsla(h, s%, l%, a)``: 色相は0-360
- アルファ値は0から1まで（``0.5``、``.5``、``1.0`` など）

関数表記はカンマ区切りのみで、空白区切りの新しい構文は受け付けない。
"""

import re

NAMED_COLORS: frozenset[str] = frozenset(
    """
    aliceblue antiquewhite aqua aquamarine azure beige bisque black blanchedalmond blue
    blueviolet brown burlywood cadetblue chartreuse chocolate coral cornflowerblue cornsilk
    crimson cyan darkblue darkcyan darkgoldenrod darkgray darkgreen darkgrey darkkhaki
    darkmagenta darkolivegreen darkorange darkorchid darkred darksalmon darkseagreen
    darkslateblue darkslategray darkslategrey darkturquoise darkviolet deeppink deepskyblue
    dimgray dimgrey dodgerblue firebrick floralwhite forestgreen fuchsia gainsboro ghostwhite
    gold goldenrod gray green greenyellow grey honeydew hotpink indianred indigo ivory khaki
    lavender lavenderblush lawngreen lemonchiffon lightblue lightcoral lightcyan
    lightgoldenrodyellow lightgray lightgreen lightgrey lightpink lightsalmon lightseagreen
    lightskyblue lightslategray lightslategrey lightsteelblue lightyellow lime limegreen linen
    magenta maroon mediumaquamarine mediumblue mediumorchid mediumpurple mediumseagreen
    mediumslateblue mediumspringgreen mediumturquoise mediumvioletred midnightblue mintcream
    mistyrose moccasin navajowhite navy oldlace olive olivedrab orange orangered orchid
    palegoldenrod palegreen paleturquoise palevioletred papayawhip peachpuff peru pink plum
    powderblue purple rebeccapurple red rosybrown royalblue saddlebrown salmon sandybrown
    seagreen seashell sienna silver skyblue slateblue slategray slategrey snow springgreen
    steelblue tan teal thistle tomato transparent turquoise violet wheat white whitesmoke
    yellow yellowgreen
    """.split()
)

_BYTE = r"(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"
_PERCENT = r"(?:100|[1-9]?\d)%"
_HUE = r"(?:360|3[0-5]\d|[12]\d\d|[1-9]?\d)"
_ALPHA = r"(?:0(?:\.\d+)?|1(?:\.0+)?|\.\d+)"
_SEP = r"\s*,\s*"
_CHANNELS = rf"(?:{_BYTE}{_SEP}{_BYTE}{_SEP}{_BYTE}|{_PERCENT}{_SEP}{_PERCENT}{_SEP}{_PERCENT})"

HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")
RGB_COLOR = re.compile(rf"rgb\(\s*{_CHANNELS}\s*\)", re.IGNORECASE)
RGBA_COLOR = re.compile(rf"rgba\(\s*{_CHANNELS}{_SEP}{_ALPHA}\s*\)", re.IGNORECASE)
HSL_COLOR = re.compile(rf"hsl\(\s*{_HUE}{_SEP}{_PERCENT}{_SEP}{_PERCENT}\s*\)", re.IGNORECASE)
HSLA_COLOR = re.compile(rf"hsla\(\s*{_HUE}{_SEP}{_PERCENT}{_SEP}{_PERCENT}{_SEP}{_ALPHA}\s*\)", re.IGNORECASE)


def is_named_color(value: str) -> bool:
    return value.lower() in NAMED_COLORS


def is_color(value: str) -> bool:
    """値がいずれかのカラーリテラル表記に一致するか判定する。"""
    if is_named_color(value):
        return True
    return any(
        pattern.fullmatch(value) is not None for pattern in (HEX_COLOR, RGB_COLOR, RGBA_COLOR, HSL_COLOR, HSLA_COLOR)
    )
