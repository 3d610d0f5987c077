"""基準日時（2006-01-02 15:04:05）形式のレイアウトを解釈する。

レイアウト中のトークンは基準日時の各要素を表す。例えば ``2006-01-02`` は
年4桁・月2桁・日2桁を意味する。レイアウトは ``strptime`` の書式に変換して
日付を解析し、ゼロ埋めの桁数は正規表現で別途確認する。
"""

import re
from datetime import datetime
from functools import lru_cache

# (トークン, strptime書式, 桁数の正規表現)。同じ位置では先に並ぶものを優先する。
_TOKENS: tuple[tuple[str, str, str], ...] = (
    ("January", "%B", r"[A-Za-z]+"),
    ("Jan", "%b", r"[A-Za-z]{3}"),
    ("Monday", "%A", r"[A-Za-z]+"),
    ("Mon", "%a", r"[A-Za-z]{3}"),
    ("MST", "%Z", r"[A-Za-z]+"),
    ("2006", "%Y", r"\d{4}"),
    ("Z07:00", "%z", r"(?:Z|[+-]\d{2}:\d{2})"),
    ("Z0700", "%z", r"(?:Z|[+-]\d{4})"),
    ("-07:00", "%z", r"[+-]\d{2}:\d{2}"),
    ("-0700", "%z", r"[+-]\d{4}"),
    (".000000", ".%f", r"\.\d{6}"),
    (".000", ".%f", r"\.\d{3}"),
    ("01", "%m", r"\d{2}"),
    ("02", "%d", r"\d{2}"),
    ("03", "%I", r"\d{2}"),
    ("04", "%M", r"\d{2}"),
    ("05", "%S", r"\d{2}"),
    ("06", "%y", r"\d{2}"),
    ("15", "%H", r"\d{1,2}"),
    ("PM", "%p", r"(?:AM|PM)"),
    ("pm", "%p", r"(?:am|pm)"),
    ("1", "%m", r"\d{1,2}"),
    ("2", "%d", r"\d{1,2}"),
    ("3", "%I", r"\d{1,2}"),
    ("4", "%M", r"\d{1,2}"),
    ("5", "%S", r"\d{1,2}"),
)


@lru_cache(maxsize=128)
def compile_layout(layout: str) -> tuple[str, re.Pattern[str]]:
    """レイアウトを ``strptime`` 書式と桁数チェック用の正規表現に変換する。"""
    fmt: list[str] = []
    pattern: list[str] = []
    i = 0
    while i < len(layout):
        for token, directive, regex in _TOKENS:
            if layout.startswith(token, i):
                fmt.append(directive)
                pattern.append(regex)
                i += len(token)
                break
        else:
            ch = layout[i]
            fmt.append("%%" if ch == "%" else ch)
            pattern.append(re.escape(ch))
            i += 1
    return "".join(fmt), re.compile("".join(pattern))


def parses(value: str, layout: str) -> bool:
    """値がレイアウトに従った実在の日時であるか判定する。"""
    fmt, pattern = compile_layout(layout)
    if pattern.fullmatch(value) is None:
        return False
    try:
        datetime.strptime(value, fmt)
    except ValueError:
        return False
    return True
