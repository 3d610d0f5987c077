"""ルールパラメータを表示用の表記に変換する。"""

# 基準日時レイアウトのトークン→利用者向け表記。上から順に最初の1箇所だけ置換する。
DATETIME_DISPLAY_TOKENS: tuple[tuple[str, str], ...] = (
    ("2006", "YYYY"),
    ("01", "MM"),
    ("02", "DD"),
    ("15", "HH"),
    ("04", "mm"),
    ("05", "ss"),
)


def display_datetime_layout(layout: str) -> str:
    """``2006-01-02`` のようなレイアウトを ``YYYY-MM-DD`` に変換する。"""
    for token, display in DATETIME_DISPLAY_TOKENS:
        layout = layout.replace(token, display, 1)
    return layout


def transform(rule: str, raw: str) -> str:
    """ルールのパラメータを表示用に変換する。datetime以外はそのまま返す。"""
    if rule == "datetime":
        return display_datetime_layout(raw)
    return raw
