"""パラメータ変換のユニットテスト。"""

from tenken.i18n.transform import display_datetime_layout, transform


class TestTransform:
    def test_datetime_date_layout(self) -> None:
        assert transform("datetime", "2006-01-02") == "YYYY-MM-DD"

    def test_datetime_day_first_layout(self) -> None:
        assert transform("datetime", "02/01/2006") == "DD/MM/YYYY"

    def test_datetime_with_time(self) -> None:
        assert transform("datetime", "2006-01-02 15:04:05") == "YYYY-MM-DD HH:mm:ss"

    def test_display_form_is_unchanged(self) -> None:
        once = transform("datetime", "2006-01-02")
        assert transform("datetime", once) == once
        assert transform("datetime", "YYYY-MM-DD") == "YYYY-MM-DD"

    def test_only_first_occurrence_is_replaced(self) -> None:
        assert display_datetime_layout("01-01") == "MM-01"

    def test_other_rules_are_identity(self) -> None:
        assert transform("min", "10") == "10"
        assert transform("iscolor", "2006") == "2006"

    def test_unrecognized_pattern_passes_through(self) -> None:
        assert transform("datetime", "yyyy.mm.dd") == "yyyy.mm.dd"
