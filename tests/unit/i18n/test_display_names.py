"""DisplayNameResolverのユニットテスト。"""

from pathlib import Path

import pytest

from tenken.i18n.display_names import DisplayNameResolver
from tenken.models.errors import CatalogError


class TestDisplayNameResolver:
    def test_resolve_mapped_field(self) -> None:
        names = DisplayNameResolver({"FamilyName": "名字"})
        assert names.resolve("FamilyName") == "名字"

    def test_unmapped_field_returns_identifier(self) -> None:
        names = DisplayNameResolver({"FamilyName": "名字"})
        assert names.resolve("Nickname") == "Nickname"

    def test_empty_resolver(self) -> None:
        assert DisplayNameResolver().resolve("FamilyName") == "FamilyName"

    def test_from_yaml(self, config_dir: Path) -> None:
        names = DisplayNameResolver.from_yaml(config_dir / "display-names" / "ja.yaml")
        assert names.resolve("Birthdate") == "生年月日"
        assert "Color" in names

    def test_from_empty_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert DisplayNameResolver.from_yaml(path).resolve("A") == "A"

    def test_from_yaml_missing_file_raises_error(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError):
            DisplayNameResolver.from_yaml(tmp_path / "missing.yaml")

    def test_from_yaml_non_mapping_raises_error(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- FamilyName\n", encoding="utf-8")
        with pytest.raises(CatalogError):
            DisplayNameResolver.from_yaml(path)
