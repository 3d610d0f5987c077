"""テスト共通フィクスチャ。"""

from pathlib import Path

import pytest

from tenken.config import TenkenConfig
from tenken.i18n.display_names import DisplayNameResolver
from tenken.i18n.universal import UniversalTranslator
from tenken.models.constraint import ConstraintSet
from tenken.rules.builtin import default_registry
from tenken.rules.registry import RuleRegistry
from tenken.services.validation import ValidationService, create_service
from tenken.validators.engine import Validator


@pytest.fixture
def config_dir() -> Path:
    """サンプル宣言ファイルのディレクトリ。"""
    return Path(__file__).parent.parent / "config"


@pytest.fixture
def tenken_config() -> TenkenConfig:
    """テスト用TenkenConfig。"""
    return TenkenConfig()


@pytest.fixture
def registry() -> RuleRegistry:
    """組み込みルール登録済みのレジストリ。"""
    return default_registry()


@pytest.fixture
def validator(registry: RuleRegistry) -> Validator:
    """テスト用Validator。"""
    return Validator(registry)


@pytest.fixture
def ja_names(config_dir: Path) -> DisplayNameResolver:
    """日本語の表示名。"""
    return DisplayNameResolver.from_yaml(config_dir / "display-names" / "ja.yaml")


@pytest.fixture
def universal(tenken_config: TenkenConfig, ja_names: DisplayNameResolver) -> UniversalTranslator:
    """ja/en対応のUniversalTranslator。"""
    return UniversalTranslator(
        fallback=tenken_config.fallback_locale,
        locales=tenken_config.locales,
        catalog_dir=tenken_config.catalog_dir,
        display_names={"ja": ja_names},
    )


@pytest.fixture
def service(tenken_config: TenkenConfig, ja_names: DisplayNameResolver) -> ValidationService:
    """表示名付きのValidationService。"""
    return create_service(tenken_config, display_names={"ja": ja_names})


@pytest.fixture
def user_constraints(config_dir: Path, service: ValidationService) -> ConstraintSet:
    """サンプルのユーザー制約宣言。"""
    return service.load_constraints(config_dir / "constraints" / "user.yaml")
