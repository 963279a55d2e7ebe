"""dockwardenの実行設定。"""

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from dockwarden.models.errors import SettingsError
from dockwarden.models.standards import VersionMatch, VersionPrecision

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CheckerConfig(BaseSettings):
    """チェッカー設定。環境変数から読み込み可能。"""

    model_config = {"env_prefix": "DOCKWARDEN_"}

    # 検査対象はCIから DOCKERFILE_PATH で渡される
    dockerfile_path: Path = Field(
        default=Path("cosmos/Dockerfile"),
        validation_alias=AliasChoices("DOCKERFILE_PATH", "dockerfile_path"),
    )
    standards_path: Path = Path("managed_files/standards.json")
    tools_path: Path | None = None

    # Noneの場合は標準定義ファイルの値を使う
    version_precision: VersionPrecision | None = None
    version_match: VersionMatch | None = None

    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


def load_config() -> CheckerConfig:
    """環境変数から設定を読み込む。

    Raises:
        SettingsError: 環境変数の値が不正な場合。
    """
    try:
        return CheckerConfig()
    except ValidationError as e:
        raise SettingsError(str(e)) from e
