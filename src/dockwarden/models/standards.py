"""組織標準（許可されたベースイメージ・ツールバージョン）のデータモデル。"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

VersionPrecision = Literal["truncated", "major", "major.minor", "exact"]
VersionMatch = Literal["exact", "prefix"]

TOOL_KEYS: tuple[str, ...] = ("jdk", "maven", "gradle", "go", "node", "python")


class StandardsConfig(BaseModel):
    """許可値の定義。読み込み後は変更しない。"""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    base_image: str = Field(alias="baseImage")
    jdk_versions: list[str] = Field(alias="jdkVersions")
    maven_versions: list[str] = Field(alias="mavenVersions")
    gradle_versions: list[str] = Field(alias="gradleVersions")
    go_versions: list[str] = Field(alias="goVersions")
    node_versions: list[str] = Field(alias="nodeVersions")
    python_versions: list[str] = Field(alias="pythonVersions")
    version_precision: VersionPrecision = Field(default="truncated", alias="versionPrecision")
    version_match: VersionMatch = Field(default="exact", alias="versionMatch")

    def allowed_versions(self, tool_key: str) -> list[str]:
        """ツールキーに対応する許可バージョン一覧を返す。

        Raises:
            KeyError: 未知のツールキーの場合。
        """
        if tool_key not in TOOL_KEYS:
            raise KeyError(tool_key)
        return list(getattr(self, f"{tool_key}_versions"))
