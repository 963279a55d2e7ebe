"""検証結果のデータモデル。"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, computed_field


class ToolNotFound(BaseModel):
    """ツールが検出されなかった結果。任意ツール扱いのため常に有効。"""

    status: Literal["not_found"] = "not_found"
    name: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def found(self) -> bool:
        return False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return True

    @computed_field  # type: ignore[prop-decorator]
    @property
    def version(self) -> str | None:
        return None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return f"{self.name} not found"


class ToolFoundValid(BaseModel):
    """許可リストに含まれるバージョンが検出された結果。"""

    status: Literal["valid"] = "valid"
    name: str
    detected_version: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def found(self) -> bool:
        return True

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return True

    @computed_field  # type: ignore[prop-decorator]
    @property
    def version(self) -> str | None:
        return self.detected_version

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return f"{self.name} found (version {self.detected_version})"


class ToolFoundInvalid(BaseModel):
    """許可リストに含まれないバージョンが検出された結果。"""

    status: Literal["invalid"] = "invalid"
    name: str
    detected_version: str
    allowed_versions: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def found(self) -> bool:
        return True

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def version(self) -> str | None:
        return self.detected_version

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        allowed = ", ".join(self.allowed_versions)
        return f"{self.name} version {self.detected_version} is not allowed. Allowed versions: {allowed}"


ToolCheckResult = Annotated[
    ToolNotFound | ToolFoundValid | ToolFoundInvalid,
    Field(discriminator="status"),
]


class BaseImageCheck(BaseModel):
    """ベースイメージの検証結果。"""

    status: Literal["valid", "invalid", "missing"]
    expected: str
    image: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return self.status == "valid"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        if self.status == "missing":
            return "Base image not found"
        if self.status == "valid":
            return f"Base image is valid: {self.image}"
        return f"Invalid base image: {self.image}. Expected: {self.expected}"


class ValidationReport(BaseModel):
    """1回の検査で生成されるレポート全体。"""

    base_image: BaseImageCheck
    tools: list[ToolCheckResult] = Field(default_factory=list)

    @property
    def found_tools(self) -> list[ToolFoundValid | ToolFoundInvalid]:
        """検出されたツールの結果のみをツール定義順で返す。"""
        return [t for t in self.tools if not isinstance(t, ToolNotFound)]

    @property
    def valid_found_count(self) -> int:
        return sum(1 for t in self.found_tools if t.valid)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        # 未検出ツールは失敗要因にならない
        return self.base_image.valid and all(t.valid for t in self.found_tools)
