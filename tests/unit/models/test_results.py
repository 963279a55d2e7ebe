"""検証結果モデルのユニットテスト。"""

import pytest
from pydantic import TypeAdapter, ValidationError

from dockwarden.models.results import (
    BaseImageCheck,
    ToolCheckResult,
    ToolFoundInvalid,
    ToolFoundValid,
    ToolNotFound,
    ValidationReport,
)


class TestToolCheckResult:
    def test_not_found_has_no_version(self) -> None:
        result = ToolNotFound(name="Go")
        assert result.found is False
        assert result.valid is True
        assert result.version is None
        assert result.message == "Go not found"

    def test_found_valid(self) -> None:
        result = ToolFoundValid(name="Java", detected_version="17")
        assert result.found is True
        assert result.valid is True
        assert result.message == "Java found (version 17)"

    def test_found_invalid(self) -> None:
        result = ToolFoundInvalid(name="Java", detected_version="8", allowed_versions=["11", "17"])
        assert result.found is True
        assert result.valid is False
        assert result.message == "Java version 8 is not allowed. Allowed versions: 11, 17"

    def test_discriminated_union_round_trip(self) -> None:
        adapter = TypeAdapter(ToolCheckResult)
        dumped = ToolFoundInvalid(name="Node", detected_version="14", allowed_versions=["16"]).model_dump()
        restored = adapter.validate_python(dumped)
        assert isinstance(restored, ToolFoundInvalid)

    def test_unknown_status_rejected(self) -> None:
        adapter = TypeAdapter(ToolCheckResult)
        with pytest.raises(ValidationError):
            adapter.validate_python({"status": "maybe", "name": "Node"})

    def test_dump_includes_record_fields(self) -> None:
        data = ToolNotFound(name="Maven").model_dump()
        assert data["found"] is False
        assert data["valid"] is True
        assert data["version"] is None


class TestValidationReport:
    def _report(self, base_status: str, *tools: object) -> ValidationReport:
        return ValidationReport(
            base_image=BaseImageCheck(status=base_status, expected="ubuntu:20.04", image="ubuntu:20.04"),  # type: ignore[arg-type]
            tools=list(tools),  # type: ignore[arg-type]
        )

    def test_passed_with_absent_tools(self) -> None:
        report = self._report("valid", ToolNotFound(name="Java"), ToolNotFound(name="Go"))
        assert report.passed is True
        assert report.found_tools == []
        assert report.valid_found_count == 0

    def test_invalid_tool_fails(self) -> None:
        report = self._report(
            "valid",
            ToolFoundValid(name="Java", detected_version="17"),
            ToolFoundInvalid(name="Node", detected_version="14", allowed_versions=["16"]),
        )
        assert report.passed is False
        assert report.valid_found_count == 1
        assert [t.name for t in report.found_tools] == ["Java", "Node"]

    def test_invalid_base_image_fails(self) -> None:
        report = self._report("invalid", ToolFoundValid(name="Java", detected_version="17"))
        assert report.passed is False

    def test_missing_base_image_fails(self) -> None:
        report = ValidationReport(base_image=BaseImageCheck(status="missing", expected="ubuntu:20.04"))
        assert report.passed is False
