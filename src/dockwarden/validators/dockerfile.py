"""Dockerfileの組織標準準拠チェック。"""

import re
from collections.abc import Sequence
from pathlib import Path

import yaml
from pydantic import ValidationError

from dockwarden.models.errors import ToolCatalogError
from dockwarden.models.results import (
    BaseImageCheck,
    ToolCheckResult,
    ToolFoundInvalid,
    ToolFoundValid,
    ToolNotFound,
    ValidationReport,
)
from dockwarden.models.standards import StandardsConfig, VersionMatch, VersionPrecision
from dockwarden.models.tools import ToolSpec
from dockwarden.utils.logging import get_logger
from dockwarden.validators.instructions import (
    detect_escape_character,
    find_base_image,
    reassemble_run_instructions,
    split_lines,
)
from dockwarden.validators.tools import DEFAULT_TOOLS
from dockwarden.validators.versions import is_allowed_version, normalize_version

logger = get_logger(__name__)


def extract_version(text: str, patterns: Sequence[re.Pattern[str]]) -> str | None:
    """優先順位順にパターンを試し、最初にマッチしたキャプチャを返す。

    後続のパターンがより適切なバージョンにマッチし得る場合でも、
    最初にマッチしたパターンを採用する。
    """
    for pattern in patterns:
        match = pattern.search(text)
        if match and match.group(1):
            return match.group(1)
    return None


def check_base_image(lines: list[str], expected: str) -> BaseImageCheck:
    """最初のFROM行のイメージを期待値と完全一致で比較する。"""
    image = find_base_image(lines)
    if image is None:
        return BaseImageCheck(status="missing", expected=expected)
    status = "valid" if image == expected else "invalid"
    return BaseImageCheck(status=status, expected=expected, image=image)


def check_tool(
    text: str,
    spec: ToolSpec,
    allowed: list[str],
    precision: VersionPrecision = "truncated",
    match: VersionMatch = "exact",
) -> ToolCheckResult:
    """単一ツールのバージョンを抽出・正規化し、許可リストと照合する。"""
    raw = extract_version(text, spec.compiled_patterns())
    if raw is None:
        return ToolNotFound(name=spec.name)

    version = normalize_version(raw, precision)
    if is_allowed_version(version, allowed, match):
        return ToolFoundValid(name=spec.name, detected_version=version)
    return ToolFoundInvalid(name=spec.name, detected_version=version, allowed_versions=list(allowed))


def load_tool_catalog(path: Path) -> list[ToolSpec]:
    """ツール検出パターン定義をYAMLファイルから読み込む。

    Raises:
        ToolCatalogError: ファイルが存在しない、または形式が不正な場合。
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ToolCatalogError(path, "file not found") from None
    except yaml.YAMLError as e:
        raise ToolCatalogError(path, str(e)) from e

    if not isinstance(data, dict) or not isinstance(data.get("tools"), list):
        raise ToolCatalogError(path, "expected a 'tools' list")

    try:
        return [ToolSpec.model_validate(tool_data) for tool_data in data["tools"]]
    except ValidationError as e:
        raise ToolCatalogError(path, str(e)) from e


class DockerfileValidator:
    """組織標準に基づくDockerfile検証を行う。"""

    def __init__(
        self,
        standards: StandardsConfig,
        tools_file: Path | None = None,
        precision: VersionPrecision | None = None,
        match: VersionMatch | None = None,
    ) -> None:
        self._standards = standards
        self._tools_file = tools_file
        self._tools: list[ToolSpec] | None = None
        self._precision: VersionPrecision = precision or standards.version_precision
        self._match: VersionMatch = match or standards.version_match

    def _load_tools(self) -> list[ToolSpec]:
        """ツール定義を読み込む。ファイル指定がなければ組み込み定義を使う。"""
        if self._tools is not None:
            return self._tools

        if self._tools_file is None:
            self._tools = list(DEFAULT_TOOLS)
        else:
            self._tools = load_tool_catalog(self._tools_file)
            logger.debug("Loaded %d tool definitions from %s", len(self._tools), self._tools_file)
        return self._tools

    def validate(self, content: str) -> ValidationReport:
        """Dockerfileの内容を検証する。

        Args:
            content: Dockerfileのテキスト。

        Returns:
            ベースイメージとツールごとの検証結果。
        """
        lines = split_lines(content)
        instructions = reassemble_run_instructions(lines, escape=detect_escape_character(lines))
        logger.debug("Reassembled %d RUN instructions from %d lines", len(instructions), len(lines))

        report = ValidationReport(
            base_image=check_base_image(lines, self._standards.base_image),
            tools=self.check_tools("\n".join(instructions)),
        )

        if report.passed:
            logger.info("Dockerfile complies with standards")
        else:
            logger.warning("Dockerfile violates standards")
        return report

    def check_tools(self, text: str) -> list[ToolCheckResult]:
        """再構成済みの命令テキストに対して全ツールをチェックする。"""
        results: list[ToolCheckResult] = []
        for spec in self._load_tools():
            try:
                allowed = self._standards.allowed_versions(spec.key)
            except KeyError:
                raise ToolCatalogError(self._tools_file, f"unknown tool key: {spec.key}") from None
            result = check_tool(text, spec, allowed, self._precision, self._match)
            if result.found:
                logger.debug("%s: detected version %s", spec.name, result.version)
            results.append(result)
        return results
