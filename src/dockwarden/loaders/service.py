"""検査入力（標準定義・Dockerfile）の読み込みサービス。"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from dockwarden.models.errors import (
    DockerfileNotFoundError,
    DockerfileReadError,
    StandardsFormatError,
    StandardsNotFoundError,
)
from dockwarden.models.standards import StandardsConfig
from dockwarden.utils.logging import get_logger

logger = get_logger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def _parse_document(path: Path, text: str) -> Any:
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise StandardsFormatError(path, str(e)) from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise StandardsFormatError(path, str(e)) from e


def load_standards(path: Path) -> StandardsConfig:
    """標準定義ファイル（JSONまたはYAML）を読み込む。

    Raises:
        StandardsNotFoundError: ファイルが存在しない場合。
        StandardsFormatError: 構文エラー、またはスキーマに適合しない場合。
    """
    if not path.is_file():
        raise StandardsNotFoundError(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise StandardsFormatError(path, str(e)) from e

    data = _parse_document(path, text)
    if not isinstance(data, dict):
        raise StandardsFormatError(path, "top-level value must be an object")
    try:
        standards = StandardsConfig.model_validate(data)
    except ValidationError as e:
        raise StandardsFormatError(path, str(e)) from e

    logger.debug("Loaded standards from %s (base image %s)", path, standards.base_image)
    return standards


def read_dockerfile(path: Path) -> str:
    """検査対象のDockerfileを読み込む。

    Raises:
        DockerfileNotFoundError: ファイルが存在しない場合。
        DockerfileReadError: 読み込みまたはデコードに失敗した場合。
    """
    if not path.exists():
        raise DockerfileNotFoundError(path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DockerfileReadError(path, str(e)) from e
