"""テスト共通フィクスチャ。"""

from collections.abc import Callable
from pathlib import Path

import pytest

from dockwarden.loaders.service import load_standards
from dockwarden.models.standards import StandardsConfig
from dockwarden.validators.dockerfile import DockerfileValidator


@pytest.fixture
def config_dir() -> Path:
    """設定ファイルディレクトリ。"""
    return Path(__file__).parent.parent / "config"


@pytest.fixture
def standards_file(config_dir: Path) -> Path:
    """サンプル標準定義ファイル。"""
    return config_dir / "standards.json"


@pytest.fixture
def standards(standards_file: Path) -> StandardsConfig:
    """サンプル標準定義。"""
    return load_standards(standards_file)


@pytest.fixture
def validator(standards: StandardsConfig) -> DockerfileValidator:
    """テスト用DockerfileValidator。"""
    return DockerfileValidator(standards)


@pytest.fixture
def write_dockerfile(tmp_path: Path) -> Callable[[str], Path]:
    """一時ディレクトリにDockerfileを書き出すファクトリ。"""

    def _write(content: str, name: str = "Dockerfile") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_standards() -> Callable[..., StandardsConfig]:
    """任意の値で上書きした標準定義を生成するファクトリ。"""

    def _make(**overrides: object) -> StandardsConfig:
        data: dict[str, object] = {
            "baseImage": "ubuntu:20.04",
            "jdkVersions": ["17"],
            "mavenVersions": [],
            "gradleVersions": [],
            "goVersions": [],
            "nodeVersions": [],
            "pythonVersions": [],
        }
        data.update(overrides)
        return StandardsConfig.model_validate(data)

    return _make
