"""入力読み込みサービスのユニットテスト。"""

from pathlib import Path

import pytest

from dockwarden.loaders.service import load_standards, read_dockerfile
from dockwarden.models.errors import (
    DockerfileNotFoundError,
    DockerfileReadError,
    StandardsFormatError,
    StandardsNotFoundError,
)


class TestLoadStandards:
    def test_load_json(self, standards_file: Path) -> None:
        standards = load_standards(standards_file)
        assert standards.base_image == "ubuntu:20.04"
        assert "17" in standards.jdk_versions

    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "standards.yaml"
        path.write_text(
            "baseImage: 'eclipse-temurin:17-jdk'\n"
            "jdkVersions: ['17']\n"
            "mavenVersions: []\n"
            "gradleVersions: []\n"
            "goVersions: []\n"
            "nodeVersions: ['20']\n"
            "pythonVersions: []\n"
            "versionPrecision: major\n",
            encoding="utf-8",
        )
        standards = load_standards(path)
        assert standards.base_image == "eclipse-temurin:17-jdk"
        assert standards.version_precision == "major"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(StandardsNotFoundError):
            load_standards(tmp_path / "standards.json")

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "standards.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StandardsFormatError):
            load_standards(path)

    def test_schema_violation(self, tmp_path: Path) -> None:
        path = tmp_path / "standards.json"
        path.write_text('{"baseImage": "ubuntu:20.04"}', encoding="utf-8")
        with pytest.raises(StandardsFormatError):
            load_standards(path)

    def test_non_object_document(self, tmp_path: Path) -> None:
        path = tmp_path / "standards.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(StandardsFormatError):
            load_standards(path)


class TestReadDockerfile:
    def test_read(self, tmp_path: Path) -> None:
        path = tmp_path / "Dockerfile"
        path.write_text("FROM ubuntu:20.04\n", encoding="utf-8")
        assert read_dockerfile(path) == "FROM ubuntu:20.04\n"

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(DockerfileNotFoundError):
            read_dockerfile(tmp_path / "Dockerfile")

    def test_directory_is_unreadable(self, tmp_path: Path) -> None:
        with pytest.raises(DockerfileReadError):
            read_dockerfile(tmp_path)

    def test_invalid_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "Dockerfile"
        path.write_bytes(b"FROM \xff\xfe\n")
        with pytest.raises(DockerfileReadError):
            read_dockerfile(path)
