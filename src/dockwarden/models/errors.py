"""dockwardenのカスタム例外クラス。"""

from pathlib import Path


class DockwardenError(Exception):
    """dockwardenの基底例外クラス。"""


class StandardsNotFoundError(DockwardenError):
    """標準定義ファイルが見つからない場合の例外。"""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Standards file not found: {path}")
        self.path = path


class StandardsFormatError(DockwardenError):
    """標準定義ファイルの形式が不正な場合の例外。"""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Invalid standards file {path}: {detail}")
        self.path = path
        self.detail = detail


class DockerfileNotFoundError(DockwardenError):
    """検査対象のDockerfileが見つからない場合の例外。"""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Dockerfile not found: {path}")
        self.path = path


class DockerfileReadError(DockwardenError):
    """Dockerfileの読み込みに失敗した場合の例外。"""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Failed to read Dockerfile {path}: {detail}")
        self.path = path
        self.detail = detail


class ToolCatalogError(DockwardenError):
    """ツール定義カタログが不正な場合の例外。"""

    def __init__(self, path: Path | None, detail: str) -> None:
        source = path if path is not None else "<built-in>"
        super().__init__(f"Invalid tool catalog {source}: {detail}")
        self.path = path
        self.detail = detail


class SettingsError(DockwardenError):
    """実行設定（環境変数）が不正な場合の例外。"""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid settings: {detail}")
        self.detail = detail
