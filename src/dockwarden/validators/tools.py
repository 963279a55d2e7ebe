"""組み込みのツール検出パターン定義。"""

from dockwarden.models.tools import ToolSpec

# キャプチャは数字とドットのみ
_V = r"(\d+(?:\.\d+)*)"

# 各ツールのパターンは具体的なもの → 汎用的なものの順に並べる
DEFAULT_TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(
        key="jdk",
        name="Java",
        patterns=[
            rf"sdk\s+install\s+java\s+{_V}",
            rf"openjdk[-@:]?{_V}",
            rf"(?:temurin|corretto|zulu)[-@:]?{_V}",
            rf"jdk[-@:]?{_V}",
            rf"java[- ]?{_V}",
        ],
    ),
    ToolSpec(
        key="maven",
        name="Maven",
        patterns=[
            rf"apache-maven-{_V}",
            rf"sdk\s+install\s+maven\s+{_V}",
            rf"maven[-: ]v?{_V}",
            rf"mvn[- ]{_V}",
        ],
    ),
    ToolSpec(
        key="gradle",
        name="Gradle",
        patterns=[
            rf"gradle-{_V}-(?:bin|all)",
            rf"sdk\s+install\s+gradle\s+{_V}",
            rf"gradle[-: ]v?{_V}",
        ],
    ),
    ToolSpec(
        key="go",
        name="Go",
        patterns=[
            r"\bgo(\d+(?:\.\d+)+)\.(?:linux|darwin|windows|freebsd)",
            rf"golang[-: ]v?{_V}",
            r"\bgo[- ]?v?(\d+\.\d+(?:\.\d+)*)",
        ],
    ),
    ToolSpec(
        key="node",
        name="Node",
        patterns=[
            rf"nvm\s+install\s+v?{_V}",
            r"setup_(\d+)\.x",
            rf"node-v{_V}",
            rf"node(?:js)?[-@:= ]v?{_V}",
        ],
    ),
    ToolSpec(
        key="python",
        name="Python",
        patterns=[
            rf"pyenv\s+install\s+(?:-\S+\s+)*{_V}",
            rf"python[- ]?v?{_V}",
        ],
    ),
)
