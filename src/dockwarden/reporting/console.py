"""検証レポートのコンソール出力。"""

from rich.console import Console
from rich.markup import escape

from dockwarden.models.results import ValidationReport

_VALID = "[green]✅ Valid[/green]"
_INVALID = "[red]❌ Invalid[/red]"


def _status(valid: bool) -> str:
    return _VALID if valid else _INVALID


def render_report(report: ValidationReport, console: Console) -> None:
    """人が読むためのセクション形式でレポートを出力する。

    ツールは検出されたもののみ表示する。
    """

    def out(text: str = "") -> None:
        console.print(text, highlight=False, soft_wrap=True)

    out("\n=== Dockerfile Validation Results ===\n")

    out("Base Image:")
    out(f"  Status: {_status(report.base_image.valid)}")
    out(f"  Details: {escape(report.base_image.message)}")
    out()

    out("Tools:")
    found = report.found_tools
    if not found:
        out("  No tracked tools found")
    for tool in found:
        out(f"  {escape(tool.name)}:")
        out(f"    Status: {_status(tool.valid)}")
        out(f"    Version: {escape(tool.detected_version)}")
        out(f"    Details: {escape(tool.message)}")

    out(f"\nSummary: {report.valid_found_count}/{len(found)} detected tools valid")


def render_json(report: ValidationReport, console: Console) -> None:
    """レポートをJSONとして出力する。"""
    console.print_json(report.model_dump_json(), highlight=False)
