"""dockwardenのコマンドラインインターフェース。"""

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from dockwarden.config import load_config
from dockwarden.loaders.service import load_standards, read_dockerfile
from dockwarden.models.errors import DockwardenError
from dockwarden.reporting.console import render_json, render_report
from dockwarden.utils.logging import get_logger, setup_logging
from dockwarden.validators.dockerfile import DockerfileValidator

app = typer.Typer(
    name="dockwarden",
    help="Check a Dockerfile against organizational base image and toolchain standards.",
    add_completion=False,
)

logger = get_logger(__name__)


class OutputFormat(str, Enum):
    text = "text"
    json = "json"


class Precision(str, Enum):
    truncated = "truncated"
    major = "major"
    major_minor = "major.minor"
    exact = "exact"


class Match(str, Enum):
    exact = "exact"
    prefix = "prefix"


@app.command()
def check(
    dockerfile: Optional[Path] = typer.Option(
        None,
        "--dockerfile",
        "-f",
        help="Dockerfile to check (defaults to $DOCKERFILE_PATH or cosmos/Dockerfile)",
    ),
    standards: Optional[Path] = typer.Option(
        None,
        "--standards",
        "-s",
        help="Standards document (JSON or YAML)",
    ),
    tools: Optional[Path] = typer.Option(
        None,
        "--tools",
        help="YAML catalog replacing the built-in tool patterns",
    ),
    precision: Optional[Precision] = typer.Option(
        None,
        "--precision",
        help="Version normalization policy (overrides the standards document)",
    ),
    match: Optional[Match] = typer.Option(
        None,
        "--match",
        help="Allow-list comparison policy (overrides the standards document)",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.text,
        "--format",
        help="Report format",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Validate a Dockerfile. Exits 1 on any violation or read error."""
    try:
        config = load_config()
    except DockwardenError as e:
        setup_logging("DEBUG" if verbose else "WARNING")
        logger.error("Error validating Dockerfile: %s", e)
        raise typer.Exit(1) from None
    setup_logging("DEBUG" if verbose else config.log_level)

    dockerfile_path = dockerfile or config.dockerfile_path
    standards_path = standards or config.standards_path
    tools_path = tools or config.tools_path

    try:
        standards_config = load_standards(standards_path)
        content = read_dockerfile(dockerfile_path)
        validator = DockerfileValidator(
            standards_config,
            tools_file=tools_path,
            precision=precision.value if precision else config.version_precision,
            match=match.value if match else config.version_match,
        )
        report = validator.validate(content)
    except DockwardenError as e:
        logger.error("Error validating Dockerfile: %s", e)
        raise typer.Exit(1) from None

    console = Console()
    if output_format is OutputFormat.json:
        render_json(report, console)
    else:
        render_report(report, console)

    if not report.passed:
        raise typer.Exit(1)
