"""ロギング設定。

ログはstderrへ、レポートはstdoutへ出力する。
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(log_level: str = "WARNING") -> None:
    """ルートロガーにRichハンドラを設定する。既存のハンドラは破棄する。"""
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())
    root_logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """名前付きロガーを返す。"""
    return logging.getLogger(name)
