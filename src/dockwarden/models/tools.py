"""ツールバージョン検出定義のデータモデル。"""

import re

from pydantic import BaseModel, ConfigDict, field_validator


class ToolSpec(BaseModel):
    """ツールごとの検出パターン定義（YAMLからも読み込み可能）。

    patternsは優先順位順。最初にマッチしたパターンが採用される。
    """

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    patterns: list[str]

    @field_validator("patterns")
    @classmethod
    def _check_patterns(cls, patterns: list[str]) -> list[str]:
        if not patterns:
            raise ValueError("at least one pattern is required")
        for pattern in patterns:
            try:
                compiled = re.compile(pattern, re.IGNORECASE)
            except re.error as e:
                raise ValueError(f"invalid pattern {pattern!r}: {e}") from None
            if compiled.groups < 1:
                raise ValueError(f"pattern {pattern!r} has no capture group")
        return patterns

    def compiled_patterns(self) -> list[re.Pattern[str]]:
        """大文字小文字を区別せずにコンパイルしたパターンを返す。"""
        return [re.compile(p, re.IGNORECASE) for p in self.patterns]
