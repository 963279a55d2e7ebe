"""Dockerfileの行を論理命令に再構成する。"""

import re

_FROM_RE = re.compile(r"^FROM(?:\s+|$)", re.IGNORECASE)
_DIRECTIVE_RE = re.compile(r"^#\s*([a-zA-Z][a-zA-Z0-9_-]*)\s*=\s*(\S*)\s*$")

DEFAULT_ESCAPE = "\\"


def split_lines(content: str) -> list[str]:
    """ファイル内容を物理行に分割する。"""
    return content.splitlines()


def detect_escape_character(lines: list[str]) -> str:
    """先頭のパーサーディレクティブから継続マーカーを決定する。

    `# escape=` ディレクティブはファイル先頭の連続したディレクティブ行でのみ有効。
    """
    for line in lines:
        match = _DIRECTIVE_RE.match(line.strip())
        if match is None:
            break
        name, value = match.group(1).lower(), match.group(2)
        if name == "escape" and value in ("\\", "`"):
            return value
    return DEFAULT_ESCAPE


def _run_body(line: str, escape: str) -> str | None:
    """RUN命令ならキーワードを除いた残りを返す。RUN命令でなければNone。

    キーワードの直後は空白・行末・継続マーカーのいずれか。
    """
    if line[:3].upper() != "RUN":
        return None
    rest = line[3:]
    if rest and not rest[0].isspace() and not rest.startswith(escape):
        return None
    return rest.strip()


def reassemble_run_instructions(lines: list[str], escape: str = DEFAULT_ESCAPE) -> list[str]:
    """RUN命令を継続行込みで1つの論理命令にまとめる。

    Args:
        lines: Dockerfileの物理行。
        escape: 行継続マーカー。

    Returns:
        RUNキーワードを除いた論理命令のリスト（出現順）。
    """
    instructions: list[str] = []
    current: list[str] | None = None

    def flush() -> None:
        nonlocal current
        if current is not None:
            instructions.append(" ".join(part for part in current if part))
            current = None

    for raw in lines:
        line = raw.strip()

        # 継続中の行は先頭が run でもキーワードとして扱わない
        if current is None:
            body = _run_body(line, escape)
            if body is None:
                continue
            if body.endswith(escape):
                current = [body[: -len(escape)].strip()]
            else:
                current = [body.strip()]
                flush()
            continue

        # 継続中の空行・コメント行は無視する
        if not line or line.startswith("#"):
            continue

        if line.endswith(escape):
            current.append(line[: -len(escape)].strip())
        else:
            current.append(line)
            flush()

    # 最終行が継続マーカーで終わっていても命令を捨てない
    flush()
    return instructions


def find_base_image(lines: list[str]) -> str | None:
    """最初のFROM行からイメージ参照（タグ込み）を取り出す。"""
    for raw in lines:
        line = raw.strip()
        if not _FROM_RE.match(line):
            continue
        tokens = line.split()
        return tokens[1] if len(tokens) > 1 else None
    return None
