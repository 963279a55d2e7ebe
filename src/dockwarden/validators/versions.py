"""バージョン正規化と許可リスト照合のポリシー。

正規化と照合は必ずこの2関数を組み合わせて使う。
パターンごとに個別の整形を行わないこと。
"""

from dockwarden.models.standards import VersionMatch, VersionPrecision


def normalize_version(raw: str, precision: VersionPrecision = "truncated") -> str:
    """検出したバージョン文字列を精度ポリシーに従って正規化する。

    Args:
        raw: 正規表現でキャプチャした数字とドットのみの文字列。
        precision: 正規化ポリシー。
            - truncated: 3要素以上ならメジャーのみ、それ以外はそのまま
            - major: メジャーのみ
            - major.minor: 最大2要素
            - exact: 変更しない

    Returns:
        正規化後のバージョン。同じポリシーで再度正規化しても変わらない。
    """
    version = raw.strip().strip(".")
    parts = version.split(".")
    if precision == "exact":
        return version
    if precision == "major":
        return parts[0]
    if precision == "major.minor":
        return ".".join(parts[:2])
    if precision == "truncated":
        return parts[0] if len(parts) > 2 else version
    raise ValueError(f"Unknown version precision: {precision}")


def is_allowed_version(version: str, allowed: list[str], match: VersionMatch = "exact") -> bool:
    """正規化済みバージョンが許可リストに含まれるか判定する。

    exactは文字列の完全一致のみ。prefixは許可値そのもの、
    または許可値に続くサブバージョン（"3" に対する "3.9" など）を許可する。
    """
    if match == "exact":
        return version in allowed
    if match == "prefix":
        return any(version == a or version.startswith(a + ".") for a in allowed)
    raise ValueError(f"Unknown version match policy: {match}")
