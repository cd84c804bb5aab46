"""アタッチメントの色名解決"""

from __future__ import annotations

from types import MappingProxyType

COLORS: MappingProxyType[str, str] = MappingProxyType(
    {
        # 公式の色名
        "good": "#2eb886",
        "warning": "#daa038",
        "danger": "#a30100",
        # 非公式の色名
        "success": "#2eb886",
        "error": "#a30100",
        "info": "#3aa3e3",
        "black": "#1e2d2f",
    }
)


def resolve_color(color: str | None) -> str | None:
    """色名をHEX値に解決する。

    テーブルにない値（"#ff0000" などの直接指定を含む）はそのまま返す。
    大文字小文字は区別する。

    Args:
        color: 色名またはカラーコード

    Returns:
        解決後のカラーコード。未指定の場合はNone。
    """
    if color is None:
        return None
    return COLORS.get(color, color)
