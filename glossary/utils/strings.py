"""字符串工具 — trim / 空值判断 / 默认值"""

from __future__ import annotations

from typing import Any


def trim(value: str | None) -> str:
    """去除首尾空白，None 视为空字符串"""
    if value is None:
        return ""
    return value.strip()


def is_empty_or_null(value: str | None) -> bool:
    """None 或长度为 0 时返回 True（仅含空白的字符串不算空）"""
    return value is None or len(value) == 0


def defined(value: Any, fallback: Any) -> Any:
    """value 为 None 时返回 fallback"""
    return fallback if value is None else value
