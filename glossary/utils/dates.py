"""日期工具 — 解析服务端时间戳并格式化为界面短日期

服务端的 lastModifiedDate 可能是:
- 毫秒级 epoch 时间戳（int/float 或纯数字字符串）
- ISO 8601 字符串（允许结尾的 "Z"）
- 已经是 datetime 对象
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from glossary.config import get_settings

logger = logging.getLogger(__name__)


def parse_date(value) -> datetime | None:
    """解析时间值，无法解析时返回 None"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value

    try:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)

        text = str(value).strip()
        if text.isascii() and text.lstrip("-").isdigit():
            return datetime.fromtimestamp(int(text) / 1000, tz=timezone.utc)
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except (ValueError, OverflowError, OSError) as exc:
        # 超出范围的时间戳与非法字符串同样视为无法解析
        logger.debug(f"无法解析日期: {value!r} ({exc})")
        return None


def short_date(value: datetime | None, fmt: str | None = None) -> str:
    """格式化为短日期字符串，None 返回空字符串"""
    if value is None:
        return ""
    return value.strftime(fmt or get_settings().SHORT_DATE_FORMAT)


def format_short_date(value) -> str:
    """parse_date + short_date

    无法解析的值原样保留（转为字符串），只记录警告，不视为错误。
    """
    if value is None or value == "":
        return ""
    parsed = parse_date(value)
    if parsed is None:
        logger.warning(f"⚠️ 日期格式无法识别，保留原值: {value!r}")
        return str(value)
    return short_date(parsed)
