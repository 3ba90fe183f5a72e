"""排序参数编解码 — SortSpec ↔ 查询参数 sort

列表接口只支持单列排序：
    "src_content"  → {"src_content": True}   升序
    "-pos"         → {"pos": False}          降序

serialize_sort_spec 可以输出多列（逗号分隔），但 parse_sort_token
只会还原单列，这是接口限制而非缺陷。
"""

from __future__ import annotations

from typing import Optional

from glossary.config import get_settings

SortSpec = dict[str, bool]


def parse_sort_token(token: Optional[str]) -> SortSpec:
    """查询参数 → SortSpec，空值返回默认排序"""
    if not token:
        return {get_settings().DEFAULT_SORT_FIELD: True}
    if token.startswith("-"):
        return {token[1:]: False}
    return {token: True}


def serialize_sort_spec(spec: Optional[SortSpec]) -> str:
    """SortSpec → 查询参数，空 spec 返回空字符串"""
    params = [field if ascending else f"-{field}" for field, ascending in (spec or {}).items()]
    return ",".join(params)
