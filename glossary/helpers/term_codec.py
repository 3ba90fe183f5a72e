"""术语编码 — 界面条目 → 服务端 GlossaryEntry / GlossaryTerm

- build_wire_term: 单个术语，locale 为空时不生成
- build_wire_entry: 组装条目，源术语保留原始格式，译文去除首尾空白
- build_entry_for_save: 生成保存接口的请求体（单元素 JSON 数组，不含 status）
"""

from __future__ import annotations

import copy
import json
import logging
from typing import Optional

from glossary.models import EditableEntry, GlossaryEntry, GlossaryTerm
from glossary.utils.strings import is_empty_or_null, trim

logger = logging.getLogger(__name__)


def build_wire_term(term, trim_content: bool) -> Optional[GlossaryTerm]:
    """生成服务端术语

    Args:
        term: 含 content、locale、comment 属性的术语（EditableTerm 或 GlossaryTerm）
        trim_content: 是否去除 content 首尾空白（译文为 True，源术语为 False）

    Returns:
        GlossaryTerm；term 为 None 或 locale 为空时返回 None
    """
    if term is None or is_empty_or_null(term.locale):
        return None
    return GlossaryTerm(
        content=trim(term.content) if trim_content else term.content,
        locale=term.locale,
        comment=trim(term.comment),
    )


def build_wire_entry(entry: EditableEntry) -> GlossaryEntry:
    """界面条目 → 服务端条目

    srcLang 与 sourceReference 取自源术语；没有 locale 的术语被忽略，
    因此 glossary_terms 可能有 0、1 或 2 个元素。
    """
    wire = GlossaryEntry(
        id=entry.id,
        pos=trim(entry.pos),
        description=trim(entry.description),
        src_lang=entry.src_term.locale,
        source_reference=entry.src_term.reference,
    )

    for term, trim_content in ((entry.src_term, False), (entry.trans_term, True)):
        wire_term = build_wire_term(term, trim_content)
        if wire_term is not None:
            wire.glossary_terms.append(wire_term)
        else:
            logger.debug(f"条目 {entry.id}: 忽略没有 locale 的术语")

    return wire


def build_entry_for_save(entry: EditableEntry) -> str:
    """生成保存请求体

    接口按批量接收条目，因此即使只保存一条也包装为单元素数组。
    status 只属于界面，不会出现在结果中；调用方的 entry 不被修改。
    """
    entry_copy = copy.deepcopy(entry)
    entry_copy.pos = trim(entry_copy.pos)
    entry_copy.description = trim(entry_copy.description)

    data = entry_copy.to_dict()
    del data["status"]
    return json.dumps([data], ensure_ascii=False)
