"""条目解码 — 服务端 GlossaryEntry → 界面可编辑条目

进入编辑模式时调用一次。按 locale 查找源术语和当前翻译语言的译文，
格式化日期并为缺失字段补默认值，保证返回的条目可以直接渲染和比对。
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from glossary.errors import MalformedEntryError
from glossary.models import DEFAULT_ENTRY_STATUS, EditableEntry, EditableTerm, GlossaryEntry, GlossaryTerm
from glossary.utils.dates import format_short_date
from glossary.utils.strings import defined, is_empty_or_null

logger = logging.getLogger(__name__)


def get_term_by_locale(terms: Iterable[GlossaryTerm], locale: str) -> Optional[GlossaryTerm]:
    """返回第一个 locale 匹配的术语，没有则返回 None"""
    for term in terms or []:
        if term.locale == locale:
            return term
    return None


def generate_empty_term(locale: str) -> EditableTerm:
    """生成指定语言的空术语（占位用）"""
    return EditableTerm(
        content="",
        locale=locale,
        comment="",
        last_modified_date="",
        last_modified_by="",
    )


def generate_src_term(locale: str) -> EditableTerm:
    """生成空的源术语（带空 reference），用于新建条目"""
    term = generate_empty_term(locale)
    term.reference = ""
    return term


def _to_editable_term(term: GlossaryTerm, reference: Optional[str] = None) -> EditableTerm:
    return EditableTerm(
        content=defined(term.content, ""),
        locale=term.locale,
        comment=defined(term.comment, ""),
        last_modified_date=format_short_date(term.last_modified_date),
        last_modified_by=defined(term.last_modified_by, ""),
        reference=reference,
    )


def build_ui_entry(entry: GlossaryEntry, trans_locale: str) -> EditableEntry:
    """服务端条目 → 界面可编辑条目

    Args:
        entry: 服务端条目
        trans_locale: 当前翻译语言

    Returns:
        EditableEntry；trans_term.locale 总是等于 trans_locale，
        没有对应译文时使用空术语占位。

    Raises:
        MalformedEntryError: 条目中没有 src_lang 对应的源术语
    """
    src = get_term_by_locale(entry.glossary_terms, entry.src_lang)
    if src is None:
        logger.error(
            f"❌ 条目 {entry.id} 缺少源术语 (srcLang={entry.src_lang!r})"
        )
        raise MalformedEntryError(
            f"malformed entry {entry.id!r}: missing source term for locale {entry.src_lang!r}",
            entry_id=entry.id,
        )
    src_term = _to_editable_term(src, reference=defined(entry.source_reference, ""))

    trans = None
    if not is_empty_or_null(trans_locale):
        trans = get_term_by_locale(entry.glossary_terms, trans_locale)
    if trans is not None:
        trans_term = _to_editable_term(trans)
    else:
        trans_term = generate_empty_term(trans_locale)

    # 服务端统计包含源术语
    terms_count = max((entry.terms_count or 0) - 1, 0)

    logger.debug(
        f"条目 {entry.id} 已解码: {entry.src_lang} → {trans_locale}, "
        f"译文{'存在' if trans is not None else '缺失'}"
    )
    return EditableEntry(
        id=entry.id,
        pos=defined(entry.pos, ""),
        description=defined(entry.description, ""),
        terms_count=terms_count,
        src_term=src_term,
        trans_term=trans_term,
        status=DEFAULT_ENTRY_STATUS,
    )
