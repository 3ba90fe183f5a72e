"""编辑状态比对 — 当前条目 vs 进入编辑时的原始条目

每次编辑变更后重新计算，用于驱动表格行的修改标记、保存按钮和必填校验。

源术语与译文按名称（EditableEntry.src_term / trans_term）或按 locale
（GlossaryEntry: src_lang 对应源术语，其他语言的第一个术语为译文）查找，
不依赖 glossary_terms 的顺序。
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from glossary.models import DEFAULT_ENTRY_STATUS, EditableEntry, EntryStatus, GlossaryEntry
from glossary.helpers.entry_decoder import get_term_by_locale
from glossary.utils.strings import is_empty_or_null, trim

logger = logging.getLogger(__name__)


class SavingTracker:
    """正在保存中的条目 id 集合

    由编辑会话持有；保存流程开始时 mark_saving，结束（成功或失败）时 mark_saved。
    """

    def __init__(self) -> None:
        self._saving: set = set()

    def mark_saving(self, entry_id: Any) -> None:
        self._saving.add(entry_id)

    def mark_saved(self, entry_id: Any) -> None:
        self._saving.discard(entry_id)

    def is_saving(self, entry_id: Any) -> bool:
        return entry_id in self._saving

    def __len__(self) -> int:
        return len(self._saving)


def to_empty_string(value: Optional[str]) -> str:
    return "" if is_empty_or_null(value) else value


def _contents(entry) -> tuple[str, str]:
    """返回 (源术语内容, 译文内容)"""
    if isinstance(entry, GlossaryEntry):
        src = get_term_by_locale(entry.glossary_terms, entry.src_lang)
        trans = next(
            (t for t in entry.glossary_terms if t.locale != entry.src_lang), None
        )
        return (
            to_empty_string(src.content if src else None),
            to_empty_string(trans.content if trans else None),
        )
    return (
        to_empty_string(entry.src_term.content if entry.src_term else None),
        to_empty_string(entry.trans_term.content if entry.trans_term else None),
    )


def compute_status(
    entry,
    original,
    saving: Optional[SavingTracker] = None,
) -> EntryStatus:
    """计算编辑状态

    None 与空字符串视为相等，避免误报修改。

    Args:
        entry: 当前条目（EditableEntry 或 GlossaryEntry）
        original: 进入编辑时的原始条目
        saving: 可选的保存状态表；提供时 is_saving 取自该表，
                否则沿用 entry.status.is_saving

    Returns:
        EntryStatus；任一参数为 None 时返回 DEFAULT_ENTRY_STATUS
    """
    if entry is None or original is None:
        return DEFAULT_ENTRY_STATUS

    source, trans = _contents(entry)
    ori_source, ori_trans = _contents(original)
    desc = to_empty_string(entry.description)
    pos = to_empty_string(entry.pos)
    ori_desc = to_empty_string(original.description)
    ori_pos = to_empty_string(original.pos)

    if saving is not None:
        is_saving = saving.is_saving(entry.id)
    else:
        status = getattr(entry, "status", None)
        is_saving = bool(status.is_saving) if status is not None else False

    status = EntryStatus(
        is_src_modified=desc != ori_desc or pos != ori_pos or source != ori_source,
        is_trans_modified=trans != ori_trans,
        # 源术语内容必填
        is_src_valid=not is_empty_or_null(trim(source)),
        can_update_trans_comment=not is_empty_or_null(ori_trans),
        is_saving=is_saving,
    )
    logger.debug(f"条目 {entry.id} 状态: {status}")
    return status


def can_update_trans_comment(entry: EditableEntry) -> bool:
    """当前译文非空时才允许编辑译文备注"""
    return not is_empty_or_null(entry.trans_term.content)
