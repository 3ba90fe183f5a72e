"""术语条目编辑 API 路由 — 条目转换、编辑状态和排序参数

提供以下端点：
- POST /api/glossary/entries/editable?trans_locale=xx  服务端条目 → 可编辑条目
- POST /api/glossary/entries/wire                      可编辑条目 → 服务端条目
- POST /api/glossary/entries/save-payload              可编辑条目 → 保存请求体
- POST /api/glossary/entries/status                    计算编辑状态
- GET  /api/glossary/sort?sort=-pos                    排序参数 → SortSpec
- POST /api/glossary/sort                              SortSpec → 排序参数

所有端点都是纯转换，不做持久化。
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Body, HTTPException, Query

from backend.app.models.schemas import (
    EditableEntryPayload,
    EntryStatusRequest,
    GlossaryEntryPayload,
    SavePayloadResponse,
    SortParamResponse,
)
from glossary.errors import MalformedEntryError
from glossary.helpers.entry_decoder import build_ui_entry
from glossary.helpers.entry_status import compute_status
from glossary.helpers.sort_params import parse_sort_token, serialize_sort_spec
from glossary.helpers.term_codec import build_entry_for_save, build_wire_entry
from glossary.models import EditableEntry, GlossaryEntry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/glossary", tags=["glossary"])


def _to_editable(payload: Optional[EditableEntryPayload]) -> Optional[EditableEntry]:
    if payload is None:
        return None
    return EditableEntry.from_dict(payload.model_dump(by_alias=True))


@router.post("/entries/editable")
async def to_editable_entry(
    body: GlossaryEntryPayload,
    trans_locale: str = Query(..., min_length=1, description="当前翻译语言"),
):
    """服务端条目 → 可编辑条目

    Raises:
        HTTPException 422: 条目缺少 srcLang 对应的源术语
    """
    entry = GlossaryEntry.from_dict(body.model_dump(by_alias=True))
    try:
        editable = build_ui_entry(entry, trans_locale)
    except MalformedEntryError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return editable.to_dict()


@router.post("/entries/wire")
async def to_wire_entry(body: EditableEntryPayload):
    """可编辑条目 → 服务端条目"""
    wire = build_wire_entry(_to_editable(body))
    logger.info("📝 条目 %s 已编码: %d 个术语", wire.id, len(wire.glossary_terms))
    return wire.to_dict()


@router.post("/entries/save-payload", response_model=SavePayloadResponse)
async def to_save_payload(body: EditableEntryPayload):
    """可编辑条目 → 保存接口请求体（JSON 文本，不含 status）"""
    return SavePayloadResponse(payload=build_entry_for_save(_to_editable(body)))


@router.post("/entries/status")
async def entry_status(body: EntryStatusRequest):
    """计算当前条目相对原始条目的编辑状态"""
    status = compute_status(_to_editable(body.current), _to_editable(body.original))
    return status.to_dict()


@router.get("/sort")
async def parse_sort(sort: Optional[str] = Query(default=None, description="排序参数，如 -src_content")):
    """排序参数 → SortSpec"""
    return parse_sort_token(sort)


@router.post("/sort", response_model=SortParamResponse)
async def serialize_sort(spec: dict[str, bool] = Body(...)):
    """SortSpec → 排序参数"""
    return SortParamResponse(sort=serialize_sort_spec(spec))
