"""数据模型 — GlossaryTerm、GlossaryEntry、EditableTerm、EditableEntry、EntryStatus

wire 模型对应服务端 REST 接口的 GlossaryEntry / GlossaryTerm DTO，
Editable 模型是界面编辑表格持有并就地修改的结构。
两者都支持 to_dict/from_dict（字典键使用服务端的 camelCase 命名）。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class GlossaryTerm:
    """服务端术语（单一语言下的译文及元数据）

    Attributes:
        content: 术语内容
        locale: 语言代码（必需，为空的术语不会被发送）
        comment: 备注，服务端可能省略
        last_modified_date: 最后修改时间（只读，服务端时间戳）
        last_modified_by: 最后修改人（只读）
    """

    content: str
    locale: str
    comment: Optional[str] = None
    last_modified_date: Any = None
    last_modified_by: Optional[str] = None

    def to_dict(self) -> dict:
        """序列化为普通字典（JSON 可序列化）

        只读字段仅在有值时输出。
        """
        data = {
            "content": self.content,
            "locale": self.locale,
            "comment": self.comment,
        }
        if self.last_modified_date is not None:
            data["lastModifiedDate"] = self.last_modified_date
        if self.last_modified_by is not None:
            data["lastModifiedBy"] = self.last_modified_by
        return data

    @classmethod
    def from_dict(cls, data: dict) -> GlossaryTerm:
        return cls(
            content=data.get("content", ""),
            locale=data.get("locale", ""),
            comment=data.get("comment"),
            last_modified_date=data.get("lastModifiedDate"),
            last_modified_by=data.get("lastModifiedBy"),
        )


@dataclass
class GlossaryEntry:
    """服务端术语条目

    glossary_terms 包含 0~2 个术语，顺序无意义，按 locale 查找。
    terms_count 由服务端统计（包含源术语），只在读取时使用，不会写回。

    Attributes:
        id: 条目 id（新建条目为 None）
        pos: 词性
        description: 描述
        src_lang: 源语言代码
        source_reference: 源引用
        glossary_terms: 术语列表
        terms_count: 服务端统计的术语数量
    """

    id: Any = None
    pos: Optional[str] = None
    description: Optional[str] = None
    src_lang: Optional[str] = None
    source_reference: Optional[str] = None
    glossary_terms: list[GlossaryTerm] = field(default_factory=list)
    terms_count: int = 0

    def to_dict(self) -> dict:
        """序列化为普通字典（JSON 可序列化）"""
        return {
            "id": self.id,
            "pos": self.pos,
            "description": self.description,
            "srcLang": self.src_lang,
            "sourceReference": self.source_reference,
            "glossaryTerms": [term.to_dict() for term in self.glossary_terms],
        }

    @classmethod
    def from_dict(cls, data: dict) -> GlossaryEntry:
        """从字典创建实例

        Args:
            data: 服务端返回的 GlossaryEntry 字典

        Returns:
            GlossaryEntry 实例
        """
        return cls(
            id=data.get("id"),
            pos=data.get("pos"),
            description=data.get("description"),
            src_lang=data.get("srcLang"),
            source_reference=data.get("sourceReference"),
            glossary_terms=[
                GlossaryTerm.from_dict(item)
                for item in data.get("glossaryTerms") or []
            ],
            terms_count=data.get("termsCount") or 0,
        )


@dataclass(frozen=True)
class EntryStatus:
    """编辑状态（由 compute_status 推导，不可变）

    Attributes:
        is_src_modified: 源术语、词性或描述已修改
        is_trans_modified: 译文已修改
        is_src_valid: 源术语内容非空（必填）
        can_update_trans_comment: 原始译文存在时才允许编辑译文备注
        is_saving: 正在保存中
    """

    is_src_modified: bool = False
    is_trans_modified: bool = False
    is_src_valid: bool = True
    can_update_trans_comment: bool = True
    is_saving: bool = False

    def to_dict(self) -> dict:
        return {
            "isSrcModified": self.is_src_modified,
            "isTransModified": self.is_trans_modified,
            "isSrcValid": self.is_src_valid,
            "canUpdateTransComment": self.can_update_trans_comment,
            "isSaving": self.is_saving,
        }

    @classmethod
    def from_dict(cls, data: dict) -> EntryStatus:
        return cls(
            is_src_modified=data.get("isSrcModified", False),
            is_trans_modified=data.get("isTransModified", False),
            is_src_valid=data.get("isSrcValid", True),
            can_update_trans_comment=data.get("canUpdateTransComment", True),
            is_saving=data.get("isSaving", False),
        )


# 零值状态：未修改、有效、未在保存
DEFAULT_ENTRY_STATUS = EntryStatus()


@dataclass
class EditableTerm:
    """界面可编辑术语

    日期是已格式化的短日期字符串。reference 只出现在源术语上。
    """

    content: str = ""
    locale: str = ""
    comment: str = ""
    last_modified_date: str = ""
    last_modified_by: str = ""
    reference: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "content": self.content,
            "locale": self.locale,
            "comment": self.comment,
            "lastModifiedDate": self.last_modified_date,
            "lastModifiedBy": self.last_modified_by,
        }
        if self.reference is not None:
            data["reference"] = self.reference
        return data

    @classmethod
    def from_dict(cls, data: dict) -> EditableTerm:
        return cls(
            content=data.get("content") or "",
            locale=data.get("locale") or "",
            comment=data.get("comment") or "",
            last_modified_date=data.get("lastModifiedDate") or "",
            last_modified_by=data.get("lastModifiedBy") or "",
            reference=data.get("reference"),
        )


@dataclass
class EditableEntry:
    """界面可编辑条目

    进入编辑模式时由 build_ui_entry 创建，编辑期间被界面就地修改，
    取消编辑时丢弃，保存成功后替换为重新解码的条目。

    Attributes:
        id: 条目 id
        pos: 词性
        description: 描述
        terms_count: 译文数量（不含源术语）
        src_term: 源术语（locale 为条目源语言）
        trans_term: 译文（locale 为当前翻译语言）
        status: 编辑状态
    """

    id: Any
    src_term: EditableTerm
    trans_term: EditableTerm
    pos: str = ""
    description: str = ""
    terms_count: int = 0
    status: EntryStatus = DEFAULT_ENTRY_STATUS

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "pos": self.pos,
            "description": self.description,
            "termsCount": self.terms_count,
            "srcTerm": self.src_term.to_dict(),
            "transTerm": self.trans_term.to_dict(),
            "status": self.status.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> EditableEntry:
        status = data.get("status")
        return cls(
            id=data.get("id"),
            pos=data.get("pos") or "",
            description=data.get("description") or "",
            terms_count=data.get("termsCount") or 0,
            src_term=EditableTerm.from_dict(data.get("srcTerm") or {}),
            trans_term=EditableTerm.from_dict(data.get("transTerm") or {}),
            status=EntryStatus.from_dict(status) if status else DEFAULT_ENTRY_STATUS,
        )
