from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union


class GlossaryTermPayload(BaseModel):
    """Server-side glossary term"""
    model_config = ConfigDict(populate_by_name=True)

    content: Optional[str] = None
    locale: Optional[str] = None
    comment: Optional[str] = None
    last_modified_date: Optional[Union[int, str]] = Field(default=None, alias="lastModifiedDate")
    last_modified_by: Optional[str] = Field(default=None, alias="lastModifiedBy")


class GlossaryEntryPayload(BaseModel):
    """Server-side glossary entry"""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[Union[int, str]] = None
    pos: Optional[str] = None
    description: Optional[str] = None
    src_lang: Optional[str] = Field(default=None, alias="srcLang")
    source_reference: Optional[str] = Field(default=None, alias="sourceReference")
    glossary_terms: list[GlossaryTermPayload] = Field(default_factory=list, alias="glossaryTerms")
    terms_count: int = Field(default=0, alias="termsCount")


class EntryStatusPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_src_modified: bool = Field(default=False, alias="isSrcModified")
    is_trans_modified: bool = Field(default=False, alias="isTransModified")
    is_src_valid: bool = Field(default=True, alias="isSrcValid")
    can_update_trans_comment: bool = Field(default=True, alias="canUpdateTransComment")
    is_saving: bool = Field(default=False, alias="isSaving")


class EditableTermPayload(BaseModel):
    """Term as held by the editing grid"""
    model_config = ConfigDict(populate_by_name=True)

    content: Optional[str] = None
    locale: Optional[str] = None
    comment: Optional[str] = None
    last_modified_date: Optional[str] = Field(default=None, alias="lastModifiedDate")
    last_modified_by: Optional[str] = Field(default=None, alias="lastModifiedBy")
    reference: Optional[str] = None


class EditableEntryPayload(BaseModel):
    """Entry as held by the editing grid"""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[Union[int, str]] = None
    pos: Optional[str] = None
    description: Optional[str] = None
    terms_count: int = Field(default=0, alias="termsCount")
    src_term: EditableTermPayload = Field(alias="srcTerm")
    trans_term: EditableTermPayload = Field(alias="transTerm")
    status: Optional[EntryStatusPayload] = None


class EntryStatusRequest(BaseModel):
    """Current entry and the original captured when editing began"""
    current: Optional[EditableEntryPayload] = None
    original: Optional[EditableEntryPayload] = None


class SavePayloadResponse(BaseModel):
    payload: str


class SortParamResponse(BaseModel):
    sort: str
