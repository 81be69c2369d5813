"""
Note Models
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
from enum import Enum


class Priority(str, Enum):
    """Note priority, ordered low < medium < high"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.LOW: 1, Priority.MEDIUM: 2, Priority.HIGH: 3}


class NoteView(str, Enum):
    """Tabs of the notes list"""
    ALL = "all"
    DRAFTS = "drafts"
    FAVOURITES = "favourites"


class NoteBase(BaseModel):
    """Base note fields"""
    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    content: str = ""
    priority: Priority = Priority.MEDIUM
    is_draft: bool = Field(default=False, alias="isDraft")
    is_favourite: bool = Field(default=False, alias="isFavourite")


class NoteCreate(NoteBase):
    """Request for creating a note"""
    pass


class NoteUpdate(BaseModel):
    """Request for updating a note"""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    content: Optional[str] = None
    priority: Optional[Priority] = None
    is_draft: Optional[bool] = Field(default=None, alias="isDraft")
    is_favourite: Optional[bool] = Field(default=None, alias="isFavourite")

    def changes(self) -> Dict[str, Any]:
        """Fields the client actually sent, in the on-disk/wire shape"""
        sent = self.model_dump(exclude_unset=True, by_alias=True, mode="json")
        return {k: v for k, v in sent.items() if v is not None}


class Note(NoteBase):
    """Note model with all fields"""
    id: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # older records may carry naive timestamps
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def to_record(self) -> Dict[str, Any]:
        """JSON-ready dict in the on-disk/wire shape"""
        return self.model_dump(by_alias=True, mode="json")


class NoteList(BaseModel):
    """List response, same shape as the data file"""
    notes: List[Note] = Field(default_factory=list)


class NoteCounts(BaseModel):
    """Number of notes per tab"""
    all: int = 0
    drafts: int = 0
    favourites: int = 0
