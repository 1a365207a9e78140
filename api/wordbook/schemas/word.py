"""
Word entry schemas.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import date


class WordEntryBase(BaseModel):
    """Fields a client can write on a word entry."""
    date_added: Optional[date] = None
    date_repeated: Optional[date] = None
    level: Optional[int] = None
    word: str
    translation: Optional[str] = None
    category: Optional[str] = None
    category2: Optional[str] = None
    source: Optional[str] = None
    popularity: Optional[int] = None
    repeat_again: Optional[int] = None
    comment: Optional[str] = None
    example: Optional[str] = None
    synonyms: Optional[str] = None
    word_formation: Optional[str] = None
    frequency: Optional[int] = None


class CreateWordRequest(WordEntryBase):
    """Request schema for creating a word entry."""
    pass


class UpdateWordRequest(WordEntryBase):
    """Request schema for replacing a word entry.

    Any id in the body is ignored; the id in the path wins.
    """
    id: Optional[int] = None


class UpgradeWordRequest(WordEntryBase):
    """A word submitted for a level upgrade. Without a known id it is inserted as new."""
    id: Optional[int] = None


class WordEntryResponse(WordEntryBase):
    """Word entry response schema."""
    id: int
    days_since_last_repeat: Optional[int] = None  # Derived from date_repeated, never stored

    class Config:
        from_attributes = True


class WordCountResponse(BaseModel):
    """Response schema for the word count."""
    count: int
