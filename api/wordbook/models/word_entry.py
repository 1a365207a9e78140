"""
WordEntry model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import date
from sqlalchemy import Column, Text

from wordbook.utils.date_utils import days_between, today


class WordEntry(SQLModel, table=True):
    """Dictionary word table - one word with its translation and learning metadata."""
    __tablename__ = "dictionary_word"

    id: Optional[int] = Field(default=None, primary_key=True)
    date_added: Optional[date] = Field(default_factory=today)
    date_repeated: Optional[date] = None  # Stamped whenever the word is reviewed
    level: Optional[int] = Field(default=None, index=True)  # Learning stage, 1-12 in practice
    word: str
    translation: Optional[str] = Field(default=None, sa_column=Column(Text))
    category: Optional[str] = None
    category2: Optional[str] = None
    source: Optional[str] = None
    popularity: Optional[int] = None
    repeat_again: Optional[int] = None
    comment: Optional[str] = Field(default=None, sa_column=Column(Text))
    example: Optional[str] = Field(default=None, sa_column=Column(Text))
    synonyms: Optional[str] = Field(default=None, sa_column=Column(Text))
    word_formation: Optional[str] = Field(default=None, sa_column=Column("word_formation", Text))
    frequency: Optional[int] = None

    @property
    def days_since_last_repeat(self) -> Optional[int]:
        """Days since date_repeated, computed against today on every access."""
        return days_between(self.date_repeated)

    def days_since_last_repeat_on(self, on: Optional[date]) -> Optional[int]:
        """Days since date_repeated as of a given date (today when None)."""
        return days_between(self.date_repeated, on)
