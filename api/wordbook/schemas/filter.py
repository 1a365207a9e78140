"""
Filter configuration schema for word filtering.
"""
from pydantic import BaseModel
from typing import Optional


class WordFilterConfig(BaseModel):
    """Filter configuration for word queries.

    Every criterion is optional and unset criteria impose no constraint.
    A set criterion excludes words whose matching field is empty.
    """
    days_since_last_repeat: Optional[int] = None  # Exact number of days since the last repeat
    level: Optional[int] = None
    popularity: Optional[int] = None
    frequency: Optional[int] = None  # Upper bound: words with frequency <= value
    source: Optional[str] = None  # Case-insensitive exact match, "" means unset
    category1: Optional[str] = None  # Matched against WordEntry.category, "" means unset
    category2: Optional[str] = None  # "" means unset
    repeat_again: Optional[int] = None

    class Config:
        """Pydantic config."""
        json_schema_extra = {
            "example": {
                "days_since_last_repeat": 7,
                "level": 3,
                "popularity": 2,
                "frequency": 5000,
                "source": "book",
                "category1": "verbs",
                "category2": "",
                "repeat_again": 1
            }
        }
