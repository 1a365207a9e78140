"""
Word statistics schemas.
"""
from pydantic import BaseModel
from typing import Dict, List


class WordStatistics(BaseModel):
    """Word counts plus a level x days-since-last-repeat histogram."""
    total_words: int
    studied_words: int  # Words with level >= 1
    distribution: Dict[int, Dict[int, int]]  # level -> days since last repeat -> word count
    all_days: List[int]  # Every distinct days value present in distribution, ascending
