"""
Models package.
"""
from wordbook.models.word_entry import WordEntry

__all__ = [
    'WordEntry',
]
