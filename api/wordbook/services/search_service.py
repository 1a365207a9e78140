"""
Search service for word and translation lookups.
"""
from typing import List, Optional
from sqlmodel import Session

from wordbook.models import WordEntry
from wordbook.services import word_store


def search_words(
    session: Session,
    word: Optional[str] = None,
    translation: Optional[str] = None
) -> List[WordEntry]:
    """
    Search words by word text or by translation.

    The word search takes priority when both are given. With neither given
    nothing is returned. An empty string still counts as given.
    """
    if word is not None:
        return word_store.find_by_word_containing(session, word)
    if translation is not None:
        return word_store.find_by_translation_containing(session, translation)
    return []
