"""
Word service for creating, replacing and deleting word entries.
"""
import logging
from typing import Optional
from sqlmodel import Session

from wordbook.core.exceptions import ValidationError
from wordbook.models import WordEntry
from wordbook.schemas.word import CreateWordRequest, UpdateWordRequest
from wordbook.services import word_store
from wordbook.utils.date_utils import today
from wordbook.utils.text_utils import is_blank

logger = logging.getLogger(__name__)


def validate_word(word: Optional[str]) -> str:
    """Reject blank words and return the word with surrounding whitespace removed."""
    if is_blank(word):
        raise ValidationError("Word cannot be empty")
    return word.strip()


def create_word(session: Session, request: CreateWordRequest) -> WordEntry:
    """
    Create a new word entry.

    Args:
        session: Database session
        request: Word fields; date_added defaults to today

    Returns:
        The stored entry with its new id

    Raises:
        ValidationError: If the word is blank
    """
    entry = WordEntry(**request.model_dump())
    entry.word = validate_word(request.word)
    if entry.date_added is None:
        entry.date_added = today()

    saved = word_store.save(session, entry)
    logger.info(f"Created word {saved.id}: '{saved.word}'")
    return saved


def replace_word(session: Session, word_id: int, request: UpdateWordRequest) -> Optional[WordEntry]:
    """
    Replace every field of an existing word entry.

    The stored id is kept whatever id the request body carries.

    Args:
        session: Database session
        word_id: Id of the entry to replace
        request: New field values

    Returns:
        The updated entry, or None if no entry has this id

    Raises:
        ValidationError: If the word is blank
    """
    existing = word_store.find_by_id(session, word_id)
    if existing is None:
        return None

    data = request.model_dump(exclude={"id"})
    data["word"] = validate_word(request.word)
    for field, value in data.items():
        setattr(existing, field, value)

    saved = word_store.save(session, existing)
    logger.info(f"Updated word {saved.id}")
    return saved


def delete_word(session: Session, word_id: int) -> None:
    """Delete a word entry. Deleting an unknown id is a no-op."""
    word_store.delete_by_id(session, word_id)
    logger.info(f"Deleted word {word_id}")
