"""
Word store: persistence operations for word entries.

All queries return entries ordered by id so callers get a stable input order.
"""
# pyright: reportAttributeAccessIssue=false
# pyright: reportArgumentType=false
import logging
from typing import List, Optional
from sqlmodel import Session, select, func
from sqlalchemy.exc import IntegrityError

from wordbook.core.exceptions import ConflictError
from wordbook.models import WordEntry
from wordbook.utils.text_utils import escape_like

logger = logging.getLogger(__name__)


def find_all(session: Session) -> List[WordEntry]:
    """Get every word entry."""
    return list(session.exec(select(WordEntry).order_by(WordEntry.id)).all())


def find_by_id(session: Session, word_id: int) -> Optional[WordEntry]:
    """Get a word entry by id, or None if it does not exist."""
    return session.get(WordEntry, word_id)


def save(session: Session, entry: WordEntry) -> WordEntry:
    """
    Insert or update a word entry.

    An entry whose id exists replaces the stored row. An entry without an id,
    or with an id the store does not know, is inserted and gets a fresh id.

    Args:
        session: Database session
        entry: Entry to persist

    Returns:
        The persisted entry

    Raises:
        ConflictError: If the write violates a database constraint
    """
    if entry.id is not None and session.get(WordEntry, entry.id) is None:
        entry.id = None

    persisted = session.merge(entry)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise ConflictError(f"Failed to save word '{entry.word}': constraint violation") from e
    session.refresh(persisted)
    return persisted


def delete_by_id(session: Session, word_id: int) -> None:
    """Delete a word entry by id. Unknown ids are ignored."""
    entry = session.get(WordEntry, word_id)
    if entry is None:
        logger.debug(f"Word {word_id} not found, nothing to delete")
        return
    session.delete(entry)
    session.commit()


def find_by_word_containing(session: Session, text: str) -> List[WordEntry]:
    """Case-insensitive substring search on the word field."""
    pattern = f"%{escape_like(text)}%"
    query = (
        select(WordEntry)
        .where(WordEntry.word.ilike(pattern, escape="\\"))  # type: ignore[attr-defined]
        .order_by(WordEntry.id)
    )
    return list(session.exec(query).all())


def find_by_translation_containing(session: Session, text: str) -> List[WordEntry]:
    """Case-insensitive substring search on the translation field."""
    pattern = f"%{escape_like(text)}%"
    query = (
        select(WordEntry)
        .where(WordEntry.translation.ilike(pattern, escape="\\"))  # type: ignore[attr-defined]
        .order_by(WordEntry.id)
    )
    return list(session.exec(query).all())


def find_by_level(session: Session, level: int) -> List[WordEntry]:
    """Get all word entries at a level."""
    query = select(WordEntry).where(WordEntry.level == level).order_by(WordEntry.id)
    return list(session.exec(query).all())


def count(session: Session) -> int:
    """Total number of word entries."""
    return session.exec(select(func.count(WordEntry.id))).one()
