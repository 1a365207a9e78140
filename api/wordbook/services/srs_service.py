"""
SRS (Spaced Repetition System) service.

Picks the words most overdue for review at a level and moves reviewed
words up a level.
"""
import logging
from datetime import date
from typing import Iterable, List, Optional
from sqlmodel import Session

from wordbook.models import WordEntry
from wordbook.schemas.word import UpgradeWordRequest
from wordbook.services import word_store
from wordbook.services.word_service import validate_word
from wordbook.utils.date_utils import today as current_date

logger = logging.getLogger(__name__)


def select_for_repetition(
    entries: Iterable[WordEntry],
    level: int,
    today: Optional[date] = None
) -> List[WordEntry]:
    """
    Select the words at a level that have gone longest without a repeat.

    Only words with a repeat date take part. All words sharing the largest
    days_since_last_repeat are returned, oldest date_repeated first.

    Args:
        entries: Candidate words
        level: Level to select from
        today: Reference date (defaults to today)

    Returns:
        The most overdue words, or an empty list if no word at the level was ever repeated
    """
    repeated = [
        (entry, entry.days_since_last_repeat_on(today))
        for entry in entries
        if entry.level == level
    ]
    repeated = [(entry, days) for entry, days in repeated if days is not None]

    max_days = max((days for _, days in repeated), default=0)

    selected = [entry for entry, days in repeated if days == max_days]
    return sorted(selected, key=lambda entry: entry.date_repeated)


def upgrade_words(
    session: Session,
    words: List[UpgradeWordRequest],
    today: Optional[date] = None
) -> List[WordEntry]:
    """
    Move each word up one level and stamp today as its repeat date.

    A word without a level is treated as level 0. Words whose id is unknown
    (or missing) are stored as new entries dated today; known words keep their
    stored date_added unless the payload sets one.

    Args:
        session: Database session
        words: Words submitted for upgrade
        today: Repeat date to stamp (defaults to today)

    Returns:
        Saved words, in input order

    Raises:
        ValidationError: If any word is blank (nothing is saved)
    """
    if today is None:
        today = current_date()

    cleaned = [validate_word(word.word) for word in words]

    upgraded = []
    for word, text in zip(words, cleaned):
        entry = WordEntry(**word.model_dump())
        entry.word = text
        if entry.date_added is None:
            stored = word_store.find_by_id(session, word.id) if word.id is not None else None
            entry.date_added = stored.date_added if stored is not None else today
        entry.level = (word.level or 0) + 1
        entry.date_repeated = today
        upgraded.append(word_store.save(session, entry))

    logger.info(f"Upgraded {len(upgraded)} words")
    return upgraded
