"""
Filter service for applying word filters to in-memory word lists.
"""
from datetime import date
from typing import Callable, Iterable, List, Optional

from wordbook.models import WordEntry
from wordbook.schemas.filter import WordFilterConfig
from wordbook.utils.text_utils import equals_ignore_case


WordPredicate = Callable[[WordEntry], bool]


# ============================================================================
# Predicate Builders
# ============================================================================

def equals_filter(getter: Callable[[WordEntry], Optional[int]], value: Optional[int]) -> Optional[WordPredicate]:
    """Exact match on an optional integer field. Words with an empty field never match."""
    if value is None:
        return None
    return lambda entry: getter(entry) is not None and getter(entry) == value


def at_most_filter(getter: Callable[[WordEntry], Optional[int]], value: Optional[int]) -> Optional[WordPredicate]:
    """Upper bound on an optional integer field. Words with an empty field never match."""
    if value is None:
        return None
    return lambda entry: getter(entry) is not None and getter(entry) <= value


def text_filter(getter: Callable[[WordEntry], Optional[str]], value: Optional[str]) -> Optional[WordPredicate]:
    """Case-insensitive exact match on an optional text field.

    An empty string is treated like an unset criterion.
    """
    if not value:
        return None
    return lambda entry: bool(getter(entry)) and equals_ignore_case(getter(entry), value)


def build_predicates(filter_config: WordFilterConfig, today: Optional[date] = None) -> List[WordPredicate]:
    """Build one predicate per criterion that is set in the filter config."""
    candidates = [
        equals_filter(lambda e: e.days_since_last_repeat_on(today), filter_config.days_since_last_repeat),
        equals_filter(lambda e: e.level, filter_config.level),
        equals_filter(lambda e: e.popularity, filter_config.popularity),
        at_most_filter(lambda e: e.frequency, filter_config.frequency),
        text_filter(lambda e: e.source, filter_config.source),
        text_filter(lambda e: e.category, filter_config.category1),
        text_filter(lambda e: e.category2, filter_config.category2),
        equals_filter(lambda e: e.repeat_again, filter_config.repeat_again),
    ]
    return [predicate for predicate in candidates if predicate is not None]


# ============================================================================
# Filtering
# ============================================================================

def filter_words(
    entries: Iterable[WordEntry],
    filter_config: WordFilterConfig,
    today: Optional[date] = None
) -> List[WordEntry]:
    """
    Filter words by every criterion set in the filter config.

    Input order is preserved. With no criteria set, every word is returned.

    Args:
        entries: Words to filter
        filter_config: Filter criteria
        today: Reference date for days_since_last_repeat (defaults to today)

    Returns:
        Words matching all criteria
    """
    predicates = build_predicates(filter_config, today)
    return [entry for entry in entries if all(predicate(entry) for predicate in predicates)]
