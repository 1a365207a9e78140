"""
Statistics service for word counts and the level x recency distribution.
"""
from collections import Counter
from datetime import date
from typing import Dict, Iterable, Optional

from wordbook.models import WordEntry
from wordbook.schemas.stats import WordStatistics

DEFAULT_LEVELS = range(1, 13)


def compute_statistics(
    entries: Iterable[WordEntry],
    levels: Iterable[int] = DEFAULT_LEVELS,
    today: Optional[date] = None
) -> WordStatistics:
    """
    Compute word statistics.

    Like a pivot table: for each level, how many words were last repeated
    N days ago. Words without a repeat date are left out of the distribution
    and words without a level are not counted as studied.

    Args:
        entries: All words
        levels: Levels to include in the distribution
        today: Reference date (defaults to today)

    Returns:
        WordStatistics with totals, distribution and all_days
    """
    entries = list(entries)

    studied_words = sum(1 for entry in entries if entry.level is not None and entry.level >= 1)

    days_by_level: Dict[int, Counter] = {level: Counter() for level in levels}
    for entry in entries:
        if entry.level not in days_by_level:
            continue
        days = entry.days_since_last_repeat_on(today)
        if days is not None:
            days_by_level[entry.level][days] += 1

    distribution = {level: dict(counts) for level, counts in days_by_level.items()}
    all_days = sorted({days for counts in days_by_level.values() for days in counts})

    return WordStatistics(
        total_words=len(entries),
        studied_words=studied_words,
        distribution=distribution,
        all_days=all_days,
    )
