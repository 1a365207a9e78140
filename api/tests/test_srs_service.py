"""Tests for repetition selection and level upgrades."""

from datetime import date, timedelta

import pytest
from sqlmodel import Session

from tests.conftest import TODAY
from wordbook.core.exceptions import ValidationError
from wordbook.models import WordEntry
from wordbook.schemas.word import UpgradeWordRequest
from wordbook.services import word_store
from wordbook.services.srs_service import select_for_repetition, upgrade_words
from wordbook.utils import date_utils


def days_ago(days: int) -> date:
    return TODAY - timedelta(days=days)


class TestDaysSinceLastRepeat:
    """Derived days_since_last_repeat on WordEntry."""

    def test_none_without_repeat_date(self, make_word) -> None:
        word = make_word(date_repeated=None)
        assert word.days_since_last_repeat is None
        assert word.days_since_last_repeat_on(TODAY) is None

    def test_day_difference(self, make_word) -> None:
        word = make_word(date_repeated=days_ago(12))
        assert word.days_since_last_repeat_on(TODAY) == 12

    def test_follows_the_clock(self, make_word, monkeypatch) -> None:
        """The same entry reports more days as the calendar moves on."""
        word = make_word(date_repeated=days_ago(4))

        monkeypatch.setattr(date_utils, "today", lambda: TODAY)
        assert word.days_since_last_repeat == 4

        monkeypatch.setattr(date_utils, "today", lambda: TODAY + timedelta(days=3))
        assert word.days_since_last_repeat == 7


class TestSelectForRepetition:
    """Most-overdue selection at a level."""

    def test_scenario_picks_oldest_at_level(self, make_word) -> None:
        """Only the level 1 word repeated 10 days ago is selected."""
        oldest = make_word("a", level=1, date_repeated=days_ago(10))
        recent = make_word("b", level=1, date_repeated=days_ago(3))
        other_level = make_word("c", level=2, date_repeated=days_ago(10))

        result = select_for_repetition([oldest, recent, other_level], level=1, today=TODAY)

        assert result == [oldest]

    def test_returns_all_ties(self, make_word) -> None:
        first = make_word("a", level=4, date_repeated=days_ago(20))
        second = make_word("b", level=4, date_repeated=days_ago(20))
        newer = make_word("c", level=4, date_repeated=days_ago(5))

        result = select_for_repetition([first, newer, second], level=4, today=TODAY)

        assert result == [first, second]
        assert {w.days_since_last_repeat_on(TODAY) for w in result} == {20}

    def test_ignores_words_never_repeated(self, make_word) -> None:
        never = make_word("never", level=2, date_repeated=None)
        repeated = make_word("once", level=2, date_repeated=days_ago(1))

        result = select_for_repetition([never, repeated], level=2, today=TODAY)

        assert result == [repeated]

    def test_empty_when_nothing_repeated(self, make_word) -> None:
        """No repeat dates at the level means no candidates."""
        words = [make_word("a", level=3, date_repeated=None), make_word("b", level=3)]

        assert select_for_repetition(words, level=3, today=TODAY) == []

    def test_repeated_today_is_a_candidate(self, make_word) -> None:
        today_word = make_word("a", level=5, date_repeated=TODAY)

        assert select_for_repetition([today_word], level=5, today=TODAY) == [today_word]

    def test_never_returns_other_levels(self, make_word) -> None:
        words = [make_word("a", level=None, date_repeated=days_ago(50)), make_word("b", level=6, date_repeated=days_ago(2))]

        result = select_for_repetition(words, level=6, today=TODAY)

        assert all(w.level == 6 for w in result)
        assert [w.word for w in result] == ["b"]


class TestUpgradeWords:
    """Level upgrades persisted through the store."""

    def test_upgrades_existing_word(self, db_session: Session) -> None:
        stored = word_store.save(db_session, WordEntry(word="kissa", translation="cat", level=2, date_added=days_ago(30)))

        payload = UpgradeWordRequest(id=stored.id, word="kissa", translation="cat", level=2, date_added=days_ago(30))
        result = upgrade_words(db_session, [payload], today=TODAY)

        assert len(result) == 1
        assert result[0].id == stored.id
        assert result[0].level == 3
        assert result[0].date_repeated == TODAY
        assert word_store.count(db_session) == 1

    def test_missing_level_becomes_one(self, db_session: Session) -> None:
        result = upgrade_words(db_session, [UpgradeWordRequest(word="koira")], today=TODAY)

        assert result[0].level == 1
        assert result[0].id is not None
        assert result[0].date_added == TODAY

    def test_unknown_id_is_inserted(self, db_session: Session) -> None:
        result = upgrade_words(db_session, [UpgradeWordRequest(id=999, word="lintu", level=1)], today=TODAY)

        assert result[0].id != 999
        assert word_store.find_by_id(db_session, result[0].id) is not None

    def test_keeps_stored_date_added(self, db_session: Session) -> None:
        """Upgrading a known word without date_added keeps its creation date."""
        stored = word_store.save(db_session, WordEntry(word="kissa", level=1, date_added=date(2020, 1, 1)))

        result = upgrade_words(db_session, [UpgradeWordRequest(id=stored.id, word="kissa", level=1)], today=TODAY)

        assert result[0].id == stored.id
        assert result[0].date_added == date(2020, 1, 1)
        assert result[0].date_repeated == TODAY

    def test_blank_word_is_rejected(self, db_session: Session) -> None:
        """A blank word anywhere in the batch rejects the whole batch."""
        words = [UpgradeWordRequest(word="koira"), UpgradeWordRequest(word="   ")]

        with pytest.raises(ValidationError):
            upgrade_words(db_session, words, today=TODAY)

        assert word_store.count(db_session) == 0
