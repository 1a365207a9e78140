"""
Word endpoints: CRUD, filtering, repetition, search and statistics.
"""
from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session
from typing import List, Optional
import logging

from wordbook.core.config import settings
from wordbook.core.database import get_session
from wordbook.core.exceptions import NotFoundError
from wordbook.schemas.filter import WordFilterConfig
from wordbook.schemas.stats import WordStatistics
from wordbook.schemas.word import (
    CreateWordRequest,
    UpdateWordRequest,
    UpgradeWordRequest,
    WordCountResponse,
    WordEntryResponse,
)
from wordbook.services import word_store
from wordbook.services.filter_service import filter_words
from wordbook.services.search_service import search_words
from wordbook.services.srs_service import select_for_repetition, upgrade_words
from wordbook.services.stats_service import compute_statistics
from wordbook.services.word_service import create_word, delete_word, replace_word

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/words", tags=["words"])


def to_responses(entries) -> List[WordEntryResponse]:
    return [WordEntryResponse.model_validate(entry) for entry in entries]


@router.get("", response_model=List[WordEntryResponse])
async def get_all_words(session: Session = Depends(get_session)):
    """Get all words."""
    return to_responses(word_store.find_all(session))


@router.get("/count", response_model=WordCountResponse)
async def get_word_count(session: Session = Depends(get_session)):
    """Get the total number of words."""
    return WordCountResponse(count=word_store.count(session))


@router.get(
    "/filter",
    response_model=List[WordEntryResponse],
    responses={status.HTTP_204_NO_CONTENT: {"description": "No word matches the filter"}},
)
async def get_filtered_words(
    filter_config: WordFilterConfig = Depends(),
    session: Session = Depends(get_session)
):
    """
    Filter words by any combination of criteria.

    Unset criteria are ignored; empty strings for source and categories count as unset.
    Returns 204 when nothing matches.
    """
    words = filter_words(word_store.find_all(session), filter_config)
    if not words:
        logger.debug(f"No words match filter {filter_config.model_dump(exclude_none=True)}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return to_responses(words)


@router.get(
    "/repeat",
    response_model=List[WordEntryResponse],
    responses={status.HTTP_204_NO_CONTENT: {"description": "No repeated word at this level"}},
)
async def get_words_for_repetition(
    level: int = Query(...),
    session: Session = Depends(get_session)
):
    """Get the words at a level with the oldest repeat date. Returns 204 when there are none."""
    words = select_for_repetition(word_store.find_by_level(session, level), level)
    if not words:
        logger.debug(f"No words to repeat at level {level}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return to_responses(words)


@router.get(
    "/search",
    response_model=List[WordEntryResponse],
    responses={status.HTTP_204_NO_CONTENT: {"description": "No word matches the search"}},
)
async def search(
    word: Optional[str] = None,
    translation: Optional[str] = None,
    session: Session = Depends(get_session)
):
    """
    Search words by word or by translation (case-insensitive substring).

    word takes priority when both are given. Returns 204 when nothing matches.
    """
    words = search_words(session, word=word, translation=translation)
    if not words:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return to_responses(words)


@router.get("/stats", response_model=WordStatistics)
async def get_word_statistics(session: Session = Depends(get_session)):
    """Get total and studied word counts and the level x days-since-repeat distribution."""
    levels = range(1, settings.statistics_max_level + 1)
    return compute_statistics(word_store.find_all(session), levels=levels)


@router.get("/{word_id}", response_model=WordEntryResponse)
async def get_word(word_id: int, session: Session = Depends(get_session)):
    """Get a word by ID."""
    entry = word_store.find_by_id(session, word_id)
    if entry is None:
        raise NotFoundError(f"Word with id {word_id} not found")
    return WordEntryResponse.model_validate(entry)


@router.post("", response_model=WordEntryResponse, status_code=status.HTTP_201_CREATED)
async def add_word(request: CreateWordRequest, session: Session = Depends(get_session)):
    """Add a new word."""
    return WordEntryResponse.model_validate(create_word(session, request))


@router.post("/upgrade", response_model=List[WordEntryResponse])
async def upgrade(request: List[UpgradeWordRequest], session: Session = Depends(get_session)):
    """Move each submitted word up one level and set its repeat date to today."""
    return to_responses(upgrade_words(session, request))


@router.put("/{word_id}", response_model=WordEntryResponse)
async def update_word(
    word_id: int,
    request: UpdateWordRequest,
    session: Session = Depends(get_session)
):
    """Replace a word by ID. The ID in the path is kept even if the body carries another one."""
    entry = replace_word(session, word_id, request)
    if entry is None:
        raise NotFoundError(f"Word with id {word_id} not found")
    return WordEntryResponse.model_validate(entry)


@router.delete("/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_word(word_id: int, session: Session = Depends(get_session)):
    """Delete a word by ID."""
    delete_word(session, word_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
