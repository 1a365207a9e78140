"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from wordbook.api.v1.endpoints import words

api_router = APIRouter()

# Each router already defines its own prefix
api_router.include_router(words.router)
