from fastapi import APIRouter
from quotes_api.api import quotes

router = APIRouter()
router.include_router(quotes.router, prefix="/quotes", tags=["Quotes"])
