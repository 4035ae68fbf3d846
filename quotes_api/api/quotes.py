import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from quotes_api.core.http_middleware import SERVER_ERROR_DETAIL
from quotes_api.db.session import get_db
from quotes_api.schemas.quote import QuoteCreate, QuoteRead, QuoteUpdate
from quotes_api.services import quote_repository
from quotes_api.services.quote_selector import select_random_quote

router = APIRouter()
logger = logging.getLogger("quotes_api.quotes")


def _server_error(action: str, quote_id=None) -> HTTPException:
    logger.exception("quote %s failed id=%s", action, quote_id if quote_id is not None else "-")
    return HTTPException(status_code=500, detail=SERVER_ERROR_DETAIL)


@router.get(
    "",
    response_model=Optional[QuoteRead],
    operation_id="Get",
    responses={400: {"description": "The Bad Request response"}},
)
def get_quote(
    author: Optional[str] = Query(None, description="The author of the quote."),
    max_length: Optional[int] = Query(None, alias="maxLength", description="The maximum length of the quote."),
    db: Session = Depends(get_db),
):
    logger.info("random quote requested author=%s max_length=%s", author or "-", max_length)
    return select_random_quote(db, author=author, max_length=max_length)


@router.get(
    "/{id}",
    response_model=QuoteRead,
    operation_id="GetById",
    responses={404: {"description": "The Not Found response"}},
)
def get_quote_by_id(
    id: int = Path(..., description="The Id of the quote to be returned."),
    db: Session = Depends(get_db),
):
    logger.info("quote requested id=%s", id)
    quote = quote_repository.find_by_id(db, id)
    if quote is None:
        raise HTTPException(status_code=404, detail=f"Quote with id {id} not found")
    return quote


@router.post(
    "/create",
    response_model=QuoteRead,
    status_code=201,
    operation_id="Create",
    responses={400: {"description": "The Bad Request response"}},
)
def create_quote(payload: QuoteCreate, db: Session = Depends(get_db)):
    logger.info("quote create requested")
    if not payload.is_complete():
        raise HTTPException(status_code=400, detail="Error: quote was not created")
    try:
        quote = quote_repository.insert(db, payload.author, payload.text)
    except SQLAlchemyError:
        raise _server_error("create")
    logger.info("quote created id=%s length=%s", quote.id, quote.length)
    return quote


@router.patch(
    "/update/{id}",
    response_model=QuoteRead,
    operation_id="Update",
    responses={404: {"description": "The Not Found response"}},
)
def update_quote(
    id: int = Path(..., description="The Id of the quote to be updated."),
    payload: Optional[QuoteUpdate] = Body(None),
    db: Session = Depends(get_db),
):
    logger.info("quote update requested id=%s", id)
    # No body means no fields to change.
    payload = payload or QuoteUpdate()
    try:
        quote = quote_repository.update(db, id, author=payload.author, text=payload.text)
    except SQLAlchemyError:
        raise _server_error("update", id)
    if quote is None:
        raise HTTPException(status_code=404, detail="Quote not found")
    return quote


@router.delete(
    "/delete/{id}",
    status_code=204,
    operation_id="Delete",
    responses={404: {"description": "The Not Found response"}},
)
def delete_quote(
    id: int = Path(..., description="The Id of the quote to be deleted."),
    db: Session = Depends(get_db),
):
    logger.info("quote delete requested id=%s", id)
    try:
        removed = quote_repository.remove(db, id)
    except SQLAlchemyError:
        raise _server_error("delete", id)
    if not removed:
        raise HTTPException(status_code=404, detail="Quote not found")
    return Response(status_code=204)
