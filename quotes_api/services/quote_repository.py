from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from quotes_api.models.quote import Quote


def find_by_id(db: Session, quote_id: int) -> Quote | None:
    return db.get(Quote, quote_id)


def filter_quotes(db: Session, *criteria) -> list[Quote]:
    return db.query(Quote).filter(*criteria).all()


def max_id(db: Session) -> int:
    return int(db.query(func.max(Quote.id)).scalar() or 0)


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


def insert(db: Session, author: str, text: str) -> Quote:
    row = Quote(author=author, text=text, length=len(text))
    db.add(row)
    _commit(db)
    db.refresh(row)
    return row


def update(
    db: Session,
    quote_id: int,
    *,
    author: str | None = None,
    text: str | None = None,
) -> Quote | None:
    row = find_by_id(db, quote_id)
    if row is None:
        return None
    if author:
        row.author = author
    if text:
        row.text = text
    db.add(row)
    _commit(db)
    db.refresh(row)
    return row


def remove(db: Session, quote_id: int) -> bool:
    row = find_by_id(db, quote_id)
    if row is None:
        return False
    db.delete(row)
    _commit(db)
    return True
