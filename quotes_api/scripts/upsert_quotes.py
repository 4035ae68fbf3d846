from __future__ import annotations

from sqlalchemy.orm import Session

from quotes_api.data.starter_quotes import STARTER_QUOTES
from quotes_api.db.session import SessionLocal, create_tables
from quotes_api.models.quote import Quote


def upsert_quotes(db: Session, quotes: list[dict]) -> tuple[int, int]:
    created = 0
    skipped = 0

    for item in quotes:
        author = str(item.get("author") or "").strip()
        text = str(item.get("text") or "").strip()
        if not author or not text:
            skipped += 1
            continue

        row = db.query(Quote).filter(Quote.author == author, Quote.text == text).first()
        if row is not None:
            skipped += 1
            continue

        db.add(Quote(author=author, text=text, length=len(text)))
        # Flush so repeated items inside the same batch are seen as existing.
        db.flush()
        created += 1

    db.commit()
    return created, skipped


def main() -> None:
    create_tables()
    db = SessionLocal()
    try:
        created, skipped = upsert_quotes(db, STARTER_QUOTES)
        total = db.query(Quote).count()
    finally:
        db.close()
    print(f"quotes upsert done: created={created}, skipped={skipped}, total={total}")


if __name__ == "__main__":
    main()
