"""Random quote selection with layered filter fallback.

Tiers are tried from the most specific combination of the supplied filters
down to the least specific: author and max length, author only, max length
only. The first tier with at least one candidate wins and one candidate is
picked uniformly. When no filter was supplied, or every supplied tier came up
empty, a random id is drawn over the whole table instead.
"""

from __future__ import annotations

import logging
import random

from sqlalchemy.orm import Session

from quotes_api.models.quote import Quote
from quotes_api.services import quote_repository

_LOG = logging.getLogger("quotes_api.selector")
_RNG = random.Random()


def _normalize_author(raw: str | None) -> str | None:
    value = str(raw or "").strip()
    return value or None


def _normalize_max_length(raw: int | None) -> int | None:
    if raw is None:
        return None
    value = int(raw)
    return value if value > 0 else None


def filter_tiers(author: str | None, max_length: int | None) -> list[tuple[str, list]]:
    tiers: list[tuple[str, list]] = []
    if author is not None and max_length is not None:
        tiers.append(("author+length", [Quote.author == author, Quote.length <= max_length]))
    if author is not None:
        tiers.append(("author", [Quote.author == author]))
    if max_length is not None:
        tiers.append(("length", [Quote.length <= max_length]))
    return tiers


def _pick_by_random_id(db: Session, rng: random.Random) -> Quote | None:
    upper = quote_repository.max_id(db)
    if upper <= 0:
        return None
    # Draw over [0, max_id). Misses on 0 or on ids left behind by deletes
    # produce no result rather than a retry.
    return quote_repository.find_by_id(db, rng.randrange(0, upper))


def select_random_quote(
    db: Session,
    author: str | None = None,
    max_length: int | None = None,
    rng: random.Random | None = None,
) -> Quote | None:
    rng = rng or _RNG
    author = _normalize_author(author)
    max_length = _normalize_max_length(max_length)

    for tier, criteria in filter_tiers(author, max_length):
        candidates = quote_repository.filter_quotes(db, *criteria)
        if candidates:
            _LOG.debug("quote selected tier=%s candidates=%s", tier, len(candidates))
            return rng.choice(candidates)

    _LOG.debug("quote selected tier=unfiltered author=%s max_length=%s", author, max_length)
    return _pick_by_random_id(db, rng)
