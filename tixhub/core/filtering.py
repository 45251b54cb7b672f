# tixhub/core/filtering.py
from __future__ import annotations

import math
from datetime import date
from typing import Iterable, List, Optional

from tixhub.core.date_ranges import DateFilter
from tixhub.core.models import Event, FilterState, Page

PAGE_SIZE = 50


def matches_search(event: Event, query: str) -> bool:
    """Sous-chaîne insensible à la casse sur nom, salle ou ville."""
    if not query:
        return True
    q = query.lower()
    return (
        q in event.name.lower()
        or q in event.venue_name.lower()
        or q in event.venue_city.lower()
    )


def matches_date_filter(event: Event, date_filter: DateFilter, today: Optional[date] = None) -> bool:
    return date_filter.matches(event.start_date, today)


def filter_events(
    events: Iterable[Event],
    query: str = "",
    date_filter: DateFilter = DateFilter.ALL,
    today: Optional[date] = None,
) -> List[Event]:
    # même "aujourd'hui" pour tout le lot
    today = today or date.today()
    return [
        ev for ev in events
        if matches_search(ev, query)
        and matches_date_filter(ev, date_filter, today)
    ]


def paginate(events: List[Event], page: int, page_size: int = PAGE_SIZE) -> Page:
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    total = len(events)
    total_pages = math.ceil(total / page_size)
    # page hors bornes → liste vide, pas d'erreur
    items = events[(page - 1) * page_size: page * page_size] if page >= 1 else []
    return Page(
        items=items,
        page=page,
        page_size=page_size,
        total=total,
        total_pages=total_pages,
    )


def select_page(
    events: Iterable[Event],
    state: FilterState,
    page_size: int = PAGE_SIZE,
    today: Optional[date] = None,
) -> Page:
    filtered = filter_events(events, state.search_query, state.date_filter, today)
    return paginate(filtered, state.current_page, page_size)
