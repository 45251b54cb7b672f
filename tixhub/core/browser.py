# tixhub/core/browser.py
from __future__ import annotations

import logging
from datetime import date
from typing import Awaitable, Callable, List, Optional

from tixhub.adapters import fetch_ticketmaster
from tixhub.core.config import Settings, settings as default_settings
from tixhub.core.date_ranges import DateFilter
from tixhub.core.errors import UNEXPECTED_ERROR_MESSAGE, CatalogError
from tixhub.core.filtering import filter_events, select_page
from tixhub.core.models import Category, Event, FilterState, Page

log = logging.getLogger(__name__)

NO_EVENTS_MESSAGE = "No events found for this location"

Fetcher = Callable[..., Awaitable[List[Event]]]


class EventBrowser:
    """
    État de la vue liste : filtres, lot d'événements courant, message d'erreur.

    Seul un changement de lieu relance un fetch. Chaque fetch reçoit un numéro
    de génération ; une réponse dont la génération n'est plus la dernière est
    ignorée, donc une requête lente et périmée n'écrase jamais un état plus récent.
    """

    def __init__(
        self,
        fetcher: Optional[Fetcher] = None,
        *,
        cfg: Optional[Settings] = None,
        category: Category = Category.CONCERTS,
        geo_point: Optional[str] = None,
    ):
        self.cfg = cfg or default_settings
        self.fetcher = fetcher or fetch_ticketmaster
        self.category = category
        self.geo_point = geo_point
        self.state = FilterState()
        self.events: List[Event] = []
        self.error: Optional[str] = None
        self._generation = 0

    # ------------------------- fetch -------------------------

    async def refresh(self) -> None:
        self._generation += 1
        generation = self._generation
        location = self.state.location
        self.error = None

        try:
            events = await self.fetcher(
                location,
                cfg=self.cfg,
                category=self.category,
                geo_point=self.geo_point,
            )
        except CatalogError as e:
            if generation != self._generation:
                log.debug("Fetch %s (%s) périmé, erreur ignorée", generation, location)
                return
            log.error("Error fetching events: %s", e.message)
            self.events = []
            self.error = e.message
            return
        except Exception:
            if generation != self._generation:
                log.debug("Fetch %s (%s) périmé, erreur ignorée", generation, location)
                return
            log.exception("Unexpected error fetching events (%s)", location)
            self.events = []
            self.error = UNEXPECTED_ERROR_MESSAGE
            return

        if generation != self._generation:
            log.debug("Fetch %s (%s) périmé, résultat ignoré", generation, location)
            return

        self.events = list(events)
        if not self.events:
            self.error = NO_EVENTS_MESSAGE

    # ------------------------- filtres -------------------------

    async def set_location(self, location: str) -> None:
        self.state.location = location
        self.state.current_page = 1
        await self.refresh()

    def set_date_filter(self, date_filter: DateFilter) -> None:
        self.state.date_filter = DateFilter(date_filter)
        self.state.current_page = 1

    def set_search_query(self, query: str) -> None:
        self.state.search_query = query
        self.state.current_page = 1

    def set_page(self, page: int) -> None:
        self.state.current_page = page

    # ------------------------- vue -------------------------

    def filtered_events(self, today: Optional[date] = None) -> List[Event]:
        return filter_events(self.events, self.state.search_query, self.state.date_filter, today)

    def current_page(self, today: Optional[date] = None) -> Page:
        return select_page(self.events, self.state, self.cfg.page_size, today)

    def results_heading(self, today: Optional[date] = None) -> str:
        return f"{self.category.value.upper()} • {len(self.filtered_events(today))} RESULTS"
