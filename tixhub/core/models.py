# tixhub/core/models.py

from __future__ import annotations

from datetime import date, time
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from tixhub.core.date_ranges import DateFilter

ALL_LOCATIONS = "all"
DEFAULT_START_TIME = time(19, 0)


class Category(str, Enum):
    """
    Rubriques du site. Chaque rubrique sait quel titre afficher et quelle
    classification demander au catalogue.
    """
    CONCERTS = "concerts"
    SPORTS = "sports"
    ARTS = "arts"
    FAMILY = "family"

    @property
    def heading(self) -> str:
        return _CATEGORY_TITLES[self]

    @property
    def classification_name(self) -> str:
        return _CATEGORY_CLASSIFICATIONS[self][0]

    @property
    def segment_name(self) -> str:
        return _CATEGORY_CLASSIFICATIONS[self][1]


_CATEGORY_TITLES = {
    Category.CONCERTS: "CONCERT TICKETS",
    Category.SPORTS: "SPORTS TICKETS",
    Category.ARTS: "ARTS & THEATRE TICKETS",
    Category.FAMILY: "FAMILY TICKETS",
}

# (classificationName, segmentName) côté Ticketmaster
_CATEGORY_CLASSIFICATIONS = {
    Category.CONCERTS: ("music", "Music"),
    Category.SPORTS: ("sports", "Sports"),
    Category.ARTS: ("arts & theatre", "Arts & Theatre"),
    Category.FAMILY: ("family", "Family"),
}


class Event(BaseModel):
    """
    Événement normalisé, tel qu'affiché dans la liste.
    Jamais modifié après construction : un nouveau fetch remplace tout le lot.
    """
    id: str
    name: str
    start_date: date
    start_time: Optional[time] = None   # absent → 19:00 à l'affichage
    venue_name: str
    venue_city: str
    image_url: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def display_month(self) -> str:
        return self.start_date.strftime("%b").upper()

    @property
    def display_day(self) -> int:
        return self.start_date.day

    @property
    def display_time(self) -> str:
        t = self.start_time or DEFAULT_START_TIME
        # "7:00 PM" (pas de zéro devant l'heure)
        return t.strftime("%I:%M %p").lstrip("0")


class FilterState(BaseModel):
    location: str = ALL_LOCATIONS
    date_filter: DateFilter = DateFilter.ALL
    search_query: str = ""
    current_page: int = 1


class Page(BaseModel):
    items: List[Event] = Field(default_factory=list)
    page: int
    page_size: int
    total: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def page_numbers(self) -> List[int]:
        return list(range(1, self.total_pages + 1))
