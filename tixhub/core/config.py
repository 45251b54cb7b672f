import os
from dataclasses import dataclass
from typing import Tuple
from dotenv import load_dotenv
load_dotenv()

def _cities(raw: str) -> Tuple[str, ...]:
    return tuple(c.strip() for c in raw.split(",") if c.strip())

@dataclass(frozen=True)
class Settings:
    ticketmaster_api_key: str = os.getenv("TICKETMASTER_API_KEY","")
    ticketmaster_base_url: str = os.getenv("TICKETMASTER_BASE_URL","https://app.ticketmaster.com/discovery/v2/events.json")
    tracked_cities: Tuple[str, ...] = _cities(os.getenv("TRACKED_CITIES","Toronto,Vancouver,Montreal"))
    result_size: int = int(os.getenv("TICKETMASTER_RESULT_SIZE","200"))
    page_size: int = int(os.getenv("EVENTS_PAGE_SIZE","50"))
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT_SECONDS","15"))
    log_level: str = os.getenv("LOG_LEVEL","INFO")

    def __post_init__(self):
        for name in ("result_size", "page_size"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1, got {getattr(self, name)}")

settings = Settings()
