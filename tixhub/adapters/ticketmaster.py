# tixhub/adapters/ticketmaster.py
from __future__ import annotations

import asyncio
import logging
from datetime import date, time
from typing import Any, Dict, List, Optional

import httpx

from tixhub.core.config import Settings, settings as default_settings
from tixhub.core.consolidate_events import consolidate_events
from tixhub.core.errors import CatalogHTTPError, CatalogTransportError, MissingCredentialsError
from tixhub.core.models import ALL_LOCATIONS, Category, Event

log = logging.getLogger(__name__)

# ----------------------------- Utils -----------------------------------

def _parse_date(v: Optional[str]) -> Optional[date]:
    if not v:
        return None
    try:
        return date.fromisoformat(v)
    except ValueError:
        return None

def _parse_time(v: Optional[str]) -> Optional[time]:
    if not v:
        return None
    try:
        return time.fromisoformat(v)
    except ValueError:
        return None

def _dict(v: Any) -> Dict[str, Any]:
    return v if isinstance(v, dict) else {}

def _pick_first(lst: Any) -> Dict[str, Any]:
    if not isinstance(lst, list) or not lst:
        return {}
    first = lst[0]
    return first if isinstance(first, dict) else {}

def _str_or_none(v: Any) -> Optional[str]:
    if isinstance(v, str) and v.strip():
        return v.strip()
    return None

# --------------------------- Build layer --------------------------------

def _build_normalized(ev: Dict[str, Any]) -> Optional[Event]:
    """
    Record catalogue brut → Event. None si un champ requis manque
    (id, nom, date de début, première salle avec nom + ville).
    """
    event_id = _str_or_none(ev.get("id"))
    name = _str_or_none(ev.get("name"))
    start = _dict(_dict(ev.get("dates")).get("start"))
    start_date = _parse_date(start.get("localDate"))

    venue = _pick_first(_dict(ev.get("_embedded")).get("venues"))
    venue_name = _str_or_none(venue.get("name"))
    venue_city = _str_or_none(_dict(venue.get("city")).get("name"))

    if not (event_id and name and start_date and venue_name and venue_city):
        log.warning("Ticketmaster: record ignoré (champs manquants) id=%s", ev.get("id"))
        return None

    return Event(
        id=event_id,
        name=name,
        start_date=start_date,
        start_time=_parse_time(start.get("localTime")),
        venue_name=venue_name,
        venue_city=venue_city,
        image_url=_str_or_none(_pick_first(ev.get("images")).get("url")),
    )

def normalize_events(raw_events: List[Dict[str, Any]]) -> List[Event]:
    out: List[Event] = []
    for raw in raw_events:
        if not isinstance(raw, dict):
            continue
        built = _build_normalized(raw)
        if built is not None:
            out.append(built)
    return out

# --------------------------- Fetch layer --------------------------------

def _params(
    api_key: str,
    city: Optional[str],
    category: Category,
    size: int,
    geo_point: Optional[str] = None,
) -> Dict[str, Any]:
    params: Dict[str, Any] = {
        "apikey": api_key,
        "classificationName": category.classification_name,
        "segmentName": category.segment_name,
        "size": size,
    }
    if city:
        params["city"] = city
    if geo_point:
        params["geoPoint"] = geo_point
    return params

async def fetch_city_events(
    client: httpx.AsyncClient,
    city: Optional[str],
    *,
    cfg: Settings,
    category: Category = Category.CONCERTS,
    geo_point: Optional[str] = None,
    name_city_in_error: bool = False,
) -> List[Dict[str, Any]]:
    """
    Un appel catalogue pour une ville. Retourne les records bruts
    (`_embedded.events`, [] si absent).
    """
    try:
        r = await client.get(
            cfg.ticketmaster_base_url,
            params=_params(cfg.ticketmaster_api_key, city, category, cfg.result_size, geo_point),
        )
    except httpx.HTTPError as e:
        log.error("Ticketmaster: échec réseau pour %s: %s", city, e)
        raise CatalogTransportError() from e

    if not r.is_success:
        raise CatalogHTTPError(r.status_code, city if name_city_in_error else None)

    try:
        payload = r.json()
    except ValueError as e:
        log.error("Ticketmaster: réponse illisible pour %s", city)
        raise CatalogTransportError() from e

    events = _dict(_dict(payload).get("_embedded")).get("events")
    if not isinstance(events, list):
        events = []
    log.info("Ticketmaster: %s: %s records", city, len(events))
    return events

async def fetch_events(
    location: str = ALL_LOCATIONS,
    *,
    cfg: Optional[Settings] = None,
    category: Category = Category.CONCERTS,
    geo_point: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[Event]:
    """
    "all" → une requête par ville suivie, en parallèle ; tout ou rien.
    Sinon → une seule requête pour la ville demandée.
    """
    cfg = cfg or default_settings
    if not cfg.ticketmaster_api_key:
        raise MissingCredentialsError()

    async with httpx.AsyncClient(timeout=cfg.http_timeout, transport=transport) as client:
        if location == ALL_LOCATIONS:
            tasks = [
                asyncio.ensure_future(fetch_city_events(
                    client, city, cfg=cfg, category=category,
                    geo_point=geo_point, name_city_in_error=True,
                ))
                for city in cfg.tracked_cities
            ]
            try:
                # gather propage la première exception : aucun résultat partiel
                per_city = await asyncio.gather(*tasks)
            except Exception:
                for t in tasks:
                    t.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise
            batches = [normalize_events(raw) for raw in per_city]
        else:
            raw = await fetch_city_events(
                client, location, cfg=cfg, category=category, geo_point=geo_point,
            )
            batches = [normalize_events(raw)]

    events = consolidate_events(*batches)
    log.info("Ticketmaster: %s événements (%s)", len(events), location)
    return events
