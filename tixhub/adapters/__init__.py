# tixhub/adapters/__init__.py

from .ticketmaster import fetch_events as fetch_ticketmaster   # async def fetch_events(location, ...) -> List[Event]
