# tixhub/core/errors.py
from __future__ import annotations

from typing import Optional

MISSING_API_KEY_MESSAGE = "API key is missing. Please check your environment variables."
TRANSPORT_ERROR_MESSAGE = "Unable to reach the event catalog. Please try again later."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class CatalogError(Exception):
    """
    Échec d'un fetch catalogue. `message` est affichable tel quel à l'utilisateur.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingCredentialsError(CatalogError):
    def __init__(self, message: str = MISSING_API_KEY_MESSAGE):
        super().__init__(message)


class CatalogTransportError(CatalogError):
    def __init__(self, message: str = TRANSPORT_ERROR_MESSAGE):
        super().__init__(message)


class CatalogHTTPError(CatalogError):
    def __init__(self, status_code: int, city: Optional[str] = None):
        if city:
            message = f"Failed to fetch events for {city} (HTTP {status_code})"
        else:
            message = f"Failed to fetch events (HTTP {status_code})"
        super().__init__(message)
        self.status_code = status_code
        self.city = city
