"""Módulo core - componentes fundamentais."""

from .exceptions import (
    GeonetworkError, ConfigurationError, TransportError,
    ServerRejection, CatalogRequestError,
)
from .http_client import GeonetworkHttpClient, ThreadSafeCookieJar
from .session_manager import SessionManager

__all__ = [
    "SessionManager", "GeonetworkHttpClient", "ThreadSafeCookieJar",
    "GeonetworkError", "ConfigurationError", "TransportError",
    "ServerRejection", "CatalogRequestError",
]
