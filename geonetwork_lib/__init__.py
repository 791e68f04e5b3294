"""
GeoNetwork Lib - Sessao autenticada em catalogos GeoNetwork (CSW).

Uso básico:
    from geonetwork_lib import CatalogClient

    with CatalogClient() as catalogo:
        xml = catalogo.get_capabilities()

Uso avançado (sessao isolada):
    from geonetwork_lib import CatalogSettings, SessionManager

    settings = CatalogSettings.from_mapping({
        "csw.endpoint.url": "http://cat.example.org/geonetwork",
        "csw.endpoint.user": "admin",
        "csw.endpoint.pass": "secret",
    })
    sessao = SessionManager(settings)
    if not sessao.is_valid():
        sessao.login()
"""

from pathlib import Path
from dotenv import load_dotenv

env_path = Path.cwd() / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    load_dotenv()

from .client import CatalogClient
from .config import (
    CSW_PATH, LOGIN_PATH, LOGOUT_PATH,
    DEFAULT_TIMEOUT, SELF_EXPIRE_HOURS,
)
from .core import (
    SessionManager, GeonetworkHttpClient,
    GeonetworkError, ConfigurationError, TransportError,
    ServerRejection, CatalogRequestError,
)
from .models import CatalogSettings, CookieRecord, SessionState

__version__ = "1.0.0"
__all__ = [
    "CatalogClient", "SessionManager", "GeonetworkHttpClient",
    "CSW_PATH", "LOGIN_PATH", "LOGOUT_PATH", "DEFAULT_TIMEOUT", "SELF_EXPIRE_HOURS",
    "CatalogSettings", "CookieRecord", "SessionState",
    "GeonetworkError", "ConfigurationError", "TransportError",
    "ServerRejection", "CatalogRequestError",
]
