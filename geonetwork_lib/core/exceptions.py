"""
Excecoes do cliente GeoNetwork.
"""

from typing import Optional


class GeonetworkError(Exception):
    """Excecao base do cliente."""


class ConfigurationError(GeonetworkError):
    """Configuracao do catalogo ausente ou invalida."""


class TransportError(GeonetworkError):
    """Falha de URL ou de E/S HTTP."""


class ServerRejection(GeonetworkError):
    """Login recusado pelo servidor (status diferente de 2xx)."""

    def __init__(self, status_code: int, url: str, message: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(message or f"Login recusado ({status_code}) em {url}")


class CatalogRequestError(GeonetworkError):
    """Requisicao CSW respondida com status diferente de 2xx."""

    def __init__(self, status_code: int, url: str, message: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(message or f"Requisicao CSW falhou ({status_code}) em {url}")

    @property
    def is_auth_failure(self) -> bool:
        return self.status_code in (401, 403)
