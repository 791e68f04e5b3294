"""
Cliente principal do GeoNetwork - Interface unificada.
"""

from pathlib import Path
from typing import Callable, Optional, TypeVar

from .core import SessionManager, GeonetworkHttpClient, CatalogRequestError, ConfigurationError
from .models import CatalogSettings, SessionState
from .services import CatalogService
from .utils import get_logger

T = TypeVar("T")


class CatalogClient:
    """Cliente para consultas autenticadas ao catalogo CSW."""

    def __init__(
        self,
        settings: Optional[CatalogSettings] = None,
        timeout: Optional[int] = None,
        log_dir: Optional[str] = None,
        debug: bool = False
    ):
        self.logger = get_logger("geonetwork", Path(log_dir) if log_dir else None, debug)

        self.settings = settings or CatalogSettings.from_env()
        if timeout is not None and (not isinstance(timeout, int) or timeout <= 0):
            raise ConfigurationError(f"Timeout invalido: {timeout!r}")
        self.timeout = self.settings.timeout if timeout is None else timeout

        self._http = GeonetworkHttpClient(self.timeout)
        self._session = SessionManager(self.settings, self._http)
        self._catalog = CatalogService(self._http, self._session.csw_url)

        self.logger.info(f"CatalogClient inicializado. Catalogo: {self._session.endpoint}")

    @property
    def session(self) -> SessionManager:
        return self._session

    @property
    def state(self) -> SessionState:
        return self._session.state

    def login(self) -> None:
        self._session.login()

    def logout(self) -> None:
        self._session.logout()

    def is_logged_in(self) -> bool:
        return self._session.is_valid()

    def ensure_logged_in(self) -> None:
        if not self._session.is_valid():
            self._session.login()

    def _autenticado(self, operacao: Callable[[], T]) -> T:
        """Executa operacao com sessao valida; refaz o login uma vez em 401/403."""
        self.ensure_logged_in()
        try:
            return operacao()
        except CatalogRequestError as e:
            if not e.is_auth_failure:
                raise
            self.logger.warning(f"Catalogo recusou a sessao ({e.status_code}), refazendo login")
            self._session.clear_cookie_jar()
            self._session.login()
            return operacao()

    def get_capabilities(self) -> str:
        return self._autenticado(self._catalog.get_capabilities)

    def get_record_by_id(self, identifier: Optional[str] = None, element_set: str = "full") -> str:
        identifier = identifier or self.settings.parent_identifier
        if not identifier:
            raise ConfigurationError("Nenhum identificador informado e csw.identifier.parent ausente")
        return self._autenticado(
            lambda: self._catalog.get_record_by_id(identifier, element_set)
        )

    def post_csw(self, xml_body: str) -> str:
        return self._autenticado(lambda: self._catalog.post(xml_body))

    def close(self):
        self._session.close()

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._session.__exit__(exc_type, exc, tb)
