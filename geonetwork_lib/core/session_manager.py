"""
Gerenciador de sessao autenticada no GeoNetwork.

Controla login, logout e a validade da sessao. A validade e medida por um
prazo proprio (login + 1 hora), independente da expiracao dos cookies
enviados pelo servidor.
"""

import threading
from datetime import datetime, timedelta, timezone
from typing import List, Mapping, Optional, Union

from requests.cookies import RequestsCookieJar

from ..config import CSW_PATH, LOGIN_PATH, LOGOUT_PATH, FORM_CONTENT_TYPE, SELF_EXPIRE_HOURS
from ..models import CatalogSettings, CookieRecord, SessionState
from ..utils import get_logger, join_url, resumir_corpo
from .exceptions import ServerRejection, TransportError
from .http_client import GeonetworkHttpClient


class SessionManager:
    """
    Sessao de um unico usuario em um unico catalogo.

    login(), logout() e is_valid() sao mutuamente exclusivos. clear_cookie_jar()
    e cookie_jar dependem apenas do cookie jar, que e thread-safe.
    """

    def __init__(
        self,
        config: Union[CatalogSettings, Mapping[str, str]],
        http_client: Optional[GeonetworkHttpClient] = None,
    ):
        if not isinstance(config, CatalogSettings):
            config = CatalogSettings.from_mapping(config)
        self.settings = config

        self.endpoint = config.endpoint.rstrip("/")
        self.csw_url = join_url(self.endpoint, CSW_PATH)
        self.login_url = join_url(self.endpoint, LOGIN_PATH)
        self.logout_url = join_url(self.endpoint, LOGOUT_PATH)

        self.logger = get_logger()
        self._http = http_client or GeonetworkHttpClient(config.timeout)
        self._lock = threading.Lock()
        self._self_expire_at = datetime.now(timezone.utc)

    @property
    def username(self) -> str:
        return self.settings.username

    @property
    def http_client(self) -> GeonetworkHttpClient:
        return self._http

    @property
    def self_expire_at(self) -> datetime:
        return self._self_expire_at

    def login(self) -> None:
        """
        Autentica no GeoNetwork via POST em xml.user.login.

        Os cookies da resposta ficam no cookie jar da sessao.

        Raises:
            ServerRejection: servidor respondeu com status diferente de 2xx.
            TransportError: falha de URL ou de rede.
        """
        with self._lock:
            self.logger.info(f"Iniciando login: {self.username} em {self.login_url}")
            resp = self._http.post(
                self.login_url,
                data={"username": self.username, "password": self.settings.password},
                headers={"Content-Type": FORM_CONTENT_TYPE},
            )
            self.logger.debug(f"Resposta do login: {resumir_corpo(resp.text)}")

            if not resp.ok:
                self._http.cookies.clear()
                self.logger.error(f"Login recusado: HTTP {resp.status_code}")
                raise ServerRejection(resp.status_code, self.login_url)

            expira = datetime.now(timezone.utc) + timedelta(hours=SELF_EXPIRE_HOURS)
            self._self_expire_at = max(self._self_expire_at, expira)
            self.logger.success(
                f"Login OK: {self.username} (valido ate {self._self_expire_at.astimezone():%H:%M:%S})"
            )

    def logout(self) -> None:
        """
        Encerra a sessao via GET em xml.user.logout.

        O cookie jar e sempre esvaziado, mesmo quando a requisicao falha.
        """
        with self._lock:
            try:
                resp = self._http.get(self.logout_url)
                self.logger.debug(f"Resposta do logout: {resumir_corpo(resp.text)}")
                if not resp.ok:
                    self.logger.warning(f"Logout retornou HTTP {resp.status_code}")
                else:
                    self.logger.info(f"Logout: {self.username}")
            finally:
                self._http.cookies.clear()

    def is_valid(self) -> bool:
        """Verifica se ha sessao utilizavel. Expirada, limpa os cookies sem chamar logout."""
        with self._lock:
            if datetime.now(timezone.utc) >= self._self_expire_at:
                if len(self._http.cookies):
                    self.logger.info("Sessao expirada, limpando cookies")
                self._http.cookies.clear()
                return False
            return len(self._http.cookies) > 0

    def clear_cookie_jar(self) -> None:
        """Invalida a sessao localmente, sem contatar o servidor."""
        self._http.cookies.clear()

    @property
    def cookie_jar(self) -> RequestsCookieJar:
        """Copia do cookie jar atual."""
        return self._http.cookies.copy()

    def cookies(self) -> List[CookieRecord]:
        return [CookieRecord.from_cookie(c) for c in self._http.cookies]

    @property
    def state(self) -> SessionState:
        if datetime.now(timezone.utc) < self._self_expire_at and len(self._http.cookies):
            return SessionState.AUTHENTICATED
        return SessionState.UNAUTHENTICATED

    def close(self):
        self._http.close()

    def __enter__(self) -> "SessionManager":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if len(self._http.cookies):
                try:
                    self.logout()
                except TransportError as e:
                    # nao mascarar a excecao que ja esta saindo do bloco with
                    if exc_type is None:
                        raise
                    self.logger.warning(f"Falha no logout ao sair: {e}")
        finally:
            self.close()
