"""
Modelos de dados compartilhados do cliente GeoNetwork.
"""

import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from http.cookiejar import Cookie
from typing import Mapping, Optional

from ..config import (
    CSW_URL_KEY, CSW_USER_KEY, CSW_PASS_KEY, CSW_PARENT_KEY, CSW_TIMEOUT_KEY,
    REQUIRED_KEYS, DEFAULT_TIMEOUT,
)
from ..core.exceptions import ConfigurationError


def env_var_name(key: str) -> str:
    """Converte chave de configuracao em nome de variavel de ambiente."""
    return key.upper().replace(".", "_")


@dataclass(frozen=True)
class CatalogSettings:
    """Endpoint e credenciais do catalogo, resolvidos uma unica vez."""
    endpoint: str
    username: str
    password: str = field(repr=False)
    parent_identifier: Optional[str] = None
    timeout: int = DEFAULT_TIMEOUT

    def __post_init__(self):
        faltando = [
            key for key, value in (
                (CSW_URL_KEY, self.endpoint),
                (CSW_USER_KEY, self.username),
                (CSW_PASS_KEY, self.password),
            )
            if not value or not str(value).strip()
        ]
        if faltando:
            raise ConfigurationError(
                "Catalogo nao configurado, defina: " + ", ".join(faltando)
            )
        if not isinstance(self.timeout, int) or self.timeout <= 0:
            raise ConfigurationError(f"Timeout invalido: {self.timeout!r}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "CatalogSettings":
        """
        Cria configuracao a partir de um mapa plano de chaves.

        Chaves obrigatorias: csw.endpoint.url, csw.endpoint.user, csw.endpoint.pass.
        Opcionais: csw.identifier.parent, csw.timeout.
        """
        timeout = DEFAULT_TIMEOUT
        raw_timeout = mapping.get(CSW_TIMEOUT_KEY)
        if raw_timeout not in (None, ""):
            try:
                timeout = int(raw_timeout)
            except (TypeError, ValueError):
                raise ConfigurationError(f"{CSW_TIMEOUT_KEY} invalido: {raw_timeout!r}")

        return cls(
            endpoint=(mapping.get(CSW_URL_KEY) or "").strip(),
            username=mapping.get(CSW_USER_KEY) or "",
            password=mapping.get(CSW_PASS_KEY) or "",
            parent_identifier=mapping.get(CSW_PARENT_KEY) or None,
            timeout=timeout,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CatalogSettings":
        """Cria configuracao a partir das variaveis de ambiente (CSW_ENDPOINT_URL, ...)."""
        environ = os.environ if environ is None else environ
        keys = REQUIRED_KEYS + (CSW_PARENT_KEY, CSW_TIMEOUT_KEY)
        mapping = {}
        for key in keys:
            value = environ.get(env_var_name(key))
            if value is not None:
                mapping[key] = value
        return cls.from_mapping(mapping)


class SessionState(Enum):
    """Estado da sessao no catalogo."""
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


@dataclass
class CookieRecord:
    """Cookie de sessao recebido do servidor."""
    name: str
    value: str
    domain: str
    expires: Optional[datetime] = None

    @classmethod
    def from_cookie(cls, cookie: Cookie) -> "CookieRecord":
        expires = None
        if cookie.expires is not None:
            expires = datetime.fromtimestamp(cookie.expires, tz=timezone.utc)
        return cls(
            name=cookie.name,
            value=cookie.value or "",
            domain=cookie.domain,
            expires=expires,
        )

    @property
    def is_session_cookie(self) -> bool:
        return self.expires is None
