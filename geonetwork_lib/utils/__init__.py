"""
Utilitários compartilhados do cliente GeoNetwork.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Dict, Optional

from ..config import MAX_LOGGED_BODY


# FUNÇÕES DE URL

def join_url(base: str, suffix: str) -> str:
    """Concatena URL base e sufixo sem barras duplicadas."""
    return base.rstrip("/") + "/" + suffix.lstrip("/")


# FUNÇÕES DE STRING

def resumir_corpo(texto: Optional[str], limite: int = MAX_LOGGED_BODY) -> str:
    """Reduz corpo de resposta para registro em log."""
    if not texto:
        return "<vazio>"
    texto = texto.strip()
    if len(texto) <= limite:
        return texto
    return f"{texto[:limite]}... ({len(texto)} caracteres)"


# LOGGER

LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'

_loggers: Dict[str, "GeonetworkLogger"] = {}


class GeonetworkLogger(logging.LoggerAdapter):
    """Logger do cliente GeoNetwork, com nivel extra para operacoes concluidas."""

    def success(self, msg: str):
        self.info(f"[OK] {msg}")


def get_logger(name: str = "geonetwork", log_dir: Optional[Path] = None, debug: bool = False) -> GeonetworkLogger:
    """Obtém instância do logger. Handlers sao configurados so na primeira chamada por nome."""
    if name in _loggers:
        return _loggers[name]

    nivel = logging.DEBUG if debug else logging.INFO
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    base = logging.getLogger(name)
    base.setLevel(nivel)
    base.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(nivel)
    console.setFormatter(formatter)
    base.addHandler(console)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        arquivo = logging.FileHandler(
            log_dir / f"geonetwork_{datetime.now():%Y%m%d}.log",
            encoding='utf-8'
        )
        arquivo.setLevel(logging.DEBUG)
        arquivo.setFormatter(formatter)
        base.addHandler(arquivo)

    _loggers[name] = GeonetworkLogger(base, {})
    return _loggers[name]
