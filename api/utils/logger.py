# api/utils/logger.py
import logging
import os
import sys
from typing import Optional

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def configurar_logging(level: Optional[str] = None) -> None:
    """
    Configura o logger raiz uma única vez.
    Os módulos usam logging.getLogger(__name__) normalmente.
    """
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel((level or os.getenv("LOG_LEVEL") or "INFO").upper())
    root.addHandler(handler)
    _initialized = True
