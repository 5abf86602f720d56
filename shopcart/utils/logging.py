# shopcart/utils/logging.py
import logging

from shopcart.utils.settings import LOG_LEVEL

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_root() -> logging.Logger:
    root = logging.getLogger("shopcart")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    root.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))
    return root


_configure_root()


def get_logger(name: str) -> logging.Logger:
    """Logger w drzewie "shopcart", wspolny handler i format."""
    if not name.startswith("shopcart"):
        name = f"shopcart.{name}"
    return logging.getLogger(name)
