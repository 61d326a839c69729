import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {"DEBUG": logging.DEBUG, "INFO": logging.INFO, "WARN": logging.WARNING, "ERROR": logging.ERROR}


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Attach the rotating logfile handler to the ``linkres`` logger.

    Args:
        home: Linkres home directory. If None, derived from LINKRES_HOME.
        level: One of DEBUG, INFO, WARN, ERROR.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        env_home = os.environ.get("LINKRES_HOME")
        home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".linkres"

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "linkres.log"

    root_logger = logging.getLogger("linkres")
    root_logger.setLevel(_LEVELS.get(level, logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
