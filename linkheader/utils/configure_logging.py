import logging
import os
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple default configurations
_CONFIGURED = False
# Explicit (level, log_file) last applied
_APPLIED: tuple[str, Path | None] | None = None
_LOCK = threading.Lock()


def configure_logging(level: str | None = None, log_file: str | Path | None = None) -> None:
    """Configure the ``linkheader`` logger.

    Called with no arguments, configuration happens once from the environment
    and later calls are no-ops. Explicit settings always replace the logger's
    handlers and level, unless they match the settings already applied.

    Args:
        level: Log level name. Defaults to ``LINKHEADER_LOG_LEVEL`` or WARNING.
        log_file: File for a rotating handler. Defaults to
            ``LINKHEADER_LOG_FILE``; with neither, a NullHandler is attached.
    """
    global _CONFIGURED, _APPLIED
    explicit = level is not None or log_file is not None
    with _LOCK:
        if _CONFIGURED and not explicit:
            return

        if level is None:
            level = os.environ.get("LINKHEADER_LOG_LEVEL", "WARNING")
        if log_file is None:
            env_file = os.environ.get("LINKHEADER_LOG_FILE")
            log_file = Path(env_file).expanduser().resolve() if env_file else None
        else:
            log_file = Path(log_file).expanduser().resolve()

        settings = (level.upper(), log_file)
        if explicit and settings == _APPLIED:
            return

        root_logger = logging.getLogger("linkheader")
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()
        root_logger.setLevel(settings[0])

        if log_file is None:
            root_logger.addHandler(logging.NullHandler())
        else:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            file_handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3)  # 5MB * 3
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        _CONFIGURED = True
        _APPLIED = settings if explicit else None
