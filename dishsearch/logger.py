'''
Logger loguru partagé par le service de plats.

Console colorée sur stderr et trois fichiers dans ``settings.LOG_DIR``
(debug, info/warning, erreurs) avec rotation quotidienne.
'''

import sys
from pathlib import Path
from loguru import logger

from dishsearch.config import settings

LOG_FORMAT_CONSOLE = (
    "<white>{time:YYYY-MM-DD HH:mm:ss.SSS}</white> | "
    "<level>{level: <8}</level> | "
    "<light-black>{name}:{function}:{line}</light-black> - "
    "<level><b>{message}</b></level>"
)
LOG_FORMAT_FILE = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"

# fichier -> (niveau minimal, niveaux acceptés ; None = tous à partir du minimal)
LOG_FILES = {
    "debug.log": ("DEBUG", ("DEBUG",)),
    "info.log": ("INFO", ("INFO", "WARNING")),
    "error.log": ("ERROR", None),
}


def _level_filter(levels):
    if levels is None:
        return None
    return lambda record: record["level"].name in levels


def configure_logger(log_dir=None, console_level=None):
    """Remplace les handlers loguru par la console et les fichiers rotatifs."""
    log_dir = Path(log_dir or settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(
        sys.stderr,
        level=console_level or settings.LOG_LEVEL,
        format=LOG_FORMAT_CONSOLE,
        colorize=True,
        backtrace=True,
        diagnose=True
    )
    for filename, (level, levels) in LOG_FILES.items():
        logger.add(
            log_dir / filename,
            level=level,
            format=LOG_FORMAT_FILE,
            rotation="00:00",
            retention="30 days",
            compression="zip",
            encoding="utf-8",
            filter=_level_filter(levels),
            backtrace=level == "ERROR",
            diagnose=level == "ERROR"
        )
    return logger


configure_logger()
