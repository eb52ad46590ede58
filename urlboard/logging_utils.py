import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# requests/urllib3 пишут по строке на каждое соединение
NOISY_LOGGERS = ("urllib3", "flet", "flet_core", "flet_runtime")


def setup_logging(  # noqa: PLR0913
    *,
    enabled: bool = True,
    debug: bool = False,
    logger_name: str = "urlboard",
    file_path: str | None = "logs/app.log",
    max_bytes: int = 500_000,
    backups: int = 3,
) -> logging.Logger:
    """
    Configure the application logger and return it.

    - enabled=False: output is muted (NullHandler), level WARNING (DEBUG when debug=True).
    - enabled=True: console handler, plus a rotating file when `file_path` is set.
      Transport/framework loggers are held at WARNING unless `debug` is on.
    """
    logger = logging.getLogger(logger_name)

    # повторный вызов не должен плодить дубликаты хендлеров
    logger.handlers.clear()

    if not enabled:
        logger.setLevel(logging.DEBUG if debug else logging.WARNING)
        logger.addHandler(logging.NullHandler())
        return logger

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)

    fmt = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    logger.addHandler(console)

    if file_path:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        rotating = RotatingFileHandler(file_path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8")
        rotating.setFormatter(fmt)
        logger.addHandler(rotating)

    return logger
