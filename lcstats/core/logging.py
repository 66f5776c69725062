import logging
import os
from logging.handlers import RotatingFileHandler

from lcstats.config import LOG_DIR, LOG_LEVEL

def _rotating_file(path: str) -> RotatingFileHandler:
    return RotatingFileHandler(
        filename=path,
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )

def setup_logging(log_dir: str = LOG_DIR, level: str = LOG_LEVEL) -> None:
    os.makedirs(log_dir, exist_ok=True)

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # ROOT: aplikacja (konsola + app.log)
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(fmt)

    app_fh = _rotating_file(os.path.join(log_dir, "app.log"))
    app_fh.setLevel(level)
    app_fh.setFormatter(fmt)

    root.addHandler(sh)
    root.addHandler(app_fh)

    # upstream: każdy request do GraphQL, tylko do upstream.log
    upstream_logger = logging.getLogger("upstream")
    upstream_logger.setLevel(logging.INFO)
    upstream_logger.propagate = False
    upstream_logger.handlers.clear()

    up_fh = _rotating_file(os.path.join(log_dir, "upstream.log"))
    up_fh.setLevel(logging.INFO)
    up_fh.setFormatter(fmt)

    upstream_logger.addHandler(up_fh)

    logging.getLogger("httpx").setLevel(logging.WARNING)
