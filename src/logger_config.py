# file: src/logger_config.py
# English-only comments

import json, logging, os
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler
from typing import List, Optional

from dotenv import load_dotenv

import public_module

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_log_dir() -> Path:
    """Docker volume first, then data/logs next to this module."""
    log_dir = Path("/data/logs")
    if not log_dir.exists():
        log_dir = Path(__file__).resolve().parent / "data" / "logs"
    return log_dir


def build_handlers(log_file: Path, is_dev: bool) -> List[logging.Handler]:
    """
    File handler always (rotated at midnight, 7 days kept).
    Console handler only in dev.
    """
    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = TimedRotatingFileHandler(
        str(log_file),
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)
    handlers: List[logging.Handler] = [file_handler]

    if is_dev:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(logging.DEBUG)   # show all levels in console
        handlers.append(console_handler)

    return handlers


def setup_logger(log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Configure root logging and return the app logger (named LOG_NAME from config).
    IS_DEV (env or .env) turns on console output.
    """
    load_dotenv()
    is_dev = bool(os.getenv("IS_DEV"))

    log_dir = log_dir or resolve_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{public_module.LOG_NAME}.log"

    logging.basicConfig(
        level=logging.INFO,
        handlers=build_handlers(log_file, is_dev)
    )

    logger = logging.getLogger(public_module.LOG_NAME)
    logger.info(
        json.dumps({
            "EventCode": 0,
            "Message": "Logger initialized (Dev Mode)" if is_dev else "Logger initialized (Production Mode)"
        })
    )
    return logger
