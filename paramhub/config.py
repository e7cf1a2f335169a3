import os
import logging
from dotenv import load_dotenv

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_log_level(name: str) -> int:
    """Map a level name (any case) to its logging constant; unknown names are a config error"""
    level = name.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {name!r}")
    return getattr(logging, level)


def configure_logging(level: int, log_file: str) -> None:
    """Console logging always; file logging unless log_file is empty"""
    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


PARAMHUB_PORT = int(os.getenv("PARAMHUB_PORT", 3310))
PARAMHUB_HOST = os.getenv("PARAMHUB_HOST", "127.0.0.1")
PARAMHUB_TOKEN = os.getenv("PARAMHUB_TOKEN")
LOG_LEVEL = parse_log_level(os.getenv("LOG_LEVEL", "INFO"))
LOG_FILE = os.getenv("LOG_FILE", "paramhub.log")

if not PARAMHUB_TOKEN:
    raise ValueError("PARAMHUB_TOKEN environment variable is required")

configure_logging(LOG_LEVEL, LOG_FILE)
