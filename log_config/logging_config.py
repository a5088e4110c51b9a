from pathlib import Path
import logging
import sys
from logging.handlers import RotatingFileHandler
from config import LOG_DIR as LOG_DIR_OVERRIDE, LOG_LEVEL

# Project root -> .../doctors-directory
ROOT = Path(__file__).resolve().parent.parent

# logs dir -> .../doctors-directory/logging unless LOG_DIR is set
LOG_DIR = Path(LOG_DIR_OVERRIDE) if LOG_DIR_OVERRIDE else ROOT / "logging"

LOG_FILE = LOG_DIR / "app.log"

FMT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    # Clear any existing handlers (prevents duplicates with --reload)
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)

    LOG_DIR.mkdir(parents=True, exist_ok=True)

    file_h = RotatingFileHandler(
        LOG_FILE, maxBytes=50*1024*1024, backupCount=5, encoding="utf-8"
    )
    file_h.setFormatter(logging.Formatter(FMT))

    console_h = logging.StreamHandler(sys.stdout)
    console_h.setFormatter(logging.Formatter(FMT))

    log_level = getattr(logging, level, logging.INFO)
    logging.basicConfig(level=log_level, handlers=[file_h, console_h])

    # Make uvicorn logs go to the same handlers
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        l = logging.getLogger(name)
        l.setLevel(log_level)
        l.handlers = [file_h, console_h]
        l.propagate = False

    logging.getLogger("log_setup").info(f"Logging to: {LOG_FILE}")
