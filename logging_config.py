# logging_config.py
import logging
import logging.handlers
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_FILE = "dashboard.log"


def setup_logging(log_level: str = "INFO", log_dir=None) -> Path:
    """Sends dashboard logs to the console and to a rotating file; safe to call twice."""
    log_dir = Path(log_dir or Path(__file__).parent / "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = (log_dir / LOG_FILE).resolve()

    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    already = any(
        isinstance(h, logging.handlers.RotatingFileHandler) and Path(h.baseFilename) == log_file
        for h in root.handlers
    )
    if not already:
        formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        # 1 MB x 3
        file_handler = logging.handlers.RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8")
        console = logging.StreamHandler()
        for handler in (file_handler, console):
            handler.setFormatter(formatter)
            root.addHandler(handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    return log_file
