import logging
import logging.handlers
import os


def _rotating_file_handler(log_file: str, formatter: logging.Formatter) -> logging.Handler:
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    # Rotating file handler: 10MB per file, keep 5 backups
    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=10*1024*1024, backupCount=5
    )
    file_handler.setFormatter(formatter)
    return file_handler


def setup_logging(app_env: str, log_file: str = None):
    """Configure logging based on environment."""

    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    formatter = logging.Formatter(log_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    # Remove existing handlers (important when the seeder is invoked twice in one process)
    for h in list(root_logger.handlers):
        root_logger.removeHandler(h)

    if log_file:
        root_logger.addHandler(_rotating_file_handler(log_file, formatter))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    if app_env != "development":
        # Keep console logs at WARNING+ in prod
        console_handler.setLevel(logging.WARNING)
    root_logger.addHandler(console_handler)
