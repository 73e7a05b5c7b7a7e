import logging
import os
from datetime import datetime

from price_engine.core.config import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def configure_logging():
    """Configure application logging."""
    settings = get_settings()

    # Set log level based on settings (DEBUG=true in environment or .env)
    log_level = logging.DEBUG if settings.debug else logging.INFO

    handlers = [logging.StreamHandler()]
    log_filename = None
    if settings.log_to_file:
        os.makedirs(settings.log_dir, exist_ok=True)
        log_filename = os.path.join(
            settings.log_dir, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        )
        handlers.append(logging.FileHandler(log_filename))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=handlers
    )

    # httpx logs every request at INFO
    logging.getLogger('httpx').setLevel(logging.INFO if settings.debug else logging.WARNING)

    # Set specific loggers to DEBUG level when in debug mode
    if log_level == logging.DEBUG:
        logging.getLogger('price_engine.scrapers').setLevel(logging.DEBUG)
        logging.getLogger('price_engine.services').setLevel(logging.DEBUG)

    return log_filename
