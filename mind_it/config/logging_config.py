import logging
from mind_it.config.settings import settings

def setup_logging(debug: bool = False):
    """Configure logging for the application"""
    # Create logs directory if it doesn't exist
    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    
    level = logging.DEBUG if (debug or settings.DEBUG) else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(settings.LOG_DIR / "mind_it.log"),
            logging.StreamHandler()  # Also log to console
        ],
        force=True
    )
    
    logger = logging.getLogger(__name__)
    logger.info("Logging initialized")
