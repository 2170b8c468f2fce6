from dotenv import load_dotenv
import os
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_INPUT_DIR = "files"
DEFAULT_OUTPUT_DIR = "outputs"


def setup_logging(level=logging.INFO, log_file="app.log"):
    """
    Set up logging configuration for the application.
    Logs to console and, when log_file is given, to that file as well.
    """
    logger = logging.getLogger()
    if not logger.handlers:  # Avoid duplicate handlers
        logger.setLevel(level)

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

        # File handler
        if log_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(file_handler)

    return logger


def load_config():
    """
    Load environment variables from .env file.
    Returns: Dict of config values, with directories resolved against the cwd.
    """
    load_dotenv()
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        raise ValueError(f"Invalid LOG_LEVEL: {level_name}")

    log_file = os.getenv("LOG_FILE", "app.log")
    setup_logging(level, log_file or None)
    logger = logging.getLogger(__name__)

    try:
        config = {
            "INPUT_DIR": os.path.abspath(os.getenv("CSV2JSON_INPUT_DIR", DEFAULT_INPUT_DIR)),
            "OUTPUT_DIR": os.path.abspath(os.getenv("CSV2JSON_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)),
            "LOG_LEVEL": level_name,
            "LOG_FILE": log_file,
            "CONVERT_INTERVAL_MINUTES": int(os.getenv("CONVERT_INTERVAL_MINUTES", "0")),
        }
        logger.debug(f"Configuration loaded: input={config['INPUT_DIR']} output={config['OUTPUT_DIR']}")
        return config
    except ValueError as e:
        logger.error(f"Failed to load configuration: {str(e)}")
        raise
