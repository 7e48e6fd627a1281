"""
Centralized configuration
"""
import os
import logging
from pathlib import Path
from dotenv import load_dotenv

_config_logger = logging.getLogger('class_base.config')

# Load .env file from the working directory if it exists
_env_file = Path.cwd() / '.env'
if _env_file.exists():
    load_dotenv(_env_file)

# Debug mode enables verbose logging for the whole class_base namespace
DEBUG_MODE = os.getenv('CLASS_BASE_DEBUG', 'false').lower() == 'true'

# Warn when key/value constructor arguments don't come in pairs
WARN_ODD_PAIRS = os.getenv('CLASS_BASE_WARN_ODD_PAIRS', 'true').lower() == 'true'

# Reserved configuration key, copied onto every instance and never interpreted
FACTORY_KEY = "factory"

if DEBUG_MODE:
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    logging.getLogger('class_base').setLevel(logging.DEBUG)
    _config_logger.debug("DEBUG_MODE enabled - verbose logging active")
    _config_logger.debug(f"   .env loaded: {_env_file.exists()}")
    _config_logger.debug(f"   WARN_ODD_PAIRS: {WARN_ODD_PAIRS}")
