# exact_kp/utils/logger.py
import logging
import sys
import os
from datetime import datetime

# Configuration is passed in as arguments so this helper does not depend on the config loader.

def setup_logger(run_name: str, log_dir: str, level=logging.INFO):
    """
    Configures the root logger for the entire application.
    This should be called only ONCE at the application's entry point.
    """
    logger = logging.getLogger() # Get the root logger

    # already configured
    if logger.hasHandlers():
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)

    # 1. File handler with a unique, timestamped log file
    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_filename = f"{run_name}_{timestamp}.log"
    log_filepath = os.path.join(log_dir, log_filename)

    file_handler = logging.FileHandler(log_filepath, mode='w')
    file_handler.setLevel(logging.DEBUG) # the file keeps everything the root lets through
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    # 2. Console handler, on stderr so stdout stays free for solver output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    logger.info(f"Logger initialized. All subsequent logs will be saved to: {log_filepath}")
