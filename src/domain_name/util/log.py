"""Logging setup for the command line.

Consistent logging format across all modules.
Library code only calls logging.getLogger(__name__); handlers are
configured here, once, by the CLI.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union


def parse_level(level: Union[int, str]) -> int:
    """Turn "DEBUG"/"info"/10 into a logging level number."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_logging(log_file: Optional[Path] = None, level: Union[int, str] = logging.INFO):
    """Configure logging for the detector.
    
    Logs to stderr and to a file (if provided), so stdout stays clean
    for detection output.
    Format includes timestamp, level, and module for debugging.
    """
    level = parse_level(level)

    # Create formatter
    formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    
    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    
    # Clear any existing handlers
    root_logger.handlers.clear()
    
    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    
    # File handler if log file specified
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    
    # Quiet down noisy libraries
    logging.getLogger('openpyxl').setLevel(logging.WARNING)
