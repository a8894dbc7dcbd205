"""
Shared helpers for the command-line runner.
"""

import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional


def setup_logging(log_type: str, name: str, log_dir: Optional[str] = None,
                  level: int = logging.INFO) -> logging.Logger:
    """Sets up a logger for a run; a log file is appended to only when ``log_dir`` is given."""
    logger = logging.getLogger(f"{log_type}_{name}_logger")
    logger.setLevel(level)

    # Prevent adding multiple handlers if the logger already exists
    if not logger.handlers:
        session_id = int(time.time())
        formatter = logging.Formatter(
            f'%(asctime)s - %(levelname)s - [Session: {session_id}]-[Algorithm: {name}] - %(message)s'
        )
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

        if log_dir is not None:
            log_dir_path = Path(log_dir)
            log_dir_path.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_dir_path / f"{log_type}_logs.log", mode='a')
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


def parse_param_overrides(specs) -> Dict[str, Any]:
    """Parse ``key=value`` strings into a dict, coercing numbers where possible."""
    overrides: Dict[str, Any] = {}
    for spec in specs or []:
        raw = (spec or "").strip()
        if "=" not in raw:
            raise ValueError(f"Hyperparameter override must look like key=value: {spec!r}")
        key, value = (part.strip() for part in raw.split("=", 1))
        if not key:
            raise ValueError(f"Hyperparameter override is missing a name: {spec!r}")
        overrides[key] = _coerce(value)
    return overrides


def _coerce(value: str) -> Any:
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            continue
    return value
