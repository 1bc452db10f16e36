# utils.py
"""
Utility functions for the simulation framework.

This module provides logging setup and configuration loading, which are
used by the entry point but do not belong to the physics or rendering
code.
"""
import copy
import logging
import logging.handlers
import json
import os
from typing import Dict, Any, List, Optional, Sequence
from vector import Vector2

# --- Data Contracts ---
#
# setup_logging(config: Dict[str, Any]) -> None:
#   - Inputs:
#     - config: A dictionary containing a "logging" key with "level",
#       "format", and "log_file" sub-keys.
#   - Side Effects: Configures the root Python logger with a console
#     handler and a rotating file handler. Creates the log directory.
#
# load_config(path: str) -> Dict[str, Any]:
#   - Outputs: the parsed JSON with every section of DEFAULT_CONFIG present.
#     Keys in the file override the defaults one section at a time.
#   - Raises: FileNotFoundError, json.JSONDecodeError (logged, re-raised).
#
# vector_from_config(value: Optional[Sequence[float]], default: Vector2) -> Vector2

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "simulation_parameters": {
        "particle_count": 1000,
        "ring_radius": 150.0,
        "boundary_radius": 600.0,
        "particle_radius": 6.0,
        "acceleration": [0.0, 2.0],
        "delta_time": 0.005,
        "center": None,
    },
    "run_control": {
        "max_steps": 0,
        "log_throttle_steps": 1000,
        "draw_every_n_ticks": 8,
    },
    "visualization": {
        "width": 2000,
        "height": 1333,
        "fps": 0,
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(levelname)s - %(message)s",
        "log_file": "logs/simulation.log",
    },
}


LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 5


def _build_handlers(log_file_path: str, formatter: logging.Formatter) -> List[logging.Handler]:
    """Console output plus a size-rotated log file, both sharing one format."""
    log_dir = os.path.dirname(log_file_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    handlers: List[logging.Handler] = [
        logging.StreamHandler(),
        logging.handlers.RotatingFileHandler(
            log_file_path, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS
        ),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(config: Dict[str, Any]) -> None:
    """
    Routes the root logger to the console and a rotating file, using the
    "logging" section of the configuration. Calling it again replaces the
    previously installed handlers.
    """
    defaults = DEFAULT_CONFIG['logging']
    log_config = {**defaults, **config.get('logging', {})}
    log_level = str(log_config['level']).upper()
    log_file_path = log_config['log_file']

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    root.setLevel(log_level)
    for handler in _build_handlers(log_file_path, logging.Formatter(log_config['format'])):
        root.addHandler(handler)

    logging.info("Logging system initialized.")
    logging.debug(f"Log level {log_level}, writing to {log_file_path}.")


def load_config(path: str) -> Dict[str, Any]:
    """Loads a JSON configuration file on top of DEFAULT_CONFIG."""
    logging.info(f"Loading configuration from {path}...")
    try:
        with open(path, 'r') as f:
            loaded = json.load(f)
    except FileNotFoundError:
        logging.error(f"Configuration file not found at {path}.")
        raise
    except json.JSONDecodeError:
        logging.error(f"Error decoding JSON from {path}.")
        raise

    config = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in loaded.items():
        if isinstance(values, dict) and section in config:
            config[section].update(values)
        else:
            config[section] = values
    logging.info("Configuration loaded successfully.")
    return config


def vector_from_config(value: Optional[Sequence[float]], default: Vector2) -> Vector2:
    """Builds a Vector2 from an [x, y] config entry, or returns `default` for null."""
    if value is None:
        return default
    x, y = value
    return Vector2(x, y)
