import json
import logging
import logging.handlers

import pytest

from utils import DEFAULT_CONFIG, load_config, setup_logging, vector_from_config
from vector import Vector2


def test_load_config_fills_missing_sections_and_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "simulation_parameters": {"particle_count": 12, "delta_time": 0.01},
        "extra": {"note": "kept"},
    }))

    config = load_config(str(path))

    sim = config["simulation_parameters"]
    assert sim["particle_count"] == 12
    assert sim["delta_time"] == 0.01
    assert sim["boundary_radius"] == DEFAULT_CONFIG["simulation_parameters"]["boundary_radius"]
    assert config["run_control"]["draw_every_n_ticks"] == 8
    assert config["extra"] == {"note": "kept"}
    # Defaults are copied, not shared.
    assert DEFAULT_CONFIG["simulation_parameters"]["particle_count"] == 1000


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.json"))


def test_load_config_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(json.JSONDecodeError):
        load_config(str(path))


def test_vector_from_config():
    default = Vector2(1.0, 2.0)
    assert vector_from_config(None, default) is default
    assert vector_from_config([3, 4], default) == Vector2(3.0, 4.0)


def test_setup_logging_installs_console_and_file_handlers(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "run.log"
    config = {"logging": {"level": "debug", "log_file": str(log_file)}}

    setup_logging(config)
    setup_logging(config)

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)
    assert log_file.parent.is_dir()
