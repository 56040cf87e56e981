import logging
from pathlib import Path

import pytest
import yaml

from bodyscan.core import Config, get_logger, setup_logging


def test_packaged_config_is_found():
    config = Config()
    assert Path(config.path).name == "config.yaml"
    assert config.get("app.name") == "bodyscan"
    assert config.get("calibration.max_height_cm") == 300.0
    assert config.get("measurement.ranges.neck_width") == [8.0, 15.0]


def test_config_is_shared():
    assert Config() is Config()


def test_get_with_default_and_set():
    config = Config()
    assert config.get("thigh.missing", 3) == 3
    assert config.get("app.name.deeper") is None

    config.set("thigh.expansion_factor", 2.0)
    config.set("new.section.value", 1)
    assert config.thigh["expansion_factor"] == 2.0
    assert config.get("new.section.value") == 1


def test_explicit_path_and_save(tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("framing:\n  min_landmarks: 12\n")
    config = Config(str(cfg_file))

    assert config.framing == {"min_landmarks": 12}
    assert config.measurement == {}

    config.set("framing.min_landmarks", 20)
    saved = tmp_path / "saved.yaml"
    config.save(str(saved))
    assert yaml.safe_load(saved.read_text()) == {"framing": {"min_landmarks": 20}}

    config.reload()
    assert config.get("framing.min_landmarks") == 12


def test_empty_config_file(tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("")
    assert Config(str(cfg_file)).get("app.name", "x") == "x"


def test_loggers_live_under_package_namespace():
    assert get_logger("measure.engine").name == "bodyscan.measure.engine"


def test_setup_logging_with_file(tmp_path, quiet_logging):
    root = setup_logging(level="DEBUG", log_file="run", log_dir=str(tmp_path / "logs"), color=True)

    assert root.name == "bodyscan"
    assert root.level == logging.DEBUG
    get_logger("test").debug("hello file")
    for handler in root.handlers:
        handler.flush()

    files = list((tmp_path / "logs").glob("run_*.log"))
    assert len(files) == 1
    assert "hello file" in files[0].read_text()
    # Console colors must not leak into the file
    assert "\033[" not in files[0].read_text()


def test_env_var_selects_config(tmp_path, monkeypatch):
    cfg_file = tmp_path / "override.yaml"
    cfg_file.write_text("thigh:\n  expansion_factor: 2.0\n")
    monkeypatch.setenv("BODYSCAN_CONFIG", str(cfg_file))

    config = Config()
    assert config.path == str(cfg_file)
    assert config.thigh == {"expansion_factor": 2.0}


def test_non_mapping_config_is_rejected(tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        Config(str(cfg_file))


def test_unknown_log_level(quiet_logging):
    with pytest.raises(ValueError):
        setup_logging(level="LOUD")


def test_console_colors_are_optional(capsys, quiet_logging):
    setup_logging(level="INFO", color=False)
    get_logger("test").warning("plain")
    err = capsys.readouterr().err
    assert "WARNING" in err
    assert "\033[" not in err
