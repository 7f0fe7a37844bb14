import logging

import pytest
from pydantic import ValidationError

from runeroll.core.config import Settings
from utils.logger_config import configure_logging


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.SOLVER_MAX_STEPS == 2000
    assert (settings.GENERATOR_WIPE_STRIDE, settings.GENERATOR_PICKUP_STRIDE, settings.GENERATOR_GATE_STRIDE) == (8, 5, 6)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("RUNEROLL_SOLVER_MAX_STEPS", "10")
    monkeypatch.setenv("RUNEROLL_GENERATOR_GATE_STRIDE", "7")
    settings = Settings(_env_file=None)
    assert settings.SOLVER_MAX_STEPS == 10
    assert settings.GENERATOR_GATE_STRIDE == 7


@pytest.fixture
def restore_logging():
    root, engine = logging.getLogger(), logging.getLogger("runeroll")
    saved = [(log, log.level, list(log.handlers), log.propagate) for log in (root, engine)]
    yield
    for log, level, handlers, propagate in saved:
        for handler in log.handlers:
            if handler not in handlers:
                handler.close()
        log.setLevel(level)
        log.handlers = handlers
        log.propagate = propagate


def test_configure_logging(tmp_path, restore_logging):
    log_file = tmp_path / "errors.log"
    configure_logging(level="debug", log_file=str(log_file))
    engine = logging.getLogger("runeroll")
    assert engine.level == logging.DEBUG
    assert not engine.propagate

    logging.getLogger("runeroll.services.solver_services").error("boom")
    for handler in engine.handlers:
        handler.flush()
    assert "boom" in log_file.read_text()


@pytest.mark.parametrize("field", ["GENERATOR_WIPE_STRIDE", "GENERATOR_PICKUP_STRIDE", "GENERATOR_GATE_STRIDE"])
def test_zero_stride_is_rejected(field):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: 0})


def test_zero_stride_from_environment_is_rejected(monkeypatch):
    monkeypatch.setenv("RUNEROLL_GENERATOR_GATE_STRIDE", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_negative_solver_cap_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, SOLVER_MAX_STEPS=-1)
