import logging

import pytest


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler and level changes made by setup_logging()."""
    logger = logging.getLogger("bytekit")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handlers, level, propagate = saved
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with an empty working directory and no per-user settings file."""
    monkeypatch.setattr(
        "bytekit.infra.config.file_io.SETTING_PATH",
        tmp_path / "user" / "settings.json",
    )
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir
