#!filepath: tests/test_logger.py
import pytest
from loguru import logger

from threadsearch.config.log_config import LogConfig
from threadsearch.utils.logger import Logging


def test_file_sink_written(tmp_path):
    log = Logging(log_dir=str(tmp_path), log_level="INFO")
    log.info("hello threadsearch")
    logger.remove()  # flush & close file sink

    files = list(tmp_path.glob("*.log"))
    assert len(files) == 1
    assert "hello threadsearch" in files[0].read_text(encoding="utf-8")


def test_configure_from_log_config(tmp_path):
    log = Logging()
    log.configure(LogConfig(dir=str(tmp_path / "logs"), level="DEBUG"))

    assert log.level == "DEBUG"
    log.debug("debug line")
    assert (tmp_path / "logs").is_dir()


def test_catch_reraises():
    log = Logging(log_level="CRITICAL")

    @log.catch("boom")
    def func():
        raise ValueError("fail")

    with pytest.raises(ValueError):
        func()


def test_catch_passes_result_through():
    log = Logging(log_level="CRITICAL")

    @log.catch(log_inputs=True, log_outputs=True)
    def add(a, b):
        return a + b

    assert add(1, b=2) == 3
    assert add.__name__ == "add"
