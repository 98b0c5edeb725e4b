"""Tests for package logging setup."""

import io
import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    from tgpp_guidance.utils import logging as logging_module

    package_logger = logging.getLogger(logging_module.PACKAGE_LOGGER)
    if logging_module._handler is not None:
        package_logger.removeHandler(logging_module._handler)
        logging_module._handler = None
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def test_module_records_reach_the_stream():
    from tgpp_guidance.utils.logging import configure_logging

    stream = io.StringIO()
    configure_logging("debug", stream=stream)

    logging.getLogger("tgpp_guidance.knowledge.store").debug("graph built")

    assert "DEBUG [tgpp_guidance.knowledge.store] graph built" in stream.getvalue()


def test_level_filters_records():
    from tgpp_guidance.utils.logging import configure_logging

    stream = io.StringIO()
    configure_logging("WARNING", stream=stream)

    logging.getLogger("tgpp_guidance.server").info("ready")

    assert stream.getvalue() == ""


def test_reconfigure_replaces_handler():
    from tgpp_guidance.utils.logging import PACKAGE_LOGGER, configure_logging

    first, second = io.StringIO(), io.StringIO()
    configure_logging("INFO", stream=first)
    configure_logging("INFO", stream=second)

    logging.getLogger("tgpp_guidance.cli").info("once")

    assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1
    assert first.getvalue() == ""
    assert "once" in second.getvalue()


def test_unknown_level_raises():
    from tgpp_guidance.utils.logging import configure_logging

    with pytest.raises(ValueError):
        configure_logging("CHATTY", stream=io.StringIO())


def test_disabled_logging_installs_nothing(monkeypatch):
    from tgpp_guidance.config import Config
    from tgpp_guidance.utils.logging import PACKAGE_LOGGER, configure_logging

    monkeypatch.setattr(Config, "ENABLE_LOGGING", False)

    package_logger = configure_logging("DEBUG", stream=io.StringIO())

    assert package_logger.level == logging.CRITICAL
    assert logging.getLogger(PACKAGE_LOGGER).handlers == []
