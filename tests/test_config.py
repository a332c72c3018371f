import logging

import pytest

from bucket_queue.config import QueueConfig, configure_logging


def test_defaults():
    config = QueueConfig()
    assert config.capacity == 1
    assert config.initial_arena == 64
    assert "Capacity: 1" in repr(config)


@pytest.mark.parametrize(
    "kwargs, error",
    [
        ({"capacity": -1}, ValueError),
        ({"capacity": 1.0}, TypeError),
        ({"capacity": True}, TypeError),
        ({"initial_arena": 0}, ValueError),
        ({"log_level": "chatty"}, ValueError),
    ],
)
def test_invalid(kwargs, error):
    with pytest.raises(error):
        QueueConfig(**kwargs)


def test_configure_logging_adds_one_handler():
    logger = configure_logging("debug")
    before = len(logger.handlers)
    assert configure_logging("INFO") is logger
    assert len(logger.handlers) == before
    assert logger.level == logging.INFO


def test_non_string_log_level():
    with pytest.raises(TypeError):
        QueueConfig(log_level=10)
