"""Unit tests for logging initialization in logging.py

Test coverage includes:

1. JsonFormatter output
   - Standard fields, `extra` fields and exception text are emitted as JSON.

2. initialize_logging()
   - Level resolution from argument, LOG_LEVEL and default.
"""

import sys
import json
import logging

import pytest

from localshortener.constants import ENV
from localshortener.utils.logging import JsonFormatter, initialize_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(**extra) -> logging.LogRecord:
    record = logging.makeLogRecord({'name': 'localshortener.test', 'levelname': 'INFO', 'levelno': logging.INFO, 'msg': 'Shortened %s', 'args': ('url',)})
    record.created = 0.0
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# -------------------------------
# 1. JsonFormatter output
# -------------------------------


def test_json_formatter_standard_fields():
    log = json.loads(JsonFormatter().format(make_record()))

    assert log == {
        'timestamp': '1970-01-01T00:00:00.000Z',
        'level': 'INFO',
        'logger': 'localshortener.test',
        'message': 'Shortened url',
    }


def test_json_formatter_includes_extra_fields():
    log = json.loads(JsonFormatter().format(make_record(shortcode='abc123', targetUrl='https://example.com')))

    assert log['shortcode'] == 'abc123'
    assert log['targetUrl'] == 'https://example.com'


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError('boom')
    except RuntimeError:
        record = logging.makeLogRecord({'msg': 'failed', 'exc_info': sys.exc_info()})

    log = json.loads(JsonFormatter().format(record))

    assert 'RuntimeError: boom' in log['exception']


# -------------------------------
# 2. initialize_logging()
# -------------------------------


@pytest.mark.parametrize(
    'argument, env_level, expected',
    [
        ('debug', None, logging.DEBUG),
        (None, 'ERROR', logging.ERROR),
        (None, None, logging.WARNING),
        ('info', 'ERROR', logging.INFO),
    ],
)
def test_initialize_logging_level(monkeypatch, argument, env_level, expected):
    if env_level is None:
        monkeypatch.delenv(ENV.App.LOG_LEVEL, raising=False)
    else:
        monkeypatch.setenv(ENV.App.LOG_LEVEL, env_level)

    initialize_logging(argument)

    root = logging.getLogger()
    assert root.level == expected
    assert any(isinstance(handler.formatter, JsonFormatter) for handler in root.handlers)
