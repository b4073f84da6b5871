import json
import logging

from medicare.config import Settings
from medicare.logging_setup import JsonFormatter, build_logging_config


def test_json_formatter_fields():
    record = logging.LogRecord(
        name='medicare.services.records', level=logging.WARNING, pathname=__file__,
        lineno=1, msg='Constraint violation on %s', args=('doctors',), exc_info=None,
    )

    entry = json.loads(JsonFormatter().format(record))

    assert entry['level'] == 'WARNING'
    assert entry['logger'] == 'medicare.services.records'
    assert entry['message'] == 'Constraint violation on doctors'
    assert 'timestamp' in entry
    assert entry['module'] == 'test_logging_setup'
    assert 'path' not in entry


def test_json_formatter_request_fields():
    record = logging.LogRecord(
        name='medicare.middleware.request_logging', level=logging.INFO, pathname=__file__,
        lineno=1, msg='GET /health -> 200', args=(), exc_info=None,
    )
    record.__dict__.update(method='GET', path='/health', status_code=200, duration_ms=1.5)

    entry = json.loads(JsonFormatter().format(record))

    assert entry['method'] == 'GET'
    assert entry['path'] == '/health'
    assert entry['status_code'] == 200
    assert entry['duration_ms'] == 1.5


def test_formatter_selected_by_settings():
    plain = build_logging_config(Settings(log_json=False, log_level='debug'))
    structured = build_logging_config(Settings(log_json=True))

    assert plain['handlers']['console']['formatter'] == 'plain'
    assert plain['loggers']['medicare']['level'] == 'DEBUG'
    assert structured['handlers']['console']['formatter'] == 'json'
