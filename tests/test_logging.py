"""Tests for bound log context and the log formatters."""

import json
import logging

from core.logging import bound, get_context
from core.logging.context import ContextFilter
from core.logging.formatter import ConsoleFormatter, JSONFormatter
from core.logging.levels import LogLevel, to_level


def make_record(message="hello", **extra):
    record = logging.LogRecord("application.services.match_sync", logging.INFO, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_bound_nests_and_resets():
    with bound(player="Tester", region="euw1"):
        with bound(profile="match-v5", region=None):
            assert get_context() == {"player": "Tester", "region": "euw1", "profile": "match-v5"}
        assert "profile" not in get_context()
    assert get_context() == {}


def test_context_filter_stamps_record_for_the_file_handler():
    record = make_record()
    with bound(player="Tester"):
        ContextFilter().filter(record)

    payload = json.loads(JSONFormatter().format(record))

    assert payload["context"] == {"player": "Tester"}
    assert payload["message"] == "hello"
    assert payload["logger"] == "application.services.match_sync"


def test_console_line_without_color():
    record = make_record(service="sync-cli")
    with bound(player="Tester"):
        line = ConsoleFormatter(use_color=False).format(record)

    assert line == "INFO | sync-cli | hello | [player=Tester]"


def test_to_level():
    assert to_level("success") == int(LogLevel.SUCCESS)
    assert to_level("15") == 15
    assert to_level(logging.ERROR) == logging.ERROR
    assert to_level("chatty") == logging.INFO
