"""Unit tests for structured logging."""
import sys
import json
import logging
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from logger import JSONFormatter, setup_logging


def _record(msg, **attrs):
    record = logging.LogRecord("services.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    
    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(_record("Generated cloud")))
        
        assert data["level"] == "INFO"
        assert data["logger"] == "services.test"
        assert data["message"] == "Generated cloud"
        assert data["timestamp"].endswith("Z")
    
    def test_extra_fields_merged(self):
        record = _record("done", extra={"top_n": 10, "latency_ms": 3})
        data = json.loads(JSONFormatter().format(record))
        
        assert data["top_n"] == 10
        assert data["latency_ms"] == 3
    
    def test_exception_included(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = _record("failed", exc_info=sys.exc_info())
        data = json.loads(JSONFormatter().format(record))
        
        assert "ValueError: bad" in data["exception"]


def test_setup_logging_installs_single_json_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("debug")
        setup_logging("DEBUG")
        
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
