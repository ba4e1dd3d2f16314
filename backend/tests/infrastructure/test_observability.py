"""Structured logging — JSON formatter surfaces known extra fields."""

import json
import logging
from uuid import uuid4

from storefront.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "storefront.test", logging.INFO, __file__, 1, "Cart increment", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    data = json.loads(JSONFormatter().format(_record()))
    assert data["level"] == "INFO"
    assert data["logger"] == "storefront.test"
    assert data["message"] == "Cart increment"


def test_json_formatter_includes_extras():
    uid = uuid4()
    data = json.loads(JSONFormatter().format(_record(user_id=uid, slot=4, quantity=2)))
    assert data["user_id"] == str(uid)
    assert data["slot"] == 4
    assert data["quantity"] == 2
    assert "product_id" not in data
