"""Tests for the function entry points"""

import json
from datetime import datetime, timedelta, timezone

import pytest

from app.handlers import health, insight
from app.services.sales_analyzer import INSIGHT_DEFAULT, INSIGHT_SHOES


def _body(response):
    return json.loads(response["body"])


def test_insight_handler_answers_question():
    response = insight.handler({"queryStringParameters": {"question": "How are Shoes doing?"}})
    assert response["statusCode"] == 200
    assert _body(response) == {"question": "how are shoes doing?", "insight": INSIGHT_SHOES}


@pytest.mark.parametrize(
    "event",
    [
        {},
        None,
        {"queryStringParameters": None},
        {"queryStringParameters": {}},
        {"queryStringParameters": {"question": None}},
        {"queryStringParameters": {"question": 7}},
        {"queryStringParameters": "question=shoes"},
    ],
)
def test_insight_handler_without_usable_question(event):
    response = insight.handler(event)
    assert response["statusCode"] == 200
    assert _body(response) == {"question": "", "insight": INSIGHT_DEFAULT}


def test_insight_handler_is_idempotent():
    event = {"queryStringParameters": {"question": "sales trend"}}
    assert insight.handler(event) == insight.handler(event)


def test_health_handler_fixed_fields():
    for event in ({}, None, {"queryStringParameters": {"question": "shoes"}}):
        response = health.handler(event)
        assert response["statusCode"] == 200
        body = _body(response)
        assert body["message"] == "Retail Intelligence API is running 🚀"
        assert body["region"] == "ap-south-1"


def test_health_handler_timestamp_is_current():
    body = _body(health.handler({}))
    timestamp = datetime.fromisoformat(body["timestamp"])
    assert timestamp.tzinfo is not None
    assert abs(datetime.now(timezone.utc) - timestamp) < timedelta(seconds=5)


def test_handlers_are_separate_entry_points():
    assert insight.handler is not health.handler
    assert "insight" in _body(insight.handler({}))
    assert "region" in _body(health.handler({}))
