"""Tests for the OpenAI-backed advisory service, using a fake client."""

import logging

import httpx
import openai

from stockroom.application.advisory import (
    DESCRIPTION_FAILED_TEXT,
    NOT_CONFIGURED_TEXT,
    NOTHING_TO_RESTOCK_TEXT,
    RESTOCK_FAILED_TEXT,
)
from stockroom.infrastructure.advisory.openai_advisory_service import (
    OpenAIAdvisoryService,
)
from tests.fakes import FakeOpenAIClient, make_product


def _connection_error() -> openai.APIConnectionError:
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    return openai.APIConnectionError(request=request)


class TestNotConfigured:

    def test_description_without_key(self):
        svc = OpenAIAdvisoryService(api_key="")
        assert svc.generate_description("Tea", "Beverages", "") == NOT_CONFIGURED_TEXT

    def test_restock_without_key(self):
        svc = OpenAIAdvisoryService(api_key="")
        assert svc.suggest_restock([make_product(quantity=2)]) == NOT_CONFIGURED_TEXT


class TestGenerateDescription:

    def test_returns_trimmed_reply(self):
        client = FakeOpenAIClient(reply="  Fresh and fragrant.  ")
        svc = OpenAIAdvisoryService(model="test-model", client=client)
        assert svc.generate_description("Tea", "Beverages", "organic") == "Fresh and fragrant."
        call = client.calls[0]
        assert call["model"] == "test-model"
        assert "Tea" in call["messages"][0]["content"]
        assert "organic" in call["messages"][0]["content"]

    def test_empty_reply_becomes_empty_string(self):
        svc = OpenAIAdvisoryService(client=FakeOpenAIClient(reply=None))
        assert svc.generate_description("Tea", "Beverages", "") == ""

    def test_api_error_returns_fallback(self):
        svc = OpenAIAdvisoryService(client=FakeOpenAIClient(error=_connection_error()))
        assert svc.generate_description("Tea", "Beverages", "") == DESCRIPTION_FAILED_TEXT

    def test_unexpected_client_error_returns_fallback(self, caplog):
        svc = OpenAIAdvisoryService(client=FakeOpenAIClient(error=RuntimeError("boom")))
        with caplog.at_level(logging.ERROR):
            assert svc.generate_description("Tea", "Beverages", "") == DESCRIPTION_FAILED_TEXT
        assert "Unexpected advisory failure" in caplog.text

    def test_missing_message_becomes_empty_string(self):
        svc = OpenAIAdvisoryService(client=FakeOpenAIClient(drop_message=True))
        assert svc.generate_description("Tea", "Beverages", "") == ""


class TestSuggestRestock:

    def test_lists_items_in_prompt(self):
        client = FakeOpenAIClient(reply="Reorder bread first.")
        svc = OpenAIAdvisoryService(client=client)
        text = svc.suggest_restock([make_product("Bread", quantity=3)])
        assert text == "Reorder bread first."
        assert "Bread (remaining: 3" in client.calls[0]["messages"][0]["content"]

    def test_nothing_low_skips_api_call(self):
        client = FakeOpenAIClient(reply="unused")
        svc = OpenAIAdvisoryService(client=client)
        assert svc.suggest_restock([]) == NOTHING_TO_RESTOCK_TEXT
        assert client.calls == []

    def test_api_error_returns_fallback(self):
        svc = OpenAIAdvisoryService(client=FakeOpenAIClient(error=_connection_error()))
        assert svc.suggest_restock([make_product(quantity=1)]) == RESTOCK_FAILED_TEXT

    def test_unexpected_client_error_returns_fallback(self):
        svc = OpenAIAdvisoryService(client=FakeOpenAIClient(error=RuntimeError("boom")))
        assert svc.suggest_restock([make_product(quantity=1)]) == RESTOCK_FAILED_TEXT

    def test_missing_message_becomes_empty_string(self):
        svc = OpenAIAdvisoryService(client=FakeOpenAIClient(drop_message=True))
        assert svc.suggest_restock([make_product(quantity=1)]) == ""
