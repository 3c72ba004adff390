"""AdvisoryService backed by the OpenAI chat completions API.

Any API failure is logged and turned into a fixed fallback string; a
missing API key short-circuits to the "not configured" text without
building a client.
"""

from __future__ import annotations

import logging

from openai import OpenAI, OpenAIError

from stockroom.application.advisory import (
    DESCRIPTION_FAILED_TEXT,
    NOT_CONFIGURED_TEXT,
    NOTHING_TO_RESTOCK_TEXT,
    RESTOCK_FAILED_TEXT,
    AdvisoryService,
)
from stockroom.domain.model.product import Product

logger = logging.getLogger(__name__)


DESCRIPTION_PROMPT = """Write an appealing, concise product description for a shop item.
- Product name: {name}
- Category: {category}
- Keywords: {keywords}

The description must be professional and suitable for an e-commerce listing.
Do not repeat the product name or category. Write only the description."""

RESTOCK_PROMPT = """You are an inventory management expert. Review the following
items that are running low and suggest which ones should be restocked first.

Low-stock items:
{items}

Reply with a short, professional summary of 2-3 sentences focused on the key
recommendations."""


class OpenAIAdvisoryService(AdvisoryService):

    def __init__(
        self,
        api_key: str = "",
        model: str = "gpt-4o-mini",
        client: OpenAI | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._client = client

    def generate_description(self, name: str, category: str, keywords: str) -> str:
        prompt = DESCRIPTION_PROMPT.format(name=name, category=category, keywords=keywords)
        return self._complete(
            prompt,
            temperature=0.7,
            max_tokens=150,
            fallback=DESCRIPTION_FAILED_TEXT,
        )

    def suggest_restock(self, low_stock_items: list[Product]) -> str:
        if self._get_client() is None:
            return NOT_CONFIGURED_TEXT
        if not low_stock_items:
            return NOTHING_TO_RESTOCK_TEXT

        items = "\n".join(
            f"- {p.name} (remaining: {p.quantity}, price: {p.price_raw})"
            for p in low_stock_items
        )
        return self._complete(
            RESTOCK_PROMPT.format(items=items),
            temperature=0.5,
            max_tokens=200,
            fallback=RESTOCK_FAILED_TEXT,
        )

    # --- Internal helpers -----------------------------------------------------

    def _get_client(self) -> OpenAI | None:
        if self._client is None and self._api_key:
            self._client = OpenAI(api_key=self._api_key)
        if self._client is None:
            logger.warning("No OpenAI API key set; advisory features are unavailable")
        return self._client

    def _complete(
        self,
        prompt: str,
        temperature: float,
        max_tokens: int,
        fallback: str,
    ) -> str:
        client = self._get_client()
        if client is None:
            return NOT_CONFIGURED_TEXT

        try:
            response = client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                max_tokens=max_tokens,
            )
            message = response.choices[0].message if response.choices else None
            content = message.content if message is not None else None
        except OpenAIError as exc:
            logger.warning("Advisory request failed: %s", exc)
            return fallback
        except Exception:
            logger.exception("Unexpected advisory failure")
            return fallback

        return (content or "").strip()
