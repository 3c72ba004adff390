"""Application service: Complete Order use case.

Completion is a pure status flip.  Stock was committed when the order
was created or last edited, so nothing is restocked or deducted here.
"""

from __future__ import annotations

import logging

from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CompleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        order.complete()
        self._order_repo.set_status(order_id, order.status)
        logger.info("Completed order #%s", order_id)
