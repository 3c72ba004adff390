"""Application service: Delete Order use case.

Deleting an order does not return its stock, pending or not.  Whether a
pending order's reservation should be released on delete is an open
product decision; until it is made the reservation stays consumed and a
warning is logged so the gap is visible.
"""

from __future__ import annotations

import logging

from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        if order.is_pending:
            logger.warning(
                "Deleting pending order #%s without releasing its reservation: %s",
                order_id, order.reserved_quantities(),
            )

        self._order_repo.delete(order_id)
        logger.info("Deleted order #%s", order_id)
