"""Application services: Show Order and List Orders use cases (queries)."""

from __future__ import annotations

from stockroom.application.dto import OrderDTO, to_order_dto
from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.model.order import OrderStatus
from stockroom.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")
        return to_order_dto(order)


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, status: OrderStatus | None = None) -> list[OrderDTO]:
        """Return orders most recent first, optionally filtered by status."""
        return [
            to_order_dto(order)
            for order in self._order_repo.list_all()
            if status is None or order.status is status
        ]
