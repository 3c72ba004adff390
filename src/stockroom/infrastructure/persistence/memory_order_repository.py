"""In-memory implementation of OrderRepository.

Orders are kept most recent first, which is the order the CLI lists
them in.  As with the product repository, everything handed out is a
copy.
"""

from __future__ import annotations

from copy import deepcopy
from datetime import datetime, timezone

from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.model.order import CustomerOrder, OrderItem, OrderStatus
from stockroom.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._orders: list[CustomerOrder] = []
        self._next_id = 1

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> CustomerOrder | None:
        for order in self._orders:
            if order.id == order_id:
                return deepcopy(order)
        return None

    def list_all(self) -> list[CustomerOrder]:
        return [deepcopy(o) for o in self._orders]

    def add(self, order: CustomerOrder) -> CustomerOrder:
        stored = deepcopy(order)
        stored.id = self._next_id
        stored.status = OrderStatus.PENDING
        stored.created_at = datetime.now(timezone.utc)
        self._next_id += 1
        self._orders.insert(0, stored)
        return deepcopy(stored)

    def set_status(self, order_id: int, status: OrderStatus) -> None:
        self._require(order_id).status = status

    def replace_items_and_header(
        self,
        order_id: int,
        customer_name: str,
        group: str,
        items: list[OrderItem],
    ) -> None:
        order = self._require(order_id)
        order.customer_name = customer_name
        order.group = group
        order.items = list(items)

    def delete(self, order_id: int) -> None:
        order = self._require(order_id)
        self._orders.remove(order)

    # --- Internal helpers -----------------------------------------------------

    def _require(self, order_id: int) -> CustomerOrder:
        for order in self._orders:
            if order.id == order_id:
                return order
        raise NotFoundError(f"Order #{order_id} not found")
