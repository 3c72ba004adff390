"""Abstract repository for the CustomerOrder aggregate (the order store)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockroom.domain.model.order import CustomerOrder, OrderItem, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> CustomerOrder | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[CustomerOrder]:
        """Return every order, most recent first."""

    @abstractmethod
    def add(self, order: CustomerOrder) -> CustomerOrder:
        """Store a new order as PENDING, stamped with the current time."""

    @abstractmethod
    def set_status(self, order_id: int, status: OrderStatus) -> None:
        """Replace only the status field. Never touches stock."""

    @abstractmethod
    def replace_items_and_header(
        self,
        order_id: int,
        customer_name: str,
        group: str,
        items: list[OrderItem],
    ) -> None:
        """Replace customer name, group and items; keep status and created_at."""

    @abstractmethod
    def delete(self, order_id: int) -> None:
        """Remove an order. Never restocks."""
