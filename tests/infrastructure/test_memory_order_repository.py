"""Tests for the in-memory order store."""

from datetime import datetime, timedelta, timezone

import pytest

from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.model.order import CustomerOrder, OrderItem, OrderStatus
from stockroom.domain.model.value_objects import Money, ProductState, Quantity
from stockroom.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)


def _order(customer: str = "Alice", qty: int = 1) -> CustomerOrder:
    item = OrderItem("1", "Widget", Quantity(qty), Money.of("10"), ProductState.RAW)
    return CustomerOrder.create(customer, "Walk-in", [item])


class TestAdd:

    def test_assigns_id_and_pending_status(self):
        repo = InMemoryOrderRepository()
        order = _order()
        order.status = OrderStatus.COMPLETED
        stored = repo.add(order)
        assert stored.id == 1
        assert stored.status == OrderStatus.PENDING

    def test_stamps_created_at(self):
        repo = InMemoryOrderRepository()
        order = _order()
        order.created_at = datetime(2000, 1, 1, tzinfo=timezone.utc)
        stored = repo.add(order)
        assert datetime.now(timezone.utc) - stored.created_at < timedelta(minutes=1)

    def test_most_recent_first(self):
        repo = InMemoryOrderRepository()
        repo.add(_order("Alice"))
        repo.add(_order("Bob"))
        assert [o.customer_name for o in repo.list_all()] == ["Bob", "Alice"]


class TestMutations:

    def test_set_status_changes_only_status(self):
        repo = InMemoryOrderRepository()
        stored = repo.add(_order())
        repo.set_status(stored.id, OrderStatus.COMPLETED)
        updated = repo.get_by_id(stored.id)
        assert updated.status == OrderStatus.COMPLETED
        assert updated.items == stored.items
        assert updated.created_at == stored.created_at

    def test_replace_items_and_header_keeps_status_and_timestamp(self):
        repo = InMemoryOrderRepository()
        stored = repo.add(_order())
        new_items = _order(qty=5).items
        repo.replace_items_and_header(stored.id, "Carol", "Events", new_items)
        updated = repo.get_by_id(stored.id)
        assert (updated.customer_name, updated.group) == ("Carol", "Events")
        assert updated.items == new_items
        assert updated.status == OrderStatus.PENDING
        assert updated.created_at == stored.created_at

    def test_delete(self):
        repo = InMemoryOrderRepository()
        stored = repo.add(_order())
        repo.delete(stored.id)
        assert repo.get_by_id(stored.id) is None

    @pytest.mark.parametrize("call", [
        lambda r: r.set_status(9, OrderStatus.COMPLETED),
        lambda r: r.replace_items_and_header(9, "A", "B", []),
        lambda r: r.delete(9),
    ])
    def test_unknown_id_rejected(self, call):
        with pytest.raises(NotFoundError, match="#9 not found"):
            call(InMemoryOrderRepository())

    def test_returned_orders_are_copies(self):
        repo = InMemoryOrderRepository()
        stored = repo.add(_order())
        repo.get_by_id(stored.id).status = OrderStatus.COMPLETED
        assert repo.get_by_id(stored.id).status == OrderStatus.PENDING
