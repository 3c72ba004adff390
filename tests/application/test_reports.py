"""Integration tests for the dashboard and group report."""

from stockroom.application.complete_order import CompleteOrderHandler
from stockroom.application.create_order import CreateOrderHandler
from stockroom.application.dto import OrderItemSpec
from stockroom.application.show_dashboard import GroupReportHandler, ShowDashboardHandler
from stockroom.domain.model.value_objects import ProductState
from tests.fakes import make_stores

RAW = ProductState.RAW


def _setup():
    products, orders = make_stores(("Widget", 30), ("Gadget", 8), ("Gizmo", 0))
    create = CreateOrderHandler(orders, products)
    complete = CompleteOrderHandler(orders)

    def place(customer, group, qty, done=True):
        dto = create.handle(customer, group, [OrderItemSpec("1", RAW, qty)])
        if done:
            complete.handle(dto.id)

    place("Alice", "Walk-in", 1)
    place("Bob", "Restaurant", 5)
    place("Carol", "Restaurant", 2)
    place("Carol", "Restaurant", 2)
    place("Dave", "Walk-in", 3, done=False)
    return products, orders


class TestDashboard:

    def test_figures(self):
        products, orders = _setup()
        dto = ShowDashboardHandler(products, orders).handle()
        assert dto.product_count == 3
        assert dto.units_on_hand == 17 + 8
        assert dto.stock_value == "2,500 VND"
        assert dto.low_stock_count == 1
        assert dto.out_of_stock_count == 1
        assert dto.pending_orders == 1
        assert dto.completed_orders == 4


class TestGroupReport:

    def test_groups_sorted_by_total(self):
        _, orders = _setup()
        report = GroupReportHandler(orders).handle()

        assert [g.group for g in report] == ["Restaurant", "Walk-in"]
        restaurant, walk_in = report
        assert restaurant.total == "900 VND"
        assert [(c.customer_name, c.total) for c in restaurant.customers] == [
            ("Bob", "500 VND"),
            ("Carol", "400 VND"),
        ]
        # Dave's order is still pending, so only Alice counts
        assert walk_in.total == "100 VND"

    def test_empty_when_nothing_completed(self):
        _, orders = make_stores(("Widget", 1))
        assert GroupReportHandler(orders).handle() == []
