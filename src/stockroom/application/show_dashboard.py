"""Application services: dashboard statistics and the group sales report."""

from __future__ import annotations

from dataclasses import dataclass

from stockroom.domain.model.order import OrderStatus
from stockroom.domain.model.product import LOW_STOCK_THRESHOLD
from stockroom.domain.model.value_objects import Money
from stockroom.domain.repository.order_repository import OrderRepository
from stockroom.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class DashboardDTO:
    product_count: int
    units_on_hand: int
    stock_value: str
    low_stock_count: int
    out_of_stock_count: int
    pending_orders: int
    completed_orders: int


@dataclass(frozen=True)
class CustomerTotalDTO:
    customer_name: str
    total: str


@dataclass(frozen=True)
class GroupReportDTO:
    group: str
    total: str
    customers: list[CustomerTotalDTO]


class ShowDashboardHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo

    def handle(self, threshold: int = LOW_STOCK_THRESHOLD) -> DashboardDTO:
        products = self._product_repo.list_all()
        orders = self._order_repo.list_all()

        stock_value = Money.zero()
        for product in products:
            stock_value = stock_value + product.stock_value

        return DashboardDTO(
            product_count=len(products),
            units_on_hand=sum(p.quantity for p in products),
            stock_value=str(stock_value),
            low_stock_count=sum(1 for p in products if p.is_low_stock(threshold)),
            out_of_stock_count=sum(1 for p in products if p.quantity == 0),
            pending_orders=sum(1 for o in orders if o.status is OrderStatus.PENDING),
            completed_orders=sum(1 for o in orders if o.status is OrderStatus.COMPLETED),
        )


class GroupReportHandler:
    """Completed-order revenue per group, broken down by customer.

    Groups and customers are sorted by total, largest first.
    """

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[GroupReportDTO]:
        by_group: dict[str, dict[str, Money]] = {}
        for order in self._order_repo.list_all():
            if order.status is not OrderStatus.COMPLETED:
                continue
            customers = by_group.setdefault(order.group, {})
            customers[order.customer_name] = (
                customers.get(order.customer_name, Money.zero()) + order.total
            )

        groups: list[tuple[str, Money, list[tuple[str, Money]]]] = []
        for group, customers in by_group.items():
            group_total = Money.zero()
            for total in customers.values():
                group_total = group_total + total
            ranked = sorted(customers.items(), key=lambda kv: kv[1], reverse=True)
            groups.append((group, group_total, ranked))
        groups.sort(key=lambda g: g[1], reverse=True)

        return [
            GroupReportDTO(
                group=group,
                total=str(group_total),
                customers=[
                    CustomerTotalDTO(customer_name=name, total=str(total))
                    for name, total in ranked
                ],
            )
            for group, group_total, ranked in groups
        ]
