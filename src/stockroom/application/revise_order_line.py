"""Application service: revise a single line of a pending order.

Starts from the order's current lines, changes the quantity and/or the
variant of one of them, and commits the result through the Edit Order
use case so the reservation is swapped the same way.
"""

from __future__ import annotations

from stockroom.application.dto import OrderDTO
from stockroom.application.edit_order import EditOrderHandler
from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.model.draft import OrderDraft
from stockroom.domain.model.value_objects import ProductState
from stockroom.domain.repository.order_repository import OrderRepository
from stockroom.domain.repository.product_repository import ProductRepository


class ReviseOrderLineHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(
        self,
        order_id: int,
        line_number: int,
        quantity: int | None = None,
        state: ProductState | None = None,
    ) -> OrderDTO:
        """Revise line *line_number* (1-based) of the order.

        A quantity of zero drops the line.  Switching the variant re-prices
        the line from the catalog and merges it into an existing line for
        the same product and variant.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")
        order.ensure_editable()

        draft = OrderDraft.from_items(order.items)
        index = line_number - 1
        if quantity is not None:
            draft.set_quantity(index, quantity)
        if state is not None and quantity != 0:
            line = draft.line_at(index)
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise NotFoundError(f"Product with ID '{line.product_id}' not found")
            draft.change_state(index, state, product)

        editor = EditOrderHandler(self._order_repo, self._product_repo)
        return editor.handle_draft(order_id, order.customer_name, order.group, draft)
