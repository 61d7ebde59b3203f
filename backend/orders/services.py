import logging
from dataclasses import replace
from datetime import timedelta

from django.conf import settings
from django.utils import timezone

from core_backend.base.models import new_id
from core_backend.exceptions import DomainError, InvalidQuantity
from core_backend.utils.numbers import to_decimal
from orders.records import OrderData, OrderStatus
from orders.repositories import OrderRepository

logger = logging.getLogger(__name__)

MIN_DESCRIPTION_LENGTH = 5


class InvalidOrder(DomainError):
    """The order details are not valid."""

    code = "invalid_order"


class OrderNotFound(DomainError):
    """Order not found."""

    code = "order_not_found"
    status_code = 404


def default_deadline(now=None):
    now = now or timezone.now()
    return now + timedelta(days=settings.DEFAULT_ORDER_LEAD_DAYS)


def _validated_fields(customer_name, description, deadline, estimated_value, now):
    customer_name = (customer_name or "").strip()
    if not customer_name:
        raise InvalidOrder("Customer name is required.")

    description = (description or "").strip()
    if len(description) < MIN_DESCRIPTION_LENGTH:
        raise InvalidOrder(f"Description must have at least {MIN_DESCRIPTION_LENGTH} characters.")

    if deadline is None:
        deadline = default_deadline(now)
    elif deadline < now:
        raise InvalidOrder("The deadline cannot be in the past.")

    value = to_decimal(estimated_value if estimated_value not in (None, "") else 0)
    if value is None or value < 0:
        raise InvalidQuantity(estimated_value, field="estimated_value")

    return customer_name, description, deadline, value


class OrderService:
    """
    Operations on an orders snapshot. Each returns a new tuple of OrderData.
    """

    @staticmethod
    def create_order(orders, customer_name, description, deadline=None, estimated_value=0, now=None):
        """
        Add a new PENDING order.

        Raises:
            InvalidOrder: blank customer, short description or past deadline.
            InvalidQuantity: negative or non-numeric estimated value.
        """
        now = now or timezone.now()
        customer_name, description, deadline, value = _validated_fields(
            customer_name, description, deadline, estimated_value, now
        )
        order = OrderData(
            id=new_id(),
            customer_name=customer_name,
            description=description,
            deadline=deadline,
            status=OrderStatus.PENDING,
            estimated_value=value,
        )
        return tuple(orders) + (order,), order

    @staticmethod
    def update_order(orders, order_id, now=None, **changes):
        """
        Change customer, description, deadline or estimated value.

        A deadline that is already past is accepted only when it is not being
        changed.
        """
        now = now or timezone.now()
        current = OrderService.get_order(orders, order_id)

        deadline = changes.get("deadline", current.deadline)
        check_deadline = "deadline" in changes and deadline != current.deadline
        customer_name, description, deadline, value = _validated_fields(
            changes.get("customer_name", current.customer_name),
            changes.get("description", current.description),
            deadline if check_deadline else None,
            changes.get("estimated_value", current.estimated_value),
            now,
        )
        if not check_deadline:
            deadline = current.deadline

        updated = replace(
            current,
            customer_name=customer_name,
            description=description,
            deadline=deadline,
            estimated_value=value,
        )
        if "status" in changes:
            updated = updated.with_status(changes["status"])

        return OrderService._swap(orders, updated), updated

    @staticmethod
    def set_status(orders, order_id, status):
        """Any status can follow any other; there is no enforced workflow."""
        current = OrderService.get_order(orders, order_id)
        updated = current.with_status(status)
        logger.info(f"Order {current.id} status {current.status} -> {updated.status}")
        return OrderService._swap(orders, updated), updated

    @staticmethod
    def get_order(orders, order_id) -> OrderData:
        order_id = str(order_id)
        for order in orders:
            if order.id == order_id:
                return order
        raise OrderNotFound()

    @staticmethod
    def _swap(orders, updated):
        return tuple(updated if order.id == updated.id else order for order in orders)


class OrderManager:
    """Loads the account's orders, applies an OrderService change and saves."""

    def __init__(self, repository=None):
        self.repository = repository or OrderRepository()

    def create(self, scope_id, **fields) -> OrderData:
        orders, order = OrderService.create_order(self.repository.load_all(scope_id), **fields)
        self.repository.save_all(orders, scope_id)
        logger.info(f"Order {order.id} created for '{order.customer_name}' due {order.deadline:%Y-%m-%d}")
        return order

    def update(self, scope_id, order_id, **changes) -> OrderData:
        orders, order = OrderService.update_order(self.repository.load_all(scope_id), order_id, **changes)
        self.repository.save_all(orders, scope_id)
        return order

    def set_status(self, scope_id, order_id, status) -> OrderData:
        orders, order = OrderService.set_status(self.repository.load_all(scope_id), order_id, status)
        self.repository.save_all(orders, scope_id)
        return order
