"""
Sale finalization and the sales summary.
"""
import logging
from dataclasses import dataclass, field, replace
from datetime import date as date_type, datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from core_backend.exceptions import DomainError, InvalidQuantity
from core_backend.utils.numbers import to_positive_decimal
from inventory.repositories import InventoryRepository
from inventory.services import DeductionReport, InventoryService
from products.repositories import ProductRepository
from sales.cart import MAX_QUANTITY, MAX_UNIT_PRICE, CartEntryKind, cart_total, describe_cart
from sales.records import SaleData
from sales.repositories import SaleRepository

logger = logging.getLogger(__name__)

MIN_CUSTOMER_NAME_LENGTH = 2
MAX_SALE_TOTAL = MAX_UNIT_PRICE


class InvalidSale(DomainError):
    """The sale cannot be registered."""

    code = "invalid_sale"


@dataclass
class SaleResult:
    sale: SaleData
    deduction: DeductionReport


@dataclass
class SalesSummary:
    total_revenue: Decimal = Decimal("0")
    sales_count: int = 0
    last_sale_date: Optional[datetime] = None
    daily_totals: List[Tuple[date_type, Decimal]] = field(default_factory=list)


def validate_customer_name(customer_name) -> str:
    customer_name = (customer_name or "").strip()
    if len(customer_name) < MIN_CUSTOMER_NAME_LENGTH:
        raise InvalidSale("Customer name must have at least 2 characters.")
    return customer_name


def price_cart(cart, products, inventory):
    """
    Fill in names and unit prices the cart entries do not carry yet.

    Product entries default to the product's current price; entries whose
    product or item no longer exists keep what they have.
    """
    products_by_id = {product.id: product for product in products}
    items_by_id = {item.id: item for item in inventory}
    priced = []

    for entry in cart:
        if entry.kind == CartEntryKind.PRODUCT:
            product = products_by_id.get(entry.reference_id)
            if product is not None:
                entry = replace(
                    entry,
                    name=entry.name or product.name,
                    unit_price=product.price if entry.unit_price is None else entry.unit_price,
                )
        else:
            item = items_by_id.get(entry.reference_id)
            if item is not None and not entry.name:
                entry = replace(entry, name=item.name)
        priced.append(entry)

    return tuple(priced)


def compose_sale(inventory, products, cart, customer_name, notes="", date=None) -> SaleResult:
    """
    Turn a cart into a sale and the inventory it leaves behind.

    Pure: nothing is loaded or saved. Validation happens before any
    deduction is computed.

    Raises:
        InvalidSale: customer name too short or empty cart.
        InvalidQuantity: an entry quantity is not positive or too large, or
            the total does not fit a sale record.
    """
    customer_name = validate_customer_name(customer_name)
    cart = tuple(cart)
    if not cart:
        raise InvalidSale("The cart is empty.")
    for entry in cart:
        amount = to_positive_decimal(entry.quantity)
        if amount is None or amount > MAX_QUANTITY:
            raise InvalidQuantity(entry.quantity)

    cart = price_cart(cart, products, inventory)
    total = cart_total(cart)
    if total > MAX_SALE_TOTAL:
        raise InvalidQuantity(total, field="total_value")

    report = InventoryService.deduct_for_sale(inventory, products, cart)
    sale = SaleData.create(
        customer_name=customer_name,
        description=describe_cart(cart, notes),
        total_value=total,
        date=date or timezone.now(),
    )
    return SaleResult(sale=sale, deduction=report)


def summarize_sales(sales, days=None) -> SalesSummary:
    """
    Revenue, count, most recent sale and per-day totals.

    ``daily_totals`` covers the last ``days`` dates that have sales, oldest
    first, grouped by local calendar date.
    """
    if days is None:
        days = settings.SALES_CHART_DAYS

    summary = SalesSummary()
    per_day = {}
    for sale in sales:
        summary.total_revenue += sale.total_value
        summary.sales_count += 1
        if summary.last_sale_date is None or sale.date > summary.last_sale_date:
            summary.last_sale_date = sale.date

        day = timezone.localdate(sale.date) if timezone.is_aware(sale.date) else sale.date.date()
        per_day[day] = per_day.get(day, Decimal("0")) + sale.total_value

    ordered = sorted(per_day.items())
    summary.daily_totals = ordered[-days:] if days > 0 else []
    return summary


class SaleService:
    """
    Loads and saves the collections a sale touches.

    Repositories can be swapped out in tests.
    """

    def __init__(self, inventory_repository=None, product_repository=None, sale_repository=None):
        self.inventory_repository = inventory_repository or InventoryRepository()
        self.product_repository = product_repository or ProductRepository()
        self.sale_repository = sale_repository or SaleRepository()

    def finalize_sale(self, scope_id, customer_name, entries, notes="", date=None) -> SaleResult:
        """
        Finalize a cart: deduct stock, record the sale and save both.

        The inventory and the sales list are saved together; if either save
        fails nothing is written and PersistenceError is raised.
        """
        inventory = self.inventory_repository.load_all(scope_id)
        products = self.product_repository.load_all(scope_id)

        result = compose_sale(inventory, products, entries, customer_name, notes, date)

        sales = self.sale_repository.load_all(scope_id)
        with transaction.atomic():
            self.inventory_repository.save_all(result.deduction.inventory, scope_id)
            self.sale_repository.save_all([result.sale] + sales, scope_id)

        logger.info(
            f"Sale {result.sale.id} finalized for '{result.sale.customer_name}': "
            f"{result.sale.total_value} ({len(result.deduction.movements)} stock movements)"
        )
        return result

    def register_sale(self, scope_id, customer_name, description, total_value, date=None) -> SaleData:
        """
        Record a sale typed in by hand. Stock is not touched.
        """
        customer_name = validate_customer_name(customer_name)
        description = (description or "").strip()
        if not description:
            raise InvalidSale("Describe what was sold.")

        total = to_positive_decimal(total_value)
        if total is None or total > MAX_SALE_TOTAL:
            raise InvalidQuantity(total_value, field="total_value")

        sale = SaleData.create(
            customer_name=customer_name,
            description=description,
            total_value=total,
            date=date or timezone.now(),
        )
        sales = self.sale_repository.load_all(scope_id)
        self.sale_repository.save_all([sale] + sales, scope_id)

        logger.info(f"Manual sale {sale.id} registered for '{customer_name}': {total}")
        return sale

    def summary(self, scope_id, days=None) -> SalesSummary:
        return summarize_sales(self.sale_repository.load_all(scope_id), days)
