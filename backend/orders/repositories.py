from core_backend.repositories import ScopedRepository
from orders.models import Order


class OrderRepository(ScopedRepository):
    model = Order
    collection = "orders"
    ordering = ("deadline",)

    def to_snapshot(self, row):
        return row.to_data()

    def to_fields(self, snapshot):
        return {
            "customer_name": snapshot.customer_name,
            "description": snapshot.description,
            "deadline": snapshot.deadline,
            "status": snapshot.status,
            "estimated_value": snapshot.estimated_value,
        }
