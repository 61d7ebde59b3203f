from core_backend.repositories import ScopedRepository
from sales.models import Sale


class SaleRepository(ScopedRepository):
    model = Sale
    collection = "sales"
    ordering = ("-date", "-created_at")

    def to_snapshot(self, row):
        return row.to_data()

    def to_fields(self, snapshot):
        return {
            "date": snapshot.date,
            "customer_name": snapshot.customer_name,
            "description": snapshot.description,
            "total_value": snapshot.total_value,
        }
