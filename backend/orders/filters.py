import django_filters

from orders.models import Order
from orders.records import OrderStatus


class OrderFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=OrderStatus.choices)
    deadline__gte = django_filters.DateTimeFilter(field_name="deadline", lookup_expr="gte")
    deadline__lte = django_filters.DateTimeFilter(field_name="deadline", lookup_expr="lte")

    class Meta:
        model = Order
        fields = ["status"]
