from django.contrib import admin

from orders.models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("customer_name", "deadline", "status", "estimated_value", "owner")
    list_filter = ("status",)
    search_fields = ("customer_name", "description")
    readonly_fields = ("id", "created_at", "updated_at")
