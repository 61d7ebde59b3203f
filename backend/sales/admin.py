from django.contrib import admin

from sales.models import Sale


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    list_display = ("date", "customer_name", "total_value", "owner")
    search_fields = ("customer_name", "description")
    date_hierarchy = "date"
    readonly_fields = ("id", "created_at", "updated_at")
