from django.contrib import admin

from products.models import Product, ProductRecipeItem


class ProductRecipeItemInline(admin.TabularInline):
    """
    Recipe lines edited directly within the Product admin page.
    """

    model = ProductRecipeItem
    extra = 1
    ordering = ("position",)


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "price", "owner")
    search_fields = ("name", "description")
    readonly_fields = ("id", "created_at", "updated_at")
    inlines = [ProductRecipeItemInline]
