from django.contrib import admin

from modules.products.models import Category, Product, Supplier


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "created_at")
    search_fields = ("name",)


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "price", "quantity_in_stock", "category")
    list_filter = ("category",)
    search_fields = ("name",)
    # Stock moves only through orders.
    readonly_fields = ("id", "quantity_in_stock", "created_at", "updated_at")

    def get_readonly_fields(self, request, obj=None):
        if obj is None:
            return ("id", "created_at", "updated_at")
        return self.readonly_fields


@admin.register(Supplier)
class SupplierAdmin(admin.ModelAdmin):
    list_display = ("name", "contact")
    search_fields = ("name", "contact")
