from django.contrib import admin

from modules.orders.models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Read-only view of orders.

    Changes go through the API so that stock stays consistent.
    """

    list_display = ("id", "customer", "product", "quantity", "created_at")
    list_select_related = ("customer", "product")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
