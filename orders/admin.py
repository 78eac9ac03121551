from django.contrib import admin

from .models import Order, OrderItem
from .services import set_item_status


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ('unit_price',)


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ('id', 'customer', 'vendor', 'payment_status', 'total_price', 'tax', 'created_at', 'paid_at')
    list_filter = ('payment_status', 'created_at', 'paid_at')
    search_fields = ('customer__username', 'customer__email', 'vendor__username')
    readonly_fields = ('paid_at',)
    inlines = [OrderItemInline]


def _status_action(status, label):
    @admin.action(description=f"Mark as {label.lower()} (notifies customer)")
    def action(modeladmin, request, queryset):
        changed = 0
        for item in queryset.select_related('order__customer'):
            if set_item_status(item, status):
                changed += 1
        modeladmin.message_user(request, f"Items updated: {changed}")
    action.__name__ = f"mark_{status}"
    return action


@admin.register(OrderItem)
class OrderItemAdmin(admin.ModelAdmin):
    list_display = ('id', 'order', 'name', 'quantity', 'unit_price', 'status')
    list_filter = ('status',)
    search_fields = ('name', 'order__id')
    actions = [_status_action(value, label) for value, label in OrderItem.Status.choices]
