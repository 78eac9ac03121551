from django.contrib import admin
from .models import Payment

@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ('razorpay_payment_id', 'razorpay_order_id', 'order', 'user', 'created_at')
    search_fields = ('razorpay_payment_id', 'razorpay_order_id', 'order__id', 'user__email')
    list_filter = ('created_at',)
    readonly_fields = ('user', 'order', 'razorpay_order_id', 'razorpay_payment_id', 'razorpay_signature', 'created_at')
