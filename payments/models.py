from django.conf import settings
from django.db import models


class Payment(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='payments')
    order = models.ForeignKey('orders.Order', on_delete=models.PROTECT, related_name='payments',
                              null=True, blank=True)
    razorpay_order_id = models.CharField(max_length=64, db_index=True)
    razorpay_payment_id = models.CharField(max_length=64)
    razorpay_signature = models.CharField(max_length=128)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        constraints = [
            # a repeated callback for the same id pair is rejected by the database
            models.UniqueConstraint(
                fields=['razorpay_order_id', 'razorpay_payment_id'],
                name='uniq_razorpay_order_payment',
            )
        ]

    def __str__(self):
        return f'razorpay:{self.razorpay_order_id}/{self.razorpay_payment_id}'
