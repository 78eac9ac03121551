from django.conf import settings
from django.db import models


class Earning(models.Model):
    vendor = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='earnings')
    # calendar day in LEDGER_TIME_ZONE
    date = models.DateField(db_index=True)
    total_earnings = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    sales = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-date']
        constraints = [
            # one row per vendor per day
            models.UniqueConstraint(fields=['vendor', 'date'], name='uniq_earning_per_vendor_day'),
        ]

    def __str__(self):
        return f'{self.vendor} {self.date}: {self.total_earnings} ({self.sales} sales)'


class Wallet(models.Model):
    vendor = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='wallets')
    date = models.DateField(db_index=True)
    balance = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    withdrawn = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-date']
        constraints = [
            models.UniqueConstraint(fields=['vendor', 'date'], name='uniq_wallet_per_vendor_day'),
        ]

    def __str__(self):
        return f'{self.vendor} {self.date}: {self.balance}'
