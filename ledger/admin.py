from django.contrib import admin
from .models import Earning, Wallet


@admin.register(Earning)
class EarningAdmin(admin.ModelAdmin):
    list_display = ('vendor', 'date', 'total_earnings', 'sales', 'updated_at')
    list_filter = ('date',)
    search_fields = ('vendor__username', 'vendor__email')
    readonly_fields = ('total_earnings', 'sales')


@admin.register(Wallet)
class WalletAdmin(admin.ModelAdmin):
    list_display = ('vendor', 'date', 'balance', 'withdrawn', 'updated_at')
    list_filter = ('withdrawn', 'date')
    search_fields = ('vendor__username', 'vendor__email')
    readonly_fields = ('balance',)
