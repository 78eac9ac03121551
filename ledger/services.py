# ledger/services.py
from decimal import Decimal
from zoneinfo import ZoneInfo

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from .models import Earning, Wallet


def ledger_day(now=None):
    """Calendar date of `now` (default: current time) in LEDGER_TIME_ZONE."""
    return timezone.localdate(now, timezone=ZoneInfo(settings.LEDGER_TIME_ZONE))


def _accumulate(model, vendor, day, increments: dict, initial: dict):
    """
    Adds `increments` to the (vendor, day) row with a single UPDATE,
    creating the row from `initial` if there is none yet.
    """
    def bump():
        changes = {field: F(field) + value for field, value in increments.items()}
        return model.objects.filter(vendor=vendor, date=day).update(updated_at=timezone.now(), **changes)

    if bump():
        return
    try:
        with transaction.atomic():
            model.objects.create(vendor=vendor, date=day, **initial)
    except IntegrityError:
        # a concurrent request created today's row first
        bump()


@transaction.atomic
def credit_vendor(vendor, amount: Decimal, *, today=None):
    """
    Credits a sale of `amount` to the vendor's earnings and wallet for `today`.
    Returns the (Earning, Wallet) rows after the update.
    """
    day = today or ledger_day()
    amount = Decimal(amount)

    _accumulate(Earning, vendor, day,
                increments={'total_earnings': amount, 'sales': 1},
                initial={'total_earnings': amount, 'sales': 1})
    _accumulate(Wallet, vendor, day,
                increments={'balance': amount},
                initial={'balance': amount, 'withdrawn': False})

    return (Earning.objects.get(vendor=vendor, date=day),
            Wallet.objects.get(vendor=vendor, date=day))
