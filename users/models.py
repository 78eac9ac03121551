from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    email = models.EmailField("Email", unique=True)
    phone = models.CharField("Phone", max_length=20, blank=True)
    # vendors receive earnings / wallet credit for paid orders
    is_vendor = models.BooleanField("Vendor", default=False)
    is_verified = models.BooleanField("Email verified", default=False)

    # one-time links sent by email
    verify_token = models.CharField(max_length=64, blank=True, db_index=True)
    verify_token_expiry = models.DateTimeField(blank=True, null=True)
    reset_token = models.CharField(max_length=64, blank=True, db_index=True)
    reset_token_expiry = models.DateTimeField(blank=True, null=True)

    def __str__(self):
        return self.username
