from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver

from core.mail import send_quietly
from .models import User
from .services import VERIFY, send_account_email


# Verification email for new users, sent once the row is committed
@receiver(post_save, sender=User)
def on_user_created(sender, instance, created, **kwargs):
    if not created or instance.is_verified or not instance.email:
        return
    transaction.on_commit(lambda: send_quietly(send_account_email, instance, VERIFY))
