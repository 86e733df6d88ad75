"""Django signals creating a profile for every new account."""

import logging

from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from accounts.models import Profile

logger = logging.getLogger(__name__)


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_profile_for_new_user(sender, instance, created, **kwargs):
    """Create the profile that shares the new user's identifier."""
    if not created:
        return
    Profile.objects.get_or_create(
        user=instance,
        defaults={
            "email": instance.email,
            "name": instance.get_full_name() or instance.get_username(),
            "is_admin": instance.is_staff,
        },
    )
    logger.info(f"Profile created for user {instance.pk}")
