"""Django signals for cache invalidation."""

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.cache import invalidate_event
from events.models import Event, TimePart


def invalidate_now_and_on_commit(event_id) -> None:
    """Drop the keys immediately and again once the write commits.

    A read between the two can refill the cache from the pre-commit row.
    """
    invalidate_event(event_id)
    transaction.on_commit(lambda: invalidate_event(event_id))


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    invalidate_now_and_on_commit(instance.id)


@receiver([post_save, post_delete], sender=TimePart)
def invalidate_time_part_cache(sender, instance, **kwargs):
    """Invalidate caches when a time part is saved or deleted."""
    invalidate_now_and_on_commit(instance.event_id)
