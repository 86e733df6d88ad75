from django.core.management.base import BaseCommand

from applications.services.application_service import ApplicationService
from applications.stores.django_store import DjangoApplicationStore
from events.stores.django_store import DjangoEventStore


class Command(BaseCommand):
    help = "Mark confirmed applications as completed once their event has ended."

    def handle(self, *args, **options):
        service = ApplicationService(DjangoApplicationStore(), DjangoEventStore())
        completed = service.complete_elapsed()
        self.stdout.write(self.style.SUCCESS(f"Completed {len(completed)} applications"))
