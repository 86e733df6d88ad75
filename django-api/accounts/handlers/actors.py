from rest_framework.request import Request

from accounts.domain import Actor, UserId
from accounts.services.profile_service import ProfileService
from accounts.stores.django_store import DjangoProfileStore


def current_user_id(request: Request) -> UserId:
    return UserId(request.user.pk)


def current_actor(request: Request) -> Actor:
    """Resolve the authenticated user into a service Actor."""
    return ProfileService(DjangoProfileStore()).actor_for(current_user_id(request))
