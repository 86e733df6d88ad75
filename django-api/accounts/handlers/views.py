"""HTTP handlers for accounts, profiles and photo uploads."""

import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.parsers import MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.domain import UserId
from accounts.domain.forms import ProfileUpdate
from accounts.handlers.actors import current_user_id
from accounts.handlers.serializers import ProfileSerializer, ProfileUpdateInput, SignUpInput
from accounts.services.profile_service import PhotoService, ProfileService
from accounts.stores.django_store import DjangoPhotoStorage, DjangoProfileStore
from common.domain.errors import ValidationError
from common.handlers.parsing import parse

logger = logging.getLogger(__name__)


def profile_service() -> ProfileService:
    return ProfileService(DjangoProfileStore())


class SignUpView(APIView):
    """Handler for POST /api/auth/signup"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        data = parse(SignUpInput, request.data)
        user_model = get_user_model()
        if user_model.objects.filter(email__iexact=data["email"]).exists():
            raise ValidationError.single("email", "An account with this email already exists")
        user = user_model.objects.create_user(
            username=data["email"],
            email=data["email"],
            password=data["password"],
            first_name=data["name"],
        )
        logger.info(f"User {user.pk} signed up")
        profile = profile_service().get_profile(UserId(user.pk))
        return Response(ProfileSerializer(profile).data, status=status.HTTP_201_CREATED)


class MyProfileView(APIView):
    """Handler for GET/PATCH /api/me/profile"""

    def get(self, request: Request) -> Response:
        profile = profile_service().get_profile(current_user_id(request))
        return Response(ProfileSerializer(profile).data)

    def patch(self, request: Request) -> Response:
        data = parse(ProfileUpdateInput, request.data)
        for field in ("face_photos", "body_photos"):
            if field in data:
                data[field] = tuple(data[field])
        profile = profile_service().update_profile(current_user_id(request), ProfileUpdate(**data))
        return Response(ProfileSerializer(profile).data)


class PhotoUploadView(APIView):
    """Handler for POST /api/photos (multipart field ``photo``)"""

    parser_classes = [MultiPartParser]

    def post(self, request: Request) -> Response:
        upload = request.FILES.get("photo")
        if upload is None:
            raise ValidationError.single("photo", "A photo file is required")
        service = PhotoService(DjangoPhotoStorage(), max_bytes=settings.MAX_PHOTO_BYTES)
        url = service.upload(
            current_user_id(request),
            filename=upload.name,
            content_type=upload.content_type,
            size=upload.size,
            content=upload,
        )
        return Response({"url": url}, status=status.HTTP_201_CREATED)
