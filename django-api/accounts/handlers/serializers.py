"""Serializers for profile input and responses."""

from rest_framework import serializers


class PhotoSerializer(serializers.Serializer):
    """Serializer for Photo domain value."""

    url = serializers.CharField()
    kind = serializers.CharField(source="kind.value")


class ProfileSerializer(serializers.Serializer):
    """Serializer for Profile domain model."""

    id = serializers.IntegerField(source="id.value")
    email = serializers.EmailField()
    name = serializers.CharField()
    gender = serializers.SerializerMethodField()
    birth_year = serializers.IntegerField(allow_null=True)
    phone = serializers.CharField()
    height = serializers.IntegerField(allow_null=True)
    weight = serializers.IntegerField(allow_null=True)
    ideal_type = serializers.CharField()
    photos = PhotoSerializer(many=True)
    is_admin = serializers.BooleanField()
    created_at = serializers.DateTimeField()

    def get_gender(self, profile) -> str | None:
        return profile.gender.value if profile.gender else None


class ProfileUpdateInput(serializers.Serializer):
    """Shape of a profile PATCH body; ranges are checked by the domain."""

    name = serializers.CharField(required=False, allow_blank=True)
    gender = serializers.CharField(required=False)
    birth_year = serializers.IntegerField(required=False)
    phone = serializers.CharField(required=False, allow_blank=True)
    height = serializers.IntegerField(required=False)
    weight = serializers.IntegerField(required=False)
    ideal_type = serializers.CharField(required=False, allow_blank=True)
    face_photos = serializers.ListField(child=serializers.CharField(), required=False)
    body_photos = serializers.ListField(child=serializers.CharField(), required=False)


class SignUpInput(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(min_length=8, write_only=True)
    name = serializers.CharField(max_length=100)
