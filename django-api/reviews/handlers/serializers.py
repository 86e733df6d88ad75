from rest_framework import serializers


class ReviewSerializer(serializers.Serializer):
    """Serializer for Review domain model."""

    id = serializers.CharField()
    event_id = serializers.CharField()
    user_id = serializers.IntegerField(source="user_id.value")
    rating = serializers.IntegerField()
    content = serializers.CharField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ReviewInput(serializers.Serializer):
    """Rating and content bounds are checked by the review service."""

    rating = serializers.IntegerField(required=False, allow_null=True, default=None)
    content = serializers.CharField(
        required=False, allow_blank=True, trim_whitespace=False, default=""
    )
