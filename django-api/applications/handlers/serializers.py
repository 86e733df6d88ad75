"""Serializers for application input and responses."""

from rest_framework import serializers

from applications.domain import ApplicationForm


class ApplicationSerializer(serializers.Serializer):
    """Serializer for Application domain model."""

    id = serializers.CharField()
    event_id = serializers.CharField()
    user_id = serializers.IntegerField(source="user_id.value")
    status = serializers.CharField(source="status.value")
    status_label = serializers.CharField(source="status.label")
    form_snapshot = serializers.SerializerMethodField()
    applied_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_form_snapshot(self, application) -> dict:
        return application.form_snapshot.to_dict()


class HeadcountSerializer(serializers.Serializer):
    confirmed_male = serializers.IntegerField()
    confirmed_female = serializers.IntegerField()
    applied_male = serializers.IntegerField()
    applied_female = serializers.IntegerField()
    total_confirmed = serializers.IntegerField()
    total_applied = serializers.IntegerField()


class TransitionResultSerializer(serializers.Serializer):
    application = ApplicationSerializer()
    headcount = HeadcountSerializer()
    capacity = serializers.IntegerField(source="capacity.value")
    changed = serializers.BooleanField()
    over_capacity = serializers.BooleanField()


class ApplicationFormSerializer(serializers.Serializer):
    """Shape of the submission form, also used to return a prefilled form.

    Ranges and required-ness are enforced by ApplicationForm.validate so
    every failing field is reported in one response.
    """

    name = serializers.CharField(required=False, allow_blank=True, default="")
    gender = serializers.CharField(required=False, allow_null=True, default=None)
    age = serializers.IntegerField(required=False, allow_null=True, default=None)
    phone = serializers.CharField(required=False, allow_blank=True, default="")
    height = serializers.IntegerField(required=False, allow_null=True, default=None)
    weight = serializers.IntegerField(required=False, allow_null=True, default=None)
    ideal_type = serializers.CharField(required=False, allow_blank=True, default="")
    photos = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )
    consent = serializers.BooleanField(required=False, default=False)
    participation_type = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, default=None
    )
    ticket_tier = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, default=None
    )


def form_from_input(data: dict) -> ApplicationForm:
    return ApplicationForm(
        name=data["name"],
        gender=data["gender"],
        age=data["age"],
        phone=data["phone"],
        height=data["height"],
        weight=data["weight"],
        ideal_type=data["ideal_type"],
        photos=tuple(data["photos"]),
        consent=data["consent"],
        participation_type=data["participation_type"] or None,
        ticket_tier=data["ticket_tier"] or None,
    )


class StatusInput(serializers.Serializer):
    status = serializers.CharField()
