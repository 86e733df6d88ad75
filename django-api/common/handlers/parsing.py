from rest_framework import serializers

from common.domain.errors import ValidationError


def parse(serializer_class: type[serializers.Serializer], data, **kwargs) -> dict:
    """Run an input serializer and raise a domain ValidationError on failure."""
    serializer = serializer_class(data=data, **kwargs)
    if not serializer.is_valid():
        raise ValidationError(
            {field: [str(message) for message in _flatten(messages)]
             for field, messages in serializer.errors.items()}
        )
    return serializer.validated_data


def _flatten(messages):
    if isinstance(messages, dict):
        for nested in messages.values():
            yield from _flatten(nested)
    elif isinstance(messages, (list, tuple)):
        for nested in messages:
            yield from _flatten(nested)
    else:
        yield messages
