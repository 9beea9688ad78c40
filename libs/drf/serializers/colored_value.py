from rest_framework import serializers


class ColoredValueSerializer(serializers.Serializer):
    """Render the ``{"value", "variant"}`` dict produced by ``ColoredValueMixin``."""

    value = serializers.CharField(allow_null=True)
    variant = serializers.CharField(allow_null=True)
