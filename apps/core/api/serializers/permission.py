from rest_framework import serializers


class PermissionResponseSerializer(serializers.Serializer):
    """Flat read model of a permission, keyed the way API clients consume it.

    Every field is writable so a rendered payload can be parsed back:
    ``PermissionResponseSerializer(data=payload).validated_data`` holds the
    same eight values keyed by model attribute.
    """

    id = serializers.IntegerField(required=False, allow_null=True)
    name = serializers.CharField(allow_blank=True, required=False, default="")
    description = serializers.CharField(allow_blank=True, required=False, default="")
    resource = serializers.CharField(allow_blank=True, required=False, default="")
    action = serializers.CharField(allow_blank=True, required=False, default="")
    isSystemPermission = serializers.BooleanField(source="is_system_permission", default=False)
    createdAt = serializers.DateTimeField(source="created_at", required=False, allow_null=True)
    updatedAt = serializers.DateTimeField(source="updated_at", required=False, allow_null=True)


class PermissionStatisticsSerializer(serializers.Serializer):
    totalPermissions = serializers.IntegerField()
    systemPermissions = serializers.IntegerField()
    categories = serializers.IntegerField()
