from django.utils.translation import gettext as _
from rest_framework import serializers

from apps.hrm.constants import UPCOMING_EXIT_DAYS
from apps.hrm.models import Employee, EmployeeExit
from apps.hrm.services.exit_service import ExitService
from libs.drf.serializers import ColoredValueSerializer

from .common_nested import EmployeeNestedSerializer


class EmployeeExitSerializer(serializers.ModelSerializer):
    """Serializer for EmployeeExit model.

    ``status``, ``approved_by`` and ``approved_at`` change only through the
    workflow actions. Creating and updating go through ``ExitService`` so the
    one-active-exit and INITIATED-only rules apply to the API as well.
    """

    employee = EmployeeNestedSerializer(read_only=True)
    employee_id = serializers.PrimaryKeyRelatedField(
        queryset=Employee.objects.all(),
        source="employee",
        write_only=True,
        help_text="ID of the employee who is leaving",
    )
    approved_by = EmployeeNestedSerializer(read_only=True)
    colored_status = ColoredValueSerializer(read_only=True)
    is_active = serializers.BooleanField(read_only=True)

    class Meta:
        model = EmployeeExit
        fields = [
            "id",
            "employee",
            "employee_id",
            "resignation_date",
            "last_working_day",
            "exit_reason",
            "status",
            "colored_status",
            "is_active",
            "approved_by",
            "approved_at",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "status", "approved_at", "created_at", "updated_at"]

    def get_fields(self):
        fields = super().get_fields()
        # The leaving employee is fixed once the request exists
        if self.instance is not None and "employee_id" in fields:
            fields["employee_id"].read_only = True
        return fields

    def validate(self, attrs):
        resignation_date = attrs.get("resignation_date", getattr(self.instance, "resignation_date", None))
        last_working_day = attrs.get("last_working_day", getattr(self.instance, "last_working_day", None))
        if resignation_date and last_working_day and last_working_day < resignation_date:
            raise serializers.ValidationError(
                {"last_working_day": _("Last working day cannot be before the resignation date.")}
            )
        return attrs

    def create(self, validated_data):
        return ExitService.initiate_exit(**validated_data)

    def update(self, instance, validated_data):
        return ExitService.update_exit(instance, **validated_data)


class EmployeeExitChangeStatusSerializer(serializers.Serializer):
    """Base serializer for the workflow actions on an existing exit request.

    Subclasses name the model guard to check and implement ``perform_action``.
    """

    guard_name = ""
    error_message = ""

    def validate(self, attrs):
        if not self.instance:
            raise serializers.ValidationError("An existing exit request is required to perform this action!")

        if not getattr(self.instance, self.guard_name)():
            raise serializers.ValidationError(self.error_message)

        return attrs

    def save(self, **kwargs):
        self.instance = self.perform_action(self.instance, {**self.validated_data, **kwargs})
        return self.instance

    def perform_action(self, employee_exit, data):
        raise NotImplementedError("Subclasses must implement perform_action")

    def _resolve_approver(self, attrs):
        """Use ``approver_id`` when given, otherwise the employee linked to the requesting user."""
        approver = attrs.get("approver")
        if approver is None:
            user = self.context["request"].user
            approver = getattr(user, "employee", None)
        if approver is None:
            raise serializers.ValidationError(
                {"approver_id": _("An approver is required when the current user has no employee profile.")}
            )
        attrs["approver"] = approver
        return attrs

    def _check_authority(self) -> bool:
        return not self.context["request"].user.is_superuser


class EmployeeExitSubmitSerializer(EmployeeExitChangeStatusSerializer):
    guard_name = "can_be_submitted"
    error_message = "Only initiated exit requests can be submitted"

    def perform_action(self, employee_exit, data):
        return ExitService.submit_exit(employee_exit)


class EmployeeExitApproveSerializer(EmployeeExitChangeStatusSerializer):
    guard_name = "can_be_approved"
    error_message = "Exit request has already been processed"

    approver_id = serializers.PrimaryKeyRelatedField(
        queryset=Employee.objects.all(),
        source="approver",
        required=False,
        allow_null=True,
        help_text="Approving employee; defaults to the employee of the current user",
    )

    def validate(self, attrs):
        attrs = super().validate(attrs)
        return self._resolve_approver(attrs)

    def perform_action(self, employee_exit, data):
        return ExitService.approve_exit(employee_exit, data["approver"], check_authority=self._check_authority())


class EmployeeExitRejectSerializer(EmployeeExitApproveSerializer):
    guard_name = "can_be_rejected"

    reason = serializers.CharField(help_text="Reason for the rejection")

    def perform_action(self, employee_exit, data):
        return ExitService.reject_exit(
            employee_exit, data["approver"], data["reason"], check_authority=self._check_authority()
        )


class EmployeeExitWithdrawSerializer(EmployeeExitChangeStatusSerializer):
    guard_name = "can_be_withdrawn"
    error_message = "Exit request can no longer be withdrawn"

    reason = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        help_text="Optional reason for the withdrawal",
    )

    def perform_action(self, employee_exit, data):
        return ExitService.withdraw_exit(employee_exit, data.get("reason"))


class EmployeeExitCompleteSerializer(EmployeeExitChangeStatusSerializer):
    guard_name = "can_be_completed"
    error_message = "Only approved exit requests can be completed"

    def perform_action(self, employee_exit, data):
        return ExitService.complete_exit(employee_exit)


class EmployeeExitUpcomingQuerySerializer(serializers.Serializer):
    days = serializers.IntegerField(min_value=0, max_value=365, default=UPCOMING_EXIT_DAYS)


class EmployeeExitMonthlyQuerySerializer(serializers.Serializer):
    year = serializers.IntegerField(min_value=1900, max_value=9999)
    month = serializers.IntegerField(min_value=1, max_value=12)


class EmployeeExitStatisticsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    initiated = serializers.IntegerField()
    pending = serializers.IntegerField()
    approved = serializers.IntegerField()
    rejected = serializers.IntegerField()
    withdrawn = serializers.IntegerField()
    completed = serializers.IntegerField()
