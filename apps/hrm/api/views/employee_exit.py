from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import OpenApiExample, OpenApiParameter, extend_schema, extend_schema_view
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response

from apps.hrm.api.filtersets import EmployeeExitFilterSet
from apps.hrm.api.serializers import (
    EmployeeExitApproveSerializer,
    EmployeeExitCompleteSerializer,
    EmployeeExitMonthlyQuerySerializer,
    EmployeeExitRejectSerializer,
    EmployeeExitSerializer,
    EmployeeExitStatisticsSerializer,
    EmployeeExitSubmitSerializer,
    EmployeeExitUpcomingQuerySerializer,
    EmployeeExitWithdrawSerializer,
)
from apps.hrm.models import Employee, EmployeeExit
from apps.hrm.services.exit_service import ExitService
from libs import BaseModelViewSet
from libs.drf.filtersets.search import PhraseSearchFilter

EXIT_EXAMPLE = {
    "id": 1,
    "employee": {"id": 7, "code": "MV007", "fullname": "Jane Doe", "email": "jane.doe@example.com"},
    "resignation_date": "2025-03-01",
    "last_working_day": "2025-03-31",
    "exit_reason": "Relocation",
    "status": "PENDING",
    "colored_status": {"value": "PENDING", "variant": "YELLOW"},
    "is_active": True,
    "approved_by": None,
    "approved_at": None,
    "notes": None,
    "created_at": "2025-03-01T09:00:00Z",
    "updated_at": "2025-03-02T10:30:00Z",
}


@extend_schema_view(
    list=extend_schema(
        summary="List employee exits",
        description="Retrieve a paginated list of exit requests with filtering by status, employee, approver, "
        "department, resignation date range and last working day range",
        tags=["Employee Exit"],
    ),
    retrieve=extend_schema(
        summary="Get employee exit details",
        description="Retrieve detailed information about a specific exit request",
        tags=["Employee Exit"],
        examples=[
            OpenApiExample(
                "Success",
                value={"success": True, "data": EXIT_EXAMPLE, "error": None},
                response_only=True,
            ),
        ],
    ),
    create=extend_schema(
        summary="Initiate an employee exit",
        description="Create an exit request in INITIATED status. An employee can only have one active exit "
        "request, and the last working day cannot be before the resignation date.",
        tags=["Employee Exit"],
        examples=[
            OpenApiExample(
                "Request",
                value={
                    "employee_id": 7,
                    "resignation_date": "2025-03-01",
                    "last_working_day": "2025-03-31",
                    "exit_reason": "Relocation",
                },
                request_only=True,
            ),
            OpenApiExample(
                "Error - Active exit exists",
                value={
                    "success": False,
                    "data": None,
                    "error": {
                        "type": "validation_error",
                        "errors": [
                            {
                                "code": "invalid",
                                "detail": "Employee already has an active exit request.",
                                "attr": "employee",
                            }
                        ],
                    },
                },
                response_only=True,
                status_codes=["400"],
            ),
        ],
    ),
    update=extend_schema(
        summary="Update employee exit",
        description="Update an exit request. Only INITIATED requests can be changed.",
        tags=["Employee Exit"],
    ),
    partial_update=extend_schema(
        summary="Partially update employee exit",
        description="Partially update an exit request. Only INITIATED requests can be changed.",
        tags=["Employee Exit"],
    ),
    destroy=extend_schema(
        summary="Delete employee exit",
        description="Delete an exit request. Only INITIATED requests can be deleted.",
        tags=["Employee Exit"],
    ),
)
class EmployeeExitViewSet(BaseModelViewSet):
    """ViewSet for EmployeeExit model and its approval workflow"""

    queryset = EmployeeExit.objects.select_related("employee", "employee__department", "approved_by")
    serializer_class = EmployeeExitSerializer
    filterset_class = EmployeeExitFilterSet
    filter_backends = [DjangoFilterBackend, PhraseSearchFilter, OrderingFilter]
    search_fields = ["employee__code", "employee__fullname", "exit_reason"]
    ordering_fields = ["resignation_date", "last_working_day", "status", "created_at"]
    ordering = ["-created_at"]

    # Permission registration attributes
    module = "HRM"
    submodule = "Exit Management"
    permission_prefix = "employee_exit"

    action_serializer_classes = {
        "submit": EmployeeExitSubmitSerializer,
        "approve": EmployeeExitApproveSerializer,
        "reject": EmployeeExitRejectSerializer,
        "withdraw": EmployeeExitWithdrawSerializer,
        "complete": EmployeeExitCompleteSerializer,
    }

    def get_serializer_class(self):
        return self.action_serializer_classes.get(self.action, super().get_serializer_class())

    def perform_destroy(self, instance):
        ExitService.delete_exit(instance)

    def _change_status(self, request):
        employee_exit = self.get_object()
        serializer = self.get_serializer(employee_exit, data=request.data)
        serializer.is_valid(raise_exception=True)
        employee_exit = serializer.save()
        return Response(EmployeeExitSerializer(employee_exit, context=self.get_serializer_context()).data)

    def _list_response(self, queryset):
        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = EmployeeExitSerializer(page, many=True, context=self.get_serializer_context())
            return self.get_paginated_response(serializer.data)

        serializer = EmployeeExitSerializer(queryset, many=True, context=self.get_serializer_context())
        return Response(serializer.data)

    @extend_schema(
        summary="Submit employee exit",
        description="Send an INITIATED exit request for approval (status becomes PENDING)",
        request=None,
        responses={200: EmployeeExitSerializer},
        tags=["Employee Exit"],
    )
    @action(detail=True, methods=["post"], url_path="submit")
    def submit(self, request, pk=None):
        return self._change_status(request)

    @extend_schema(
        summary="Approve employee exit",
        description="Approve an INITIATED or PENDING exit request. The approver must be the employee's direct "
        "manager or the leader of the employee's department.",
        request=EmployeeExitApproveSerializer,
        responses={200: EmployeeExitSerializer},
        tags=["Employee Exit"],
        examples=[
            OpenApiExample(
                "Error - Already processed",
                value={
                    "success": False,
                    "data": None,
                    "error": {
                        "type": "validation_error",
                        "errors": [
                            {
                                "code": "invalid",
                                "detail": "Exit request has already been processed",
                                "attr": "non_field_errors",
                            }
                        ],
                    },
                },
                response_only=True,
                status_codes=["400"],
            ),
        ],
    )
    @action(detail=True, methods=["post"], url_path="approve")
    def approve(self, request, pk=None):
        return self._change_status(request)

    @extend_schema(
        summary="Reject employee exit",
        description="Reject an INITIATED or PENDING exit request. The reason is appended to the notes.",
        request=EmployeeExitRejectSerializer,
        responses={200: EmployeeExitSerializer},
        tags=["Employee Exit"],
    )
    @action(detail=True, methods=["post"], url_path="reject")
    def reject(self, request, pk=None):
        return self._change_status(request)

    @extend_schema(
        summary="Withdraw employee exit",
        description="Withdraw an INITIATED or PENDING exit request. An optional reason is appended to the notes.",
        request=EmployeeExitWithdrawSerializer,
        responses={200: EmployeeExitSerializer},
        tags=["Employee Exit"],
    )
    @action(detail=True, methods=["post"], url_path="withdraw")
    def withdraw(self, request, pk=None):
        return self._change_status(request)

    @extend_schema(
        summary="Complete employee exit",
        description="Complete an APPROVED exit request once the last working day has been reached. "
        "The employee is marked as Resigned.",
        request=None,
        responses={200: EmployeeExitSerializer},
        tags=["Employee Exit"],
    )
    @action(detail=True, methods=["post"], url_path="complete")
    def complete(self, request, pk=None):
        return self._change_status(request)

    @extend_schema(
        summary="List pending employee exits",
        description="Exit requests still waiting for a decision (INITIATED or PENDING)",
        responses={200: EmployeeExitSerializer(many=True)},
        tags=["Employee Exit"],
    )
    @action(detail=False, methods=["get"], url_path="pending")
    def pending(self, request):
        return self._list_response(self.filter_queryset(self.get_queryset().pending()))

    @extend_schema(
        summary="List active employee exits",
        description="Exit requests that are INITIATED, PENDING or APPROVED",
        responses={200: EmployeeExitSerializer(many=True)},
        tags=["Employee Exit"],
    )
    @action(detail=False, methods=["get"], url_path="active")
    def active(self, request):
        return self._list_response(self.filter_queryset(self.get_queryset().active()))

    @extend_schema(
        summary="List exits pending for an approver",
        description="Pending exit requests of employees managed by the given employee or in a department they lead",
        responses={200: EmployeeExitSerializer(many=True)},
        tags=["Employee Exit"],
    )
    @action(detail=False, methods=["get"], url_path=r"approver/(?P<approver_id>[0-9]+)/pending")
    def pending_for_approver(self, request, approver_id=None):
        approver = get_object_or_404(Employee, pk=approver_id)
        return self._list_response(self.filter_queryset(self.get_queryset().pending_for_approver(approver)))

    @extend_schema(
        summary="List upcoming employee exits",
        description="APPROVED exit requests whose last working day falls within the next `days` days",
        parameters=[
            OpenApiParameter(
                name="days",
                description="Look-ahead window in days (default: 30)",
                required=False,
                type=int,
            ),
        ],
        responses={200: EmployeeExitSerializer(many=True)},
        tags=["Employee Exit"],
    )
    @action(detail=False, methods=["get"], url_path="upcoming")
    def upcoming(self, request):
        params = EmployeeExitUpcomingQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        queryset = self.filter_queryset(self.get_queryset().upcoming(days_ahead=params.validated_data["days"]))
        return self._list_response(queryset.order_by("last_working_day", "id"))

    @extend_schema(
        summary="List overdue employee exits",
        description="APPROVED exit requests whose last working day has passed without completion",
        responses={200: EmployeeExitSerializer(many=True)},
        tags=["Employee Exit"],
    )
    @action(detail=False, methods=["get"], url_path="overdue")
    def overdue(self, request):
        queryset = self.filter_queryset(self.get_queryset().overdue())
        return self._list_response(queryset.order_by("last_working_day", "id"))

    @extend_schema(
        summary="Employee exit statistics",
        description="Total number of exit requests and one count per status",
        responses={200: EmployeeExitStatisticsSerializer},
        tags=["Employee Exit"],
        examples=[
            OpenApiExample(
                "Success",
                value={
                    "success": True,
                    "data": {
                        "total": 5,
                        "initiated": 1,
                        "pending": 1,
                        "approved": 1,
                        "rejected": 0,
                        "withdrawn": 1,
                        "completed": 1,
                    },
                    "error": None,
                },
                response_only=True,
            ),
        ],
    )
    @action(detail=False, methods=["get"], url_path="statistics")
    def statistics(self, request):
        return Response(EmployeeExitStatisticsSerializer(ExitService.get_statistics()).data)

    @extend_schema(
        summary="List employee exits of a month",
        description="Exit requests whose resignation date falls within the given month",
        parameters=[
            OpenApiParameter(name="year", description="Year, e.g. 2025", required=True, type=int),
            OpenApiParameter(name="month", description="Month, 1-12", required=True, type=int),
        ],
        responses={200: EmployeeExitSerializer(many=True)},
        tags=["Employee Exit"],
    )
    @action(detail=False, methods=["get"], url_path="monthly")
    def monthly(self, request):
        params = EmployeeExitMonthlyQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        queryset = self.filter_queryset(
            self.get_queryset().for_month(params.validated_data["year"], params.validated_data["month"])
        )
        return self._list_response(queryset.order_by("resignation_date", "id"))

    @extend_schema(
        summary="Most recent exit of an employee",
        description="Return the latest exit request of the given employee",
        responses={200: EmployeeExitSerializer},
        tags=["Employee Exit"],
    )
    @action(detail=False, methods=["get"], url_path=r"employee/(?P<employee_id>[0-9]+)")
    def by_employee(self, request, employee_id=None):
        employee = get_object_or_404(Employee, pk=employee_id)
        employee_exit = self.get_queryset().most_recent_for(employee)
        if employee_exit is None:
            raise NotFound("This employee has no exit request.")
        return Response(EmployeeExitSerializer(employee_exit, context=self.get_serializer_context()).data)
