"""Token management views with proper API documentation."""

from drf_spectacular.utils import OpenApiExample, OpenApiResponse, extend_schema
from rest_framework_simplejwt.views import (
    TokenObtainPairView as SimpleJWTTokenObtainPairView,
    TokenRefreshView as SimpleJWTTokenRefreshView,
    TokenVerifyView as SimpleJWTTokenVerifyView,
)


class TokenObtainPairView(SimpleJWTTokenObtainPairView):
    """
    Exchange username and password for an access/refresh token pair.
    """

    @extend_schema(
        summary="Obtain token pair",
        description="Authenticate with username and password and receive an access and a refresh token.",
        responses={
            200: OpenApiResponse(description="Token pair issued"),
            401: OpenApiResponse(description="Invalid credentials"),
        },
        tags=["Auth"],
        examples=[
            OpenApiExample(
                "Login request",
                value={"username": "hr.manager", "password": "<password>"},
                request_only=True,
            ),
            OpenApiExample(
                "Login success",
                value={
                    "success": True,
                    "data": {"access": "<access.jwt>", "refresh": "<refresh.jwt>"},
                    "error": None,
                },
                response_only=True,
            ),
        ],
    )
    def post(self, request, *args, **kwargs):
        return super().post(request, *args, **kwargs)


class TokenRefreshView(SimpleJWTTokenRefreshView):
    """
    Refresh JWT access token using refresh token.
    """

    @extend_schema(
        summary="Refresh access token",
        description="Use refresh token to generate a new access token.",
        responses={
            200: OpenApiResponse(description="New access token"),
            401: OpenApiResponse(description="Invalid or expired refresh token"),
        },
        tags=["Auth"],
    )
    def post(self, request, *args, **kwargs):
        return super().post(request, *args, **kwargs)


class TokenVerifyView(SimpleJWTTokenVerifyView):
    """
    Verify the validity of a JWT token.
    """

    @extend_schema(
        summary="Verify token",
        description="Check the validity of a JWT token (access or refresh). "
        "Returns 200 if token is valid, 401 if invalid.",
        responses={
            200: OpenApiResponse(description="Token is valid"),
            401: OpenApiResponse(description="Invalid or expired token"),
        },
        tags=["Auth"],
    )
    def post(self, request, *args, **kwargs):
        return super().post(request, *args, **kwargs)
