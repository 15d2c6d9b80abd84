from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import error_response
from apps.common import get_logger
from apps.common.repository import AlreadyExistsError, NotFoundError
from .container import build_user_service
from .serializers import UserSerializer, UserUpdateSerializer

logger = get_logger(__name__).bind(component="users", layer="view")


@extend_schema(tags=["Users"])
class UserListView(APIView):
    permission_classes = [AllowAny]
    service = build_user_service()
    log = logger.bind(view="UserListView")

    @extend_schema(
        summary="List users",
        responses={200: UserSerializer(many=True)},
    )
    def get(self, request):
        self.log.debug("Listing users via API")
        data = self.service.list_users()
        return Response(UserSerializer(data, many=True).data)


@extend_schema(tags=["Users"])
class UserDetailView(APIView):
    permission_classes = [AllowAny]
    service = build_user_service()
    log = logger.bind(view="UserDetailView")

    @extend_schema(
        summary="Get user by ID",
        parameters=[OpenApiParameter("user_id", int, OpenApiParameter.PATH)],
        responses={
            200: UserSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, user_id: int):
        self.log.debug("Fetching user detail", user_id=user_id)
        try:
            dto = self.service.get_user(user_id)
        except NotFoundError:
            self.log.info("User not found", user_id=user_id)
            return error_response("NOT_FOUND", "User not found", {"id": str(user_id)})
        return Response(UserSerializer(dto).data)

    @extend_schema(
        summary="Replace user",
        request=UserUpdateSerializer,
        responses={
            200: UserSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, user_id: int):
        return self._update(request, user_id, partial=False)

    @extend_schema(
        summary="Update user",
        request=UserUpdateSerializer,
        responses={
            200: UserSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def patch(self, request, user_id: int):
        return self._update(request, user_id, partial=True)

    def _update(self, request, user_id: int, *, partial: bool):
        serializer = UserUpdateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        self.log.info("Updating user via API", user_id=user_id, partial=partial)
        try:
            dto = self.service.update_user(
                user_id, dict(serializer.validated_data), partial=partial
            )
        except NotFoundError:
            self.log.warning("User update failed: not found", user_id=user_id)
            return error_response("NOT_FOUND", "User not found", {"id": str(user_id)})
        except AlreadyExistsError as exc:
            self.log.warning("User update conflict", user_id=user_id, field=exc.field_name)
            return error_response(
                "CONFLICT", "Email already in use", {exc.field_name: str(exc.value)}
            )
        return Response(UserSerializer(dto).data)
