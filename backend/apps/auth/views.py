from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import error_response
from apps.common import get_logger
from apps.common.repository import AlreadyExistsError
from apps.users.serializers import UserSerializer
from .container import build_login_service, build_registration_service
from .serializers import LoginRequestSerializer, RegisterRequestSerializer
from .services import InvalidLoginError, RegistrationError

logger = get_logger(__name__).bind(component="auth", layer="view")


@extend_schema(tags=["Auth"])
class RegisterView(APIView):
    permission_classes = [AllowAny]
    service = build_registration_service()
    log = logger.bind(view="RegisterView")

    @extend_schema(
        summary="Register user",
        request=RegisterRequestSerializer,
        responses={
            201: UserSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = RegisterRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        email = serializer.validated_data["email"]
        try:
            user = self.service.register(serializer.validated_data)
        except RegistrationError as exc:
            return error_response("VALIDATION_ERROR", str(exc))
        except AlreadyExistsError:
            self.log.info("Registration rejected: email already exists", email=email)
            return error_response(
                "CONFLICT", "Email already exists", {"email": email}
            )
        self.log.info("User registered via API", user_id=user.id)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Auth"])
class LoginView(APIView):
    permission_classes = [AllowAny]
    service = build_login_service()
    log = logger.bind(view="LoginView")

    @extend_schema(
        summary="Login",
        description="Compares the supplied credentials with the stored user.",
        request=LoginRequestSerializer,
        responses={
            200: UserSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            user = self.service.login(
                serializer.validated_data["email"],
                serializer.validated_data["password"],
            )
        except InvalidLoginError:
            return error_response("UNAUTHORIZED", "Invalid email or password")
        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)
