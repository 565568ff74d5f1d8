"""
Users API v1 views.
"""
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView

from shared.application import parse_optional_enum
from ....application.use_cases import (
    CompleteSignupUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    RequestOtpUseCase,
    UpdateProfileUseCase,
    VerifyOtpUseCase,
)
from ....application.dtos.auth_dto import CompleteSignupDTO, RequestOtpDTO, VerifyOtpDTO
from ....application.dtos.user_dto import UserDTO, UserUpdateDTO
from ....domain.value_objects.user_role import UserRole
from ....infrastructure.repositories import DjangoUserRepository
from ....infrastructure.tokens import JwtTokenIssuer
from ...permissions import IsAdmin
from ...serializers.user_serializer import UserSerializer, UserUpdateSerializer
from ...serializers.auth_serializer import (
    AuthResultSerializer,
    CompleteSignupSerializer,
    OtpIssuedSerializer,
    RequestOtpSerializer,
    VerifyOtpSerializer,
)


@extend_schema(tags=['Auth'])
class RequestOtpView(APIView):
    """OTP request endpoint."""
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = 'otp_request'

    @extend_schema(
        request=RequestOtpSerializer,
        responses={200: OtpIssuedSerializer},
        summary="Send a one-time code to a phone number",
    )
    def post(self, request):
        serializer = RequestOtpSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = RequestOtpUseCase(user_repository=DjangoUserRepository())
        result = use_case.execute(RequestOtpDTO(**serializer.validated_data))

        output_serializer = OtpIssuedSerializer(result.data)
        return Response(output_serializer.data, status=status.HTTP_200_OK)


@extend_schema(tags=['Auth'])
class VerifyOtpView(APIView):
    """OTP verification endpoint."""
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = 'otp_verify'

    @extend_schema(
        request=VerifyOtpSerializer,
        responses={200: AuthResultSerializer},
        summary="Verify a one-time code and get tokens",
    )
    def post(self, request):
        serializer = VerifyOtpSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = VerifyOtpUseCase(
            user_repository=DjangoUserRepository(),
            token_issuer=JwtTokenIssuer(),
        )
        result = use_case.execute(VerifyOtpDTO(**serializer.validated_data))

        output_serializer = AuthResultSerializer(result.data)
        return Response(output_serializer.data, status=status.HTTP_200_OK)


@extend_schema(tags=['Auth'])
class CompleteSignupView(APIView):
    """Profile completion endpoint for freshly verified numbers."""
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        request=CompleteSignupSerializer,
        responses={201: AuthResultSerializer},
        summary="Complete signup after OTP verification",
    )
    def post(self, request):
        serializer = CompleteSignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = CompleteSignupUseCase(
            user_repository=DjangoUserRepository(),
            token_issuer=JwtTokenIssuer(),
        )
        result = use_case.execute(CompleteSignupDTO(**serializer.validated_data))

        output_serializer = AuthResultSerializer(result.data)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Users'])
class UserMeView(APIView):
    """Current user endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: UserSerializer},
        summary="Get current user profile",
    )
    def get(self, request):
        use_case = GetUserUseCase(user_repository=DjangoUserRepository())
        result = use_case.execute(request.user.id)
        return Response(UserSerializer(result.data).data)

    @extend_schema(
        request=UserUpdateSerializer,
        responses={200: UserSerializer},
        summary="Update current user profile",
    )
    def patch(self, request):
        serializer = UserUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        use_case = UpdateProfileUseCase(
            user_repository=DjangoUserRepository(),
            user_id=request.user.id,
        )
        result = use_case.execute(UserUpdateDTO(**serializer.validated_data))

        return Response(UserSerializer(result.data).data)


@extend_schema(tags=['Users'])
class UserListView(APIView):
    """User list endpoint."""
    permission_classes = [IsAdmin]

    @extend_schema(
        parameters=[
            OpenApiParameter('role', str, enum=[role.value for role in UserRole]),
        ],
        responses={200: UserSerializer(many=True)},
        summary="List all users",
    )
    def get(self, request):
        role = parse_optional_enum(UserRole, request.query_params.get("role"), "role")

        use_case = ListUsersUseCase(user_repository=DjangoUserRepository())
        result = use_case.execute(role)
        return Response(UserSerializer(result.data, many=True).data)


@extend_schema(tags=['Users'])
class DeliveryPersonnelView(APIView):
    """Delivery personnel list endpoint."""
    permission_classes = [IsAdmin]

    @extend_schema(
        responses={200: UserSerializer(many=True)},
        summary="List active delivery personnel",
    )
    def get(self, request):
        users = DjangoUserRepository().find_delivery_personnel()
        dtos = [UserDTO.from_entity(user) for user in users]
        return Response(UserSerializer(dtos, many=True).data)
