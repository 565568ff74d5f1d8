"""
Catalog API v1 views.
"""
from uuid import UUID

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.users.interfaces.permissions import IsAdmin
from ....application.dtos.catalog_dto import (
    ClothingItemCreateDTO,
    ClothingItemUpdateDTO,
    LaundryServiceCreateDTO,
    PricingUpsertDTO,
)
from ....application.use_cases import (
    CreateClothingItemUseCase,
    CreateLaundryServiceUseCase,
    GetClothingItemUseCase,
    ListClothingItemsUseCase,
    ListLaundryServicesUseCase,
    ListPricingUseCase,
    UpdateClothingItemUseCase,
    UpsertPricingUseCase,
)
from ....infrastructure.factories import build_seed_use_case
from ....infrastructure.repositories import (
    DjangoClothingItemRepository,
    DjangoLaundryServiceRepository,
    DjangoPricingRepository,
)
from ...serializers.catalog_serializer import (
    CATEGORY_CHOICES,
    SERVICE_CHOICES,
    ClothingItemCreateSerializer,
    ClothingItemSerializer,
    ClothingItemUpdateSerializer,
    LaundryServiceCreateSerializer,
    LaundryServiceSerializer,
    PricingSerializer,
    PricingUpsertSerializer,
    SeedResultSerializer,
)


class PublicReadAdminWriteMixin:
    """GET is public; every other method needs an admin."""

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAdmin()]


@extend_schema(tags=['Catalog'])
class ClothingItemListCreateView(PublicReadAdminWriteMixin, APIView):
    """Clothing item list and create endpoint."""

    @extend_schema(
        parameters=[
            OpenApiParameter(name='category', type=str, required=False, enum=CATEGORY_CHOICES),
        ],
        responses={200: ClothingItemSerializer(many=True)},
        summary="List active clothing items",
    )
    def get(self, request):
        use_case = ListClothingItemsUseCase(item_repository=DjangoClothingItemRepository())
        result = use_case.execute(request.query_params.get('category'))
        return Response(ClothingItemSerializer(result.data, many=True).data)

    @extend_schema(
        request=ClothingItemCreateSerializer,
        responses={201: ClothingItemSerializer},
        summary="Create a clothing item",
    )
    def post(self, request):
        serializer = ClothingItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = CreateClothingItemUseCase(item_repository=DjangoClothingItemRepository())
        result = use_case.execute(ClothingItemCreateDTO(**serializer.validated_data))

        return Response(ClothingItemSerializer(result.data).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Catalog'])
class ClothingItemDetailView(PublicReadAdminWriteMixin, APIView):
    """Clothing item detail endpoint."""

    @extend_schema(
        responses={200: ClothingItemSerializer},
        summary="Get clothing item detail",
    )
    def get(self, request, item_id: UUID):
        use_case = GetClothingItemUseCase(item_repository=DjangoClothingItemRepository())
        result = use_case.execute(item_id)
        return Response(ClothingItemSerializer(result.data).data)

    @extend_schema(
        request=ClothingItemUpdateSerializer,
        responses={200: ClothingItemSerializer},
        summary="Update a clothing item",
    )
    def patch(self, request, item_id: UUID):
        serializer = ClothingItemUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        use_case = UpdateClothingItemUseCase(
            item_repository=DjangoClothingItemRepository(),
            item_id=item_id,
        )
        result = use_case.execute(ClothingItemUpdateDTO(**serializer.validated_data))
        return Response(ClothingItemSerializer(result.data).data)


@extend_schema(tags=['Catalog'])
class LaundryServiceListCreateView(PublicReadAdminWriteMixin, APIView):
    """Laundry service list and create endpoint."""

    @extend_schema(
        responses={200: LaundryServiceSerializer(many=True)},
        summary="List active laundry services",
    )
    def get(self, request):
        use_case = ListLaundryServicesUseCase(service_repository=DjangoLaundryServiceRepository())
        result = use_case.execute()
        return Response(LaundryServiceSerializer(result.data, many=True).data)

    @extend_schema(
        request=LaundryServiceCreateSerializer,
        responses={201: LaundryServiceSerializer},
        summary="Create a laundry service",
    )
    def post(self, request):
        serializer = LaundryServiceCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = CreateLaundryServiceUseCase(service_repository=DjangoLaundryServiceRepository())
        result = use_case.execute(LaundryServiceCreateDTO(**serializer.validated_data))
        return Response(LaundryServiceSerializer(result.data).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Catalog'])
class PricingView(PublicReadAdminWriteMixin, APIView):
    """Pricing list and upsert endpoint."""

    @extend_schema(
        parameters=[
            OpenApiParameter(name='category', type=str, required=False, enum=CATEGORY_CHOICES),
            OpenApiParameter(name='service_type', type=str, required=False, enum=SERVICE_CHOICES),
        ],
        responses={200: PricingSerializer(many=True)},
        summary="List active prices",
    )
    def get(self, request):
        use_case = ListPricingUseCase(
            pricing_repository=DjangoPricingRepository(),
            item_repository=DjangoClothingItemRepository(),
        )
        result = use_case.execute((
            request.query_params.get('category'),
            request.query_params.get('service_type'),
        ))
        return Response(PricingSerializer(result.data, many=True).data)

    @extend_schema(
        request=PricingUpsertSerializer,
        responses={200: PricingSerializer},
        summary="Create or update a price",
    )
    def post(self, request):
        serializer = PricingUpsertSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = UpsertPricingUseCase(
            pricing_repository=DjangoPricingRepository(),
            item_repository=DjangoClothingItemRepository(),
        )
        result = use_case.execute(PricingUpsertDTO(**serializer.validated_data))
        return Response(PricingSerializer(result.data).data)


@extend_schema(tags=['Catalog'])
class SeedCatalogView(APIView):
    """Default catalog seeding endpoint."""
    permission_classes = [IsAdmin]

    @extend_schema(
        request=None,
        responses={200: SeedResultSerializer},
        summary="Seed the default catalog",
    )
    def post(self, request):
        use_case = build_seed_use_case()
        result = use_case.execute()
        return Response(SeedResultSerializer(result.data).data)

