"""
Orders API v1 views.
"""
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.users.domain.value_objects import UserRole
from apps.users.interfaces.permissions import (
    IsAdmin,
    IsCustomer,
    IsDeliveryOrAdmin,
    IsDeliveryPerson,
)
from ....application.dtos.order_dto import (
    AddressDTO,
    AssignDeliveryPersonDTO,
    CreateOrderDTO,
    ListOrdersQuery,
    OrderLineDTO,
    UpdateOrderStatusDTO,
)
from ....application.use_cases import (
    AssignDeliveryPersonUseCase,
    CreateOrderUseCase,
    GetDeliveryStatsUseCase,
    GetOrderStatsUseCase,
    GetOrderUseCase,
    ListAllOrdersUseCase,
    ListAssignedOrdersUseCase,
    ListDeliveryHistoryUseCase,
    ListMyOrdersUseCase,
    ListUnassignedOrdersUseCase,
    UpdateOrderStatusUseCase,
)
from ....domain.services.order_access_policy import Actor
from ....domain.value_objects.order_status import OrderStatus
from ....infrastructure.adapters import CatalogPriceResolver, DjangoUserDirectory
from ....infrastructure.repositories import DjangoOrderRepository
from ...serializers.order_serializer import (
    AssignDeliverySerializer,
    DeliveryStatsSerializer,
    OrderCreateSerializer,
    OrderListQuerySerializer,
    OrderPageSerializer,
    OrderSerializer,
    OrderStatsSerializer,
    OrderStatusUpdateSerializer,
)


def actor_from_request(request) -> Actor:
    """Build the domain actor for the authenticated user."""
    return Actor(user_id=request.user.id, role=UserRole(request.user.role))


def _address_dto(data):
    if not data:
        return None
    return AddressDTO(**data)


@extend_schema(tags=['Orders'])
class OrderListCreateView(APIView):
    """Order create (customers) and full listing (admins) endpoint."""

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsCustomer()]
        return [IsAdmin()]

    @extend_schema(
        parameters=[
            OpenApiParameter('status', str, enum=[value.value for value in OrderStatus]),
            OpenApiParameter('page', int),
            OpenApiParameter('limit', int),
        ],
        responses={200: OrderPageSerializer},
        summary="List all orders",
    )
    def get(self, request):
        query = OrderListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        use_case = ListAllOrdersUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(
            ListOrdersQuery(actor=actor_from_request(request), **query.validated_data)
        )
        return Response(OrderPageSerializer(result.data).data)

    @extend_schema(
        request=OrderCreateSerializer,
        responses={201: OrderSerializer},
        summary="Place a new order",
    )
    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        input_dto = CreateOrderDTO(
            actor=actor_from_request(request),
            items=[OrderLineDTO(**line) for line in data['items']],
            pickup_address=_address_dto(data['pickup_address']),
            delivery_address=_address_dto(data.get('delivery_address')),
            notes=data.get('notes', ''),
            scheduled_pickup_time=data.get('scheduled_pickup_time'),
        )

        use_case = CreateOrderUseCase(
            order_repository=DjangoOrderRepository(),
            price_resolver=CatalogPriceResolver(),
        )
        result = use_case.execute(input_dto)

        return Response(OrderSerializer(result.data).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Orders'])
class MyOrdersView(APIView):
    """Orders placed by the current customer."""
    permission_classes = [IsCustomer]

    @extend_schema(responses={200: OrderSerializer(many=True)}, summary="List my orders")
    def get(self, request):
        use_case = ListMyOrdersUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(actor_from_request(request))
        return Response(OrderSerializer(result.data, many=True).data)


@extend_schema(tags=['Delivery'])
class AssignedOrdersView(APIView):
    """Active orders assigned to the current delivery person."""
    permission_classes = [IsDeliveryPerson]

    @extend_schema(responses={200: OrderSerializer(many=True)}, summary="List my active deliveries")
    def get(self, request):
        use_case = ListAssignedOrdersUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(actor_from_request(request))
        return Response(OrderSerializer(result.data, many=True).data)


@extend_schema(tags=['Delivery'])
class DeliveryHistoryView(APIView):
    permission_classes = [IsDeliveryPerson]

    @extend_schema(responses={200: OrderSerializer(many=True)}, summary="List my finished deliveries")
    def get(self, request):
        use_case = ListDeliveryHistoryUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(actor_from_request(request))
        return Response(OrderSerializer(result.data, many=True).data)


@extend_schema(tags=['Delivery'])
class DeliveryStatsView(APIView):
    permission_classes = [IsDeliveryPerson]

    @extend_schema(responses={200: DeliveryStatsSerializer}, summary="Get my delivery statistics")
    def get(self, request):
        use_case = GetDeliveryStatsUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(request.user.id)
        return Response(DeliveryStatsSerializer(result.data).data)


@extend_schema(tags=['Admin'])
class UnassignedOrdersView(APIView):
    """Requested orders still waiting for a courier."""
    permission_classes = [IsAdmin]

    @extend_schema(responses={200: OrderSerializer(many=True)}, summary="List unassigned orders")
    def get(self, request):
        use_case = ListUnassignedOrdersUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute()
        return Response(OrderSerializer(result.data, many=True).data)


@extend_schema(tags=['Admin'])
class OrderStatsView(APIView):
    permission_classes = [IsAdmin]

    @extend_schema(responses={200: OrderStatsSerializer}, summary="Get order dashboard statistics")
    def get(self, request):
        use_case = GetOrderStatsUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(actor_from_request(request))
        return Response(OrderStatsSerializer(result.data).data)


@extend_schema(tags=['Orders'])
class OrderDetailView(APIView):
    """Single order endpoint; visible to its customer, its courier and admins."""
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: OrderSerializer}, summary="Get order details")
    def get(self, request, order_id):
        use_case = GetOrderUseCase(
            order_repository=DjangoOrderRepository(),
            actor=actor_from_request(request),
        )
        result = use_case.execute(order_id)
        return Response(OrderSerializer(result.data).data)


@extend_schema(tags=['Orders'])
class OrderStatusView(APIView):
    """Status change endpoint for the assigned courier or an admin."""
    permission_classes = [IsDeliveryOrAdmin]

    @extend_schema(
        request=OrderStatusUpdateSerializer,
        responses={200: OrderSerializer},
        summary="Move an order to a new status",
    )
    def patch(self, request, order_id):
        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = UpdateOrderStatusUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(
            UpdateOrderStatusDTO(
                actor=actor_from_request(request),
                order_id=order_id,
                **serializer.validated_data,
            )
        )
        return Response(OrderSerializer(result.data).data)


@extend_schema(tags=['Admin'])
class AssignDeliveryPersonView(APIView):
    permission_classes = [IsAdmin]

    @extend_schema(
        request=AssignDeliverySerializer,
        responses={200: OrderSerializer},
        summary="Assign a delivery person to an order",
    )
    def patch(self, request, order_id):
        serializer = AssignDeliverySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = AssignDeliveryPersonUseCase(
            order_repository=DjangoOrderRepository(),
            user_directory=DjangoUserDirectory(),
        )
        result = use_case.execute(
            AssignDeliveryPersonDTO(
                actor=actor_from_request(request),
                order_id=order_id,
                delivery_person_id=serializer.validated_data['delivery_person_id'],
                estimated_delivery_time=serializer.validated_data['estimated_delivery_time'],
            )
        )
        return Response(OrderSerializer(result.data).data)
