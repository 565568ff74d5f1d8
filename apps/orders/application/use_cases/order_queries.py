"""
Order read use cases.
"""
from dataclasses import dataclass, field
from typing import List
from uuid import UUID

from shared.application import UseCase, UseCaseResult, parse_optional_enum
from shared.interfaces.pagination import page_window, total_pages
from ...domain.exceptions import OrderNotFoundError
from ...domain.repositories.order_repository import OrderRepository
from ...domain.services.order_access_policy import Actor, OrderAccessPolicy
from ...domain.value_objects.order_status import OrderStatus
from ..dtos.order_dto import ListOrdersQuery, OrderDTO, OrderPageDTO


def _to_dtos(orders) -> List[OrderDTO]:
    return [OrderDTO.from_entity(order) for order in orders]


@dataclass
class GetOrderUseCase(UseCase[UUID, OrderDTO]):
    """Fetch an order visible to the actor."""

    order_repository: OrderRepository
    actor: Actor
    access_policy: OrderAccessPolicy = field(default_factory=OrderAccessPolicy)

    def execute(self, input_dto: UUID) -> UseCaseResult[OrderDTO]:
        order = self.order_repository.find_by_id(input_dto)
        if order is None:
            raise OrderNotFoundError(str(input_dto))
        self.access_policy.ensure_can_read(self.actor, order)
        return UseCaseResult.ok(OrderDTO.from_entity(order))


@dataclass
class ListMyOrdersUseCase(UseCase[Actor, List[OrderDTO]]):
    """Orders the actor placed, newest first."""

    order_repository: OrderRepository

    def execute(self, input_dto: Actor) -> UseCaseResult[List[OrderDTO]]:
        return UseCaseResult.ok(_to_dtos(self.order_repository.find_by_customer(input_dto.user_id)))


@dataclass
class ListAssignedOrdersUseCase(UseCase[Actor, List[OrderDTO]]):
    """Open orders assigned to the actor."""

    order_repository: OrderRepository

    def execute(self, input_dto: Actor) -> UseCaseResult[List[OrderDTO]]:
        orders = self.order_repository.find_active_by_delivery_person(input_dto.user_id)
        return UseCaseResult.ok(_to_dtos(orders))


@dataclass
class ListDeliveryHistoryUseCase(UseCase[Actor, List[OrderDTO]]):
    """Delivered and cancelled orders of the actor."""

    order_repository: OrderRepository

    def execute(self, input_dto: Actor) -> UseCaseResult[List[OrderDTO]]:
        orders = self.order_repository.find_finished_by_delivery_person(input_dto.user_id)
        return UseCaseResult.ok(_to_dtos(orders))


@dataclass
class ListUnassignedOrdersUseCase(UseCase[None, List[OrderDTO]]):
    """REQUESTED orders waiting for a courier, oldest first."""

    order_repository: OrderRepository

    def execute(self, input_dto=None) -> UseCaseResult[List[OrderDTO]]:
        return UseCaseResult.ok(_to_dtos(self.order_repository.find_unassigned()))


@dataclass
class ListAllOrdersUseCase(UseCase[ListOrdersQuery, OrderPageDTO]):
    """Paginated admin listing with an optional status filter."""

    order_repository: OrderRepository
    access_policy: OrderAccessPolicy = field(default_factory=OrderAccessPolicy)

    def execute(self, input_dto: ListOrdersQuery) -> UseCaseResult[OrderPageDTO]:
        self.access_policy.ensure_can_view_fleet(input_dto.actor)
        status = parse_optional_enum(OrderStatus, input_dto.status, "status")
        offset, limit = page_window(input_dto.page, input_dto.limit)

        total = self.order_repository.count(status)
        orders = self.order_repository.find_all(status=status, offset=offset, limit=limit)

        return UseCaseResult.ok(
            OrderPageDTO(
                orders=_to_dtos(orders),
                total=total,
                page=offset // limit + 1,
                total_pages=total_pages(total, limit),
            )
        )
