"""
Assign delivery person use case.
"""
import logging
from dataclasses import dataclass, field

from apps.users.domain.value_objects import UserRole
from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import NotADeliveryPersonError, OrderNotFoundError
from ...domain.repositories.order_repository import OrderRepository
from ...domain.services.order_access_policy import OrderAccessPolicy
from ...domain.services.user_directory import UserDirectory
from ..dtos.order_dto import AssignDeliveryPersonDTO, OrderDTO

logger = logging.getLogger(__name__)


@dataclass
class AssignDeliveryPersonUseCase(UseCase[AssignDeliveryPersonDTO, OrderDTO]):
    """Admin puts a courier on an order."""

    order_repository: OrderRepository
    user_directory: UserDirectory
    access_policy: OrderAccessPolicy = field(default_factory=OrderAccessPolicy)

    def execute(self, input_dto: AssignDeliveryPersonDTO) -> UseCaseResult[OrderDTO]:
        self.access_policy.ensure_can_assign(input_dto.actor)

        order = self.order_repository.find_by_id(input_dto.order_id)
        if order is None:
            raise OrderNotFoundError(str(input_dto.order_id))

        role = self.user_directory.get_user_role(input_dto.delivery_person_id)
        if role != UserRole.DELIVERY:
            raise NotADeliveryPersonError(str(input_dto.delivery_person_id))

        if order.delivery_person_id is not None and order.delivery_person_id != input_dto.delivery_person_id:
            logger.warning(
                "Order %s reassigned from %s to %s while %s",
                order.id, order.delivery_person_id, input_dto.delivery_person_id, order.status.value,
            )

        order.assign_delivery_person(
            input_dto.delivery_person_id,
            assigned_by=input_dto.actor.user_id,
            estimated_delivery_time=input_dto.estimated_delivery_time,
        )
        saved = self.order_repository.save(order)

        for event in order.clear_domain_events():
            logger.info(
                "%s order=%s delivery_person=%s by=%s",
                event.event_type, saved.id, event.delivery_person_id, event.assigned_by,
            )
        return UseCaseResult.ok(OrderDTO.from_entity(saved))
