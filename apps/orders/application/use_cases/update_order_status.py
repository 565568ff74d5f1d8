"""
Update order status use case.
"""
import logging
from dataclasses import dataclass, field

from shared.application import UseCase, UseCaseResult, parse_enum
from ...domain.exceptions import InvalidStatusTransitionError, OrderNotFoundError
from ...domain.repositories.order_repository import OrderRepository
from ...domain.services.order_access_policy import OrderAccessPolicy
from ...domain.value_objects.order_status import OrderStatus
from ..dtos.order_dto import OrderDTO, UpdateOrderStatusDTO

logger = logging.getLogger(__name__)


@dataclass
class UpdateOrderStatusUseCase(UseCase[UpdateOrderStatusDTO, OrderDTO]):
    """Advance an order through its lifecycle.

    Checks run in order: existence, caller permission, transition table.
    """

    order_repository: OrderRepository
    access_policy: OrderAccessPolicy = field(default_factory=OrderAccessPolicy)

    def execute(self, input_dto: UpdateOrderStatusDTO) -> UseCaseResult[OrderDTO]:
        target = parse_enum(OrderStatus, input_dto.status, "status")

        order = self.order_repository.find_by_id(input_dto.order_id)
        if order is None:
            raise OrderNotFoundError(str(input_dto.order_id))

        self.access_policy.ensure_can_update_status(input_dto.actor, order)

        try:
            order.change_status(target, changed_by=input_dto.actor.user_id, note=input_dto.note)
        except InvalidStatusTransitionError:
            logger.warning(
                "Rejected transition %s -> %s on order %s by %s",
                order.status.value, target.value, order.id, input_dto.actor.user_id,
            )
            raise

        saved = self.order_repository.save(order)
        for event in order.clear_domain_events():
            logger.info(
                "%s order=%s %s -> %s by=%s",
                event.event_type, saved.id, event.old_status, event.new_status, event.changed_by,
            )
        return UseCaseResult.ok(OrderDTO.from_entity(saved))
