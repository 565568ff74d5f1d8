"""
Who may do what with an order.
"""
from dataclasses import dataclass
from uuid import UUID

from apps.users.domain.value_objects import UserRole
from shared.domain import PermissionDeniedError
from ..entities.order import Order
from ..exceptions import OrderAccessDeniedError


@dataclass(frozen=True)
class Actor:
    """The authenticated caller of an order operation."""
    user_id: UUID
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class OrderAccessPolicy:
    """Role capability plus ownership checks for order operations."""

    def can_create(self, actor: Actor) -> bool:
        return actor.role == UserRole.CUSTOMER

    def can_read(self, actor: Actor, order: Order) -> bool:
        return actor.is_admin or order.is_customer(actor.user_id) or order.is_assigned_to(actor.user_id)

    def can_update_status(self, actor: Actor, order: Order) -> bool:
        return actor.is_admin or order.is_assigned_to(actor.user_id)

    def can_assign(self, actor: Actor) -> bool:
        return actor.is_admin

    def can_view_fleet(self, actor: Actor) -> bool:
        return actor.is_admin

    def ensure_can_create(self, actor: Actor) -> None:
        if not self.can_create(actor):
            raise PermissionDeniedError("Only customers can place orders")

    def ensure_can_read(self, actor: Actor, order: Order) -> None:
        if not self.can_read(actor, order):
            raise OrderAccessDeniedError()

    def ensure_can_update_status(self, actor: Actor, order: Order) -> None:
        if not self.can_update_status(actor, order):
            raise OrderAccessDeniedError("Only the assigned delivery person or an admin can update order status")

    def ensure_can_assign(self, actor: Actor) -> None:
        if not self.can_assign(actor):
            raise PermissionDeniedError("Only admins can assign delivery personnel")

    def ensure_can_view_fleet(self, actor: Actor) -> None:
        if not self.can_view_fleet(actor):
            raise PermissionDeniedError("Only admins can view all orders")
