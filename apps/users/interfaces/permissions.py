"""
Role based DRF permission classes.
"""
from rest_framework.permissions import BasePermission

from ..domain.value_objects.user_role import UserRole


class HasRole(BasePermission):
    """Allow authenticated users whose role is in ``allowed_roles``."""

    allowed_roles = ()
    message = "You do not have the role required for this action."

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        return getattr(user, 'role', None) in {role.value for role in self.allowed_roles}


class IsCustomer(HasRole):
    allowed_roles = (UserRole.CUSTOMER,)


class IsDeliveryPerson(HasRole):
    allowed_roles = (UserRole.DELIVERY,)


class IsAdmin(HasRole):
    allowed_roles = (UserRole.ADMIN,)


class IsDeliveryOrAdmin(HasRole):
    allowed_roles = (UserRole.DELIVERY, UserRole.ADMIN)
