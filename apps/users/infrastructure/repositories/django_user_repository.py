"""
Django ORM implementation of UserRepository.
"""
from typing import List, Optional
from uuid import UUID

from django.db import transaction

from ...domain.entities.user import User
from ...domain.exceptions import UserNotFoundError
from ...domain.repositories.user_repository import UserRepository
from ...domain.value_objects.phone_number import PhoneNumber
from ...domain.value_objects.user_role import UserRole
from ..models.user_model import UserModel


class DjangoUserRepository(UserRepository):
    """Django ORM based user repository implementation."""

    def save(self, user: User) -> User:
        """Save a user entity."""
        with transaction.atomic():
            model, created = UserModel.objects.update_or_create(
                id=user.id,
                defaults={
                    'phone_number': user.phone_number.value,
                    'full_name': user.full_name,
                    'address': user.address,
                    'role': user.role.value,
                    'is_active': user.is_active,
                    'is_verified': user.is_verified,
                    'is_staff': user.is_staff,
                    'otp_code': user.otp_code,
                    'otp_expiry': user.otp_expiry,
                    'last_login': user.last_login,
                    'updated_at': user.updated_at,
                }
            )
            if created:
                model.set_unusable_password()
                model.created_at = user.created_at
                model.save(update_fields=['password', 'created_at'])
            return self._to_entity(model)

    def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by ID."""
        try:
            model = UserModel.objects.get(id=user_id)
            return self._to_entity(model)
        except UserModel.DoesNotExist:
            return None

    def find_by_phone(self, phone_number: str) -> Optional[User]:
        """Find a user by phone number."""
        try:
            model = UserModel.objects.get(phone_number=phone_number)
            return self._to_entity(model)
        except UserModel.DoesNotExist:
            return None

    def find_all(
        self,
        role: Optional[UserRole] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[User]:
        """Find all users with optional filters."""
        queryset = UserModel.objects.all()
        if role is not None:
            queryset = queryset.filter(role=role.value)
        models = queryset.order_by('-created_at')[offset:offset + limit]
        return [self._to_entity(model) for model in models]

    def get_role(self, user_id: UUID) -> UserRole:
        """Look up only the role column of a user."""
        role = UserModel.objects.filter(id=user_id).values_list('role', flat=True).first()
        if role is None:
            raise UserNotFoundError(str(user_id))
        return UserRole(role)

    def _to_entity(self, model: UserModel) -> User:
        """Convert Django model to domain entity."""
        return User(
            id=model.id,
            phone_number=PhoneNumber(value=model.phone_number),
            full_name=model.full_name,
            address=model.address,
            role=UserRole(model.role),
            is_active=model.is_active,
            is_verified=model.is_verified,
            is_staff=model.is_staff,
            otp_code=model.otp_code,
            otp_expiry=model.otp_expiry,
            last_login=model.last_login,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
