"""
JWT issuance for domain users.
"""
from rest_framework_simplejwt.tokens import RefreshToken

from ..application.dtos.auth_dto import TokenDTO
from ..domain.entities.user import User
from .models.user_model import UserModel


class JwtTokenIssuer:
    """Issues SimpleJWT access/refresh pairs carrying role and phone claims."""

    def issue(self, user: User) -> TokenDTO:
        django_user = UserModel.objects.get(id=user.id)
        refresh = RefreshToken.for_user(django_user)
        refresh['role'] = user.role.value
        refresh['phone_number'] = user.phone_number.value

        return TokenDTO(
            access_token=str(refresh.access_token),
            refresh_token=str(refresh),
            token_type="Bearer",
        )
