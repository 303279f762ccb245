from fastapi import Depends

from recuerdamed.helpers.enums import UserRole
from recuerdamed.helpers.exception_handler import UnauthorizedException
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.services.srv_user import UserService


def login_required(current_user: CurrentUser = Depends(UserService.get_current_user)) -> CurrentUser:
    return current_user


class PermissionRequired:
    """Route dependency restricting an endpoint to the given roles."""

    def __init__(self, *roles: UserRole):
        self.roles = roles

    def __call__(self, current_user: CurrentUser = Depends(login_required)) -> CurrentUser:
        if self.roles and current_user.role not in self.roles:
            raise UnauthorizedException(
                message=f'User {current_user.email} can not access this api as {current_user.role.value}'
            )
        return current_user
