import logging
from typing import List

from fastapi import Depends

from recuerdamed.helpers.enums import PermissionLevel, UserRole
from recuerdamed.helpers.exception_handler import ForbiddenException, NotFoundException, UnauthorizedException
from recuerdamed.models.model_permission import Permission
from recuerdamed.repository.repo_permission import PermissionRepository
from recuerdamed.repository.repo_user import UserRepository
from recuerdamed.schemas.sche_permission import (
    PermissionCreateRequest, PermissionUpdateRequest, CaregiverPatientResponse
)
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.services.srv_access import AccessService

logger = logging.getLogger(__name__)


class PermissionService:
    """
    Management of caregiver grants. Changing who may see a profile needs ADMIN
    on it (the owning patient always qualifies); a caregiver may always see
    and give up its own grant.
    """

    def __init__(self, permission_repo: PermissionRepository = Depends(),
                 user_repo: UserRepository = Depends(),
                 access_service: AccessService = Depends()):
        self.permission_repo = permission_repo
        self.user_repo = user_repo
        self.access_service = access_service

    def _get_permission(self, permission_id: int) -> Permission:
        permission = self.permission_repo.get_by_id(permission_id)
        if permission is None:
            raise ForbiddenException()
        return permission

    def list_permissions(self, profile_id: int, current_user: CurrentUser) -> List[Permission]:
        self.access_service.authorize(current_user, profile_id, PermissionLevel.ADMIN)
        return self.permission_repo.list_by_profile(profile_id)

    def grant_permission(self, data: PermissionCreateRequest, current_user: CurrentUser) -> Permission:
        self.access_service.authorize(current_user, data.profile_id, PermissionLevel.ADMIN)
        caregiver = self.user_repo.get_by_id(data.caregiver_id)
        if not caregiver or caregiver.role != UserRole.CAREGIVER.value:
            raise NotFoundException(message="Caregiver not found")

        permission = self.permission_repo.upsert(data.profile_id, data.caregiver_id, data.level.value)
        logger.info(f"Permission {permission.permission_id} granted: profile_id={data.profile_id} "
                    f"caregiver_id={data.caregiver_id} level={data.level.value} by user_id={current_user.user_id}")
        return permission

    def get_permission(self, permission_id: int, current_user: CurrentUser) -> Permission:
        permission = self._get_permission(permission_id)
        if current_user.is_caregiver and permission.caregiver_id == current_user.user_id:
            return permission
        self.access_service.authorize(current_user, permission.profile_id, PermissionLevel.ADMIN)
        return permission

    def update_permission(self, permission_id: int, data: PermissionUpdateRequest,
                          current_user: CurrentUser) -> Permission:
        permission = self._get_permission(permission_id)
        self.access_service.authorize(current_user, permission.profile_id, PermissionLevel.ADMIN)
        previous = permission.level
        permission.level = data.level.value
        permission = self.permission_repo.update(permission)
        logger.info(f"Permission {permission_id} changed from {previous} to {permission.level} "
                    f"by user_id={current_user.user_id}")
        return permission

    def revoke_permission(self, permission_id: int, current_user: CurrentUser) -> None:
        permission = self._get_permission(permission_id)
        if not (current_user.is_caregiver and permission.caregiver_id == current_user.user_id):
            self.access_service.authorize(current_user, permission.profile_id, PermissionLevel.ADMIN)
        self.permission_repo.delete(permission)
        logger.info(f"Permission {permission_id} revoked by user_id={current_user.user_id}")

    def list_my_patients(self, current_user: CurrentUser) -> List[CaregiverPatientResponse]:
        if not current_user.is_caregiver:
            raise UnauthorizedException(message="Only caregivers have patients")
        return [
            CaregiverPatientResponse(
                profile_id=permission.profile_id,
                name=permission.profile.name,
                level=PermissionLevel(permission.level),
            )
            for permission in self.permission_repo.list_by_caregiver(current_user.user_id)
        ]
