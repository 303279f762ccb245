import logging
from fastapi import Depends

from recuerdamed.helpers.enums import PermissionLevel
from recuerdamed.helpers.exception_handler import ForbiddenException
from recuerdamed.models.model_patient_profile import PatientProfile
from recuerdamed.repository.repo_patient_profile import PatientProfileRepository
from recuerdamed.repository.repo_permission import PermissionRepository
from recuerdamed.schemas.sche_token import CurrentUser

logger = logging.getLogger(__name__)


class AccessService:
    """
    Gatekeeper for everything scoped to a patient profile.

    The owning patient is always allowed. A caregiver is allowed when a permission
    row for (profile, caregiver) exists whose level is at least the required one.
    A missing profile is reported exactly like a denied one.
    """

    def __init__(self, profile_repo: PatientProfileRepository = Depends(),
                 permission_repo: PermissionRepository = Depends()):
        self.profile_repo = profile_repo
        self.permission_repo = permission_repo

    def authorize(self, current_user: CurrentUser, profile_id: int,
                  required_level: PermissionLevel) -> PatientProfile:
        profile = self.profile_repo.get_by_id(profile_id)
        if profile is not None:
            if current_user.is_patient and profile.patient_id == current_user.user_id:
                return profile
            if current_user.is_caregiver:
                permission = self.permission_repo.get(profile_id, current_user.user_id)
                if permission and PermissionLevel(permission.level).allows(required_level):
                    return profile

        logger.warning(
            f"Access denied: user_id={current_user.user_id} role={current_user.role.value} "
            f"profile_id={profile_id} required={PermissionLevel(required_level).value}"
        )
        raise ForbiddenException()
