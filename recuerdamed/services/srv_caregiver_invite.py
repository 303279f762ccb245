import logging
import secrets
import string
from datetime import datetime, timedelta
from typing import List, Optional

from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from recuerdamed.core.config import settings
from recuerdamed.helpers.enums import PermissionLevel
from recuerdamed.helpers.exception_handler import (
    ConflictException, InviteExpiredException, NotFoundException, UnauthorizedException
)
from recuerdamed.models.model_caregiver_invite import CaregiverInvite
from recuerdamed.models.model_permission import Permission
from recuerdamed.repository.repo_caregiver_invite import CaregiverInviteRepository
from recuerdamed.repository.repo_patient_profile import PatientProfileRepository
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.services.srv_access import AccessService

logger = logging.getLogger(__name__)

INVITE_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_invite_code(length: int = None) -> str:
    length = length or settings.INVITE_CODE_LENGTH
    return ''.join(secrets.choice(INVITE_CODE_ALPHABET) for _ in range(length))


class CaregiverInviteService:
    def __init__(self, invite_repo: CaregiverInviteRepository = Depends(),
                 profile_repo: PatientProfileRepository = Depends(),
                 access_service: AccessService = Depends()):
        self.invite_repo = invite_repo
        self.profile_repo = profile_repo
        self.access_service = access_service

    def create_invite(self, profile_id: int, current_user: CurrentUser,
                      now: Optional[datetime] = None) -> CaregiverInvite:
        """
        Issue a single-use invite for a patient profile. The returned object is the only
        place the plaintext code is handed out.
        """
        now = now or datetime.utcnow()
        if not self.profile_repo.get_by_id(profile_id):
            raise NotFoundException(message="Patient profile not found")
        self.access_service.authorize(current_user, profile_id, PermissionLevel.ADMIN)

        code = generate_invite_code()
        while self.invite_repo.code_exists(code):
            code = generate_invite_code()

        expires_at = now + timedelta(hours=settings.INVITE_EXPIRE_HOURS)
        invite = self.invite_repo.create(profile_id=profile_id, code=code, expires_at=expires_at)
        logger.info(f"Invite {invite.invite_id} issued for profile_id={profile_id} by user_id={current_user.user_id}, "
                    f"expires at {expires_at.isoformat()}")
        return invite

    def list_active_invites(self, profile_id: int, current_user: CurrentUser,
                            now: Optional[datetime] = None) -> List[CaregiverInvite]:
        now = now or datetime.utcnow()
        self.access_service.authorize(current_user, profile_id, PermissionLevel.ADMIN)
        return self.invite_repo.list_active(profile_id, now)

    def redeem_invite(self, code: str, current_user: CurrentUser,
                      now: Optional[datetime] = None) -> Permission:
        if not current_user.is_caregiver:
            raise UnauthorizedException(message="Only caregivers can redeem invite codes")
        return self.redeem_for_caregiver(code, current_user.user_id, now=now)

    def redeem_for_caregiver(self, code: str, caregiver_id: int,
                             now: Optional[datetime] = None) -> Permission:
        now = now or datetime.utcnow()
        invite = self.invite_repo.get_by_code(code)
        if not invite:
            raise NotFoundException(message="Invite code not found")
        if invite.used or invite.expires_at <= now:
            raise InviteExpiredException()

        level = settings.DEFAULT_INVITE_PERMISSION_LEVEL
        try:
            permission = self.invite_repo.redeem(invite, caregiver_id=caregiver_id, level=level.value, now=now)
        except IntegrityError:
            logger.warning(f"Concurrent grant while redeeming invite {invite.invite_id} for caregiver_id={caregiver_id}")
            raise ConflictException(message="Access for this caregiver was granted concurrently, please retry")

        if permission is None:
            # Another request claimed the invite between our read and the conditional update
            raise InviteExpiredException()

        logger.info(f"Invite {invite.invite_id} redeemed: caregiver_id={caregiver_id} "
                    f"profile_id={permission.profile_id} level={permission.level}")
        return permission
