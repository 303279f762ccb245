import logging
from typing import Any, List

from fastapi import APIRouter, Depends, Query

from recuerdamed.helpers.enums import UserRole
from recuerdamed.helpers.login_manager import login_required, PermissionRequired
from recuerdamed.schemas.sche_base import DataResponse
from recuerdamed.schemas.sche_caregiver_invite import (
    CaregiverInviteCreateRequest, CaregiverInviteAcceptRequest, CaregiverInviteResponse
)
from recuerdamed.schemas.sche_permission import PermissionResponse
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.services.srv_caregiver_invite import CaregiverInviteService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post('', status_code=201, response_model=DataResponse[CaregiverInviteResponse])
def create_invite(
    invite_data: CaregiverInviteCreateRequest,
    invite_service: CaregiverInviteService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    """
    Issue a caregiver invite for a patient profile.

    **Authorization**: the owning patient, or a caregiver with ADMIN on the profile.

    **Response**: the invite including its code. The code is valid for 48 hours and
    can be redeemed once.
    """
    invite = invite_service.create_invite(invite_data.profile_id, current_user)
    return DataResponse().success_response(data=invite)


@router.get('', response_model=DataResponse[List[CaregiverInviteResponse]])
def list_active_invites(
    profile_id: int = Query(..., gt=0),
    invite_service: CaregiverInviteService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=invite_service.list_active_invites(profile_id, current_user))


@router.post('/accept', response_model=DataResponse[PermissionResponse])
def accept_invite(
    accept_data: CaregiverInviteAcceptRequest,
    invite_service: CaregiverInviteService = Depends(),
    current_user: CurrentUser = Depends(PermissionRequired(UserRole.CAREGIVER))
) -> Any:
    """
    Redeem an invite code. On success the caller holds a permission on the
    inviting patient's profile and the code can no longer be used.
    """
    logger.info(f"accept_invite request from user_id={current_user.user_id}")
    permission = invite_service.redeem_invite(accept_data.code, current_user)
    return DataResponse().success_response(data=permission)
