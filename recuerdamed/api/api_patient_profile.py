from typing import Any
from fastapi import APIRouter, Depends, Query

from recuerdamed.helpers.enums import UserRole
from recuerdamed.helpers.login_manager import login_required, PermissionRequired
from recuerdamed.schemas.sche_base import DataResponse
from recuerdamed.schemas.sche_patient_profile import (
    PatientProfileSaveRequest, PatientProfileUpdateRequest, PatientProfileResponse, CalendarResponse
)
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.services.srv_patient_profile import PatientProfileService

router = APIRouter()


@router.get('/me', response_model=DataResponse[PatientProfileResponse])
def get_my_profile(
    profile_service: PatientProfileService = Depends(),
    current_user: CurrentUser = Depends(PermissionRequired(UserRole.PATIENT))
) -> Any:
    return DataResponse().success_response(data=profile_service.get_my_profile(current_user))


@router.put('/me', response_model=DataResponse[PatientProfileResponse])
def save_my_profile(
    profile_data: PatientProfileSaveRequest,
    profile_service: PatientProfileService = Depends(),
    current_user: CurrentUser = Depends(PermissionRequired(UserRole.PATIENT))
) -> Any:
    """
    Create the patient's profile on first save, update it afterwards.
    """
    return DataResponse().success_response(data=profile_service.save_my_profile(profile_data, current_user))


@router.get('/{profile_id}', response_model=DataResponse[PatientProfileResponse])
def get_profile(
    profile_id: int,
    profile_service: PatientProfileService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=profile_service.get_profile(profile_id, current_user))


@router.patch('/{profile_id}', response_model=DataResponse[PatientProfileResponse])
def update_profile(
    profile_id: int,
    profile_data: PatientProfileUpdateRequest,
    profile_service: PatientProfileService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    profile = profile_service.update_profile(profile_id, profile_data, current_user)
    return DataResponse().success_response(data=profile)


@router.get('/{profile_id}/calendar', response_model=DataResponse[CalendarResponse])
def get_calendar(
    profile_id: int,
    year: int = Query(..., ge=1900, le=9999),
    month: int = Query(..., ge=1, le=12),
    profile_service: PatientProfileService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    """
    Medications (by start date) and appointments of one month, grouped per day.
    """
    calendar = profile_service.get_calendar(profile_id, year, month, current_user)
    return DataResponse().success_response(data=calendar)
