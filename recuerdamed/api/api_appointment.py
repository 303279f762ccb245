from typing import Any

from fastapi import APIRouter, Depends, Query

from recuerdamed.helpers.login_manager import login_required
from recuerdamed.helpers.paging import Page, PaginationParams
from recuerdamed.schemas.sche_base import DataResponse
from recuerdamed.schemas.sche_appointment import AppointmentCreateRequest, AppointmentUpdateRequest, AppointmentResponse
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.services.srv_clinical_record import AppointmentService

router = APIRouter()


@router.get('', response_model=Page[AppointmentResponse])
def list_appointments(
    profile_id: int = Query(..., gt=0),
    params: PaginationParams = Depends(),
    appointment_service: AppointmentService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return appointment_service.list_records(profile_id, params, current_user)


@router.post('', status_code=201, response_model=DataResponse[AppointmentResponse])
def create_appointment(
    appointment_data: AppointmentCreateRequest,
    appointment_service: AppointmentService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    """
    Schedule an appointment. When the caller is a caregiver the appointment is
    linked to them as the accompanying caregiver.
    """
    return DataResponse().success_response(data=appointment_service.create_record(appointment_data, current_user))


@router.get('/{appointment_id}', response_model=DataResponse[AppointmentResponse])
def get_appointment(
    appointment_id: int,
    appointment_service: AppointmentService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=appointment_service.get_record(appointment_id, current_user))


@router.patch('/{appointment_id}', response_model=DataResponse[AppointmentResponse])
def update_appointment(
    appointment_id: int,
    appointment_data: AppointmentUpdateRequest,
    appointment_service: AppointmentService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=appointment_service.update_record(appointment_id, appointment_data, current_user))


@router.delete('/{appointment_id}', response_model=DataResponse[None])
def delete_appointment(
    appointment_id: int,
    appointment_service: AppointmentService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    appointment_service.delete_record(appointment_id, current_user)
    return DataResponse().success_response(data=None)
