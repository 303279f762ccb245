from typing import Any

from fastapi import APIRouter, Depends, Query

from recuerdamed.helpers.login_manager import login_required
from recuerdamed.helpers.paging import Page, PaginationParams
from recuerdamed.schemas.sche_base import DataResponse
from recuerdamed.schemas.sche_medication import MedicationCreateRequest, MedicationUpdateRequest, MedicationResponse
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.services.srv_clinical_record import MedicationService

router = APIRouter()


@router.get('', response_model=Page[MedicationResponse])
def list_medications(
    profile_id: int = Query(..., gt=0),
    params: PaginationParams = Depends(),
    medication_service: MedicationService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    """
    API list medications of a patient profile, newest first by default.
    """
    return medication_service.list_records(profile_id, params, current_user)


@router.post('', status_code=201, response_model=DataResponse[MedicationResponse])
def create_medication(
    medication_data: MedicationCreateRequest,
    medication_service: MedicationService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=medication_service.create_record(medication_data, current_user))


@router.get('/{medication_id}', response_model=DataResponse[MedicationResponse])
def get_medication(
    medication_id: int,
    medication_service: MedicationService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=medication_service.get_record(medication_id, current_user))


@router.patch('/{medication_id}', response_model=DataResponse[MedicationResponse])
def update_medication(
    medication_id: int,
    medication_data: MedicationUpdateRequest,
    medication_service: MedicationService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=medication_service.update_record(medication_id, medication_data, current_user))


@router.delete('/{medication_id}', response_model=DataResponse[None])
def delete_medication(
    medication_id: int,
    medication_service: MedicationService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    medication_service.delete_record(medication_id, current_user)
    return DataResponse().success_response(data=None)
