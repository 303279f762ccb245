from typing import Any

from fastapi import APIRouter, Depends, Query

from recuerdamed.helpers.login_manager import login_required
from recuerdamed.helpers.paging import Page, PaginationParams
from recuerdamed.schemas.sche_base import DataResponse
from recuerdamed.schemas.sche_treatment import TreatmentCreateRequest, TreatmentUpdateRequest, TreatmentResponse
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.services.srv_clinical_record import TreatmentService

router = APIRouter()


@router.get('', response_model=Page[TreatmentResponse])
def list_treatments(
    profile_id: int = Query(..., gt=0),
    params: PaginationParams = Depends(),
    treatment_service: TreatmentService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return treatment_service.list_records(profile_id, params, current_user)


@router.post('', status_code=201, response_model=DataResponse[TreatmentResponse])
def create_treatment(
    treatment_data: TreatmentCreateRequest,
    treatment_service: TreatmentService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=treatment_service.create_record(treatment_data, current_user))


@router.get('/{treatment_id}', response_model=DataResponse[TreatmentResponse])
def get_treatment(
    treatment_id: int,
    treatment_service: TreatmentService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=treatment_service.get_record(treatment_id, current_user))


@router.patch('/{treatment_id}', response_model=DataResponse[TreatmentResponse])
def update_treatment(
    treatment_id: int,
    treatment_data: TreatmentUpdateRequest,
    treatment_service: TreatmentService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=treatment_service.update_record(treatment_id, treatment_data, current_user))


@router.delete('/{treatment_id}', response_model=DataResponse[None])
def delete_treatment(
    treatment_id: int,
    treatment_service: TreatmentService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    treatment_service.delete_record(treatment_id, current_user)
    return DataResponse().success_response(data=None)
