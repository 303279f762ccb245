from typing import Any

from fastapi import APIRouter, Depends, Query

from recuerdamed.helpers.login_manager import login_required
from recuerdamed.helpers.paging import Page, PaginationParams
from recuerdamed.schemas.sche_base import DataResponse
from recuerdamed.schemas.sche_note import NoteCreateRequest, NoteUpdateRequest, NoteResponse
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.services.srv_clinical_record import NoteService

router = APIRouter()


@router.get('', response_model=Page[NoteResponse])
def list_notes(
    profile_id: int = Query(..., gt=0),
    params: PaginationParams = Depends(),
    note_service: NoteService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return note_service.list_records(profile_id, params, current_user)


@router.post('', status_code=201, response_model=DataResponse[NoteResponse])
def create_note(
    note_data: NoteCreateRequest,
    note_service: NoteService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=note_service.create_record(note_data, current_user))


@router.get('/{note_id}', response_model=DataResponse[NoteResponse])
def get_note(
    note_id: int,
    note_service: NoteService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=note_service.get_record(note_id, current_user))


@router.patch('/{note_id}', response_model=DataResponse[NoteResponse])
def update_note(
    note_id: int,
    note_data: NoteUpdateRequest,
    note_service: NoteService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=note_service.update_record(note_id, note_data, current_user))


@router.delete('/{note_id}', response_model=DataResponse[None])
def delete_note(
    note_id: int,
    note_service: NoteService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    note_service.delete_record(note_id, current_user)
    return DataResponse().success_response(data=None)
