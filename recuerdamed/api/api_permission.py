from typing import Any, List

from fastapi import APIRouter, Depends, Query

from recuerdamed.helpers.login_manager import login_required
from recuerdamed.schemas.sche_base import DataResponse
from recuerdamed.schemas.sche_permission import PermissionCreateRequest, PermissionUpdateRequest, PermissionResponse
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.services.srv_permission import PermissionService

router = APIRouter()


@router.get('', response_model=DataResponse[List[PermissionResponse]])
def list_permissions(
    profile_id: int = Query(..., gt=0),
    permission_service: PermissionService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=permission_service.list_permissions(profile_id, current_user))


@router.post('', status_code=201, response_model=DataResponse[PermissionResponse])
def grant_permission(
    permission_data: PermissionCreateRequest,
    permission_service: PermissionService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=permission_service.grant_permission(permission_data, current_user))


@router.get('/{permission_id}', response_model=DataResponse[PermissionResponse])
def get_permission(
    permission_id: int,
    permission_service: PermissionService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=permission_service.get_permission(permission_id, current_user))


@router.patch('/{permission_id}', response_model=DataResponse[PermissionResponse])
def update_permission(
    permission_id: int,
    permission_data: PermissionUpdateRequest,
    permission_service: PermissionService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    permission = permission_service.update_permission(permission_id, permission_data, current_user)
    return DataResponse().success_response(data=permission)


@router.delete('/{permission_id}', response_model=DataResponse[None])
def revoke_permission(
    permission_id: int,
    permission_service: PermissionService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    permission_service.revoke_permission(permission_id, current_user)
    return DataResponse().success_response(data=None)
