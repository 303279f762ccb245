from typing import Any, List

from fastapi import APIRouter, Depends

from recuerdamed.helpers.enums import UserRole
from recuerdamed.helpers.login_manager import PermissionRequired
from recuerdamed.schemas.sche_base import DataResponse
from recuerdamed.schemas.sche_permission import CaregiverPatientResponse
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.services.srv_permission import PermissionService

router = APIRouter()


@router.get('/patients', response_model=DataResponse[List[CaregiverPatientResponse]])
def get_my_patients(
    permission_service: PermissionService = Depends(),
    current_user: CurrentUser = Depends(PermissionRequired(UserRole.CAREGIVER))
) -> Any:
    return DataResponse().success_response(data=permission_service.list_my_patients(current_user))
