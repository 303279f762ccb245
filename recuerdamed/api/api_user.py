from typing import Any

from fastapi import APIRouter, Depends

from recuerdamed.helpers.login_manager import login_required
from recuerdamed.schemas.sche_base import DataResponse
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.services.srv_user import UserService

router = APIRouter()


@router.get("/me", dependencies=[Depends(login_required)], response_model=DataResponse[CurrentUser])
def detail_me(current_user: CurrentUser = Depends(UserService.get_current_user)) -> Any:
    """
    API get detail current User
    """
    return DataResponse().success_response(data=current_user)
