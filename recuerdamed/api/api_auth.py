from typing import Any

from fastapi import APIRouter, Depends

from recuerdamed.schemas.sche_base import DataResponse
from recuerdamed.schemas.sche_user import LoginRequest, LoginResponse, UserRegisterRequest
from recuerdamed.services.srv_user import UserService

router = APIRouter()


@router.post('/login', response_model=DataResponse[LoginResponse])
def login_access_token(form_data: LoginRequest, user_service: UserService = Depends()) -> Any:
    return DataResponse().success_response(data=user_service.login(form_data))


@router.post('/register', status_code=201, response_model=DataResponse[LoginResponse])
def register(register_data: UserRegisterRequest, user_service: UserService = Depends()) -> Any:
    """
    Register a PATIENT or CAREGIVER account and return an access token.

    A caregiver may send `invite_code`; the account is then created together with
    the access grant for the inviting patient, or not at all.
    """
    return DataResponse().success_response(data=user_service.register_user(register_data))
