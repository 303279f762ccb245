import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from recuerdamed.db.base import get_db
from recuerdamed.models.model_user import User
from recuerdamed.core.security import verify_password, get_password_hash, create_access_token, decode_access_token
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.schemas.sche_user import UserRegisterRequest, UserItemResponse, LoginRequest, LoginResponse
from recuerdamed.repository.repo_user import UserRepository
from recuerdamed.repository.repo_patient_profile import PatientProfileRepository
from recuerdamed.services.srv_caregiver_invite import CaregiverInviteService
from recuerdamed.helpers.enums import UserRole
from recuerdamed.helpers.exception_handler import (
    ConflictException, CustomException, UnauthorizedException, ValidationException
)

logger = logging.getLogger(__name__)

reusable_oauth2 = HTTPBearer(
    scheme_name='Authorization',
    auto_error=False
)


class UserService:
    def __init__(self, user_repo: UserRepository = Depends(),
                 profile_repo: PatientProfileRepository = Depends(),
                 invite_service: CaregiverInviteService = Depends()):
        self.user_repo = user_repo
        self.profile_repo = profile_repo
        self.invite_service = invite_service

    def authenticate(self, *, email: str, password: str) -> Optional[User]:
        user = self.user_repo.get_by_email(email)
        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user

    @staticmethod
    def get_current_user(http_authorization_credentials=Depends(reusable_oauth2),
                         db: Session = Depends(get_db)) -> CurrentUser:
        if http_authorization_credentials is None:
            raise UnauthorizedException(message="Token is missing")

        token_data = decode_access_token(http_authorization_credentials.credentials)
        if not token_data.sub.isdigit():
            logger.warning("Token subject is not a user id")
            raise UnauthorizedException(message="Could not validate credentials")

        user = UserRepository(db).get_by_id(int(token_data.sub))
        if not user or not user.is_active:
            logger.warning(f"Token for unknown or inactive user_id={token_data.sub}")
            raise UnauthorizedException(message="Could not validate credentials")
        if user.role != token_data.role.value:
            logger.warning(f"Token role {token_data.role.value} does not match user_id={user.user_id}")
            raise UnauthorizedException(message="Could not validate credentials")

        # The profile is created lazily, so it may exist even when the token predates it
        profile_id = None
        if user.role == UserRole.PATIENT.value:
            profile = PatientProfileRepository(db).get_profile_by_patient_id(user.user_id)
            profile_id = profile.profile_id if profile else token_data.profile_id

        return CurrentUser(user_id=user.user_id, email=user.email, role=UserRole(user.role), profile_id=profile_id)

    def build_login_response(self, user: User) -> LoginResponse:
        profile_id = None
        if user.role == UserRole.PATIENT.value:
            profile = self.profile_repo.get_profile_by_patient_id(user.user_id)
            profile_id = profile.profile_id if profile else None
        access_token = create_access_token(user_id=user.user_id, role=user.role, profile_id=profile_id)
        return LoginResponse(access_token=access_token, user=UserItemResponse.model_validate(user), profile_id=profile_id)

    def login(self, data: LoginRequest) -> LoginResponse:
        user = self.authenticate(email=data.email, password=data.password)
        if not user:
            logger.info(f"Failed login for {data.email}")
            raise UnauthorizedException(message='Incorrect email or password')
        if not user.is_active:
            raise UnauthorizedException(message='Inactive user')
        return self.build_login_response(user)

    def register_user(self, data: UserRegisterRequest) -> LoginResponse:
        if data.invite_code and data.role != UserRole.CAREGIVER:
            raise ValidationException(message='Only caregivers can register with an invite code')
        if self.user_repo.get_by_email(data.email):
            raise ConflictException(message='Email already exists')

        new_user = User(
            full_name=data.full_name,
            email=data.email,
            hashed_password=get_password_hash(data.password),
            is_active=True,
            role=data.role.value,
        )
        try:
            if data.invite_code:
                # User row and permission grant commit together, or not at all
                self.user_repo.create(new_user, commit=False)
                self.invite_service.redeem_for_caregiver(data.invite_code, new_user.user_id)
                self.user_repo.db.refresh(new_user)
            else:
                self.user_repo.create(new_user)
        except IntegrityError:
            self.user_repo.db.rollback()
            raise ConflictException(message='Email already exists')
        except CustomException:
            self.user_repo.db.rollback()
            raise

        logger.info(f"Registered user_id={new_user.user_id} role={new_user.role}")
        return self.build_login_response(new_user)
