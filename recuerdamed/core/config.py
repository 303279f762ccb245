import os
from typing import List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

from recuerdamed.helpers.enums import PermissionLevel

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '../../'))
load_dotenv(os.path.join(BASE_DIR, '.env'))


class Settings(BaseSettings):
    PROJECT_NAME: str = os.getenv('PROJECT_NAME', 'RecuerdaMed')
    SECRET_KEY: str = os.getenv('SECRET_KEY', 'recuerdamed-development-secret-key-change-me')
    API_PREFIX: str = '/api'
    BACKEND_CORS_ORIGINS: List[str] = ['*']
    DATABASE_URL: str = os.getenv('SQL_DATABASE_URL', 'sqlite:///' + os.path.join(BASE_DIR, 'recuerdamed.db'))
    ACCESS_TOKEN_EXPIRE_SECONDS: int = 60 * 60 * 24 * 7  # Token expired after 7 days
    SECURITY_ALGORITHM: str = 'HS256'
    LOGGING_CONFIG_FILE: str = os.path.join(BASE_DIR, 'logging.ini')

    # Caregiver invites
    INVITE_EXPIRE_HOURS: int = int(os.getenv('INVITE_EXPIRE_HOURS', '48'))
    # Codes are stored in a String(16) column
    INVITE_CODE_LENGTH: int = Field(8, ge=4, le=16)
    DEFAULT_INVITE_PERMISSION_LEVEL: PermissionLevel = PermissionLevel.READ


settings = Settings()
