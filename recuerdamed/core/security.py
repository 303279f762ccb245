import jwt
import bcrypt
import logging
from typing import Any, Optional, Union
from pydantic import ValidationError
from recuerdamed.core.config import settings
from recuerdamed.helpers.exception_handler import UnauthorizedException
from recuerdamed.schemas.sche_token import TokenPayload
from datetime import datetime, timedelta

logger = logging.getLogger(__name__)


def create_access_token(user_id: Union[int, Any], role: str, profile_id: Optional[int] = None) -> str:
    now = datetime.utcnow()
    expire = now + timedelta(
        seconds=settings.ACCESS_TOKEN_EXPIRE_SECONDS
    )
    to_encode = {
        "exp": expire, "iat": now, "sub": str(user_id),
        "role": role, "profile_id": profile_id
    }
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.SECURITY_ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> TokenPayload:
    """
    Verify signature and expiry of an access token and return its claims.
    Any failure is reported as UnauthorizedException.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.SECURITY_ALGORITHM])
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        logger.info("Token decode failed: token expired")
        raise UnauthorizedException(message="Token has expired. Please log in again.")
    except (jwt.PyJWTError, ValidationError) as e:
        logger.warning(f"Token decode failed: {e}")
        raise UnauthorizedException(message="Could not validate credentials")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))


def get_password_hash(password: str) -> str:
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')
