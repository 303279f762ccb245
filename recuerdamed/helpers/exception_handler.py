import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from recuerdamed.schemas.sche_base import ResponseSchemaBase

logger = logging.getLogger(__name__)


class CustomException(Exception):
    http_code: int
    code: str
    message: str

    def __init__(self, http_code: int = None, code: str = None, message: str = None):
        self.http_code = http_code if http_code else 500
        self.code = code if code else str(self.http_code)
        self.message = message
        super().__init__(message)


class ValidationException(CustomException):
    def __init__(self, message: str = 'Invalid data'):
        super().__init__(http_code=400, code='400', message=message)


class UnauthorizedException(CustomException):
    def __init__(self, message: str = 'Authentication required'):
        super().__init__(http_code=401, code='401', message=message)


class ForbiddenException(CustomException):
    def __init__(self, message: str = 'You do not have access to this resource'):
        super().__init__(http_code=403, code='403', message=message)


class NotFoundException(CustomException):
    def __init__(self, message: str = 'Not found'):
        super().__init__(http_code=404, code='404', message=message)


class ConflictException(CustomException):
    def __init__(self, message: str = 'Conflict'):
        super().__init__(http_code=409, code='409', message=message)


class InviteExpiredException(CustomException):
    def __init__(self, message: str = 'Invite code is expired or already used'):
        super().__init__(http_code=410, code='410', message=message)


class InternalException(CustomException):
    def __init__(self, message: str = 'Internal server error'):
        super().__init__(http_code=500, code='500', message=message)


def get_message_validation(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        field = '.'.join(str(loc) for loc in error.get('loc', ()) if loc != 'body')
        messages.append(f"{field}: {error.get('msg')}" if field else error.get('msg'))
    return '; '.join(messages)


async def http_exception_handler(request: Request, exc: CustomException):
    return JSONResponse(
        status_code=exc.http_code,
        content=jsonable_encoder(ResponseSchemaBase().custom_response(exc.code, exc.message))
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder(ResponseSchemaBase().custom_response('400', get_message_validation(exc)))
    )


async def fastapi_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    error = InternalException()
    return JSONResponse(
        status_code=error.http_code,
        content=jsonable_encoder(ResponseSchemaBase().custom_response(error.code, error.message))
    )
