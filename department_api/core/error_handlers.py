import logging
from http import HTTPStatus
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from department_api.core.exceptions import BaseAppException
from department_api.schemas.common.error_schema import ErrorMessage

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    body = ErrorMessage(status=HTTPStatus(status_code).name, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        field = error["loc"][-1] if error.get("loc") else "body"
        messages.append(f"{field}: {error['msg']}")
    logger.info(f"Rejected {request.method} {request.url.path}: {'; '.join(messages)}")
    return error_response(status.HTTP_400_BAD_REQUEST, "; ".join(messages))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
