import logging
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from constants.doctor_status import ERRORS
from utils.responses import error_response

logger = logging.getLogger("utils.exceptions")


class DoctorError(Exception):
    """Base error for the doctors API. Carries the HTTP status and response body."""

    def __init__(self, status_code: int, message: str, error: str):
        super().__init__(error)
        self.status_code = status_code
        self.message = message
        self.error = error


class DoctorValidationError(DoctorError):
    def __init__(self, error: str, kind: str = "INVALID_REQUEST"):
        super().__init__(error=error, **ERRORS[kind])


class DoctorNotFound(DoctorError):
    def __init__(self, doctor_id: str):
        super().__init__(error=f"No doctor with id {doctor_id}", **ERRORS["DOCTOR_NOT_FOUND"])
        self.doctor_id = doctor_id


class DoctorServerError(DoctorError):
    def __init__(self, error: str):
        super().__init__(error=error, **ERRORS["SERVER_ERROR"])


async def doctor_error_handler(request: Request, exc: DoctorError):
    return error_response(exc.message, exc.error, exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies and query values as 400 instead of FastAPI's 422."""
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        problems.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    detail = "; ".join(problems)
    logger.warning("Rejected request to %s: %s", request.url.path, detail)
    return error_response(ERRORS["INVALID_REQUEST"]["message"], detail, ERRORS["INVALID_REQUEST"]["status_code"])
