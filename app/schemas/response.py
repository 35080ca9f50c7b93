from pydantic import BaseModel
from typing import Optional, Any


class ResponseStatus:
    """
    Status tags carried in every response envelope.
    """
    SUCCESS = "SUCCESS"
    SERVER_ERROR = "SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    RECORD_NOT_FOUND = "RECORD_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    HTTP_ERROR = "HTTP_ERROR"


class ApiResponse(BaseModel):
    """
    Standard response structure for both success and error bodies.
    """
    status: str
    message: str
    data: Optional[Any] = None


def success(data: Optional[Any] = None, message: str = "Your request is successfully executed") -> dict:
    return ApiResponse(status=ResponseStatus.SUCCESS, message=message, data=data).model_dump()


def record_not_found(message: str = "Record not found with specified criteria.") -> dict:
    return ApiResponse(status=ResponseStatus.RECORD_NOT_FOUND, message=message).model_dump()
