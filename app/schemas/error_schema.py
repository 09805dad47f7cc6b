from pydantic import BaseModel
from typing import Any, Optional


# 오류 응답 스키마
class ErrorResponse(BaseModel):
    error: str                      # 오류 종류 (ValidationError, Conflict, NotFound ...)
    message: str
    field: Optional[str] = None     # 문제가 된 필드 (옵션)
    value: Optional[Any] = None     # 문제가 된 값/ID (옵션)
