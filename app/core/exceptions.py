from typing import Any, Optional


class CatalogError(Exception):
    """
    카탈로그 서비스 공통 예외
    - kind: 오류 종류 (응답 body의 error 필드)
    - field / value: 문제가 된 필드와 값 (옵션)
    """
    kind = "CatalogError"
    status_code = 500

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value

    def to_dict(self) -> dict:
        return {
            "error": self.kind,
            "message": self.message,
            "field": self.field,
            "value": self.value,
        }


# 입력값 검증 실패 (이름 누락/길이 부족)
class ValidationError(CatalogError):
    kind = "ValidationError"
    status_code = 400


# 중복 데이터
class ConflictError(CatalogError):
    kind = "Conflict"
    status_code = 409


# 대상 없음
class NotFoundError(CatalogError):
    kind = "NotFound"
    status_code = 404

    def __init__(self, resource: str, field: str, value: Any):
        super().__init__(f"{resource} not found with {field}: {value}", field=field, value=value)
        self.resource = resource


# 페이지/정렬 파라미터 오류
class InvalidArgumentError(CatalogError):
    kind = "InvalidArgument"
    status_code = 400


# DB 접속 불가 등 인프라 오류
class StoreUnavailableError(CatalogError):
    kind = "StoreUnavailable"
    status_code = 503
