"""검증 관련 예외."""

from discovery.application.common.exceptions.base import ApplicationError


class SearchDispatchFailedError(ApplicationError):
    """사업장 검색 서비스 호출 실패."""

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        message = "Business search failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DirectionsUnavailableError(ApplicationError):
    """목적지 주소와 좌표가 모두 없음."""

    def __init__(self, business_id: int) -> None:
        self.business_id = business_id
        super().__init__(f"Business {business_id} has no address or valid coordinate")


class SessionNotFoundError(ApplicationError):
    """지도 세션을 찾을 수 없음."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Discovery session '{session_id}' not found")


class BusinessDirectoryUnavailableError(ApplicationError):
    """사업장 디렉터리 서비스 호출 실패 (네트워크/HTTP/응답 형식)."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Business directory unavailable: {reason}")
