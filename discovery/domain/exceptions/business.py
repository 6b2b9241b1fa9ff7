"""Business 도메인 예외."""

from discovery.domain.exceptions.base import DomainError


class BusinessNotFoundError(DomainError):
    """사업장을 찾을 수 없음."""

    def __init__(self, business_id: int) -> None:
        self.business_id = business_id
        super().__init__(f"Business {business_id} not found")
