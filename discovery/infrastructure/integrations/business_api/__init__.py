"""Business Directory API Integration."""

from discovery.infrastructure.integrations.business_api.business_api_client import (
    BusinessApiHttpClient,
)

__all__ = ["BusinessApiHttpClient"]
