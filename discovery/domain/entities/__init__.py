"""Domain Entities."""

from discovery.domain.entities.business import BusinessRecord

__all__ = ["BusinessRecord"]
