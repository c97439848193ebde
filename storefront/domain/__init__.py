"""Domain layer.

Error taxonomy and identifier helpers shared by the catalog and API layers.
"""

from storefront.domain.exceptions import (
    BrandNotFoundError,
    DomainError,
    UpstreamQueryError,
)
from storefront.domain.identifiers import is_uuid, is_uuid_shaped

__all__ = [
    "BrandNotFoundError",
    "DomainError",
    "UpstreamQueryError",
    "is_uuid",
    "is_uuid_shaped",
]
