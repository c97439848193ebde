"""Brand token resolution.

Callers may filter by brand using either the brand's UUID or its
human-readable name. A token is classified once, then resolved to a
brand ID; only names cost a store lookup.
"""

from dataclasses import dataclass

import structlog

from storefront.catalog.repository import CatalogStore
from storefront.domain.exceptions import BrandNotFoundError, UpstreamQueryError
from storefront.domain.identifiers import is_uuid

logger = structlog.get_logger()


@dataclass(frozen=True)
class BrandById:
    """Token that already is a brand ID."""

    brand_id: str


@dataclass(frozen=True)
class BrandByName:
    """Token that names a brand."""

    name: str


BrandToken = BrandById | BrandByName


def parse_brand_token(token: str) -> BrandToken:
    """Classify a caller-supplied brand token.

    Args:
        token: Brand UUID or brand name.

    Returns:
        BrandById for canonical UUIDs, BrandByName otherwise.
    """
    token = token.strip()
    if is_uuid(token):
        return BrandById(brand_id=token)
    return BrandByName(name=token)


class BrandResolver:
    """Resolves brand tokens to brand IDs.

    Stateless apart from the injected store; safe to use for several
    tokens concurrently.
    """

    def __init__(self, store: CatalogStore) -> None:
        """Initialize resolver.

        Args:
            store: Catalog store used for name lookups.
        """
        self.store = store

    async def resolve(self, token: str | BrandToken) -> str:
        """Resolve a brand token to a brand ID.

        Args:
            token: Raw token or an already parsed BrandToken.

        Returns:
            Brand ID.

        Raises:
            BrandNotFoundError: If no single brand matches the name, or
                the lookup itself fails.
        """
        parsed = parse_brand_token(token) if isinstance(token, str) else token

        if isinstance(parsed, BrandById):
            return parsed.brand_id

        try:
            matches = await self.store.find_brand_ids_by_name(parsed.name, limit=2)
        except UpstreamQueryError as e:
            logger.warning("Brand lookup failed", brand=parsed.name, error=str(e))
            raise BrandNotFoundError(parsed.name, reason=str(e)) from e

        if len(matches) != 1:
            logger.info("Brand not resolved", brand=parsed.name, matches=len(matches))
            raise BrandNotFoundError(
                parsed.name,
                reason="ambiguous name" if matches else "no match",
            )

        return matches[0]
