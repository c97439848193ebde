"""Product and seller catalog.

Store access, row normalization, pagination and the listing services
behind the HTTP API.
"""

from storefront.catalog.brands import BrandById, BrandByName, BrandResolver, parse_brand_token
from storefront.catalog.dto import (
    ProductDetail,
    ProductVariant,
    SellerListItem,
    SimplifiedProduct,
)
from storefront.catalog.models import Brand, Product, ProductTag, Seller
from storefront.catalog.pagination import PaginatedResult, PaginationParams, paginate
from storefront.catalog.repository import CatalogRepository, CatalogStore, ProductFilter
from storefront.catalog.sellers import SellerService
from storefront.catalog.service import CatalogService

__all__ = [
    # Models
    "Brand",
    "Product",
    "ProductTag",
    "Seller",
    # Projections
    "ProductDetail",
    "ProductVariant",
    "SellerListItem",
    "SimplifiedProduct",
    # Pagination
    "PaginatedResult",
    "PaginationParams",
    "paginate",
    # Repository
    "CatalogRepository",
    "CatalogStore",
    "ProductFilter",
    # Brands
    "BrandById",
    "BrandByName",
    "BrandResolver",
    "parse_brand_token",
    # Services
    "CatalogService",
    "SellerService",
]
