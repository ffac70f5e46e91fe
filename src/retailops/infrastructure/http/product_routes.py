"""Product endpoints: ``/api/products``."""

from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, Depends, Query, status

from retailops.application.dto import ProductFilter, ProductUpdate
from retailops.infrastructure.bootstrap import Container
from retailops.infrastructure.http.dependencies import get_container
from retailops.infrastructure.http.schemas import (
    ProductCreateRequest,
    ProductOut,
    ProductUpdateRequest,
    StockAdjustRequest,
    envelope,
)

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
def list_products(
    category: str | None = Query(None),
    min_price: Decimal | None = Query(None, alias="minPrice"),
    max_price: Decimal | None = Query(None, alias="maxPrice"),
    container: Container = Depends(get_container),
) -> dict:
    criteria = ProductFilter(category=category or None, min_price=min_price, max_price=max_price)
    products = container.list_products.handle(criteria)
    return envelope([ProductOut.from_domain(p) for p in products], count=len(products))


@router.get("/{product_id}")
def get_product(product_id: str, container: Container = Depends(get_container)) -> dict:
    product = container.show_product.handle(product_id)
    return envelope(ProductOut.from_domain(product))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_product(
    body: ProductCreateRequest,
    container: Container = Depends(get_container),
) -> dict:
    product = container.add_product.handle(
        name=body.name,
        price=body.price,
        stock=body.stock,
        description=body.description,
        category=body.category,
    )
    return envelope(ProductOut.from_domain(product))


@router.put("/{product_id}")
def update_product(
    product_id: str,
    body: ProductUpdateRequest,
    container: Container = Depends(get_container),
) -> dict:
    update = ProductUpdate(**body.model_dump(exclude_none=True))
    product = container.update_product.handle(product_id, update)
    return envelope(ProductOut.from_domain(product))


@router.patch("/{product_id}/stock")
def adjust_stock(
    product_id: str,
    body: StockAdjustRequest,
    container: Container = Depends(get_container),
) -> dict:
    product = container.adjust_stock.handle(product_id, body.delta)
    return envelope(ProductOut.from_domain(product))


@router.delete("/{product_id}")
def delete_product(product_id: str, container: Container = Depends(get_container)) -> dict:
    container.delete_product.handle(product_id)
    return envelope(message="Product deleted successfully")
