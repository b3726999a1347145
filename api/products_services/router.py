"""
Product/service catalogue endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from core.errors import recover_as

from . import repository, schemas

router = APIRouter()

INTERNAL_ERROR = "Internal server error"
NOT_FOUND = "Product/service not found"


@router.get("/api/products-services")
async def list_products_services(brand_id: UUID = Query(...)) -> dict:
    with recover_as(INTERNAL_ERROR, event="list_products_services_failed"):
        rows = await repository.list_for_brand(brand_id)
    return {"success": True, "data": rows}


@router.get("/api/products-services/{item_id}")
async def get_product_service(item_id: UUID) -> dict:
    with recover_as(INTERNAL_ERROR, event="get_product_service_failed"):
        row = await repository.get_product_service(item_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return {"success": True, "data": row}


@router.post("/api/products-services", status_code=status.HTTP_201_CREATED)
async def create_product_service(request: schemas.CreateProductServiceRequest) -> dict:
    name = (request.name or "").strip()
    if request.brand_id is None or not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="brand_id and name are required")

    with recover_as(INTERNAL_ERROR, event="create_product_service_failed"):
        row = await repository.insert_product_service(
            request.brand_id,
            name=name,
            category=request.category,
            description=request.description,
            price=request.price,
            features=request.features,
            image_url=request.image_url,
        )
    return {"success": True, "data": row}


@router.put("/api/products-services/{item_id}")
async def update_product_service(item_id: UUID, request: schemas.UpdateProductServiceRequest) -> dict:
    with recover_as(INTERNAL_ERROR, event="update_product_service_failed"):
        row = await repository.update_product_service(
            item_id,
            name=(request.name or "").strip() or None,
            category=request.category,
            description=request.description,
            price=request.price,
            features=request.features,
            image_url=request.image_url,
        )
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return {"success": True, "data": row}


@router.delete("/api/products-services/{item_id}")
async def delete_product_service(item_id: UUID) -> dict:
    with recover_as(INTERNAL_ERROR, event="delete_product_service_failed"):
        deleted = await repository.delete_product_service(item_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return {"success": True, "message": "Product/service deleted successfully"}
