# app/routers/brands.py
"""
Brands — CRUD plus listing by vehicle type.
Writes are only accepted when the referenced vehicle type exists.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends

from app.dependencies import get_brand_repository, get_vehicle_repository
from app.repositories.brand_repository import BrandRepository
from app.repositories.vehicle_repository import VehicleRepository
from app.schemas.brand import BrandIn, BrandOut
from app.utils.exceptions import InvalidInputError, NotFoundError
from app.utils.responses import handle_errors, ok

router = APIRouter()

ID_NOT_FOUND = "Id not found"


def _serialize_all(brands):
    if brands is None:
        return None
    return [BrandOut.model_validate(b) for b in brands]


@router.post("/Brand/AddBrand", summary="Add a brand to an existing vehicle type")
@handle_errors
def add_brand(
    brand: Optional[BrandIn] = Body(None),
    brands: BrandRepository = Depends(get_brand_repository),
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
):
    if brand is None:
        raise InvalidInputError()
    if not vehicles.exists(brand.vehicle_type_id):
        raise InvalidInputError(ID_NOT_FOUND)
    created = brands.add(brand.model_copy(update={"brand_id": 0}))
    return ok(BrandOut.model_validate(created) if created is not None else None)


@router.get("/Brand/GetAllBrandsOfAVehicleType/{vehicle_type_id}", summary="Brands of one vehicle type")
@handle_errors
def get_all_brands_of_a_vehicle_type(
    vehicle_type_id: int,
    brands: BrandRepository = Depends(get_brand_repository),
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
):
    """The brand table is not queried at all when the vehicle type is unknown."""
    if not vehicles.exists(vehicle_type_id):
        raise InvalidInputError(ID_NOT_FOUND)
    return ok(_serialize_all(brands.list_by_vehicle_type(vehicle_type_id)))


@router.get("/Brand/GetAllBrands", summary="List all brands")
@handle_errors
def get_all_brands(brands: BrandRepository = Depends(get_brand_repository)):
    all_brands = brands.list_all()
    if not all_brands:
        raise NotFoundError()
    return ok(_serialize_all(all_brands))


@router.get("/{brand_id}", summary="Get a brand by id")
@handle_errors
def get_brand(brand_id: int, brands: BrandRepository = Depends(get_brand_repository)):
    brand = brands.get_by_id(brand_id)
    if brand is None:
        raise NotFoundError()
    return ok(BrandOut.model_validate(brand))


@router.put("/{brand_id}", summary="Replace a brand")
@handle_errors
def update_brand(
    brand_id: int,
    brand: Optional[BrandIn] = Body(None),
    brands: BrandRepository = Depends(get_brand_repository),
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
):
    if brand is None:
        raise InvalidInputError()
    # Parent check is keyed on the body's vehicle type, not on brand_id
    if not vehicles.exists(brand.vehicle_type_id):
        raise InvalidInputError(ID_NOT_FOUND)
    updated = brands.update(brand_id, brand)
    if updated is None:
        raise InvalidInputError()
    return ok(BrandOut.model_validate(updated))


@router.delete("/{brand_id}", summary="Delete a brand")
@handle_errors
def delete_brand(brand_id: int, brands: BrandRepository = Depends(get_brand_repository)):
    if not brands.exists(brand_id):
        raise InvalidInputError("Something Went Wrong")
    brands.delete(brand_id)
    return ok("Deleted")
