# app/routers/vehicles.py
"""Vehicle types — add, update, list and look up."""

from typing import Optional

from fastapi import APIRouter, Body, Depends

from app.dependencies import get_vehicle_repository
from app.repositories.vehicle_repository import VehicleRepository
from app.schemas.vehicle_type import VehicleTypeIn, VehicleTypeOut
from app.utils.exceptions import InvalidInputError, NotFoundError
from app.utils.responses import handle_errors, ok

router = APIRouter()


@router.post("/Vehicle/AddVehicleType", summary="Add a vehicle type")
@handle_errors
def add_vehicle_type(
    vehicle_type: Optional[VehicleTypeIn] = Body(None),
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
):
    """Any id in the body is discarded; the database assigns a new one."""
    if vehicle_type is None:
        raise InvalidInputError()
    created = vehicles.add(vehicle_type.model_copy(update={"vehicle_type_id": 0}))
    return ok(VehicleTypeOut.model_validate(created) if created is not None else None)


@router.put("/{vehicle_type_id}", summary="Replace a vehicle type")
@handle_errors
def update_vehicle_type(
    vehicle_type_id: int,
    vehicle_type: Optional[VehicleTypeIn] = Body(None),
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
):
    # A body id that differs from the path id comes back as False from the repository
    if vehicle_type is None or not vehicles.update(vehicle_type_id, vehicle_type):
        raise InvalidInputError()
    return ok("Success")


@router.get("/Vehicle/GetAllVehicleTypes", summary="List all vehicle types")
@handle_errors
def get_all_vehicle_types(vehicles: VehicleRepository = Depends(get_vehicle_repository)):
    vehicle_types = vehicles.list_all()
    if not vehicle_types:
        raise NotFoundError()
    return ok([VehicleTypeOut.model_validate(v) for v in vehicle_types])


@router.get("/{vehicle_type_id}", summary="Get a vehicle type by id")
@handle_errors
def get_vehicle_type(vehicle_type_id: int, vehicles: VehicleRepository = Depends(get_vehicle_repository)):
    vehicle_type = vehicles.get_by_id(vehicle_type_id)
    if vehicle_type is None:
        raise NotFoundError()
    return ok(VehicleTypeOut.model_validate(vehicle_type))
