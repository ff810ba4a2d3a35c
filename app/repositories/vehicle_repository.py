# app/repositories/vehicle_repository.py
"""Gateway for the vehicle_types table."""

from typing import Optional

from app.models.vehicle_type import VehicleType
from app.repositories.base_repository import BaseRepository, storage_guard
from app.schemas.vehicle_type import VehicleTypeIn


class VehicleRepository(BaseRepository):
    model = VehicleType
    id_field = "vehicle_type_id"

    @storage_guard
    def add(self, vehicle_type: VehicleTypeIn) -> Optional[VehicleType]:
        """Insert a new vehicle type. The store assigns the id."""
        return self._insert(vehicle_type)

    @storage_guard
    def update(self, vehicle_type_id: int, vehicle_type: VehicleTypeIn) -> bool:
        """False when the body id differs from `vehicle_type_id` or no such row exists."""
        return self._replace(vehicle_type_id, vehicle_type) is not None
