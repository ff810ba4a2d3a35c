# app/schemas/vehicle_type.py
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional


class VehicleTypeIn(BaseModel):
    vehicle_type_id: int = 0     # ignored on create, must match the path id on update
    type_name: str
    description: Optional[str] = None
    is_active: Optional[bool] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class VehicleTypeOut(BaseModel):
    vehicle_type_id: int
    type_name: str
    description: Optional[str]
    is_active: Optional[bool]

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
