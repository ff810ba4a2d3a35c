# app/schemas/brand.py
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional


class BrandIn(BaseModel):
    brand_id: int = 0            # ignored on create, must match the path id on update
    vehicle_type_id: int
    brand_name: str
    description: Optional[str] = None
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class BrandOut(BaseModel):
    brand_id: int
    vehicle_type_id: int
    brand_name: str
    description: Optional[str]
    sort_order: Optional[int]
    is_active: Optional[bool]

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
