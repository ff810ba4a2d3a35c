# app/dependencies.py
"""FastAPI dependencies — one repository per request, sharing the request's DB session."""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.repositories.brand_repository import BrandRepository
from app.repositories.vehicle_repository import VehicleRepository


def get_vehicle_repository(db: Session = Depends(get_db)) -> VehicleRepository:
    return VehicleRepository(db)


def get_brand_repository(db: Session = Depends(get_db)) -> BrandRepository:
    return BrandRepository(db)
