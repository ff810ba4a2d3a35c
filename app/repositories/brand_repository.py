# app/repositories/brand_repository.py
"""Gateway for the brands table."""

from typing import List, Optional

from app.models.brand import Brand
from app.repositories.base_repository import BaseRepository, storage_guard
from app.schemas.brand import BrandIn
from app.utils.logger import get_logger

logger = get_logger(__name__)


class BrandRepository(BaseRepository):
    model = Brand
    id_field = "brand_id"

    @storage_guard
    def add(self, brand: BrandIn) -> Optional[Brand]:
        return self._insert(brand)

    @storage_guard
    def update(self, brand_id: int, brand: BrandIn) -> Optional[Brand]:
        """Returns the updated row, or None on id mismatch / unknown id."""
        return self._replace(brand_id, brand)

    @storage_guard
    def list_by_vehicle_type(self, vehicle_type_id: int) -> List[Brand]:
        return self.db.query(Brand).filter(Brand.vehicle_type_id == vehicle_type_id).all()

    @storage_guard
    def delete(self, brand_id: int) -> bool:
        row = self.db.query(Brand).filter(Brand.brand_id == brand_id).first()
        if row is None:
            return False
        self.db.delete(row)
        self.db.commit()
        logger.info(f"[brands] deleted id={brand_id}")
        return True
