"""
Brands table — each brand belongs to exactly one vehicle type.
The parent reference is checked by the brand router before writes.
"""

from sqlalchemy import Column, Integer, String, Boolean, Text, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base


class Brand(Base):
    __tablename__ = "brands"

    brand_id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_type_id = Column(Integer, ForeignKey("vehicle_types.vehicle_type_id"), nullable=False, index=True)
    brand_name = Column(String(100), nullable=False)
    description = Column(Text)
    sort_order = Column(Integer)
    is_active = Column(Boolean)

    vehicle_type = relationship("VehicleType", back_populates="brands")

    def __repr__(self):
        return f"<Brand {self.brand_id} name={self.brand_name} type={self.vehicle_type_id}>"
