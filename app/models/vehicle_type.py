"""
Vehicle types table — top-level categories such as CAR or TRUCK.
Parent of the brands table.
"""

from sqlalchemy import Column, Integer, String, Boolean, Text
from sqlalchemy.orm import relationship
from app.database import Base


class VehicleType(Base):
    __tablename__ = "vehicle_types"

    vehicle_type_id = Column(Integer, primary_key=True, autoincrement=True)
    type_name = Column(String(100), nullable=False)
    description = Column(Text)
    is_active = Column(Boolean)

    brands = relationship("Brand", back_populates="vehicle_type")

    def __repr__(self):
        return f"<VehicleType {self.vehicle_type_id} name={self.type_name} active={self.is_active}>"
