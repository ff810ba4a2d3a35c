# Vehicle & Brand Catalogue — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.vehicle_type import VehicleType   # noqa
from app.models.brand import Brand                # noqa
