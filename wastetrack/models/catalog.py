"""Reference tables: waste types and hotel locations. Seeded, looked up by name."""

from sqlalchemy import Column, Integer, String

from wastetrack.models.base import Base


class WasteType(Base):
    __tablename__ = "waste_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True, index=True)


class Location(Base):
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
