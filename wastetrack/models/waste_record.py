"""ORM model for captured waste records."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    Text,
    func,
)

from wastetrack.models.base import Base


class WasteRecord(Base):
    """
    One weighed batch of waste of a given type from a given location.

    Rows are immutable once written; recorded_at defaults to the store's now().
    """

    __tablename__ = "waste_records"
    __table_args__ = (
        CheckConstraint("weight_kg > 0", name="ck_waste_records_weight_positive"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    waste_type_id = Column(
        Integer,
        ForeignKey("waste_types.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    location_id = Column(
        Integer,
        ForeignKey("locations.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    weight_kg = Column(Numeric(10, 3), nullable=False)
    notes = Column(Text, nullable=True)
    recorded_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
