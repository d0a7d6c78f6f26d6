"""Response schemas for catalog (reference data) listings."""

from pydantic import BaseModel, ConfigDict


class CatalogItem(BaseModel):
    """A waste type or location."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
