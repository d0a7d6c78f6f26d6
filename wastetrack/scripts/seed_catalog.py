"""
Insert the default waste types and hotel locations. Safe to run repeatedly:

  python -m wastetrack.scripts.seed_catalog
"""

import logging
import sys
from collections.abc import Iterable

from sqlalchemy.orm import Session

from wastetrack.core.database import SessionLocal
from wastetrack.models import Location, WasteType

logger = logging.getLogger(__name__)

DEFAULT_WASTE_TYPES = (
    "Orgánicos",
    "Orgánicos (naranja/limón)",
    "Inorgánicos - no valorizables",
    "Pet",
    "Plástico duro",
    "Emplaye",
    "BOPP (envolturas)",
    "Vidrio",
    "Aluminio",
    "Cartón",
    "Papel, libros, revistas y periódicos",
    "Lata de conserva o latón",
    "Tetrapak",
    "Textiles",
    "Chatarra",
    "Café para composta",
    "Residuos para rancho",
)

DEFAULT_LOCATIONS = (
    "NA (No aplica)",
    "Áreas públicas",
    "Albercas",
    "Almacén",
    "Ama de llaves",
    "Audio visual",
    "Banquetes",
    "Barefoot",
    "Bares",
    "Barracuda",
    "Bodas",
    "Bordeaux",
    "Carpintería",
    "Club Preferred",
    "Cocina central",
    "Coco Café",
    "Comedor empleados",
    "Comisariato",
    "Edificios",
    "El Patio",
    "Entretenimiento",
    "Especialidades",
    "Eventos/Banquetes",
    "Himitsu",
    "Jardinería",
    "Lavandería",
    "Limpieza de playa",
    "Manatees",
    "Mantenimiento",
    "Market",
    "Market Café",
    "Minibares/Servibar",
    "Oceana",
    "Oficinas",
    "Poblado",
    "Portofino",
    "Proveedores",
    "RH",
    "Room Service/IRD",
    "Seaside",
    "Seaside Grill",
    "Seguridad",
    "Sommelier",
    "Spa",
    "Steward",
    "Tiendas",
    "Tiendita colegas",
    "UVC",
    "Chatos",
)


def seed_names(
    db: Session, model: type[WasteType] | type[Location], names: Iterable[str]
) -> int:
    """Add rows for names not yet present; return how many were added. Does not commit."""
    existing = {name for (name,) in db.query(model.name).all()}
    added = 0
    for name in names:
        if name in existing:
            continue
        db.add(model(name=name))
        existing.add(name)
        added += 1
    return added


def seed_catalog(db: Session) -> tuple[int, int]:
    """Seed both tables in one transaction; returns (types_added, locations_added)."""
    types_added = seed_names(db, WasteType, DEFAULT_WASTE_TYPES)
    locations_added = seed_names(db, Location, DEFAULT_LOCATIONS)
    db.commit()
    return types_added, locations_added


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )
    db = SessionLocal()
    try:
        types_added, locations_added = seed_catalog(db)
        logger.info(
            "Catalog seeded: waste_types_added=%s locations_added=%s",
            types_added,
            locations_added,
        )
        return 0
    except Exception as e:
        db.rollback()
        logger.exception("Catalog seeding failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
