"""
Seed data for the plant care database.
Populates the default species and locations catalogs.

Run directly with ``python -m plantcare.seed.seed_data``.
"""
import logging

from sqlalchemy.orm import Session

from plantcare.database import SessionLocal
from plantcare.models import (
    HumidityLevel, LightRequirement, Location, LocationType, Species,
    SunlightLevel, WaterFrequency,
)

logger = logging.getLogger(__name__)

SPECIES = [
    {
        "name": "Monstera deliciosa",
        "common_name": "Costela de Adão",
        "description": "Planta tropical de folhas grandes e recortadas, nativa das florestas do México.",
        "care_instructions": "Regar quando o substrato estiver seco na superfície e limpar as folhas com pano úmido.",
        "ideal_conditions": "Luz indireta brilhante, temperatura entre 18 e 27 graus e umidade moderada.",
        "light_requirements": LightRequirement.MEDIUM,
        "water_frequency": WaterFrequency.WEEKLY,
    },
    {
        "name": "Ficus lyrata",
        "common_name": "Figueira lira",
        "description": "Árvore ornamental de folhas grandes em formato de violino.",
        "care_instructions": "Evitar mudanças de lugar, regar com moderação e girar o vaso para crescer por igual.",
        "ideal_conditions": "Muita luz indireta, sem correntes de ar frio e temperatura estável.",
        "light_requirements": LightRequirement.HIGH,
        "water_frequency": WaterFrequency.WEEKLY,
    },
    {
        "name": "Sansevieria trifasciata",
        "common_name": "Espada de São Jorge",
        "description": "Suculenta de folhas eretas e rígidas, muito resistente e purificadora de ar.",
        "care_instructions": "Regar pouco, apenas com o substrato totalmente seco. Tolera esquecimento.",
        "ideal_conditions": "Aceita pouca luz ou sol indireto, prefere ambientes secos.",
        "light_requirements": LightRequirement.LOW,
        "water_frequency": WaterFrequency.BIWEEKLY,
    },
    {
        "name": "Epipremnum aureum",
        "common_name": "Jiboia",
        "description": "Trepadeira pendente de folhas em formato de coração, de crescimento rápido.",
        "care_instructions": "Manter o substrato levemente úmido e podar as ramas longas para adensar.",
        "ideal_conditions": "Luz indireta média a baixa e umidade moderada.",
        "light_requirements": LightRequirement.MEDIUM,
        "water_frequency": WaterFrequency.WEEKLY,
    },
    {
        "name": "Zamioculcas zamiifolia",
        "common_name": "Zamioculca",
        "description": "Planta de folhas brilhantes e rizomas que armazenam água.",
        "care_instructions": "Regar a cada duas semanas ou menos e evitar encharcamento.",
        "ideal_conditions": "Meia sombra ou luz indireta, tolera ar-condicionado.",
        "light_requirements": LightRequirement.LOW,
        "water_frequency": WaterFrequency.BIWEEKLY,
    },
]

LOCATIONS = [
    {
        "name": "Sala de Estar",
        "type": LocationType.INDOOR,
        "sunlight": SunlightLevel.PARTIAL,
        "humidity": HumidityLevel.MEDIUM,
        "description": "Ambiente interno com janelas amplas e luz filtrada pela manhã.",
    },
    {
        "name": "Jardim",
        "type": LocationType.GARDEN,
        "sunlight": SunlightLevel.FULL,
        "humidity": HumidityLevel.HIGH,
        "description": "Área externa com canteiros e irrigação frequente.",
    },
    {
        "name": "Varanda",
        "type": LocationType.BALCONY,
        "sunlight": SunlightLevel.PARTIAL,
        "humidity": HumidityLevel.MEDIUM,
        "description": "Varanda coberta com sol da tarde.",
    },
    {
        "name": "Terraço",
        "type": LocationType.TERRACE,
        "sunlight": SunlightLevel.FULL,
        "humidity": HumidityLevel.LOW,
        "description": "Terraço aberto com sol o dia todo e bastante vento.",
    },
    {
        "name": "Quintal",
        "type": LocationType.OUTDOOR,
        "sunlight": SunlightLevel.SHADE,
        "humidity": HumidityLevel.HIGH,
        "description": "Quintal sombreado por árvores, solo sempre úmido.",
    },
]


def seed_database(db: Session) -> dict:
    """Insert the default catalogs into empty tables. Returns how many rows were added."""
    added = {"species": 0, "locations": 0}

    if db.query(Species).first():
        logger.info("Species already seeded, skipping")
    else:
        db.add_all(Species(**entry) for entry in SPECIES)
        added["species"] = len(SPECIES)

    if db.query(Location).first():
        logger.info("Locations already seeded, skipping")
    else:
        db.add_all(Location(**entry) for entry in LOCATIONS)
        added["locations"] = len(LOCATIONS)

    db.commit()
    if any(added.values()):
        logger.info(f"Seeded {added['species']} species and {added['locations']} locations")
    return added


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    db = SessionLocal()
    try:
        seed_database(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
