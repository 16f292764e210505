from plantcare.models import Location, Species
from plantcare.seed.seed_data import LOCATIONS, SPECIES, seed_database


def test_seed_inserts_default_catalogs(db):
    added = seed_database(db)
    assert added == {"species": len(SPECIES), "locations": len(LOCATIONS)}
    assert db.query(Species).count() == 5
    assert {loc.name for loc in db.query(Location).all()} == {
        "Sala de Estar", "Jardim", "Varanda", "Terraço", "Quintal",
    }


def test_seed_is_idempotent(db):
    seed_database(db)
    assert seed_database(db) == {"species": 0, "locations": 0}
    assert db.query(Species).count() == 5
    assert db.query(Location).count() == 5


def test_seed_skips_populated_tables_only(client, db, make_species):
    make_species("Ficus elastica")
    added = seed_database(db)
    assert added == {"species": 0, "locations": 5}
    assert db.query(Species).count() == 1


def test_seeded_names_resolve_plants(client, db):
    seed_database(db)
    rv = client.post("/plants", json={
        "name": "Minha Monstera",
        "speciesName": "Monstera deliciosa",
        "locationName": "Terraço",
        "purchaseDate": "2024-01-10",
        "notes": "Presente",
    })
    assert rv.status_code == 201
    assert rv.json()["location"]["type"] == "terrace"
