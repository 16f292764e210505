from uuid import uuid4

from plantcare.seed.seed_data import seed_database


def test_create_species_returns_camel_case(client, make_species):
    species = make_species("Ficus lyrata", commonName="Figueira lira", lightRequirements="high")
    assert species["name"] == "Ficus lyrata"
    assert species["commonName"] == "Figueira lira"
    assert species["lightRequirements"] == "high"
    assert species["waterFrequency"] is None
    assert species["photo"] is None
    assert "createdAt" in species


def test_create_species_duplicate_name_is_conflict(client, make_species):
    make_species("Ficus lyrata")
    rv = client.post("/species", json={
        "name": "FICUS LYRATA",
        "commonName": "Outra",
        "description": "x",
        "careInstructions": "x",
        "idealConditions": "x",
    })
    assert rv.status_code == 409
    assert "already exists" in rv.json()["detail"]


def test_create_species_rejects_digits_in_name(client):
    rv = client.post("/species", json={
        "name": "Ficus 2",
        "commonName": "Figueira",
        "description": "x",
        "careInstructions": "x",
        "idealConditions": "x",
    })
    assert rv.status_code == 400
    assert "name" in rv.json()["detail"]


def test_create_species_requires_all_texts(client):
    rv = client.post("/species", json={"name": "Ficus lyrata", "commonName": "Figueira"})
    assert rv.status_code == 400


def test_species_photo_must_be_data_uri(client, make_species):
    species = make_species("Ficus lyrata", photo="data:image/jpeg;base64,/9j/4AAQ")
    assert species["photo"].startswith("data:image/jpeg")

    rv = client.post("/species", json={
        "name": "Ficus elastica",
        "commonName": "Falsa seringueira",
        "description": "x",
        "careInstructions": "x",
        "idealConditions": "x",
        "photo": "https://example.com/ficus.jpg",
    })
    assert rv.status_code == 400


def test_unknown_fields_are_rejected(client):
    rv = client.post("/species", json={
        "name": "Ficus lyrata",
        "commonName": "Figueira",
        "description": "x",
        "careInstructions": "x",
        "idealConditions": "x",
        "color": "green",
    })
    assert rv.status_code == 400


def test_get_species_not_found(client, db):
    rv = client.get(f"/species/{uuid4()}")
    assert rv.status_code == 404
    assert "not found" in rv.json()["detail"]


def test_update_species(client, make_species):
    species = make_species("Ficus lyrata")
    rv = client.patch(f"/species/{species['id']}", json={"commonName": "Figueira de folha de violino"})
    assert rv.status_code == 200
    assert rv.json()["commonName"] == "Figueira de folha de violino"
    assert rv.json()["name"] == "Ficus lyrata"


def test_update_species_rejects_null_and_duplicate(client, make_species):
    make_species("Ficus lyrata")
    other = make_species("Ficus elastica")

    rv = client.patch(f"/species/{other['id']}", json={"description": None})
    assert rv.status_code == 400
    assert "description must not be null" in rv.json()["detail"]

    rv = client.patch(f"/species/{other['id']}", json={"name": "ficus lyrata"})
    assert rv.status_code == 409


def test_delete_species_blocked_while_plants_exist(client, sample_plant):
    species_id = sample_plant["species"]["id"]

    rv = client.get(f"/species/{species_id}/can-remove")
    assert rv.json() == {"canBeRemoved": False, "plantCount": 1}

    rv = client.delete(f"/species/{species_id}")
    assert rv.status_code == 409
    assert "1 plant(s)" in rv.json()["detail"]

    client.delete(f"/plants/{sample_plant['plant']['id']}")
    assert client.get(f"/species/{species_id}/can-remove").json()["canBeRemoved"] is True
    assert client.delete(f"/species/{species_id}").status_code == 204
    assert client.get(f"/species/{species_id}").status_code == 404


def test_filter_stats_and_easy_care(client, db):
    seed_database(db)

    rv = client.get("/species", params={"lightRequirements": "low"})
    names = [s["name"] for s in rv.json()]
    assert names == ["Sansevieria trifasciata", "Zamioculcas zamiifolia"]

    rv = client.get("/species", params={"lightRequirements": "medium", "waterFrequency": "weekly"})
    assert [s["name"] for s in rv.json()] == ["Epipremnum aureum", "Monstera deliciosa"]

    rv = client.get("/species", params={"lightRequirements": "bright"})
    assert rv.status_code == 400

    light = {row["lightRequirements"]: row["count"] for row in client.get("/species/stats/light-requirements").json()}
    assert light == {"low": 2, "medium": 2, "high": 1}

    water = {row["waterFrequency"]: row["count"] for row in client.get("/species/stats/water-frequency").json()}
    assert water == {"weekly": 3, "biweekly": 2}

    easy = [s["name"] for s in client.get("/species/easy-care").json()]
    assert easy == ["Sansevieria trifasciata", "Zamioculcas zamiifolia"]
