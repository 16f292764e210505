from datetime import date, timedelta
from uuid import uuid4

import pytest


def _days(n: int) -> str:
    return (date.today() + timedelta(days=n)).isoformat()


def _log(**overrides):
    payload = {
        "plantName": "Planta X",
        "type": "watering",
        "date": "2024-01-15",
        "notes": "Regada pela manhã",
        "success": True,
    }
    payload.update(overrides)
    return payload


def test_register_and_list_care_log_scenario(client, make_species, make_location, make_plant):
    make_species("Monstera deliciosa")
    make_location("Sala de Estar")
    plant = make_plant("Planta X", "Monstera deliciosa", "Sala de Estar")

    rv = client.post("/care-logs", json=_log())
    assert rv.status_code == 201
    log = rv.json()
    assert log["date"] == "2024-01-15"
    assert log["plantId"] == plant["id"]

    logs = client.get("/care-logs", params={"plantId": plant["id"]}).json()
    assert len(logs) == 1
    assert logs[0]["id"] == log["id"]

    rv = client.post("/care-logs", json=_log(notes="De novo"))
    assert rv.status_code == 409
    assert "2024-01-15" in rv.json()["detail"]


def test_create_log_rules(client, sample_plant):
    rv = client.post("/care-logs", json=_log(date=_days(1)))
    assert rv.status_code == 400
    assert "past" in rv.json()["detail"]

    rv = client.post("/care-logs", json=_log(date="15/01/2024"))
    assert rv.status_code == 400

    rv = client.post("/care-logs", json=_log(plantName="Cacto"))
    assert rv.status_code == 404

    rv = client.post("/care-logs", json=_log(success="true"))
    assert rv.status_code == 400

    payload = _log()
    del payload["success"]
    assert client.post("/care-logs", json=payload).status_code == 400

    rv = client.post("/care-logs", json=_log(type="singing"))
    assert rv.status_code == 400

    rv = client.post("/care-logs", json=_log(photo="not-a-photo"))
    assert rv.status_code == 400

    rv = client.post("/care-logs", json=_log(date=_days(0), photo="https://example.com/log.jpg"))
    assert rv.status_code == 201
    assert rv.json()["photo"] == "https://example.com/log.jpg"


@pytest.fixture()
def logs(client, sample_plant, make_plant):
    make_plant("Segunda", "Monstera deliciosa", "Sala de Estar")
    created = [
        client.post("/care-logs", json=_log(date=_days(-40))).json(),
        client.post("/care-logs", json=_log(date=_days(-2), type="fertilizing", success=False)).json(),
        client.post("/care-logs", json=_log(plantName="Segunda", date=_days(0))).json(),
    ]
    return created


def test_update_log(client, logs):
    log_id = logs[0]["id"]
    rv = client.patch(f"/care-logs/{log_id}", json={"notes": "Adubo líquido", "success": False})
    assert rv.status_code == 200
    assert rv.json()["notes"] == "Adubo líquido"
    assert rv.json()["success"] is False

    for field, value in [("plantName", "Segunda"), ("type", "pruning"), ("date", _days(-1))]:
        rv = client.patch(f"/care-logs/{log_id}", json={field: value})
        assert rv.status_code == 400
        assert field in rv.json()["detail"]

    assert client.patch(f"/care-logs/{log_id}", json={"success": None}).status_code == 400
    assert client.patch(f"/care-logs/{uuid4()}", json={"notes": "x"}).status_code == 404


def test_listings(client, logs, sample_plant):
    all_logs = client.get("/care-logs").json()
    assert [log["date"] for log in all_logs] == [_days(0), _days(-2), _days(-40)]

    recent = client.get("/care-logs/recent").json()
    assert [log["date"] for log in recent] == [_days(0), _days(-2)]

    successful = client.get("/care-logs/successful").json()
    assert [log["date"] for log in successful] == [_days(0), _days(-40)]

    by_type = client.get("/care-logs", params={"type": "fertilizing"}).json()
    assert [log["id"] for log in by_type] == [logs[1]["id"]]

    by_plant = client.get("/care-logs", params={"plantId": sample_plant["plant"]["id"]}).json()
    assert len(by_plant) == 2


def test_date_range(client, logs):
    rv = client.get("/care-logs", params={"startDate": _days(-5), "endDate": _days(0)})
    assert rv.status_code == 200
    assert [log["date"] for log in rv.json()] == [_days(0), _days(-2)]

    rv = client.get("/care-logs", params={"startDate": _days(0), "endDate": _days(-5)})
    assert rv.status_code == 400

    rv = client.get("/care-logs", params={"startDate": _days(-5)})
    assert rv.status_code == 400


def test_care_stats(client, logs):
    stats = {row["type"]: row["count"] for row in client.get("/care-logs/stats").json()}
    assert stats == {"watering": 2, "fertilizing": 1}


def test_composite_key_lookup_and_delete(client, logs):
    path = f"/care-logs/Segunda/watering/{_days(0)}"
    rv = client.get(path)
    assert rv.status_code == 200
    assert rv.json()["id"] == logs[2]["id"]

    assert client.delete(path).status_code == 204
    assert client.get(path).status_code == 404
    assert client.get("/care-logs/Cacto/watering/2024-01-15").status_code == 404


def test_delete_log(client, logs):
    log_id = logs[0]["id"]
    assert client.delete(f"/care-logs/{log_id}").status_code == 204
    assert client.get(f"/care-logs/{log_id}").status_code == 404


def test_update_by_composite_key(client, logs):
    path = f"/care-logs/Segunda/watering/{_days(0)}"
    rv = client.patch(path, json={"notes": "Regada à tarde", "success": False})
    assert rv.status_code == 200
    assert rv.json()["id"] == logs[2]["id"]
    assert rv.json()["notes"] == "Regada à tarde"
    assert rv.json()["success"] is False

    rv = client.patch(path, json={"type": "pruning"})
    assert rv.status_code == 400

    assert client.patch("/care-logs/Segunda/pruning/2024-01-15", json={"notes": "x"}).status_code == 404
