#!/usr/bin/env python3
"""
Generate sample plants, care reminders and care logs through the HTTP API.
Expects a running server with the default species and locations seeded.
"""
import random
from datetime import date, timedelta

import requests

# Configuration
API_URL = "http://localhost:8000"
LOG_DAYS = 30

# (plant name, species, location)
PLANTS = [
    ("Monstera da Sala", "Monstera deliciosa", "Sala de Estar"),
    ("Figueira Grande", "Ficus lyrata", "Varanda"),
    ("Espada do Jardim", "Sansevieria trifasciata", "Jardim"),
    ("Jiboia Pendente", "Epipremnum aureum", "Sala de Estar"),
    ("Zamioculca do Quintal", "Zamioculcas zamiifolia", "Quintal"),
]

# reminder type -> frequency in days
REMINDERS = {
    "watering": 7,
    "fertilizing": 30,
    "pruning": 60,
}

LOG_TYPES = ["watering", "fertilizing", "pruning", "cleaning"]


def post(path: str, payload: dict):
    """POST a JSON payload; returns the response body or None on failure."""
    try:
        res = requests.post(f"{API_URL}{path}", json=payload, timeout=10)
    except requests.RequestException as e:
        print(f"  Connection error: {e}")
        return None
    if res.status_code != 201:
        print(f"  Error {res.status_code} on {path}: {res.json().get('detail')}")
        return None
    return res.json()


def create_plants() -> list:
    created = []
    for name, species, location in PLANTS:
        purchase = date.today() - timedelta(days=random.randint(60, 720))
        plant = post("/plants", {
            "name": name,
            "speciesName": species,
            "locationName": location,
            "purchaseDate": purchase.isoformat(),
            "notes": f"{name} adquirida em {purchase.isoformat()}",
        })
        if plant:
            created.append(plant)
    return created


def create_reminders(plant: dict) -> int:
    count = 0
    today = date.today()
    for reminder_type, frequency in REMINDERS.items():
        last_done = today - timedelta(days=random.randint(0, frequency - 1))
        reminder = post("/care-reminders", {
            "plantName": plant["name"],
            "type": reminder_type,
            "frequency": frequency,
            "lastDone": last_done.isoformat(),
            "nextDue": (last_done + timedelta(days=frequency)).isoformat(),
            "notes": f"{reminder_type} a cada {frequency} dias",
        })
        if reminder:
            count += 1
    return count


def create_logs(plant: dict) -> int:
    count = 0
    today = date.today()
    for offset in range(0, LOG_DAYS, 3):
        log = post("/care-logs", {
            "plantName": plant["name"],
            "type": random.choice(LOG_TYPES),
            "date": (today - timedelta(days=offset)).isoformat(),
            "notes": "Registro gerado automaticamente",
            "success": random.random() > 0.1,
        })
        if log:
            count += 1
    return count


def main():
    print("=" * 60)
    print("Sample Data Generator for Plants, Reminders & Care Logs")
    print("=" * 60)

    plants = create_plants()
    print(f"\nCreated {len(plants)} plants")

    total_reminders = 0
    total_logs = 0
    for plant in plants:
        reminders = create_reminders(plant)
        logs = create_logs(plant)
        total_reminders += reminders
        total_logs += logs
        print(f"  {plant['name']}: {reminders} reminders, {logs} care logs")

    print(f"\n{'=' * 60}")
    print(f"SUCCESS: {len(plants)} plants, {total_reminders} reminders, {total_logs} care logs")
    print("=" * 60)


if __name__ == "__main__":
    main()
