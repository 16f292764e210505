#!/usr/bin/env python3
"""
Remove every plant, care reminder and care log from the database.
Species and locations are left untouched.
"""
import argparse
import sys

from plantcare.database import SessionLocal
from plantcare.errors import PlantCareError
from plantcare.services.plant_service import remove_all


def main():
    parser = argparse.ArgumentParser(description="Remove all plants with their reminders and care logs")
    parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    args = parser.parse_args()

    if not args.yes:
        answer = input("This deletes ALL plants, reminders and care logs. Continue? [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print("Aborted.")
            return 1

    session = SessionLocal()
    try:
        removed = remove_all(session)
    except PlantCareError as exc:
        print(f"Error: {exc.message}")
        return 1
    finally:
        session.close()

    print(f"Removed {removed} plant(s) with their reminders and care logs.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
