#!/usr/bin/env python3
"""
Script to load the treatment catalog into the services table

Usage:
    python seed_services.py                 # built-in catalog
    python seed_services.py catalog.json    # [{"name": ..., "slots": [...], "price": ...}]
"""

import json
import sys
from pathlib import Path

from clinicbook.database import Base, SessionLocal, engine
from clinicbook.domain.services.schemas import ServiceCreate
from clinicbook.domain.services.service import ServiceCatalog

DEFAULT_SLOTS = [
    "08.00 AM - 08.30 AM",
    "08.30 AM - 09.00 AM",
    "09.00 AM - 09.30 AM",
    "09.30 AM - 10.00 AM",
    "10.00 AM - 10.30 AM",
    "10.30 AM - 11.00 AM",
    "11.00 AM - 11.30 AM",
    "11.30 AM - 12.00 PM",
    "04.00 PM - 04.30 PM",
    "04.30 PM - 05.00 PM",
    "05.00 PM - 05.30 PM",
    "05.30 PM - 06.00 PM",
]

DEFAULT_CATALOG = [
    {"name": "Teeth Orthodontics", "slots": DEFAULT_SLOTS},
    {"name": "Cosmetic Dentistry", "slots": DEFAULT_SLOTS},
    {"name": "Teeth Cleaning", "slots": DEFAULT_SLOTS},
    {"name": "Cavity Protection", "slots": DEFAULT_SLOTS},
    {"name": "Pediatric Dental", "slots": DEFAULT_SLOTS},
    {"name": "Oral Surgery", "slots": DEFAULT_SLOTS},
]


def load_catalog(path=None) -> list[dict]:
    if path is None:
        return DEFAULT_CATALOG
    return json.loads(Path(path).read_text())


def seed_services(catalog: list[dict]) -> int:
    Base.metadata.create_all(bind=engine, checkfirst=True)
    db = SessionLocal()
    inserted = 0

    try:
        catalog_service = ServiceCatalog(db)
        print(f"🔍 Loading {len(catalog)} services into the catalog...\n")

        for entry in catalog:
            data = ServiceCreate(**entry)
            if catalog_service.repo.get_service_by_name(db, data.name):
                print(f"   ⏭️  '{data.name}' already exists, skipping")
                continue
            catalog_service.create_service(data)
            inserted += 1
            print(f"   ✅ Inserted '{data.name}' ({len(data.slots)} slots)")

        print(f"\n🎉 Done: {inserted} new service(s)")
        return inserted
    finally:
        db.close()


if __name__ == "__main__":
    seed_services(load_catalog(sys.argv[1] if len(sys.argv) > 1 else None))
