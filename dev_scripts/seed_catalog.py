#!/usr/bin/env python3
"""
Seed a starter catalog: device types, brands, models, repairs and their
price list. Safe to run repeatedly: existing rows are reused.
"""
import sys
from pathlib import Path

# Add project root to import path
top = Path(__file__).resolve().parents[1].as_posix()
if top not in sys.path:
    sys.path.insert(0, top)

from sqlalchemy import func

from app import create_app
from controllers import catalog
from controllers.device_model import ModelCatalog
from controllers.errors import ConflictError
from controllers.price_list import PriceList
from models.device_model import DeviceModel

DEVICE_TYPES = ["Smartphone", "Tablet", "Laptop"]
BRANDS       = ["Apple", "Samsung", "Xiaomi"]
REPAIRS      = ["Sostituzione schermo", "Sostituzione batteria", "Connettore di ricarica"]

# (device type, brand) → model names
MODELS = {
    ("Smartphone", "Apple"):   ["iPhone 12", "iPhone 13"],
    ("Smartphone", "Samsung"): ["Galaxy S21", "Galaxy A52"],
    ("Tablet", "Apple"):       ["iPad Air 4"],
}

# repair → price for every seeded model
PRICES = {
    "Sostituzione schermo":   129.0,
    "Sostituzione batteria":  69.0,
    "Connettore di ricarica": 49.0,
}


def ensure(registry, name):
    """Create *name* in *registry* or return the id it already has."""
    try:
        return registry.create(name)["id"]
    except ConflictError:
        return next(r["id"] for r in registry.list() if r["name"].lower() == name.lower())


def ensure_model(name, device_type_id, brand_id):
    try:
        return ModelCatalog().create(name, device_type_id, brand_id)["id"]
    except ConflictError:
        return DeviceModel.query.filter(
            func.lower(DeviceModel.name) == name.lower(),
            DeviceModel.device_type_id == device_type_id,
            DeviceModel.brand_id == brand_id,
        ).first().id


def seed():
    app = create_app()
    with app.app_context():
        # 1) Registries
        type_ids   = {n: ensure(catalog.device_types(), n) for n in DEVICE_TYPES}
        brand_ids  = {n: ensure(catalog.brands(), n) for n in BRANDS}
        repair_ids = {n: ensure(catalog.repairs(), n) for n in REPAIRS}

        # 2) Models + price list
        prices = PriceList()
        for (type_name, brand_name), names in MODELS.items():
            for name in names:
                model_id = ensure_model(name, type_ids[type_name], brand_ids[brand_name])
                for repair, price in PRICES.items():
                    prices.upsert(model_id, repair_ids[repair], price)
            print(f"✅ Seeded {type_name} / {brand_name}: {', '.join(names)}")

        print("🎉 Catalog seed completed successfully.")


if __name__ == "__main__":
    seed()
