# test/conftest.py
import os, sys
# put the project root (the folder holding app.py) first on sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from types import SimpleNamespace

import pytest

from app import create_app
from config.settings import TestConfig
from controllers import catalog as registries
from controllers.device_model import ModelCatalog
from controllers.fixpoint import FixpointRegistry
from extensions import db


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def catalog(app):
    """Phone / Acme / X1 with three repairs, plus one fixpoint in Rome."""
    phone = registries.device_types().create("Phone")["id"]
    acme = registries.brands().create("Acme")["id"]
    x1 = ModelCatalog().create("X1", phone, acme)["id"]
    repairs = registries.repairs()
    return SimpleNamespace(
        phone=phone,
        acme=acme,
        x1=x1,
        screen=repairs.create("Screen")["id"],
        battery=repairs.create("Battery")["id"],
        camera=repairs.create("Camera")["id"],
        rome=FixpointRegistry().create("FixPoint Roma", "Rome", "Via Roma 1")["id"],
    )
