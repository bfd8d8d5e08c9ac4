import pytest

from controllers import catalog as registries
from controllers.device_model import ModelCatalog
from controllers.errors import ConflictError, NotFoundError, ValidationError
from controllers.price_list import PriceList
from controllers.quotes import QuoteEngine
from extensions import db
from models import DeviceModel


def test_list_needs_both_filters(catalog):
    models = ModelCatalog()
    assert models.list(None, catalog.acme) == []
    assert models.list(catalog.phone, None) == []
    assert models.list("", "") == []
    assert [m["name"] for m in models.list(catalog.phone, catalog.acme)] == ["X1"]


def test_list_is_scoped_and_sorted(catalog):
    models = ModelCatalog()
    tablet = registries.device_types().create("Tablet")["id"]
    models.create("X3", catalog.phone, catalog.acme)
    models.create("X2", catalog.phone, catalog.acme)
    models.create("T1", tablet, catalog.acme)

    names = [m["name"] for m in models.list(str(catalog.phone), str(catalog.acme))]
    assert names == ["X1", "X2", "X3"]


@pytest.mark.parametrize("field", ["name", "device_type_id", "brand_id"])
def test_create_requires_every_field(catalog, field):
    args = {"name": "Y1", "device_type_id": catalog.phone, "brand_id": catalog.acme}
    args[field] = None
    with pytest.raises(ValidationError):
        ModelCatalog().create(**args)


def test_create_rejects_unknown_references(catalog):
    with pytest.raises(ValidationError):
        ModelCatalog().create("Y1", 999, catalog.acme)
    with pytest.raises(ValidationError):
        ModelCatalog().create("Y1", catalog.phone, 999)


def test_duplicate_in_same_triple_is_conflict(catalog):
    with pytest.raises(ConflictError):
        ModelCatalog().create(" x1 ", catalog.phone, catalog.acme)


def test_same_name_under_other_brand_is_allowed(catalog):
    other = registries.brands().create("Globex")["id"]
    created = ModelCatalog().create("X1", catalog.phone, other)
    assert created["id"] != catalog.x1


def test_rename(catalog):
    ModelCatalog().rename(catalog.x1, "X1 Pro")
    assert db.session.get(DeviceModel, catalog.x1).name == "X1 Pro"
    with pytest.raises(NotFoundError):
        ModelCatalog().rename(999, "Nope")


def test_delete_unused_model(catalog):
    ModelCatalog().delete(catalog.x1)
    assert db.session.get(DeviceModel, catalog.x1) is None


def test_delete_priced_model_is_refused(catalog):
    PriceList().upsert(catalog.x1, catalog.screen, 80)

    with pytest.raises(ConflictError):
        ModelCatalog().delete(catalog.x1)
    assert db.session.get(DeviceModel, catalog.x1) is not None


def test_delete_quoted_model_is_refused(catalog):
    QuoteEngine().create(catalog.x1, [catalog.screen], price=80)
    with pytest.raises(ConflictError):
        ModelCatalog().delete(catalog.x1)


def test_delete_unknown_model(app):
    with pytest.raises(NotFoundError):
        ModelCatalog().delete(42)
