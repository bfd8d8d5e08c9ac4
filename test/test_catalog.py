import pytest

from controllers import catalog as registries
from controllers.device_model import ModelCatalog
from controllers.errors import ConflictError, NotFoundError, ValidationError
from controllers.price_list import PriceList
from controllers.quotes import QuoteEngine
from extensions import db
from models import Brand, DeviceType, LifecycleState, Repair

REGISTRIES = [
    (registries.device_types, DeviceType),
    (registries.brands, Brand),
    (registries.repairs, Repair),
]


@pytest.fixture(params=REGISTRIES, ids=["device_types", "brands", "repairs"])
def registry(request, app):
    factory, model = request.param
    return factory(), model


def test_create_trims_and_lists_by_name(registry):
    reg, _ = registry
    reg.create("  Zeta ")
    reg.create("Alpha")

    rows = reg.list()
    assert [r["name"] for r in rows] == ["Alpha", "Zeta"]
    assert all(r["active"] for r in rows)


def test_create_rejects_empty_name(registry):
    reg, _ = registry
    with pytest.raises(ValidationError):
        reg.create("   ")
    with pytest.raises(ValidationError):
        reg.create(None)


def test_create_active_duplicate_is_conflict_case_insensitive(registry):
    reg, model = registry
    reg.create("Screen")
    with pytest.raises(ConflictError):
        reg.create("sCREEN")
    assert db.session.query(model).count() == 1


def test_create_reactivates_disabled_row(registry):
    reg, model = registry
    created = reg.create("Tablet")
    assert created["reactivated"] is False

    row = db.session.get(model, created["id"])
    row.disable()
    db.session.commit()
    assert row.state is LifecycleState.DISABLED

    again = reg.create("TABLET")
    assert again == {"id": created["id"], "reactivated": True}
    assert db.session.query(model).count() == 1
    assert db.session.get(model, created["id"]).state is LifecycleState.ACTIVE


def test_rename(registry):
    reg, model = registry
    entry_id = reg.create("Old")["id"]
    reg.rename(entry_id, " New ")
    assert db.session.get(model, entry_id).name == "New"


def test_rename_unknown_id(registry):
    reg, _ = registry
    with pytest.raises(NotFoundError):
        reg.rename(999, "Anything")


def test_delete_unreferenced_removes_row(registry):
    reg, model = registry
    entry_id = reg.create("Lonely")["id"]
    assert reg.delete(entry_id) == {"id": entry_id, "disabled": False}
    assert db.session.get(model, entry_id) is None


def test_delete_unknown_id(registry):
    reg, _ = registry
    with pytest.raises(NotFoundError):
        reg.delete(12345)


def test_delete_referenced_device_type_and_brand_disable(catalog):
    for reg, entry_id, model in (
        (registries.device_types(), catalog.phone, DeviceType),
        (registries.brands(), catalog.acme, Brand),
    ):
        assert reg.delete(entry_id)["disabled"] is True
        row = db.session.get(model, entry_id)
        assert row is not None
        assert row.active is False


def test_delete_repair_in_price_list_disables(catalog):
    PriceList().upsert(catalog.x1, catalog.screen, 50)

    result = registries.repairs().delete(catalog.screen)

    assert result["disabled"] is True
    listed = {r["id"]: r for r in registries.repairs().list()}
    assert listed[catalog.screen]["active"] is False


def test_delete_repair_used_by_quote_disables(catalog):
    QuoteEngine().create(catalog.x1, [catalog.battery], price=30)
    assert registries.repairs().delete(catalog.battery)["disabled"] is True
    assert db.session.get(Repair, catalog.battery) is not None


def test_disabled_entry_reactivated_after_delete(catalog):
    reg = registries.brands()
    reg.delete(catalog.acme)

    result = reg.create("acme")

    assert result == {"id": catalog.acme, "reactivated": True}
    assert ModelCatalog().list(catalog.phone, catalog.acme)[0]["name"] == "X1"


def test_repair_list_exposes_catalog_price(app):
    reg = registries.repairs()
    reg.create("Screen")
    assert reg.list()[0]["price"] is None
