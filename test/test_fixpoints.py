import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from controllers.errors import NotFoundError, StorageError, ValidationError
from controllers.fixpoint import FixpointRegistry
from controllers.quotes import QuoteEngine
from extensions import db
from models import Fixpoint, Quote, QuoteRepairLine, User


def test_list_orders_by_city_then_name(app):
    fixpoints = FixpointRegistry()
    fixpoints.create("Zeta", "Milano")
    fixpoints.create("Beta", "Roma")
    fixpoints.create("Alfa", "Roma")

    rows = fixpoints.list()

    assert [(r["city"], r["name"]) for r in rows] == [
        ("Milano", "Zeta"), ("Roma", "Alfa"), ("Roma", "Beta"),
    ]


def test_optional_fields_default_to_empty(app):
    fp_id = FixpointRegistry().create(" Shop ", " Torino ")["id"]
    fp = FixpointRegistry().get(fp_id)
    assert fp["name"] == "Shop" and fp["city"] == "Torino"
    assert (fp["address"], fp["phone"], fp["email"]) == ("", "", "")
    assert fp["active"] is True


@pytest.mark.parametrize("name, city", [("", "Roma"), ("Shop", None), ("  ", "  ")])
def test_name_and_city_required(app, name, city):
    with pytest.raises(ValidationError):
        FixpointRegistry().create(name, city)


def test_update(app):
    fixpoints = FixpointRegistry()
    fp_id = fixpoints.create("Shop", "Roma", phone="06 123")["id"]

    fixpoints.update(fp_id, "Shop 2", "Napoli", address="Via Toledo 5", email="n@fix.it")

    fp = fixpoints.get(fp_id)
    assert fp["name"] == "Shop 2" and fp["city"] == "Napoli"
    assert fp["address"] == "Via Toledo 5"
    assert fp["phone"] == ""
    assert fp["email"] == "n@fix.it"


def test_update_unknown_and_invalid(app):
    with pytest.raises(NotFoundError):
        FixpointRegistry().update(77, "Shop", "Roma")
    with pytest.raises(ValidationError):
        FixpointRegistry().update(77, "Shop", "")


def _user(username, fixpoint_id):
    user = User(username=username, email=f"{username}@fix.it", fixpoint_id=fixpoint_id)
    user.set_password("secret")
    db.session.add(user)
    db.session.commit()
    return user.id


def test_delete_cascades_quotes_lines_and_users(catalog):
    other = FixpointRegistry().create("Other", "Bari")["id"]
    engine = QuoteEngine()
    mine = engine.create(catalog.x1, [catalog.screen, catalog.battery], fixpoint_id=catalog.rome, price=90)
    kept = engine.create(catalog.x1, [catalog.screen], fixpoint_id=other, price=50)
    _user("roma", catalog.rome)
    _user("bari", other)

    result = FixpointRegistry().delete(catalog.rome)

    assert result == {"id": catalog.rome, "quotes": 1, "users": 1}
    assert db.session.get(Fixpoint, catalog.rome) is None
    assert db.session.get(Quote, mine) is None
    assert db.session.query(QuoteRepairLine).filter_by(quote_id=mine).count() == 0
    assert [q["id"] for q in engine.list()] == [kept]
    assert [u.username for u in db.session.query(User).all()] == ["bari"]


def test_delete_unknown_fixpoint(app):
    with pytest.raises(NotFoundError):
        FixpointRegistry().delete(5)


def test_delete_is_all_or_nothing(catalog, monkeypatch):
    quote_id = QuoteEngine().create(catalog.x1, [catalog.screen], fixpoint_id=catalog.rome, price=10)
    _user("roma", catalog.rome)

    def failing_commit(self):
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    monkeypatch.setattr(Session, "commit", failing_commit)
    with pytest.raises(StorageError):
        FixpointRegistry().delete(catalog.rome)

    assert db.session.get(Fixpoint, catalog.rome) is not None
    assert db.session.get(Quote, quote_id) is not None
    assert db.session.query(User).count() == 1
