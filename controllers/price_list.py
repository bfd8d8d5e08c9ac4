# controllers/price_list.py

from __future__ import annotations

from flask import current_app
from sqlalchemy.exc import IntegrityError

from controllers.errors import NotFoundError, ValidationError
from controllers.transaction import SessionBound, atomic
from controllers.validation import require_id, require_price, to_id
from models.device_model import DeviceModel
from models.price_list import PriceListEntry
from models.repair import Repair


class PriceList(SessionBound):
    """(model, repair) → price. One entry per pair."""

    def list(self, model_id) -> list[dict]:
        model_id = to_id(model_id)
        if not model_id:
            return []
        with atomic(self.session, "list price list", commit=False):
            rows = (
                self.session.query(PriceListEntry, Repair)
                .join(Repair, Repair.id == PriceListEntry.repair_id)
                .filter(PriceListEntry.model_id == model_id)
                .order_by(Repair.name)
                .all()
            )
            return [
                {
                    "id": entry.id,
                    "price": entry.price,
                    "repair_id": repair.id,
                    "repair": repair.name,
                }
                for entry, repair in rows
            ]

    def upsert(self, model_id, repair_id, price) -> dict:
        model_id = require_id(model_id, "model_id")
        repair_id = require_id(repair_id, "repair_id")
        price = require_price(price)

        try:
            return self._write(model_id, repair_id, price, first_try=True)
        except IntegrityError:
            # a concurrent upsert inserted the pair first: it exists now
            current_app.logger.warning(
                "Price list insert raced for model=%s repair=%s – retrying as update",
                model_id, repair_id,
            )
            return self._write(model_id, repair_id, price)

    def _write(self, model_id: int, repair_id: int, price: float, first_try=False) -> dict:
        reraise = (IntegrityError,) if first_try else ()
        with atomic(self.session, "upsert price list", reraise=reraise):
            if self.session.get(DeviceModel, model_id) is None:
                raise ValidationError(f"Model {model_id} does not exist")
            if self.session.get(Repair, repair_id) is None:
                raise ValidationError(f"Repair {repair_id} does not exist")

            entry = (
                self.session.query(PriceListEntry)
                .filter_by(model_id=model_id, repair_id=repair_id)
                .first()
            )
            if entry is not None:
                entry.price = price
                current_app.logger.info(
                    "💶 Price updated model=%s repair=%s → %s", model_id, repair_id, price
                )
                return {"id": entry.id, "updated": True, "created": False}

            entry = PriceListEntry(model_id=model_id, repair_id=repair_id, price=price)
            self.session.add(entry)
            self.session.flush()
            current_app.logger.info(
                "💶 Price added model=%s repair=%s → %s", model_id, repair_id, price
            )
            return {"id": entry.id, "updated": False, "created": True}

    def delete(self, entry_id) -> dict:
        entry_id = require_id(entry_id, "id")
        with atomic(self.session, "delete price list entry"):
            entry = self.session.get(PriceListEntry, entry_id)
            if entry is None:
                raise NotFoundError(f"Price list entry {entry_id} not found")
            self.session.delete(entry)
            return {"id": entry_id}
