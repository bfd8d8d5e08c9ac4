# controllers/device_model.py

from __future__ import annotations

from flask import current_app
from sqlalchemy import func

from controllers.errors import ConflictError, NotFoundError, ValidationError
from controllers.transaction import SessionBound, atomic
from controllers.validation import clean_text, require_id, to_id
from models.brand import Brand
from models.device_model import DeviceModel
from models.device_type import DeviceType
from models.price_list import PriceListEntry
from models.quote import Quote


class ModelCatalog(SessionBound):
    """Device models, always looked up inside one (device type, brand) pair."""

    def _get_or_404(self, model_id: int) -> DeviceModel:
        row = self.session.get(DeviceModel, model_id)
        if row is None:
            raise NotFoundError(f"Model {model_id} not found")
        return row

    # ── LIST MODELS FOR <select> (both filters required) ──────────────
    def list(self, device_type_id, brand_id) -> list[dict]:
        device_type_id = to_id(device_type_id)
        brand_id = to_id(brand_id)
        if not device_type_id or not brand_id:
            return []
        with atomic(self.session, "list models", commit=False):
            rows = (
                self.session.query(DeviceModel)
                .filter_by(device_type_id=device_type_id, brand_id=brand_id)
                .order_by(DeviceModel.name)
                .all()
            )
            return [
                {
                    "id": m.id,
                    "name": m.name,
                    "device_type_id": m.device_type_id,
                    "brand_id": m.brand_id,
                }
                for m in rows
            ]

    # ── CREATE ────────────────────────────────────────────────────────
    def create(self, name, device_type_id, brand_id) -> dict:
        name = clean_text(name, "name")
        device_type_id = require_id(device_type_id, "device_type_id")
        brand_id = require_id(brand_id, "brand_id")

        with atomic(self.session, "create model"):
            if self.session.get(DeviceType, device_type_id) is None:
                raise ValidationError(f"Device type {device_type_id} does not exist")
            if self.session.get(Brand, brand_id) is None:
                raise ValidationError(f"Brand {brand_id} does not exist")

            duplicate = (
                self.session.query(DeviceModel.id)
                .filter(
                    func.lower(DeviceModel.name) == func.lower(name),
                    DeviceModel.device_type_id == device_type_id,
                    DeviceModel.brand_id == brand_id,
                )
                .first()
            )
            if duplicate:
                raise ConflictError(f"Model '{name}' already exists")

            row = DeviceModel(name=name, device_type_id=device_type_id, brand_id=brand_id)
            self.session.add(row)
            self.session.flush()
            current_app.logger.info("➕ Model '%s' created (id=%s)", name, row.id)
            return {"id": row.id}

    # ── RENAME ────────────────────────────────────────────────────────
    def rename(self, model_id, name) -> dict:
        model_id = require_id(model_id, "id")
        name = clean_text(name, "name")
        with atomic(self.session, "rename model"):
            row = self._get_or_404(model_id)
            row.name = name
            return {"id": row.id}

    # ── DELETE (refused while priced or quoted) ───────────────────────
    def delete(self, model_id) -> dict:
        model_id = require_id(model_id, "id")
        with atomic(self.session, "delete model"):
            row = self._get_or_404(model_id)

            priced = (
                self.session.query(func.count(PriceListEntry.id))
                .filter(PriceListEntry.model_id == model_id)
                .scalar()
            )
            if priced:
                raise ConflictError("Model is used in the price list")

            quoted = (
                self.session.query(func.count(Quote.id))
                .filter(Quote.model_id == model_id)
                .scalar()
            )
            if quoted:
                raise ConflictError("Model is used by existing quotes")

            self.session.delete(row)
            current_app.logger.info("🗑️  Model %s deleted", model_id)
            return {"id": model_id}
