# controllers/catalog.py
# ════════════════════════════════════════════════════════════════════════════
#  Soft-deletable name registries: device types, brands, repairs.
#  --------------------------------------------------------------------------
#  ▸ names are unique case-insensitively, active or not
#  ▸ creating a disabled name reactivates the old row
#  ▸ deleting a row something still points at only disables it
# ════════════════════════════════════════════════════════════════════════════
from __future__ import annotations

from flask import current_app
from sqlalchemy import func

from controllers.errors import ConflictError, NotFoundError
from controllers.transaction import SessionBound, atomic
from controllers.validation import clean_text, require_id
from models.brand import Brand
from models.device_model import DeviceModel
from models.device_type import DeviceType
from models.price_list import PriceListEntry
from models.quote import QuoteRepairLine
from models.repair import Repair


class CatalogRegistry(SessionBound):

    def __init__(self, model, label, dependents=(), extra_fields=(), session=None):
        """
        *dependents* lists ``(model, fk_column_name)`` pairs whose rows pin
        an entry; *extra_fields* are extra columns exposed by ``list()``.
        """
        super().__init__(session)
        self.model        = model
        self.label        = label
        self.dependents   = tuple(dependents)
        self.extra_fields = tuple(extra_fields)

    # ────────────────────────────────────────────────────────────────
    #  Helpers
    # ────────────────────────────────────────────────────────────────
    def _serialize(self, row) -> dict:
        data = {"id": row.id, "name": row.name, "active": row.active}
        for field in self.extra_fields:
            data[field] = getattr(row, field)
        return data

    def _find_by_name(self, name: str):
        return (
            self.session.query(self.model)
            .filter(func.lower(self.model.name) == func.lower(name))
            .first()
        )

    def _get_or_404(self, entry_id: int):
        row = self.session.get(self.model, entry_id)
        if row is None:
            raise NotFoundError(f"{self.label} {entry_id} not found")
        return row

    def dependent_count(self, entry_id: int) -> int:
        total = 0
        for dep_model, column in self.dependents:
            total += (
                self.session.query(func.count())
                .select_from(dep_model)
                .filter(getattr(dep_model, column) == entry_id)
                .scalar()
            )
        return total

    # ────────────────────────────────────────────────────────────────
    #  CRUD
    # ────────────────────────────────────────────────────────────────
    def list(self) -> list[dict]:
        with atomic(self.session, f"list {self.label}", commit=False):
            rows = self.session.query(self.model).order_by(self.model.name).all()
            return [self._serialize(r) for r in rows]

    def create(self, name) -> dict:
        name = clean_text(name, "name")
        with atomic(self.session, f"create {self.label}"):
            row = self._find_by_name(name)
            if row is not None and not row.is_active:
                row.reactivate()
                current_app.logger.info("♻️  %s '%s' reactivated (id=%s)", self.label, row.name, row.id)
                return {"id": row.id, "reactivated": True}
            if row is not None:
                raise ConflictError(f"{self.label} '{name}' already exists")

            row = self.model(name=name, active=True)
            self.session.add(row)
            self.session.flush()   # so row.id is set
            current_app.logger.info("➕ %s '%s' created (id=%s)", self.label, name, row.id)
            return {"id": row.id, "reactivated": False}

    def rename(self, entry_id, name) -> dict:
        entry_id = require_id(entry_id, "id")
        name = clean_text(name, "name")
        with atomic(self.session, f"rename {self.label}"):
            row = self._get_or_404(entry_id)
            row.name = name
            return {"id": row.id}

    def delete(self, entry_id) -> dict:
        entry_id = require_id(entry_id, "id")
        with atomic(self.session, f"delete {self.label}"):
            row = self._get_or_404(entry_id)
            in_use = self.dependent_count(entry_id)
            if in_use:
                row.disable()
                current_app.logger.warning(
                    "🚫 %s %s still referenced %d time(s) – disabled instead of deleted",
                    self.label, entry_id, in_use,
                )
                return {"id": entry_id, "disabled": True}

            self.session.delete(row)
            current_app.logger.info("🗑️  %s %s deleted", self.label, entry_id)
            return {"id": entry_id, "disabled": False}


# ── REGISTRIES ─────────────────────────────────────────────────────────
def device_types(session=None) -> CatalogRegistry:
    return CatalogRegistry(
        DeviceType, "Device type",
        dependents=[(DeviceModel, "device_type_id")],
        session=session,
    )

def brands(session=None) -> CatalogRegistry:
    return CatalogRegistry(
        Brand, "Brand",
        dependents=[(DeviceModel, "brand_id")],
        session=session,
    )

def repairs(session=None) -> CatalogRegistry:
    return CatalogRegistry(
        Repair, "Repair",
        dependents=[(PriceListEntry, "repair_id"), (QuoteRepairLine, "repair_id")],
        extra_fields=("price",),
        session=session,
    )
