# controllers/quotes.py
# ════════════════════════════════════════════════════════════════════════════
#  Customer quotes
#  --------------------------------------------------------------------------
#  ▸ create       – quote row + one line per repair, in one transaction
#  ▸ list / get   – joined with model name and the repair names
#  ▸ assign       – hand the quote to a fixpoint (status → ASSIGNED)
#  ▸ set_status   – move along QuoteStatus, see models.quote.STATUS_TRANSITIONS
# ════════════════════════════════════════════════════════════════════════════
from __future__ import annotations

from flask import current_app

from controllers.errors import ConflictError, NotFoundError, ValidationError
from controllers.transaction import SessionBound, atomic
from controllers.validation import optional_text, require_id, require_price, to_id
from models.device_model import DeviceModel
from models.fixpoint import Fixpoint
from models.quote import Quote, QuoteRepairLine, QuoteStatus, can_transition
from models.repair import Repair

REPAIR_SEPARATOR = ", "


def _parse_status(value, default=None) -> QuoteStatus:
    if value is None or value == "":
        if default is None:
            raise ValidationError("status is required")
        return default
    status = QuoteStatus.parse(value)
    if status is None:
        allowed = ", ".join(s.value for s in QuoteStatus)
        raise ValidationError(f"Unknown status '{value}' (allowed: {allowed})")
    return status


class QuoteEngine(SessionBound):

    # ────────────────────────────────────────────────────────────────
    #  Read helpers
    # ────────────────────────────────────────────────────────────────
    def _repairs_by_quote(self, quote_ids) -> dict:
        """quote id → [(repair id, repair name)], names in alphabetical order."""
        found = {qid: [] for qid in quote_ids}
        if not quote_ids:
            return found
        rows = (
            self.session.query(QuoteRepairLine.quote_id, Repair.id, Repair.name)
            .join(Repair, Repair.id == QuoteRepairLine.repair_id)
            .filter(QuoteRepairLine.quote_id.in_(quote_ids))
            .order_by(Repair.name, Repair.id)
            .all()
        )
        for quote_id, repair_id, repair_name in rows:
            found[quote_id].append((repair_id, repair_name))
        return found

    def _rows(self, query) -> list[dict]:
        rows = (
            query.outerjoin(DeviceModel, DeviceModel.id == Quote.model_id)
            .add_columns(DeviceModel.name)
            .order_by(Quote.created_at.desc(), Quote.id.desc())
            .all()
        )
        repairs = self._repairs_by_quote([q.id for q, _ in rows])
        return [self._serialize(q, model_name, repairs[q.id]) for q, model_name in rows]

    @staticmethod
    def _serialize(q: Quote, model_name, repairs) -> dict:
        return {
            "id":             q.id,
            "model_id":       q.model_id,
            "model":          model_name,
            "repair":         REPAIR_SEPARATOR.join(name for _, name in repairs) or None,
            "repair_ids":     [rid for rid, _ in repairs],
            "fixpoint_id":    q.fixpoint_id,
            "price":          q.price,
            "city":           q.city,
            "customer_name":  q.customer_name,
            "customer_email": q.customer_email,
            "status":         q.status,
            "created_at":     q.created_at.strftime("%Y-%m-%d %H:%M:%S") if q.created_at else None,
        }

    def _get_or_404(self, quote_id: int) -> Quote:
        q = self.session.get(Quote, quote_id)
        if q is None:
            raise NotFoundError(f"Quote {quote_id} not found")
        return q

    def _require_fixpoint(self, fixpoint_id: int):
        if self.session.get(Fixpoint, fixpoint_id) is None:
            raise ValidationError(f"Fixpoint {fixpoint_id} does not exist")

    # ────────────────────────────────────────────────────────────────
    #  CREATE
    # ────────────────────────────────────────────────────────────────
    def create(self, model_id, repair_ids, fixpoint_id=None, price=None, city=None,
               customer_name=None, customer_email=None, status=None) -> int:
        model_id = require_id(model_id, "model_id")
        if not isinstance(repair_ids, (list, tuple)) or not repair_ids:
            raise ValidationError("repair_ids must be a non-empty list")
        # one line per repair, first occurrence wins
        repair_ids = list(dict.fromkeys(require_id(r, "repair_ids[]") for r in repair_ids))
        fixpoint_id = to_id(fixpoint_id)
        price = require_price(price) if price not in (None, "") else 0.0
        status = _parse_status(status, default=QuoteStatus.NEW)

        with atomic(self.session, "create quote"):
            if self.session.get(DeviceModel, model_id) is None:
                raise ValidationError(f"Model {model_id} does not exist")
            known = {
                rid for (rid,) in
                self.session.query(Repair.id).filter(Repair.id.in_(repair_ids))
            }
            missing = [rid for rid in repair_ids if rid not in known]
            if missing:
                raise ValidationError(f"Unknown repair id(s): {missing}")
            if fixpoint_id is not None:
                self._require_fixpoint(fixpoint_id)

            quote = Quote(
                model_id=model_id,
                fixpoint_id=fixpoint_id,
                price=price,
                city=optional_text(city),
                customer_name=optional_text(customer_name),
                customer_email=optional_text(customer_email),
                status=status.value,
            )
            self.session.add(quote)
            self.session.flush()   # so quote.id is set

            for rid in repair_ids:
                self.session.add(QuoteRepairLine(quote_id=quote.id, repair_id=rid))
            self.session.flush()

            current_app.logger.info(
                "📝 Quote #%s created: model=%s repairs=%s price=%s",
                quote.id, model_id, repair_ids, price,
            )
            return quote.id

    # ────────────────────────────────────────────────────────────────
    #  READ
    # ────────────────────────────────────────────────────────────────
    def list(self) -> list[dict]:
        with atomic(self.session, "list quotes", commit=False):
            return self._rows(self.session.query(Quote))

    def list_for_fixpoint(self, fixpoint_id) -> list[dict]:
        fixpoint_id = to_id(fixpoint_id)
        if not fixpoint_id:
            return []
        with atomic(self.session, "list fixpoint quotes", commit=False):
            return self._rows(
                self.session.query(Quote).filter(Quote.fixpoint_id == fixpoint_id)
            )

    def get(self, quote_id) -> dict:
        """Single quote with model, repairs and the assigned fixpoint's contact data."""
        quote_id = require_id(quote_id, "id")
        with atomic(self.session, "get quote", commit=False):
            q = self._get_or_404(quote_id)
            model = self.session.get(DeviceModel, q.model_id)
            repairs = self._repairs_by_quote([q.id])[q.id]
            data = self._serialize(q, model.name if model else None, repairs)

            fp = self.session.get(Fixpoint, q.fixpoint_id) if q.fixpoint_id else None
            data.update({
                "fixpoint_name":    fp.name if fp else None,
                "fixpoint_city":    fp.city if fp else None,
                "fixpoint_address": fp.address if fp else None,
                "fixpoint_phone":   fp.phone if fp else None,
            })
            return data

    # ────────────────────────────────────────────────────────────────
    #  UPDATE
    # ────────────────────────────────────────────────────────────────
    def assign_fixpoint(self, quote_id, fixpoint_id) -> dict:
        quote_id = require_id(quote_id, "id")
        fixpoint_id = require_id(fixpoint_id, "fixpoint_id")
        with atomic(self.session, "assign quote"):
            q = self._get_or_404(quote_id)
            self._require_fixpoint(fixpoint_id)

            if q.status == QuoteStatus.DONE.value:
                current_app.logger.warning("↩️  Quote #%s was DONE, reopened as ASSIGNED", quote_id)
            q.fixpoint_id = fixpoint_id
            q.status = QuoteStatus.ASSIGNED.value
            current_app.logger.info("📌 Quote #%s assigned to fixpoint %s", quote_id, fixpoint_id)
            return {"id": quote_id, "fixpoint_id": fixpoint_id, "status": q.status}

    def set_status(self, quote_id, status) -> dict:
        quote_id = require_id(quote_id, "id")
        target = _parse_status(status)
        with atomic(self.session, "set quote status"):
            q = self._get_or_404(quote_id)
            current = QuoteStatus.parse(q.status)
            if not can_transition(current, target):
                raise ConflictError(f"Quote {quote_id} cannot move from {q.status} to {target.value}")

            changed = q.status != target.value
            q.status = target.value
            if changed:
                current_app.logger.info("🔁 Quote #%s status → %s", quote_id, target.value)
            return {"id": quote_id, "status": target.value, "changed": changed}
