# controllers/fixpoint.py

from __future__ import annotations

from flask import current_app
from sqlalchemy import select

from controllers.errors import NotFoundError
from controllers.transaction import SessionBound, atomic
from controllers.validation import clean_text, optional_text, require_id
from models.fixpoint import Fixpoint
from models.quote import Quote, QuoteRepairLine
from models.user import User


def _serialize(fp: Fixpoint) -> dict:
    return {
        "id":      fp.id,
        "name":    fp.name,
        "city":    fp.city,
        "address": fp.address or "",
        "phone":   fp.phone or "",
        "email":   fp.email or "",
        "active":  fp.active,
    }


class FixpointRegistry(SessionBound):

    def _get_or_404(self, fixpoint_id: int) -> Fixpoint:
        fp = self.session.get(Fixpoint, fixpoint_id)
        if fp is None:
            raise NotFoundError(f"Fixpoint {fixpoint_id} not found")
        return fp

    def list(self) -> list[dict]:
        with atomic(self.session, "list fixpoints", commit=False):
            rows = (
                self.session.query(Fixpoint)
                .order_by(Fixpoint.city, Fixpoint.name)
                .all()
            )
            return [_serialize(fp) for fp in rows]

    def get(self, fixpoint_id) -> dict:
        fixpoint_id = require_id(fixpoint_id, "id")
        with atomic(self.session, "get fixpoint", commit=False):
            return _serialize(self._get_or_404(fixpoint_id))

    def create(self, name, city, address=None, phone=None, email=None) -> dict:
        name = clean_text(name, "name")
        city = clean_text(city, "city")
        with atomic(self.session, "create fixpoint"):
            fp = Fixpoint(
                name=name,
                city=city,
                address=optional_text(address),
                phone=optional_text(phone),
                email=optional_text(email),
                active=True,
            )
            self.session.add(fp)
            self.session.flush()
            current_app.logger.info("🏪 Fixpoint '%s' (%s) created (id=%s)", name, city, fp.id)
            return {"id": fp.id}

    def update(self, fixpoint_id, name, city, address=None, phone=None, email=None) -> dict:
        fixpoint_id = require_id(fixpoint_id, "id")
        name = clean_text(name, "name")
        city = clean_text(city, "city")
        with atomic(self.session, "update fixpoint"):
            fp = self._get_or_404(fixpoint_id)
            fp.name    = name
            fp.city    = city
            fp.address = optional_text(address)
            fp.phone   = optional_text(phone)
            fp.email   = optional_text(email)
            return {"id": fp.id}

    def delete(self, fixpoint_id) -> dict:
        """
        Remove a fixpoint together with its quotes (and their repair lines)
        and its user accounts. All or nothing.
        """
        fixpoint_id = require_id(fixpoint_id, "id")
        with atomic(self.session, "delete fixpoint"):
            self._get_or_404(fixpoint_id)

            quote_ids = select(Quote.id).where(Quote.fixpoint_id == fixpoint_id)
            self.session.query(QuoteRepairLine).filter(
                QuoteRepairLine.quote_id.in_(quote_ids)
            ).delete(synchronize_session=False)
            quotes = (
                self.session.query(Quote)
                .filter(Quote.fixpoint_id == fixpoint_id)
                .delete(synchronize_session=False)
            )
            users = (
                self.session.query(User)
                .filter(User.fixpoint_id == fixpoint_id)
                .delete(synchronize_session=False)
            )
            self.session.query(Fixpoint).filter(
                Fixpoint.id == fixpoint_id
            ).delete(synchronize_session=False)
            current_app.logger.warning(
                "🗑️  Fixpoint %s deleted with %d quote(s) and %d user(s)",
                fixpoint_id, quotes, users,
            )
            return {"id": fixpoint_id, "quotes": quotes, "users": users}
