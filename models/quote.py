# models/quote.py

import enum
from datetime import datetime

from extensions import db

class QuoteStatus(str, enum.Enum):
    NEW      = "NEW"
    ASSIGNED = "ASSIGNED"
    DONE     = "DONE"

    @classmethod
    def parse(cls, value):
        """Return the member for *value* (case/space tolerant) or None."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return None

# current status → statuses reachable through set_status
# (assigning a fixpoint bypasses this and always lands on ASSIGNED)
STATUS_TRANSITIONS = {
    QuoteStatus.NEW:      {QuoteStatus.ASSIGNED, QuoteStatus.DONE},
    QuoteStatus.ASSIGNED: {QuoteStatus.NEW, QuoteStatus.DONE},
    QuoteStatus.DONE:     set(),
}

def can_transition(current, target) -> bool:
    """
    *current* may be None for a stored status outside QuoteStatus; such
    quotes can move to any known status.
    """
    if current is None or current is target:
        return True
    return target in STATUS_TRANSITIONS[current]

class Quote(db.Model):
    __tablename__ = "quotes"

    id             = db.Column(db.Integer, primary_key=True)
    model_id       = db.Column(db.Integer, db.ForeignKey("models.id"), nullable=False)
    fixpoint_id    = db.Column(db.Integer, db.ForeignKey("fixpoints.id"), nullable=True)
    price          = db.Column(db.Float, nullable=False, default=0)
    city           = db.Column(db.String(120))
    customer_name  = db.Column(db.String(120))
    customer_email = db.Column(db.String(120))
    # stored as text, older rows may hold values outside QuoteStatus
    status         = db.Column(db.String(20), nullable=False, default=QuoteStatus.NEW.value)
    created_at     = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    model    = db.relationship("DeviceModel")
    fixpoint = db.relationship("Fixpoint", back_populates="quotes")
    lines    = db.relationship("QuoteRepairLine", back_populates="quote",
                               cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Quote #{self.id} {self.status}>"

class QuoteRepairLine(db.Model):
    __tablename__ = "quote_repairs"

    quote_id  = db.Column(db.Integer, db.ForeignKey("quotes.id"), primary_key=True)
    repair_id = db.Column(db.Integer, db.ForeignKey("repairs.id"), primary_key=True)

    quote  = db.relationship("Quote", back_populates="lines")
    repair = db.relationship("Repair")

    def __repr__(self):
        return f"<QuoteRepairLine quote={self.quote_id} repair={self.repair_id}>"
