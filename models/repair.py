# models/repair.py

from extensions import db
from models.lifecycle import SoftDeleteMixin

class Repair(SoftDeleteMixin, db.Model):
    """
    A repair operation ("Screen", "Battery" ...). The per-model price lives
    in the price list; ``price`` here is a catalog hint only.
    """
    __tablename__ = "repairs"
    id    = db.Column(db.Integer, primary_key=True)
    name  = db.Column(db.String(100), nullable=False)
    price = db.Column(db.Float, nullable=True)

    price_entries = db.relationship("PriceListEntry", back_populates="repair")

    def __repr__(self):
        return f"<Repair {self.name} {self.state.value}>"
