# models/price_list.py

from extensions import db

class PriceListEntry(db.Model):
    __tablename__ = "model_repairs"
    __table_args__ = (
        db.UniqueConstraint("model_id", "repair_id", name="uq_model_repair"),
    )

    id        = db.Column(db.Integer, primary_key=True)
    model_id  = db.Column(db.Integer, db.ForeignKey("models.id"), nullable=False)
    repair_id = db.Column(db.Integer, db.ForeignKey("repairs.id"), nullable=False)
    price     = db.Column(db.Float, nullable=False)

    model  = db.relationship("DeviceModel", back_populates="price_entries")
    repair = db.relationship("Repair", back_populates="price_entries")

    def __repr__(self):
        return f"<PriceListEntry model={self.model_id} repair={self.repair_id} {self.price}>"
