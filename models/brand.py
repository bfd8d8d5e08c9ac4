# models/brand.py

from extensions import db
from models.lifecycle import SoftDeleteMixin

class Brand(SoftDeleteMixin, db.Model):
    __tablename__ = "brands"
    id   = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)

    models = db.relationship("DeviceModel", back_populates="brand")

    def __repr__(self):
        return f"<Brand {self.name} {self.state.value}>"
