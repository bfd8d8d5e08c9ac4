# models/device_type.py

from extensions import db
from models.lifecycle import SoftDeleteMixin

class DeviceType(SoftDeleteMixin, db.Model):
    __tablename__ = "device_types"
    id   = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)   # "Phone", "Tablet", ...

    models = db.relationship("DeviceModel", back_populates="device_type")

    def __repr__(self):
        return f"<DeviceType {self.name} {self.state.value}>"
