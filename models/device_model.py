# models/device_model.py

from extensions import db

class DeviceModel(db.Model):
    """
    One concrete device model – iPhone 12, Galaxy S21 …
    Always scoped to one device type and one brand. Has no active flag:
    it is either deleted before anything prices it, or kept forever.
    """
    __tablename__ = "models"
    id   = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)

    # FK → device type / brand
    device_type_id = db.Column(db.Integer,
                               db.ForeignKey("device_types.id"),
                               nullable=False)
    brand_id       = db.Column(db.Integer,
                               db.ForeignKey("brands.id"),
                               nullable=False)
    device_type = db.relationship("DeviceType", back_populates="models")
    brand       = db.relationship("Brand", back_populates="models")

    price_entries = db.relationship("PriceListEntry", back_populates="model")

    def __repr__(self):
        return f"<DeviceModel {self.name} type={self.device_type_id} brand={self.brand_id}>"
