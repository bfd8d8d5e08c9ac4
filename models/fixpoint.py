# models/fixpoint.py

from extensions import db

class Fixpoint(db.Model):
    __tablename__ = "fixpoints"

    id      = db.Column(db.Integer, primary_key=True)
    name    = db.Column(db.String(120), nullable=False)
    city    = db.Column(db.String(120), nullable=False)
    address = db.Column(db.String(255), nullable=False, default="")
    phone   = db.Column(db.String(50), nullable=False, default="")
    email   = db.Column(db.String(120), nullable=False, default="")
    active  = db.Column(db.Boolean, nullable=False, default=True)

    quotes = db.relationship("Quote", back_populates="fixpoint")
    users  = db.relationship("User", back_populates="fixpoint")

    def __repr__(self):
        return f"<Fixpoint {self.name} ({self.city})>"
