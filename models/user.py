# models/user.py
from extensions import db
from datetime import datetime
from werkzeug.security import generate_password_hash

# ----------------------------------------------------------------------
# 'User' model: accounts belonging to a fixpoint
# ----------------------------------------------------------------------

class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)    # Hashed password
    role = db.Column(db.String(20), nullable=False, default='fixpoint')  # e.g. "admin", "fixpoint"
    fixpoint_id = db.Column(db.Integer, db.ForeignKey('fixpoints.id'), nullable=True)
    active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    fixpoint = db.relationship('Fixpoint', back_populates='users')

    def __repr__(self):
        return f'<User {self.username}>'

    def set_password(self, password_plaintext):
        """Hashes the plaintext password and stores it."""
        self.password = generate_password_hash(password_plaintext)
