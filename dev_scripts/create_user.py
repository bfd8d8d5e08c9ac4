import sys
import os

# Add the project directory to the system path to ensure app can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from argparse import ArgumentParser

from app import create_app
from extensions import db
from models import Fixpoint, User

# Create an application instance
app = create_app()

# This function will create a user account attached to a fixpoint
def create_user(username, email, password, fixpoint_id=None, role="fixpoint"):
    # Ensure the app context is pushed for the database operations
    with app.app_context():
        # Check if the user already exists
        existing_user = User.query.filter_by(username=username).first()
        if existing_user:
            print(f"User '{username}' already exists.")
            return

        if fixpoint_id is not None and db.session.get(Fixpoint, fixpoint_id) is None:
            print(f"Fixpoint {fixpoint_id} does not exist.")
            return

        new_user = User(
            username=username,
            email=email,
            role=role,
            fixpoint_id=fixpoint_id,
            active=True,
        )

        # Set password (it will be hashed)
        new_user.set_password(password)

        # Add to session and commit
        db.session.add(new_user)
        db.session.commit()

        print(f"User '{username}' created successfully.")

# Run the function to create the user
if __name__ == "__main__":
    parser = ArgumentParser(description="Create a fixpoint user account")
    parser.add_argument("username")
    parser.add_argument("email")
    parser.add_argument("password")
    parser.add_argument("--fixpoint-id", type=int, default=None)
    parser.add_argument("--role", default="fixpoint")
    args = parser.parse_args()
    create_user(args.username, args.email, args.password, args.fixpoint_id, args.role)
