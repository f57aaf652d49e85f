"""Seed script — populates the database with demo customers.

Usage:
    flask shell
    >>> exec(open('seed.py').read())

Or run directly:
    python seed.py
"""

from crm import create_app
from crm.extensions import db
from crm.domain.models import Customer


def seed():
    """Insert demo customers unless some already exist."""
    app = create_app("development")

    with app.app_context():
        db.create_all()

        # Check if already seeded
        if db.session.execute(db.select(Customer).limit(1)).first():
            print("⚠ Seed data already exists — skipping.")
            return

        db.session.add_all([
            Customer(name="Alice Johnson", email="alice@example.com", password="alice-secret"),
            Customer(name="Bob Smith", email="bob@example.com", password="bob-secret"),
            Customer(name="Carol White", email="carol@example.com", password="carol-secret"),
        ])

        db.session.commit()
        print("✓ Seed data inserted successfully.")


if __name__ == "__main__":
    seed()
