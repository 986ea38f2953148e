"""Seed the database with demo users."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hrm.database import SessionLocal, engine, Base
import hrm.models  # noqa: F401

from hrm.models.user import User
from hrm.services import leave_type_service
from hrm.services.auth_service import hash_password

DEMO_PASSWORD = "password123"


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        leave_type_service.seed_default_leave_types(db)

        if db.query(User).count() > 0:
            print("Database already seeded. Skipping.")
            return

        users = [
            User(name="Alice Kim", email="alice@example.com", password_hash=hash_password(DEMO_PASSWORD)),
            User(name="Brian Lee", email="brian@example.com", password_hash=hash_password(DEMO_PASSWORD)),
            User(name="Chloe Park", email="chloe@example.com", password_hash=hash_password(DEMO_PASSWORD)),
        ]
        db.add_all(users)
        db.commit()

        print(f"Seeded {len(users)} users (password: {DEMO_PASSWORD}).")
        for user in users:
            print(f"  - {user.email}")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
