"""Initialize the database - creates all tables and the default leave type catalog."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hrm.database import SessionLocal, engine, Base
import hrm.models  # noqa: F401 - registers all models
from hrm.services import leave_type_service


def init_db():
    print("Creating all database tables...")
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        inserted = leave_type_service.seed_default_leave_types(db)
    finally:
        db.close()
    if inserted:
        print(f"Seeded {inserted} default leave types.")
    else:
        print("Leave types already present. Skipping seed.")
    print("Database initialized successfully.")


if __name__ == "__main__":
    init_db()
