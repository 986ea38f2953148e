import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from hrm.database import Base, enable_sqlite_foreign_keys, get_db
from hrm.main import app
from hrm.models.user import User
from hrm.services import leave_type_service
from hrm.services.auth_service import hash_password

TEST_DB_URL = "sqlite:///./test_hrm.db"
TEST_PASSWORD = "password123"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
enable_sqlite_foreign_keys(engine)
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    session = TestingSession()
    try:
        leave_type_service.seed_default_leave_types(session)
    finally:
        session.close()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_users(db):
    users = {
        "employee": User(name="Employee", email="employee@example.com", password_hash=hash_password(TEST_PASSWORD)),
        "manager": User(name="Manager", email="manager@example.com", password_hash=hash_password(TEST_PASSWORD)),
        "other": User(name="Other", email="other@example.com", password_hash=hash_password(TEST_PASSWORD)),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


def get_token(client, email: str, password: str = TEST_PASSWORD) -> str:
    resp = client.post("/api/auth/signin", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client, email: str, password: str = TEST_PASSWORD) -> dict:
    return {"Authorization": f"Bearer {get_token(client, email, password)}"}
