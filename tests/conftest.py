import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from cpms.database import Base, get_db
from cpms.main import app
from cpms.models.user import User
from cpms.utils.passwords import generate_salt, hash_password

TEST_DB_URL = "sqlite:///./test_cpms.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
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


SEED_PASSWORD = "secret123"


@pytest.fixture
def seed_user(db):
    salt = generate_salt()
    user = User(email="owner@example.com", salt=salt, password=hash_password(SEED_PASSWORD, salt))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def get_token(client, email: str, password: str = SEED_PASSWORD) -> str:
    resp = client.post("/users/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["token"]


def auth_headers(client, email: str, password: str = SEED_PASSWORD) -> dict:
    return {"Authorization": f"Bearer {get_token(client, email, password)}"}
