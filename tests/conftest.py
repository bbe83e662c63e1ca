"""Pytest configuration and fixtures."""

import os
from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from foodtech.database import Base, get_db
from foodtech.main import app
from foodtech.models import InventoryItem, Order, SchoolClass, User
from foodtech.models.enums import OrderStatus, UserRole


class AuthHeaders(dict):
    """Dict subclass that also stores user_id."""

    def __init__(self, *args, user_id: int | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/foodtech", "/foodtech_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, email: str, class_id: int | None = None) -> AuthHeaders:
    """Register a student through the API and return their auth headers."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "email": email,
            "password": "testpass123",
            "name": email.split("@")[0].title(),
            "class_id": class_id,
        },
    )
    assert response.status_code == 201, response.text
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['access_token']}"}, user_id=data["user"]["id"]
    )


@pytest.fixture
def school_class(db):
    """A class with two expected students."""
    school_class = SchoolClass(name="Year 9 Food Tech", day="Monday", time="09:00", students=2)
    db.add(school_class)
    db.commit()
    db.refresh(school_class)
    return school_class


@pytest.fixture
def teacher_headers(client, db):
    """Auth headers for a teacher.

    Registration only creates students, so the account is promoted directly.
    """
    headers = register(client, "teacher@example.com")
    db.query(User).filter(User.id == headers.user_id).update({"role": UserRole.TEACHER})
    db.commit()
    return headers


@pytest.fixture
def student_headers(client, school_class):
    """Auth headers for a student enrolled in ``school_class``."""
    return register(client, "student@example.com", class_id=school_class.id)


@pytest.fixture
def make_student(db):
    """Factory for student users created directly in the database."""

    def _make(email: str, school_class: SchoolClass | None = None) -> User:
        user = User(
            email=email,
            password_hash="fake",
            name=email.split("@")[0],
            role=UserRole.STUDENT,
            class_id=school_class.id if school_class else None,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def make_order(db):
    """Factory for orders created directly in the database."""

    def _make(
        student: User,
        school_class: SchoolClass,
        ingredients: list[dict],
        days_ahead: float = 2,
        status: OrderStatus = OrderStatus.APPROVED,
    ) -> Order:
        order = Order(
            student_id=student.id,
            class_id=school_class.id,
            date=datetime.now(UTC) + timedelta(days=days_ahead),
            ingredients=ingredients,
            status=status,
        )
        db.add(order)
        db.commit()
        db.refresh(order)
        return order

    return _make


@pytest.fixture
def make_inventory(db):
    """Factory for inventory items."""

    def _make(name: str, current_stock: float, unit: str, min_level: float = 0) -> InventoryItem:
        item = InventoryItem(name=name, current_stock=current_stock, unit=unit, min_level=min_level)
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    return _make
