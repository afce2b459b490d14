import os
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault('DATABASE_URL', 'sqlite://')
os.environ.setdefault('ACCESS_TOKEN_SECRET', 'test-secret')
os.environ.setdefault('STRIPE_SECRET_KEY', 'sk_test_dummy')

from backend.auth import jwt_handler  # noqa: E402
from backend.database import Base, get_db  # noqa: E402
from backend.main import app  # noqa: E402
from backend.models.payment import Payment  # noqa: E402
from backend.models.school_class import SchoolClass  # noqa: E402
from backend.models.selected_class import SelectedClass  # noqa: E402
from backend.models.user import User  # noqa: E402

TABLES = [User.__table__, SchoolClass.__table__, SelectedClass.__table__, Payment.__table__]


@pytest.fixture
def session_factory():
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine, tables=TABLES)
    try:
        yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    finally:
        Base.metadata.drop_all(bind=engine, tables=TABLES)
        engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def build(email: str) -> dict:
        token = jwt_handler.create_access_token({'email': email})
        return {'Authorization': f'Bearer {token}'}

    return build


@pytest.fixture
def make_user(db):
    def build(email: str, role: str = 'student', created_offset_minutes: int = 0, **fields) -> User:
        user = User(
            email=email,
            role=role,
            created_at=datetime(2026, 1, 5, 9, 0) + timedelta(minutes=created_offset_minutes),
            extra={},
            **fields,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return build


@pytest.fixture
def make_class(db):
    def build(
        name: str,
        instructor_email: str = 'teacher@example.edu',
        status: str = 'approved',
        total_enrolled: int = 0,
        quantity: int = 10,
        created_offset_minutes: int = 0,
    ) -> SchoolClass:
        school_class = SchoolClass(
            name=name,
            instructor_email=instructor_email,
            status=status,
            total_enrolled=total_enrolled,
            quantity=quantity,
            price=49.5,
            created_at=datetime(2026, 1, 5, 9, 0) + timedelta(minutes=created_offset_minutes),
            extra={},
        )
        db.add(school_class)
        db.commit()
        db.refresh(school_class)
        return school_class

    return build
