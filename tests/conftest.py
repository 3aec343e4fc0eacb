import os
from types import SimpleNamespace

TEST_DB_FILE = "test_course_management.db"
TEST_DB_URL = f"sqlite:///./{TEST_DB_FILE}"

# must be set before the app module builds its engine
os.environ["DATABASE_URL"] = TEST_DB_URL

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from course_management.core.deps import get_db  # noqa: E402
from course_management.db.base import Base  # noqa: E402
from course_management.db.init_db import seed_users  # noqa: E402
from course_management.db.session import build_engine  # noqa: E402
from course_management.main import app  # noqa: E402
from course_management.models.course import Course  # noqa: E402
from course_management.models.enrolment import Enrolment  # noqa: E402
from course_management.models.user import Role, User  # noqa: E402

engine = build_engine(TEST_DB_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """Create a fresh schema once for the whole test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if os.path.exists(TEST_DB_FILE):
        os.remove(TEST_DB_FILE)


@pytest.fixture(autouse=True)
def seed_data():
    """Seed users and two courses for each test; yields their ids."""
    db = TestingSessionLocal()
    try:
        # Clear tables (child -> parent)
        db.query(Enrolment).delete()
        db.query(Course).delete()
        db.query(User).delete()
        db.commit()

        admin, teacher1, teacher2, student1, student2 = seed_users(
            db,
            [
                ("Ada Admin", Role.ADMIN),
                ("Tom Teacher", Role.TEACHER),
                ("Tina Teacher", Role.TEACHER),
                ("Sam Student", Role.STUDENT),
                ("Sue Student", Role.STUDENT),
            ],
        )

        # one open course with a teacher, one closed course with none
        open_course = Course(title="CS5004", teacher_id=teacher1.id, is_available=True)
        closed_course = Course(title="CS6000", is_available=False)
        db.add_all([open_course, closed_course])
        db.commit()

        yield SimpleNamespace(
            admin=admin.id,
            teacher1=teacher1.id,
            teacher2=teacher2.id,
            student1=student1.id,
            student2=student2.id,
            open_course=open_course.id,
            closed_course=closed_course.id,
        )
    finally:
        db.close()


@pytest.fixture()
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    """Test client that uses the test DB session via dependency override."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
