from datetime import date, datetime
from decimal import Decimal

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from tests.entities import Contact, Employee

LAZY_HASH = "XylyRwiKnyNPKbC1r4FSqA5YN9shIgsNik5ADyqStZc="
LAZY_SALT = "TVGXbhY="


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def contacts(session):
    """Three contacts, added in contact_id order."""
    rows = [
        Contact(
            first_name="MrWhiskers",
            last_name="Whiskers",
            password_hash=LAZY_HASH,
            password_salt=LAZY_SALT,
            account_number=9007199254740993,
            rating=4.5,
            balance=Decimal("1250.75"),
            modified_date=datetime(2016, 5, 5, 8, 42, 40),
            favorite_date=datetime(2016, 5, 5, 8, 42, 40),
        ),
        Contact(
            first_name="NoSearchUser",
            last_name="NoSearchUser",
            password_hash=LAZY_HASH,
            password_salt=LAZY_SALT,
            rating=3.25,
            balance=Decimal("10.5"),
            modified_date=datetime(2015, 11, 20, 17, 5, 0),
        ),
        Contact(
            first_name="Garfield",
            last_name="Arbuckle",
            password_hash=LAZY_HASH,
            password_salt=LAZY_SALT,
            account_number=42,
            rating=2.75,
            balance=Decimal("99.99"),
            modified_date=datetime(2017, 3, 9, 12, 30, 15),
            favorite_date=datetime(2018, 12, 25, 0, 0, 0),
        ),
    ]
    session.add_all(rows)
    session.commit()
    for row in rows:
        session.refresh(row)
    return rows


@pytest.fixture
def employees(session, contacts):
    rows = [
        Employee(
            national_id_number="14417807",
            contact_id=contacts[0].contact_id,
            login_id="adventure-works\\whiskers",
            title="Chief Mouser",
            birth_date=date(1980, 6, 15),
            marital_status="S",
            gender="M",
            hire_date=datetime(2016, 5, 5, 8, 42, 40),
            vacation_hours=42,
            sick_leave_hours=30,
        ),
        Employee(
            national_id_number="253022876",
            contact_id=contacts[2].contact_id,
            login_id="adventure-works\\garfield",
            manager_id=1,
            title="Lasagna Analyst",
            birth_date=date(1978, 7, 19),
            marital_status="M",
            gender="M",
            hire_date=datetime(2017, 3, 9, 12, 30, 15),
            vacation_hours=7,
            sick_leave_hours=61,
        ),
    ]
    session.add_all(rows)
    session.commit()
    for row in rows:
        session.refresh(row)
    return rows
