"""Mapped test schema: users with a profile, an address and orders."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Session, relationship

from query_engine import Predicate


class Base(DeclarativeBase):
    pass


class AddressRecord(Base):
    __tablename__ = "addresses"
    id = Column(Integer, primary_key=True)
    city = Column(String)
    street = Column(String)


class ProfileRecord(Base):
    __tablename__ = "profiles"
    id = Column(Integer, primary_key=True)
    bio = Column(String)
    address_id = Column(Integer, ForeignKey("addresses.id"))
    address = relationship("AddressRecord")


class OrderRecord(Base):
    __tablename__ = "orders"
    id = Column(Integer, primary_key=True)
    reference = Column(String, nullable=False)
    total = Column(Integer, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"))
    user = relationship("UserRecord", back_populates="orders")


class UserRecord(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    status = Column(String, nullable=False)
    department = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    is_active = Column(Boolean, nullable=False)
    birth_date = Column(Date, nullable=False)
    created_at = Column(DateTime, nullable=False)
    profile_id = Column(Integer, ForeignKey("profiles.id"))
    profile = relationship("ProfileRecord")
    orders = relationship("OrderRecord", back_populates="user")


ALICE, BOB, JOHN, CARLA = 1, 2, 3, 4
ALL_USERS = {ALICE, BOB, JOHN, CARLA}


def seed(session: Session) -> None:
    rome = AddressRecord(id=1, city="Rome", street="Via Appia 1")
    milan = AddressRecord(id=2, city="Milan", street="Corso Como 5")
    session.add_all(
        [
            UserRecord(
                id=ALICE,
                first_name="Alice",
                last_name="Smith",
                email="alice@example.com",
                status="ACTIVE",
                department="IT",
                age=30,
                is_active=True,
                birth_date=date(1994, 3, 10),
                created_at=datetime(2024, 1, 10, 9, 0),
                profile=ProfileRecord(id=1, bio="Engineer", address=rome),
                orders=[
                    OrderRecord(id=1, reference="A-1", total=50),
                    OrderRecord(id=2, reference="A-2", total=120),
                ],
            ),
            UserRecord(
                id=BOB,
                first_name="Bob",
                last_name="Johnson",
                email=None,
                status="INACTIVE",
                department="HR",
                age=45,
                is_active=False,
                birth_date=date(1979, 7, 22),
                created_at=datetime(2024, 2, 15, 12, 30),
                profile=ProfileRecord(id=2, bio="Recruiter", address=milan),
                orders=[OrderRecord(id=3, reference="B-1", total=20)],
            ),
            UserRecord(
                id=JOHN,
                first_name="John",
                last_name="Doe",
                email="john@example.com",
                status="ACTIVE",
                department="Sales",
                age=25,
                is_active=True,
                birth_date=date(1999, 11, 2),
                created_at=datetime(2024, 3, 1, 8, 15),
                profile=ProfileRecord(id=3, bio="100%_sales", address=None),
            ),
            UserRecord(
                id=CARLA,
                first_name="Carla",
                last_name="Johnston",
                email="carla@example.org",
                status="ACTIVE",
                department="IT",
                age=38,
                is_active=True,
                birth_date=date(1986, 1, 30),
                created_at=datetime(2024, 3, 20, 18, 45),
            ),
        ]
    )
    session.commit()


def compile_sql(predicate: Predicate, root: type = UserRecord) -> str:
    """Render a predicate with literal values inlined."""
    return str(
        predicate.to_expression(root).compile(compile_kwargs={"literal_binds": True})
    )
