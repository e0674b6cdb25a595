from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def as_utc(value: datetime) -> datetime:
    """タイムゾーン情報を持たない値（SQLite）を UTC として扱う"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class UserRecord(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    name = Column(String(255))


class FlightRecord(Base):
    __tablename__ = "flights"

    id = Column(Integer, primary_key=True, autoincrement=True)
    flight_number = Column(String(10), unique=True, nullable=False, index=True)
    airline_id = Column(Integer, nullable=False)
    departure_airport_id = Column(Integer, nullable=False)
    arrival_airport_id = Column(Integer, nullable=False)
    departure_time = Column(DateTime(timezone=True), nullable=False)
    arrival_time = Column(DateTime(timezone=True), nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    currency = Column(String(3), nullable=False)
    base_price = Column(Numeric(10, 2), nullable=False)
    economy_price = Column(Numeric(10, 2))
    business_price = Column(Numeric(10, 2))
    first_class_price = Column(Numeric(10, 2))
    total_seats = Column(Integer, nullable=False)
    economy_seats = Column(Integer, nullable=False, default=0)
    business_seats = Column(Integer, nullable=False, default=0)
    first_class_seats = Column(Integer, nullable=False, default=0)
    status = Column(String(20), nullable=False)
    active = Column(Boolean, nullable=False, default=True)
    aircraft = Column(String(50))


class BookingRecord(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    booking_reference = Column(String(32), unique=True, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    flight_id = Column(Integer, ForeignKey("flights.id"), nullable=False, index=True)
    fare_class = Column(String(20), nullable=False)
    passenger_count = Column(Integer, nullable=False)
    total_amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), nullable=False)
    status = Column(String(20), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)


class PassengerRecord(Base):
    __tablename__ = "passengers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=False, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    gender = Column(String(10), nullable=False)
    passport_number = Column(String(50), nullable=False)
    nationality = Column(String(100), nullable=False)
    passenger_type = Column(String(10), nullable=False)
    seat_number = Column(String(10))
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)


class PaymentRecord(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = Column(String(32), unique=True, nullable=False, index=True)
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), nullable=False)
    payment_method = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False, index=True)
    gateway_response = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)
