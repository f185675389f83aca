from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
)

metadata = MetaData()

locations = Table(
    "locations",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(150), nullable=False, unique=True),
)

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(150), nullable=False, unique=True),
    Column("password_hash", String(128), nullable=False),
    Column("password_salt", String(64), nullable=False),
    Column("role", String(16), nullable=False, default="customer"),
    Column("created_at", DateTime, nullable=False),
)

sessions = Table(
    "sessions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("token", String(128), nullable=False, unique=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("created_at", DateTime, nullable=False),
    Column("expires_at", DateTime, nullable=False),
)

cars = Table(
    "cars",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("model", String(150), nullable=False),
    Column("type", String(32), nullable=False),
    Column("price_per_day", Numeric(10, 2), nullable=False),
    Column("available", Boolean, nullable=False, default=True),
    Column("location_id", Integer, ForeignKey("locations.id")),
    Column("image_url", String(500)),
    Column("lock_version", Integer, nullable=False, default=0),
)

reservations = Table(
    "reservations",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("car_id", Integer, ForeignKey("cars.id"), nullable=False),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=False),
    Column("total_price", Numeric(10, 2), nullable=False),
    Column("status", String(16), nullable=False),
    Column("gps", Boolean, nullable=False, default=False),
    Column("toll_pass", Boolean, nullable=False, default=False),
    Column("created_at", DateTime, nullable=False),
    Column("updated_at", DateTime, nullable=False),
    Index("ix_reservations_car_status_dates", "car_id", "status", "start_date", "end_date"),
    Index("ix_reservations_user", "user_id"),
)

payments = Table(
    "payments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("reservation_id", Integer, ForeignKey("reservations.id"), nullable=False, unique=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("amount", Numeric(10, 2), nullable=False),
    Column("method", String(32), nullable=False),
    Column("card_last4", String(4)),
    Column("status", String(32), nullable=False),
    Column("created_at", DateTime, nullable=False),
)
