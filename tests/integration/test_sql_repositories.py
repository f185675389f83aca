"""Repositorios SQL sobre SQLite en disco con datos semilla."""

from datetime import date, datetime
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.car_repo import CarFilter
from app.application.interfaces.reservation_repo import ReservationFilter
from app.domain.entities.payment import Payment
from app.domain.entities.reservation import Reservation, ReservationStatus
from app.domain.entities.user import User
from app.domain.errors import DuplicatePaymentError, UsernameTakenError
from app.domain.value_objects.date_range import DateRange
from app.infrastructure.db.queries.report_query_sql import ReportQuerySQL
from app.infrastructure.db.repositories.car_repo_sql import CarRepoSQL, LocationRepoSQL
from app.infrastructure.db.repositories.payment_repo_sql import PaymentRepoSQL
from app.infrastructure.db.repositories.reservation_repo_sql import ReservationRepoSQL
from app.infrastructure.db.repositories.user_repo_sql import UserRepoSQL

NOW = datetime(2024, 2, 3, 12, 0, 0)


def _reservation(car_id, start, end, status=ReservationStatus.CONFIRMED, user_id=2):
    return Reservation(
        car_id=car_id,
        user_id=user_id,
        start_date=start,
        end_date=end,
        total_price=Decimal("130.00"),
        status=status,
        created_at=NOW,
        updated_at=NOW,
    )


@pytest.mark.asyncio
async def test_reservation_roundtrip_and_overlap_query(db_session: AsyncSession):
    repo = ReservationRepoSQL(db_session)
    booked = await repo.create(_reservation(5, date(2024, 2, 1), date(2024, 2, 5)))
    await repo.create(_reservation(5, date(2024, 2, 2), date(2024, 2, 4), ReservationStatus.CANCELLED))
    await repo.create(_reservation(6, date(2024, 2, 2), date(2024, 2, 4)))

    loaded = await repo.get_by_id(booked.id)
    assert loaded.start_date == date(2024, 2, 1)
    assert loaded.total_price == Decimal("130.00")
    assert loaded.status == ReservationStatus.CONFIRMED

    overlapping = await repo.list_overlapping(5, DateRange(date(2024, 2, 3), date(2024, 2, 4)))
    assert [r.id for r in overlapping] == [booked.id]

    assert await repo.list_overlapping(5, DateRange(date(2024, 2, 5), date(2024, 2, 6))) == []
    assert await repo.list_overlapping(
        5, DateRange(date(2024, 2, 3), date(2024, 2, 4)), exclude_id=booked.id
    ) == []


@pytest.mark.asyncio
async def test_reservation_update_and_filters(db_session: AsyncSession):
    repo = ReservationRepoSQL(db_session)
    created = await repo.create(_reservation(5, date(2024, 2, 1), date(2024, 2, 5)))
    await repo.create(_reservation(7, date(2024, 2, 1), date(2024, 2, 5), user_id=1))

    created.cancel()
    await repo.update(created)

    cancelled = await repo.list(ReservationFilter(status=ReservationStatus.CANCELLED))
    assert [r.id for r in cancelled] == [created.id]
    assert len(await repo.list(ReservationFilter(user_id=1))) == 1


@pytest.mark.asyncio
async def test_car_lock_filters_and_flag(db_session: AsyncSession):
    repo = CarRepoSQL(db_session)

    assert await repo.lock(5) is True
    assert await repo.lock(999) is False

    await repo.set_available(5, False)
    assert (await repo.get_by_id(5)).available is False

    suvs = await repo.list(CarFilter(car_type="SUV", max_price=Decimal("90")))
    assert [car.model for car in suvs] == ["Honda CR-V", "Toyota RAV4", "Mazda CX-5"]


@pytest.mark.asyncio
async def test_availability_derived_from_reservations_on_a_day(db_session: AsyncSession):
    await ReservationRepoSQL(db_session).create(_reservation(5, date(2024, 2, 5), date(2024, 2, 8)))
    repo = CarRepoSQL(db_session)

    assert (await repo.get_by_id(5, today=date(2024, 2, 4))).available is True
    assert (await repo.get_by_id(5, today=date(2024, 2, 5))).available is False
    assert (await repo.get_by_id(5, today=date(2024, 2, 8))).available is True

    sedans = await repo.list(CarFilter(car_type="Sedan"), today=date(2024, 2, 6))
    assert {car.id: car.available for car in sedans}[5] is False
    assert all(car.available for car in sedans if car.id != 5)


@pytest.mark.asyncio
async def test_location_search(db_session: AsyncSession):
    repo = LocationRepoSQL(db_session)
    assert len(await repo.search()) == 12
    assert [loc.name for loc in await repo.search("jose")] == ["San Jose, CA"]


@pytest.mark.asyncio
async def test_duplicate_username_maps_to_domain_error(db_session: AsyncSession):
    repo = UserRepoSQL(db_session)
    with pytest.raises(UsernameTakenError):
        await repo.create(
            User(username="demo", password_hash="x", password_salt="00", created_at=NOW)
        )


@pytest.mark.asyncio
async def test_one_payment_per_reservation(db_session: AsyncSession):
    reservation = await ReservationRepoSQL(db_session).create(
        _reservation(5, date(2024, 2, 1), date(2024, 2, 5))
    )
    repo = PaymentRepoSQL(db_session)

    def _payment():
        payment = Payment.captured(reservation.id, 2, Decimal("130.00"), "card", "4242")
        payment.created_at = NOW
        return payment

    first = await repo.create(_payment())
    assert (await repo.get_by_reservation(reservation.id)).id == first.id

    with pytest.raises(DuplicatePaymentError):
        await repo.create(_payment())


@pytest.mark.asyncio
async def test_report_rows_join_car_data(db_session: AsyncSession):
    repo = ReservationRepoSQL(db_session)
    await repo.create(_reservation(13, date(2024, 3, 1), date(2024, 3, 2)))
    await repo.create(_reservation(5, date(2024, 4, 1), date(2024, 4, 2)))

    rows = await ReportQuerySQL(db_session).rental_rows(date(2024, 3, 1), date(2024, 3, 31))
    assert [(row.car_type, row.car_model) for row in rows] == [("SUV", "Honda CR-V")]
