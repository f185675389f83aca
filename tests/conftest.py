"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Base de datos SQLite en disco por test (tmp_path), con tablas y datos semilla
- Cliente HTTP de prueba (FastAPI TestClient) con override de la sesión de BD
- Reloj y generador de tokens deterministas
- Helpers de autenticación
"""

import asyncio
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import AsyncGenerator, Generator

# La app lee la configuración al importarse: apuntarla a un archivo temporal
# antes de cualquier import de `app`.
_bootstrap_dir = Path(tempfile.mkdtemp(prefix="car-rental-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_bootstrap_dir / 'bootstrap.db'}"
os.environ["SEED_ON_STARTUP"] = "false"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from app.api.dependencies import get_clock, get_token_generator  # noqa: E402
from app.api.deps import get_db_session  # noqa: E402
from app.application.interfaces.clock import FakeClock  # noqa: E402
from app.application.interfaces.credentials import FakeTokenGenerator  # noqa: E402
from app.infrastructure.db.seed import seed_reference_data  # noqa: E402
from app.infrastructure.db.tables import metadata  # noqa: E402
from app.infrastructure.services.password_hasher_impl import Sha256PasswordHasher  # noqa: E402
from app.main import app  # noqa: E402

# "Hoy" para todos los tests: 2024-02-03 al mediodía UTC.
TEST_NOW = datetime(2024, 2, 3, 12, 0, 0)


# ============================================================================
# FIXTURES DE BASE DE DATOS
# ============================================================================

def _build_test_engine(db_path: Path):
    # NullPool: cada request abre su conexión en el loop que la usa.
    return create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)


async def _prepare_database(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        await seed_reference_data(conn, Sha256PasswordHasher())


@pytest.fixture
def database_path(tmp_path: Path) -> Path:
    """Archivo SQLite con el esquema y los datos semilla."""
    db_path = tmp_path / "rental.db"
    engine = _build_test_engine(db_path)

    async def setup() -> None:
        await _prepare_database(engine)
        await engine.dispose()

    asyncio.run(setup())
    return db_path


@pytest_asyncio.fixture
async def db_session(tmp_path: Path) -> AsyncGenerator[AsyncSession, None]:
    """Sesión async directa para tests de repositorios."""
    engine = _build_test_engine(tmp_path / "repo.db")
    await _prepare_database(engine)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        yield session

    await engine.dispose()


# ============================================================================
# FIXTURES DE SERVICIOS DETERMINISTAS
# ============================================================================

@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock(TEST_NOW)


@pytest.fixture
def fake_tokens() -> FakeTokenGenerator:
    return FakeTokenGenerator()


# ============================================================================
# FIXTURES DE CLIENTE HTTP
# ============================================================================

@pytest.fixture
def client(
    database_path: Path,
    fake_clock: FakeClock,
    fake_tokens: FakeTokenGenerator,
) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient con override de DB session.
    Cada request obtiene su propia sesión sobre la BD del test.
    """
    engine = _build_test_engine(database_path)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_clock] = lambda: fake_clock
    app.dependency_overrides[get_token_generator] = lambda: fake_tokens

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================================================
# HELPERS DE AUTENTICACIÓN
# ============================================================================

def _login(client: TestClient, username: str, password: str) -> dict:
    response = client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, f"Login falló: {response.json()}"
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def login_as(client: TestClient):
    """Retorna headers Authorization para las credenciales dadas."""
    return lambda username, password: _login(client, username, password)


@pytest.fixture
def demo_headers(client: TestClient) -> dict:
    """Usuario `demo` (customer)."""
    return _login(client, "demo", "password")


@pytest.fixture
def aarav_headers(client: TestClient) -> dict:
    """Usuario `aarav` (customer)."""
    return _login(client, "aarav", "shah")


@pytest.fixture
def admin_headers(client: TestClient) -> dict:
    return _login(client, "admin", "admin")


@pytest.fixture
def book(client: TestClient, demo_headers: dict):
    """Crea una reservación y retorna la respuesta cruda."""

    def _book(car_id: int, start: str, end: str, headers: dict | None = None, **extra):
        payload = {"carId": car_id, "startDate": start, "endDate": end, **extra}
        return client.post("/api/reservations", json=payload, headers=headers or demo_headers)

    return _book


# ============================================================================
# MARKERS DE PYTEST
# ============================================================================

def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: Tests que levantan la app completa sobre SQLite"
    )
    config.addinivalue_line(
        "markers",
        "deadlock: Tests de escenarios de contención y reintentos"
    )
