import asyncio
import sys
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from app.api.deps import engine  # noqa: E402
from app.infrastructure.db.seed import seed_reference_data  # noqa: E402
from app.infrastructure.db.tables import metadata  # noqa: E402
from app.infrastructure.services.password_hasher_impl import Sha256PasswordHasher  # noqa: E402


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        print("Ensured all tables exist.")

        # Only empty tables are filled, so this is safe to re-run.
        await seed_reference_data(conn, Sha256PasswordHasher())
        print("Seeded locations, cars and demo users.")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(seed())
