from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.transaction_manager import TransactionManager


class SQLAlchemyTransactionManager(TransactionManager):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        if not self._session.in_transaction():
            async with self._session.begin():
                yield
            return

        # An earlier read (e.g. the session token lookup) already autobegan a
        # transaction; the unit of work still owns its outcome.
        try:
            yield
        except BaseException:
            await self._session.rollback()
            raise
        await self._session.commit()
