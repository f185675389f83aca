from datetime import date
from typing import Sequence

from app.domain.reporting import RentalRow


class ReportQuery:
    async def rental_rows(
        self,
        start: date,
        end: date,
        user_id: int | None = None,
    ) -> Sequence[RentalRow]:
        """Reservations starting in [start, end] joined with their car."""
        raise NotImplementedError
