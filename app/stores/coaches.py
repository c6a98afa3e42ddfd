"""
Coaches Store
=============
Read-only access to the "Coaches" directory.

Only verified coaches are ever returned. No rows yields [] or None;
query or connection failures raise StoreFetchError.
"""

import logging
from typing import List, Optional

from app.coaches.models import Coach, CoachDetail, CoachSpecialization
from .db import Database
from .errors import DB_ERRORS, StoreFetchError

logger = logging.getLogger(__name__)

STORE_NAME = "coaches"

LIST_COACHES_SQL = """
    SELECT id, name, bio, photo_url, specialization_ids
    FROM "Coaches"
    WHERE is_verified = TRUE
      AND ($1::text IS NULL OR $1::text = ANY(specialization_ids))
    ORDER BY name ASC
"""

SELECT_COACH_SQL = """
    SELECT id, name, bio, photo_url, specialization_ids
    FROM "Coaches"
    WHERE id = $1
      AND is_verified = TRUE
"""

SELECT_SPECIALIZATIONS_SQL = """
    SELECT field_id, name
    FROM "CareerFields"
    WHERE field_id = ANY($1::text[])
    ORDER BY name
"""


class CoachesStore:
    """Verified coaches, optionally narrowed to one career field."""

    def __init__(self, db: Database):
        self._db = db

    async def list_coaches(self, field_id: Optional[str] = None) -> List[Coach]:
        """
        Verified coaches ordered by name.

        Args:
            field_id: Only coaches whose specialization_ids contain this field
        """
        try:
            async with self._db.connection() as conn:
                rows = await conn.fetch(LIST_COACHES_SQL, field_id)
        except StoreFetchError:
            raise
        except DB_ERRORS as e:
            logger.error(f"Coaches fetch error: {e}")
            raise StoreFetchError(STORE_NAME, "Could not load coaches") from e

        return [Coach(**dict(row)) for row in rows]

    async def get_coach(self, coach_id: str) -> Optional[CoachDetail]:
        """One verified coach with specialization names, or None."""
        try:
            async with self._db.connection() as conn:
                row = await conn.fetchrow(SELECT_COACH_SQL, coach_id)
                if row is None:
                    return None
                coach = dict(row)
                specializations = []
                if coach.get("specialization_ids"):
                    specializations = await conn.fetch(
                        SELECT_SPECIALIZATIONS_SQL, coach["specialization_ids"]
                    )
        except StoreFetchError:
            raise
        except DB_ERRORS as e:
            logger.error(f"Coach fetch error for {coach_id}: {e}")
            raise StoreFetchError(STORE_NAME, "Could not load coach") from e

        return CoachDetail(
            **coach,
            specializations=[CoachSpecialization(**dict(s)) for s in specializations],
        )
