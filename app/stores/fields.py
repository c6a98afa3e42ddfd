"""
Fields Store
============
Read-only access to the "CareerFields" catalog.

An empty catalog is returned as an empty list; a failed query raises
StoreFetchError.
"""

import logging
from typing import List, Optional

from app.matching.models import CareerField
from .db import Database
from .errors import DB_ERRORS, StoreFetchError

logger = logging.getLogger(__name__)

STORE_NAME = "fields"

LIST_FIELDS_SQL = """
    SELECT field_id, name, keywords, description
    FROM "CareerFields"
    ORDER BY name
"""

SELECT_FIELD_SQL = """
    SELECT field_id, name, keywords, description
    FROM "CareerFields"
    WHERE field_id = $1
"""


class FieldsStore:
    """The career field catalog."""

    def __init__(self, db: Database):
        self._db = db

    async def list_fields(self) -> List[CareerField]:
        """Fetch the full catalog."""
        try:
            async with self._db.connection() as conn:
                rows = await conn.fetch(LIST_FIELDS_SQL)
        except StoreFetchError:
            raise
        except DB_ERRORS as e:
            logger.error(f"Fields fetch error: {e}")
            raise StoreFetchError(STORE_NAME, "Could not load career fields") from e

        return [CareerField(**dict(row)) for row in rows]

    async def get_field(self, field_id: str) -> Optional[CareerField]:
        """Fetch one field, or None if no field has this id."""
        try:
            async with self._db.connection() as conn:
                row = await conn.fetchrow(SELECT_FIELD_SQL, field_id)
        except StoreFetchError:
            raise
        except DB_ERRORS as e:
            logger.error(f"Field fetch error for {field_id}: {e}")
            raise StoreFetchError(STORE_NAME, "Could not load career field") from e

        if row is None:
            return None
        return CareerField(**dict(row))
