"""
Preferences Store
=================
Read and upsert access to the "UserPreferences" table.

At most one row per user_id. get_preferences returns None when the user
has not saved preferences yet; query or connection failures raise
StoreFetchError / StoreWriteError.
"""

import logging
from typing import Optional

from app.matching.models import PreferencesRecord, PreferencesUpdate
from .db import Database
from .errors import DB_ERRORS, StoreFetchError, StoreWriteError

logger = logging.getLogger(__name__)

STORE_NAME = "preferences"

PREFERENCE_COLUMNS = "user_id, likes, dislikes, hobbies, skills, work_styles, updated_at"

SELECT_PREFERENCES_SQL = f"""
    SELECT {PREFERENCE_COLUMNS}
    FROM "UserPreferences"
    WHERE user_id = $1
"""

UPSERT_PREFERENCES_SQL = f"""
    INSERT INTO "UserPreferences" (
        user_id, likes, dislikes, hobbies, skills, work_styles, updated_at
    ) VALUES ($1, $2, $3, $4, $5, $6, NOW())
    ON CONFLICT (user_id) DO UPDATE SET
        likes = EXCLUDED.likes,
        dislikes = EXCLUDED.dislikes,
        hobbies = EXCLUDED.hobbies,
        skills = EXCLUDED.skills,
        work_styles = EXCLUDED.work_styles,
        updated_at = NOW()
    RETURNING {PREFERENCE_COLUMNS}
"""


class PreferencesStore:
    """Preferences keyed by user identity."""

    def __init__(self, db: Database):
        self._db = db

    async def get_preferences(self, user_id: str) -> Optional[PreferencesRecord]:
        """
        Fetch the stored profile for a user.

        Returns:
            The profile, or None if the user has no row
        """
        try:
            async with self._db.connection() as conn:
                row = await conn.fetchrow(SELECT_PREFERENCES_SQL, user_id)
        except StoreFetchError:
            raise
        except DB_ERRORS as e:
            logger.error(f"Prefs fetch error for {user_id}: {e}")
            raise StoreFetchError(STORE_NAME, "Could not load preferences") from e

        if row is None:
            return None
        return PreferencesRecord(**dict(row))

    async def upsert_preferences(
        self,
        user_id: str,
        update: PreferencesUpdate
    ) -> PreferencesRecord:
        """Insert the user's row, or replace every list if one exists."""
        try:
            async with self._db.connection() as conn:
                row = await conn.fetchrow(
                    UPSERT_PREFERENCES_SQL,
                    user_id,
                    update.likes,
                    update.dislikes,
                    update.hobbies,
                    update.skills,
                    update.work_styles,
                )
        except StoreFetchError as e:
            raise StoreWriteError(STORE_NAME, e.message) from e
        except DB_ERRORS as e:
            logger.error(f"Prefs upsert error for {user_id}: {e}")
            raise StoreWriteError(STORE_NAME, "Could not save preferences") from e

        logger.info(f"Saved preferences for {user_id}")
        return PreferencesRecord(**dict(row))
