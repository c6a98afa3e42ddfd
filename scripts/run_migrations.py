#!/usr/bin/env python3
"""
Career Match Migration Runner
=============================
Applies pending numbered SQL migrations (001_name.sql, 002_name.sql, ...)
from ./migrations and records each one in the _migrations table.

Usage:
    python scripts/run_migrations.py
    python scripts/run_migrations.py --dry-run
"""

import argparse
import hashlib
import logging
import os
import re
import sys
from pathlib import Path
from typing import Dict, Any, List, Set

import psycopg2
from psycopg2.extras import RealDictCursor

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

DEFAULT_MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "migrations"
MIGRATION_FILENAME = re.compile(r'^\d+_.+\.sql$')

CREATE_MIGRATIONS_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS _migrations (
        id SERIAL PRIMARY KEY,
        filename VARCHAR(255) UNIQUE NOT NULL,
        executed_at TIMESTAMP WITH TIME ZONE DEFAULT NOW(),
        checksum VARCHAR(64),
        success BOOLEAN DEFAULT true,
        error_message TEXT
    )
"""

RECORD_MIGRATION_SQL = """
    INSERT INTO _migrations (filename, checksum, success, error_message)
    VALUES (%s, %s, %s, %s)
    ON CONFLICT (filename) DO UPDATE SET
        executed_at = NOW(),
        checksum = EXCLUDED.checksum,
        success = EXCLUDED.success,
        error_message = EXCLUDED.error_message
"""


def get_db_connection():
    """Connect using DATABASE_URL."""
    database_url = os.environ.get('DATABASE_URL')
    if not database_url:
        raise RuntimeError("DATABASE_URL not configured")
    return psycopg2.connect(database_url)


def calculate_checksum(content: str) -> str:
    """SHA256 of the migration text."""
    return hashlib.sha256(content.encode()).hexdigest()


def get_pending_migrations(migrations_dir: Path, executed: Set[str]) -> List[Path]:
    """Numbered .sql files not yet executed, in filename order."""
    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return []

    return sorted(
        (f for f in migrations_dir.glob("*.sql")
         if MIGRATION_FILENAME.match(f.name) and f.name not in executed),
        key=lambda f: f.name,
    )


def get_executed_migrations(conn) -> Set[str]:
    with conn.cursor(cursor_factory=RealDictCursor) as cur:
        cur.execute("SELECT filename FROM _migrations WHERE success = true")
        return {row['filename'] for row in cur.fetchall()}


def apply_migration(conn, migration_file: Path) -> bool:
    """Run one migration in its own transaction and record the outcome."""
    content = migration_file.read_text()
    checksum = calculate_checksum(content)
    logger.info(f"Running migration: {migration_file.name}")

    try:
        with conn.cursor() as cur:
            cur.execute(content)
            cur.execute(RECORD_MIGRATION_SQL, (migration_file.name, checksum, True, None))
        conn.commit()
        logger.info(f"Migration {migration_file.name} completed")
        return True
    except psycopg2.Error as e:
        conn.rollback()
        logger.error(f"Migration {migration_file.name} failed: {e}")
        with conn.cursor() as cur:
            cur.execute(RECORD_MIGRATION_SQL, (migration_file.name, checksum, False, str(e)))
        conn.commit()
        return False


def run_pending_migrations(migrations_dir: Path = DEFAULT_MIGRATIONS_DIR) -> Dict[str, Any]:
    """
    Run all pending migrations, stopping at the first failure.

    Returns:
        dict with 'success', 'executed', 'failed', 'skipped', 'errors'
    """
    result = {'success': True, 'executed': 0, 'failed': 0, 'skipped': 0, 'errors': []}

    conn = get_db_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(CREATE_MIGRATIONS_TABLE_SQL)
        conn.commit()

        pending = get_pending_migrations(migrations_dir, get_executed_migrations(conn))
        logger.info(f"Pending migrations: {len(pending)}")

        for migration_file in pending:
            if apply_migration(conn, migration_file):
                result['executed'] += 1
            else:
                result['failed'] += 1
                result['success'] = False
                result['errors'].append(f"Failed: {migration_file.name}")
                break

        result['skipped'] = len(pending) - result['executed'] - result['failed']
    finally:
        conn.close()

    logger.info(
        f"Migration summary: {result['executed']} executed, "
        f"{result['failed']} failed, {result['skipped']} skipped"
    )
    return result


def main():
    parser = argparse.ArgumentParser(description='Run database migrations')
    parser.add_argument('--dir', '-d', type=Path, default=DEFAULT_MIGRATIONS_DIR,
                        help='Migrations directory path')
    parser.add_argument('--dry-run', action='store_true',
                        help='Show pending migrations without running')
    args = parser.parse_args()

    if args.dry_run:
        conn = get_db_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(CREATE_MIGRATIONS_TABLE_SQL)
            conn.commit()
            pending = get_pending_migrations(args.dir, get_executed_migrations(conn))
        finally:
            conn.close()
        print(f"\nPending migrations: {len(pending)}")
        for m in pending:
            print(f"  ○ {m.name}")
        return

    result = run_pending_migrations(args.dir)
    sys.exit(0 if result['success'] else 1)


if __name__ == '__main__':
    main()
