"""Direct Postgres access to the Monopoly database.

Connects to the database with psycopg2 (bypassing the HTTP service), prints
every row of `Player` as one JSON object per line, and exits. Useful for
checking credentials and firewall rules from an operator's machine; not
suitable for production use.

Connection parameters are the same `DB_*` variables the service reads:

    source .env
    monopoly-direct
"""

import json
import logging
import sys

import psycopg2
from psycopg2.extras import RealDictCursor

from .logging_config import configure_logging
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def connect(settings: Settings):
    """Open a psycopg2 connection to the Monopoly database.

    Connection parameters are read from `settings`:
        db_server, db_port, db_database, db_user, db_password, db_sslmode

    Returns:
        psycopg2.extensions.connection: Open database connection.

    Raises:
        psycopg2.OperationalError: If the database is unreachable or credentials are invalid.
    """
    return psycopg2.connect(
        host=settings.db_server,
        port=settings.db_port,
        dbname=settings.db_database,
        user=settings.db_user,
        password=settings.db_password,
        sslmode=settings.db_sslmode,
    )


def fetch_players(conn) -> list[dict]:
    with conn.cursor(cursor_factory=RealDictCursor) as cur:
        cur.execute("SELECT * FROM Player")
        return [dict(row) for row in cur.fetchall()]


def main(settings: Settings | None = None) -> int:
    """Print all players.

    Returns:
        int: Process exit code (0 = success, 1 = database error).
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    try:
        conn = connect(settings)
    except psycopg2.Error:
        logger.exception("could not connect to %s:%s", settings.db_server, settings.db_port)
        return 1

    try:
        players = fetch_players(conn)
    except psycopg2.Error:
        logger.exception("query failed")
        return 1
    finally:
        conn.close()

    for player in players:
        sys.stdout.write(json.dumps(player, default=str) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
