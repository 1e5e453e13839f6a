#!/usr/bin/env python3
"""
Dox Maintenance CLI

Usage:
    python manage.py init-db                # Create folders/documents tables
    python manage.py check-db               # Verify the database is reachable
    python manage.py health                 # Query a running server's health endpoint
    python manage.py health --url http://host:8080

Via docker:
    docker-compose exec dox-api python manage.py init-db
"""
import argparse
import asyncio
import sys
from pathlib import Path

# Add api directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

DEFAULT_SERVER_URL = "http://localhost:8080"


def get_database_config():
    """Get database config from the environment"""
    from config import default_config
    return default_config.database


async def _with_connection(config, action):
    """Open a single connection, run action(conn), close it"""
    import asyncpg

    conn = await asyncpg.connect(dsn=config.database_url, timeout=config.connect_timeout)
    try:
        return await action(conn)
    finally:
        await conn.close()


def cmd_init_db(args):
    """Create the drive schema"""
    from storage import PostgresSchemaManager

    async def create(conn):
        manager = PostgresSchemaManager(conn)
        await manager.create_schema()
        return await manager.table_names()

    config = get_database_config()
    try:
        tables = asyncio.run(_with_connection(config, create))
    except Exception as e:
        print(f"Error: Failed to initialize schema: {e}")
        return 1

    print(f"Schema ready: {', '.join(tables)}")
    return 0


def cmd_check_db(args):
    """Check database connectivity"""
    async def ping(conn):
        return await conn.fetchval("SELECT 1")

    config = get_database_config()
    if config.using_default_url:
        print("DATABASE_URL not set, using default local database")
    try:
        asyncio.run(_with_connection(config, ping))
    except Exception as e:
        print(f"Database unreachable: {str(e) or type(e).__name__}")
        return 1

    print("Database reachable")
    return 0


def cmd_health(args):
    """Check a running server"""
    import requests

    url = f"{args.url.rstrip('/')}/api/health"
    try:
        resp = requests.get(url, timeout=args.timeout)
    except requests.exceptions.ConnectionError:
        print("Error: Cannot connect to API. Is the server running?")
        return 1

    if resp.status_code != 200 or resp.json().get('status') != 'ok':
        print(f"Unhealthy: HTTP {resp.status_code} {resp.text}")
        return 1

    print("Server healthy")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        description='Dox Maintenance CLI',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    # init-db
    p = subparsers.add_parser('init-db', help='Create folders/documents tables')
    p.set_defaults(func=cmd_init_db)

    # check-db
    p = subparsers.add_parser('check-db', help='Verify database connectivity')
    p.set_defaults(func=cmd_check_db)

    # health
    p = subparsers.add_parser('health', help='Check a running server')
    p.add_argument('--url', default=DEFAULT_SERVER_URL, help=f'Server base URL (default: {DEFAULT_SERVER_URL})')
    p.add_argument('--timeout', type=float, default=5.0, help='Request timeout in seconds')
    p.set_defaults(func=cmd_health)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    sys.exit(args.func(args))


if __name__ == '__main__':
    main()
