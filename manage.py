import argparse

from app.database.bootstrap import ensure_database_exists, reset_database, synchronize_schema
from app.database.config.settings import get_settings
from app.database.database import create_db_engine, create_session_factory
from app.database.seed import seed_sample_data
from app.main import configure_logging, serve


def main(argv=None):
    parser = argparse.ArgumentParser(description="Campus directory management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("createdb", help="Create the database if it does not exist")
    sync_parser = subparsers.add_parser("sync", help="Create missing tables")
    sync_parser.add_argument("--drop", action="store_true", help="Drop all tables first (destroys data)")
    subparsers.add_parser("seed", help="Insert sample campuses and students")
    subparsers.add_parser("reset", help="Drop, recreate and seed all tables (destroys data)")
    serve_parser = subparsers.add_parser("serve", help="Prepare the database and start the API server")
    serve_parser.add_argument("--reset", action="store_true", help="Reset the database before serving")

    args = parser.parse_args(argv)
    settings = get_settings()

    if args.command == "serve":
        serve(settings, reset=args.reset)
        return

    configure_logging(settings.LOG_LEVEL)
    if args.command == "createdb":
        ensure_database_exists(settings)
        return

    engine = create_db_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    session_factory = create_session_factory(engine)
    try:
        if args.command == "sync":
            synchronize_schema(engine, drop_existing=args.drop)
        elif args.command == "seed":
            seed_sample_data(session_factory)
        elif args.command == "reset":
            reset_database(engine, session_factory)
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
