"""Entry point for the Tecnofit data tools."""

import argparse
import json
import logging
import sys

from tecnofit.config import get_settings


def _parse_filters(pairs: list[str]) -> dict[str, str]:
    criteria = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Invalid filter '{pair}', expected key=value")
        criteria[key] = value
    return criteria


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the Tecnofit CLI."""
    parser = argparse.ArgumentParser(
        description="Tecnofit - training data access tools",
        prog="tecnofit",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("init-db", help="Create database tables")
    subparsers.add_parser("seed", help="Create tables and load demo data")
    subparsers.add_parser("customers", help="List all customers as JSON")

    exercises_parser = subparsers.add_parser("exercises", help="Search exercises")
    exercises_parser.add_argument(
        "--filter", "-f",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Filter by field; comma separated values match any (repeatable)",
    )
    exercises_parser.add_argument("--page", type=int, default=None, help="Page number")
    exercises_parser.add_argument(
        "--per-page",
        type=int,
        default=None,
        help="Page size (default: DEFAULT_PER_PAGE setting)",
    )

    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    logger = logging.getLogger("tecnofit")

    from tecnofit.db.session import get_session, init_db

    if args.command == "init-db":
        init_db()
        logger.info(f"Database initialized: {settings.database_url}")

    elif args.command == "seed":
        init_db(seed=True)
        logger.info(f"Database seeded: {settings.database_url}")

    elif args.command == "customers":
        from tecnofit.services import TrainingService

        with get_session() as session:
            result = TrainingService(session).list_customers()
            print(json.dumps(result.to_dict(), indent=2))

    elif args.command == "exercises":
        from tecnofit.core.errors import InvalidCriteriaError
        from tecnofit.db.repositories import ExerciseRepository

        try:
            criteria = _parse_filters(args.filter)
        except argparse.ArgumentTypeError as e:
            parser.error(str(e))
        if args.per_page is not None:
            criteria["per_page"] = str(args.per_page)

        with get_session() as session:
            try:
                page = ExerciseRepository(session).find_by(criteria, page=args.page)
            except InvalidCriteriaError as e:
                logger.error(str(e))
                return 2
            print(json.dumps(page.to_dict(), indent=2))

    else:
        parser.print_help()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
