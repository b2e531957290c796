"""
Command-line entry point: reset the database and load fixture data.

    pokedeck-seed --database-url sqlite:///dev.db --random-seed 7

Exit status is 0 on success and 1 on any failure. The database engine is
disposed on both paths.
"""
import argparse
import logging
import os
import random
import sys

from pokedeck import create_app
from pokedeck.extensions import db
from pokedeck.utils.seed_service import seed_database

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pokedeck-seed",
        description="Reset the database and load users, Pokémon cards and starter decks.",
    )
    parser.add_argument("--config", default=os.getenv("POKEDECK_CONFIG", "default"),
                        choices=["default", "development", "testing"])
    parser.add_argument("--database-url", default=None,
                        help="SQLAlchemy URL; overrides DATABASE_URL.")
    parser.add_argument("--data", default=None, help="Path to the Pokémon JSON dataset.")
    parser.add_argument("--random-seed", type=int, default=None,
                        help="Seed for deck sampling (random if omitted).")
    parser.add_argument("--log-level", default=None)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.database_url:
        overrides["SQLALCHEMY_DATABASE_URI"] = args.database_url
    if args.data:
        overrides["POKEMON_DATA_PATH"] = args.data

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=(args.log_level or os.getenv("LOG_LEVEL", "INFO")).upper(),
    )

    app = None
    try:
        app = create_app(args.config, overrides=overrides)
        if not args.log_level:
            logging.getLogger().setLevel(app.config["LOG_LEVEL"].upper())

        with app.app_context():
            summary = seed_database(rng=random.Random(args.random_seed))
        print(
            f"Seeded {summary.users} users, {summary.cards} cards, "
            f"{summary.decks} decks ({summary.deck_cards} deck cards)"
        )
        return 0
    except Exception:
        log.exception("Error seeding database")
        return 1
    finally:
        if app is not None:
            with app.app_context():
                db.session.remove()
                db.engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
