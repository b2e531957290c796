"""
Fixture seeder — resets the database and repopulates it with known data.

This module owns the three seeding stages:
  - Reset: delete every DeckCard, Deck, Card and User row (children first)
  - Populate: create the two fixture accounts and one Card per dataset record
  - Assign: give each account a starter deck sampled from the card pool

seed_database() runs them in order inside the current app context and
commits once at the end. Nothing is caught here; the caller decides what a
failure means (the command-line entry point turns it into exit status 1).
"""
import logging
import random
from dataclasses import dataclass

from argon2 import PasswordHasher
from flask import current_app

from pokedeck.extensions import db
from pokedeck.models.card import Card, artwork_url
from pokedeck.models.deck import Deck, DeckCard
from pokedeck.models.user import User
from pokedeck.utils.pokemon_data import (
    PokemonRecord,
    SeedDataError,
    SeedError,
    load_pokemon_data,
)

log = logging.getLogger(__name__)

__all__ = [
    "SeedError", "SeedDataError", "SeedPostconditionError", "SeedSummary",
    "FIXTURE_USERS", "reset_database", "create_users", "create_cards",
    "assign_starter_deck", "seed_database",
]

# (username, email); deck assignment follows this order
FIXTURE_USERS = [
    ("red",  "red@example.com"),
    ("blue", "blue@example.com"),
]

# Fixture-strength argon2 parameters: fast to hash, not for real accounts.
_fixture_hasher = PasswordHasher(time_cost=1, memory_cost=8192, parallelism=1)

# Leaf tables first so no foreign key is ever left dangling mid-reset.
_RESET_ORDER = (DeckCard, Deck, Card, User)


class SeedPostconditionError(SeedError):
    """Raised when a row the seeder just inserted cannot be found again."""


@dataclass
class SeedSummary:
    """Row counts after a successful seed run."""
    users: int
    cards: int
    decks: int
    deck_cards: int


# ── Reset ─────────────────────────────────────────────────────────────────────

def reset_database() -> dict:
    """Delete all fixture rows, leaf tables first. Safe on an empty database.

    Returns {table_name: rows_deleted}.
    """
    deleted = {}
    for model in _RESET_ORDER:
        result = db.session.execute(db.delete(model))
        deleted[model.__tablename__] = result.rowcount
    db.session.flush()
    log.info("Reset: %s", ", ".join(f"{t}={n}" for t, n in deleted.items()))
    return deleted


# ── Populate ──────────────────────────────────────────────────────────────────

def create_users(password: str = None) -> tuple[User, User]:
    """Create the red and blue fixture accounts sharing one password hash.

    Raises SeedPostconditionError if either account cannot be found by
    email after the insert.
    """
    if password is None:
        password = current_app.config["FIXTURE_PASSWORD"]
    password_hash = _fixture_hasher.hash(password)

    db.session.execute(
        db.insert(User),
        [
            {"username": username, "email": email, "password_hash": password_hash}
            for username, email in FIXTURE_USERS
        ],
    )

    found = {
        email: db.session.execute(
            db.select(User).filter_by(email=email)
        ).scalar_one_or_none()
        for _, email in FIXTURE_USERS
    }
    missing = [email for email, user in found.items() if user is None]
    if missing:
        raise SeedPostconditionError(
            f"Failed to create users: no account found for {', '.join(missing)}"
        )

    red, blue = (found[email] for _, email in FIXTURE_USERS)
    log.info("Created users: %s, %s", red.username, blue.username)
    return red, blue


def create_cards(records: list[PokemonRecord]) -> list[Card]:
    """Create one Card per dataset record.

    All cards go into the session together and are written by a single
    flush, so no card depends on another having been inserted first.
    """
    cards = [
        Card(
            name=rec.name,
            hp=rec.hp,
            attack=rec.attack,
            type=rec.type,
            pokedex_number=rec.pokedex_number,
            img_url=artwork_url(rec.pokedex_number),
        )
        for rec in records
    ]
    db.session.add_all(cards)
    db.session.flush()
    log.info("Created %d Pokémon cards", len(cards))
    return cards


# ── Assign ────────────────────────────────────────────────────────────────────

def assign_starter_deck(
    user: User,
    cards: list[Card],
    rng: random.Random = None,
    size: int = 10,
    name: str = "Starter Deck",
) -> Deck:
    """Create a deck for *user* holding min(size, len(cards)) random cards.

    Each call draws its own sample without replacement, so a single deck
    never repeats a card while two decks may share some. *cards* itself is
    left in its original order.
    """
    rng = rng or random.Random()
    deck = Deck(name=name, user_id=user.id)
    db.session.add(deck)
    db.session.flush()

    picked = rng.sample(cards, k=min(size, len(cards)))
    for card in picked:
        db.session.add(DeckCard(deck_id=deck.id, card_id=card.id))
        log.debug("Deck %d (%s): added %s", deck.id, user.username, card.name)
    db.session.flush()
    return deck


# ── Orchestration ─────────────────────────────────────────────────────────────

def seed_database(rng: random.Random = None, data_path=None) -> SeedSummary:
    """Reset and repopulate the database. Must run inside an app context.

    The dataset is read before anything is deleted, so an unreadable file
    leaves the existing rows alone. On any failure the session is rolled
    back and the exception re-raised.
    """
    cfg = current_app.config
    rng = rng or random.Random()
    records = load_pokemon_data(data_path or cfg.get("POKEMON_DATA_PATH"))

    log.info("Starting database seed")
    try:
        reset_database()
        red, blue = create_users(cfg["FIXTURE_PASSWORD"])
        cards = create_cards(records)

        size = cfg.get("STARTER_DECK_SIZE", 10)
        deck_name = cfg.get("STARTER_DECK_NAME", "Starter Deck")
        decks = [
            assign_starter_deck(user, cards, rng=rng, size=size, name=deck_name)
            for user in (red, blue)
        ]
        log.info("Created starter decks for %s and %s", red.username, blue.username)

        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    summary = SeedSummary(
        users=len(FIXTURE_USERS),
        cards=len(cards),
        decks=len(decks),
        deck_cards=sum(d.card_count for d in decks),
    )
    log.info("Database seeding completed: %s", summary)
    return summary
