"""
Configuration objects for create_app().

Values come from the environment where one is set, otherwise from the
class defaults below.
"""
import os

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///pokedeck.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # ── Fixture data ─────────────────────────────────────────────────────────
    POKEMON_DATA_PATH = os.environ.get(
        "POKEMON_DATA_PATH", os.path.join(_PACKAGE_DIR, "data", "pokemon.json")
    )
    STARTER_DECK_NAME = "Starter Deck"
    STARTER_DECK_SIZE = 10
    FIXTURE_PASSWORD  = "password123"

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"


config = {
    "development": DevelopmentConfig,
    "testing":     TestingConfig,
    "default":     Config,
}
