"""
PokeDeck – Flask application factory.
Pokémon card database with fixture seeding for starter decks.
"""
import os
from flask import Flask
from pokedeck.config import config
from pokedeck.extensions import db, login_manager


def create_app(config_name: str = "default", overrides: dict = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config[config_name])
    if overrides:
        app.config.update(overrides)

    # Ensure instance directory exists (SQLite lives here)
    os.makedirs(app.instance_path, exist_ok=True)

    # ── Initialise extensions ────────────────────────────────────────────────
    db.init_app(app)
    login_manager.init_app(app)

    # ── Database ─────────────────────────────────────────────────────────────
    with app.app_context():
        # Register all models with SQLAlchemy before create_all().
        import importlib
        importlib.import_module("pokedeck.models")
        db.create_all()

    return app
