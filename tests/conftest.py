import json

import pytest

from pokedeck import create_app
from pokedeck.extensions import db


SMALL_DATASET = [
    {"name": "Bulbasaur",  "hp": 45, "attack": 49, "type": "Grass", "pokedexNumber": 1},
    {"name": "Charmander", "hp": 39, "attack": 52, "type": "Fire",  "pokedexNumber": 4},
    {"name": "Squirtle",   "hp": 44, "attack": 48, "type": "Water", "pokedexNumber": 7},
]


@pytest.fixture
def app():
    """App bound to a fresh in-memory SQLite database, context pushed."""
    app = create_app("testing")
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def write_dataset(tmp_path):
    """Write a list of records to a JSON file and return its path."""
    def _write(records, name="pokemon.json"):
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def small_dataset(write_dataset):
    return write_dataset(SMALL_DATASET)
