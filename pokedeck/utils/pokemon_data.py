"""
Static Pokémon dataset — reading and validating the JSON the seeder loads.

The file is a JSON array of objects:

    {"name": "Bulbasaur", "hp": 45, "attack": 49, "type": "Grass", "pokedexNumber": 1}

Everything is checked up front so a bad dataset fails the run before the
database is touched: unreadable file, malformed JSON, missing or ill-typed
fields, a type name outside PokemonType, or a repeated pokedexNumber all
raise SeedDataError.
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pokedeck.models.card import PokemonType

log = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "pokemon.json"

_INT_FIELDS = ("hp", "attack", "pokedexNumber")


class SeedError(Exception):
    """Base class for failures raised by the fixture seeder."""


class SeedDataError(SeedError):
    """Raised when the card dataset cannot be read or is malformed."""
    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


@dataclass(frozen=True)
class PokemonRecord:
    """One validated row of the dataset."""
    name: str
    hp: int
    attack: int
    type: PokemonType
    pokedex_number: int


def parse_record(raw, index: int = 0) -> PokemonRecord:
    """Validate one raw JSON object and convert it to a PokemonRecord.

    Raises SeedDataError naming the offending entry.
    """
    where = f"record {index}"
    if not isinstance(raw, dict):
        raise SeedDataError(f"{where}: expected an object, got {type(raw).__name__}")

    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise SeedDataError(f"{where}: 'name' must be a non-empty string")
    where = f"record {index} ({name})"

    for key in _INT_FIELDS:
        value = raw.get(key)
        # bool is an int subclass; true/false are not stats
        if not isinstance(value, int) or isinstance(value, bool):
            raise SeedDataError(f"{where}: '{key}' must be an integer, got {value!r}")
    if raw["pokedexNumber"] < 1:
        raise SeedDataError(f"{where}: 'pokedexNumber' must be positive")

    try:
        ptype = PokemonType.from_name(raw.get("type"))
    except ValueError as exc:
        raise SeedDataError(f"{where}: {exc}") from exc

    return PokemonRecord(
        name=name.strip(),
        hp=raw["hp"],
        attack=raw["attack"],
        type=ptype,
        pokedex_number=raw["pokedexNumber"],
    )


def parse_pokemon_data(data) -> list[PokemonRecord]:
    """Validate an already-decoded dataset (a list of record objects)."""
    if not isinstance(data, list):
        raise SeedDataError(f"dataset must be a JSON array, got {type(data).__name__}")

    records: list[PokemonRecord] = []
    seen: dict[int, str] = {}
    for i, raw in enumerate(data):
        rec = parse_record(raw, i)
        if rec.pokedex_number in seen:
            raise SeedDataError(
                f"record {i} ({rec.name}): pokedexNumber {rec.pokedex_number} "
                f"already used by {seen[rec.pokedex_number]}"
            )
        seen[rec.pokedex_number] = rec.name
        records.append(rec)
    return records


def load_pokemon_data(path=None) -> list[PokemonRecord]:
    """Read and validate the dataset at *path* (defaults to the packaged file)."""
    path = Path(path) if path else DEFAULT_DATA_PATH
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SeedDataError(f"Cannot read Pokémon dataset {path}: {exc}", path=path) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SeedDataError(f"Invalid JSON in {path}: {exc}", path=path) from exc

    try:
        records = parse_pokemon_data(data)
    except SeedDataError as exc:
        raise SeedDataError(f"{path}: {exc}", path=path) from exc

    log.debug("Loaded %d Pokémon records from %s", len(records), path)
    return records
