import enum
from datetime import datetime, timezone
from pokedeck.extensions import db

ARTWORK_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/"
    "pokemon/other/official-artwork/{pokedex_number}.png"
)


def artwork_url(pokedex_number: int) -> str:
    """Official artwork URL for a species. Depends only on the Pokédex number."""
    return ARTWORK_URL_TEMPLATE.format(pokedex_number=pokedex_number)


class PokemonType(enum.Enum):
    NORMAL   = "Normal"
    FIRE     = "Fire"
    WATER    = "Water"
    ELECTRIC = "Electric"
    GRASS    = "Grass"
    ICE      = "Ice"
    FIGHTING = "Fighting"
    POISON   = "Poison"
    GROUND   = "Ground"
    FLYING   = "Flying"
    PSYCHIC  = "Psychic"
    BUG      = "Bug"
    ROCK     = "Rock"
    GHOST    = "Ghost"
    DRAGON   = "Dragon"
    DARK     = "Dark"
    STEEL    = "Steel"
    FAIRY    = "Fairy"

    @classmethod
    def from_name(cls, name: str) -> "PokemonType":
        """Resolve a dataset type string ("Grass", "GRASS", "grass").

        Raises ValueError for anything outside the enumeration.
        """
        if isinstance(name, str):
            member = cls.__members__.get(name.strip().upper())
            if member is not None:
                return member
        raise ValueError(f"Unknown Pokémon type: {name!r}")


class Card(db.Model):
    """One card template per species.

    Cards are never owned directly; decks reference them through DeckCard,
    so the same card can sit in any number of decks.
    """
    __tablename__ = "cards"

    id             = db.Column(db.Integer, primary_key=True)
    name           = db.Column(db.String(100), nullable=False, index=True)
    hp             = db.Column(db.Integer, nullable=False)
    attack         = db.Column(db.Integer, nullable=False)
    type           = db.Column(db.Enum(PokemonType), nullable=False)
    pokedex_number = db.Column(db.Integer, unique=True, nullable=False, index=True)
    img_url        = db.Column(db.String(400), nullable=False)
    created_at     = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))

    deck_slots = db.relationship("DeckCard", back_populates="card", lazy="dynamic")

    def __repr__(self) -> str:
        return f"<Card #{self.pokedex_number} {self.name}>"
