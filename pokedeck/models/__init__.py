# Import all models so SQLAlchemy can discover them for db.create_all()
# Order matters: FK targets must be imported before dependents.
from pokedeck.models.user import User
from pokedeck.models.card import Card, PokemonType, artwork_url
from pokedeck.models.deck import Deck, DeckCard

__all__ = [
    "User",
    "Card", "PokemonType", "artwork_url",
    "Deck", "DeckCard",
]
