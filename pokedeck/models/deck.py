from datetime import datetime, timezone
from pokedeck.extensions import db


class Deck(db.Model):
    """A named deck belonging to a user.

    Membership lives in DeckCard rows; a deck has no card data of its own.
    """
    __tablename__ = "decks"

    id         = db.Column(db.Integer, primary_key=True)
    user_id    = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    name       = db.Column(db.String(100), nullable=False)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))

    # ── Relationships ────────────────────────────────────────────────────────
    user  = db.relationship("User", back_populates="decks")
    cards = db.relationship("DeckCard", back_populates="deck", lazy="dynamic")

    @property
    def card_count(self) -> int:
        """Number of card slots (DeckCard rows) in this deck."""
        return self.cards.count()

    def __repr__(self) -> str:
        return f"<Deck {self.name!r} (user={self.user_id})>"


class DeckCard(db.Model):
    """Join row: one card occupying one slot in one deck."""
    __tablename__ = "deck_cards"

    id      = db.Column(db.Integer, primary_key=True)
    deck_id = db.Column(db.Integer, db.ForeignKey("decks.id"), nullable=False, index=True)
    card_id = db.Column(db.Integer, db.ForeignKey("cards.id"), nullable=False, index=True)

    deck = db.relationship("Deck", back_populates="cards")
    card = db.relationship("Card", back_populates="deck_slots")

    def __repr__(self) -> str:
        return f"<DeckCard deck={self.deck_id} card={self.card_id}>"
