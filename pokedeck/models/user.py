from datetime import datetime, timezone
from flask_login import UserMixin
from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError, InvalidHashError, VerificationError
from pokedeck.extensions import db

_ph = PasswordHasher()


class User(db.Model, UserMixin):
    __tablename__ = "users"

    id            = db.Column(db.Integer, primary_key=True)
    username      = db.Column(db.String(64),  unique=True, nullable=False, index=True)
    email         = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(512), nullable=False)
    created_at    = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))

    decks = db.relationship("Deck", back_populates="user", lazy="dynamic")

    # ── Password helpers ────────────────────────────────────────────────────
    def set_password(self, password: str) -> None:
        self.password_hash = _ph.hash(password)

    def check_password(self, password: str) -> bool:
        # verify() reads the cost parameters from the hash itself, so fixture
        # hashes made with a cheaper hasher still check out here.
        try:
            return _ph.verify(self.password_hash, password)
        except (VerifyMismatchError, InvalidHashError, VerificationError):
            return False

    @property
    def deck_count(self) -> int:
        return self.decks.count()

    def __repr__(self) -> str:
        return f"<User {self.username}>"
