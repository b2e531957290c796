import pytest
from sqlalchemy.exc import IntegrityError

from pokedeck.extensions import db, load_user
from pokedeck.models import Card, Deck, DeckCard, PokemonType, User, artwork_url


class TestPokemonType:

    def test_from_name(self):
        assert PokemonType.from_name("Grass") is PokemonType.GRASS
        assert PokemonType.from_name(" psychic ") is PokemonType.PSYCHIC

    @pytest.mark.parametrize("name", ["Shadow", "", None, 3])
    def test_unknown(self, name):
        with pytest.raises(ValueError):
            PokemonType.from_name(name)

    def test_eighteen_types(self):
        assert len(PokemonType) == 18


class TestArtworkUrl:

    def test_template(self):
        assert artwork_url(25) == (
            "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/"
            "pokemon/other/official-artwork/25.png"
        )

    def test_pure_and_distinct(self):
        assert artwork_url(1) == artwork_url(1)
        assert len({artwork_url(n) for n in range(1, 152)}) == 151


class TestUser:

    def test_password_roundtrip(self, app):
        u = User(username="ash", email="ash@example.com")
        u.set_password("pikachu")
        assert u.password_hash != "pikachu"
        assert u.check_password("pikachu")
        assert not u.check_password("wrong")

    def test_garbage_hash(self, app):
        u = User(username="ash", email="ash@example.com", password_hash="not-a-hash")
        assert u.check_password("anything") is False

    def test_unique_email(self, app):
        db.session.add(User(username="a", email="x@example.com", password_hash="h"))
        db.session.add(User(username="b", email="x@example.com", password_hash="h"))
        with pytest.raises(IntegrityError):
            db.session.flush()

    def test_load_user(self, app):
        u = User(username="ash", email="ash@example.com", password_hash="h")
        db.session.add(u)
        db.session.commit()
        assert load_user(str(u.id)) is u
        assert load_user("999") is None


class TestDeckCard:

    def _card(self, n=1):
        return Card(name=f"Mon{n}", hp=10, attack=10, type=PokemonType.NORMAL,
                    pokedex_number=n, img_url=artwork_url(n))

    def test_foreign_keys_enforced(self, app):
        card = self._card()
        db.session.add(card)
        db.session.flush()
        db.session.add(DeckCard(deck_id=12345, card_id=card.id))
        with pytest.raises(IntegrityError):
            db.session.flush()

    def test_same_card_in_many_decks(self, app):
        user = User(username="ash", email="ash@example.com", password_hash="h")
        card = self._card()
        d1, d2 = Deck(name="A", user=user), Deck(name="B", user=user)
        db.session.add_all([user, card, d1, d2])
        db.session.flush()
        db.session.add_all([DeckCard(deck=d1, card=card), DeckCard(deck=d2, card=card)])
        db.session.commit()
        assert d1.card_count == 1
        assert d2.card_count == 1
        assert card.deck_slots.count() == 2
        assert user.deck_count == 2
