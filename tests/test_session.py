import pytest

from projecthub.errors import InvalidCredentialsError, StorageError
from projecthub.session import Session
from projecthub.utils.storage import MemoryStorage
from projecthub.utils.store import StoreAdapter


def test_login_persists_user_and_token(store, session):
    user = session.login("demo@example.com", "pw")

    assert session.is_authenticated()
    assert session.auth_token == "mock-jwt-token"
    assert store.load("user") == user.to_dict()

    reopened = Session(store)
    assert reopened.current_user == user
    assert reopened.is_authenticated()


def test_login_with_explicit_token(session):
    session.login("demo@example.com", "pw", token="abc")
    assert session.auth_token == "abc"


def test_invalid_credentials(session, store):
    with pytest.raises(InvalidCredentialsError):
        session.login("", "pw")
    assert session.current_user is None
    assert store.load("token") is None


def test_logout_clears_state(store, session):
    session.login("demo@example.com", "pw")
    session.logout()

    assert session.current_user is None
    assert not session.is_authenticated()
    assert store.load("user") is None
    assert Session(store).current_user is None


def test_theme_toggle_is_persisted(store, session):
    assert session.theme == "light"
    assert not session.is_dark

    assert session.toggle_theme() == "dark"
    assert session.is_dark
    assert Session(store).theme == "dark"

    session.toggle_theme()
    assert Session(store).theme == "light"


def test_unknown_stored_theme_falls_back_to_default(store):
    store.save("theme", "sepia")
    assert Session(store, default_theme="dark").theme == "dark"


def test_malformed_stored_user_is_ignored(store):
    store.save("user", {"name": "no id"})
    assert Session(store).current_user is None


def test_close_resets_state(session):
    session.login("demo@example.com", "pw")
    session.toggle_theme()
    session.close()
    assert session.current_user is None
    assert session.theme == "light"


class ReadOnlyStorage(MemoryStorage):
    def set_item(self, key, value):
        raise StorageError("read-only")


def test_login_survives_a_failed_token_write():
    session = Session(StoreAdapter(ReadOnlyStorage()))

    session.login("demo@example.com", "pw", token="abc")

    assert session.is_authenticated()
    assert session.auth_token == "abc"
    session.logout()
    assert not session.is_authenticated()
