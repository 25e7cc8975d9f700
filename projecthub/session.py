import logging
from typing import Optional

from projecthub.demo_data import demo_user
from projecthub.errors import InvalidCredentialsError
from projecthub.models import User

logger = logging.getLogger(__name__)

USER_KEY = "user"
TOKEN_KEY = "token"
THEME_KEY = "theme"

THEMES = ("light", "dark")
DEFAULT_TOKEN = "mock-jwt-token"


class Session:
    """Ambient session state: the current user, the login flag and the theme.

    One instance lives for a whole process run. It is handed to whatever
    needs it instead of being looked up globally, and ``close()`` marks the
    end of its life.
    """

    def __init__(self, store, default_theme: str = "light"):
        self.store = store
        self.default_theme = default_theme if default_theme in THEMES else "light"
        self.current_user: Optional[User] = None
        self._auth_token: Optional[str] = None
        self.theme = self.default_theme
        self._load()

    def _load(self):
        raw_user = self.store.load(USER_KEY, None)
        if isinstance(raw_user, dict):
            try:
                self.current_user = User.from_dict(raw_user)
            except (KeyError, TypeError):
                logger.warning("Discarding malformed stored user")
        self._auth_token = self.store.load(TOKEN_KEY, None)
        theme = self.store.load(THEME_KEY, None)
        self.theme = theme if theme in THEMES else self.default_theme

    @property
    def auth_token(self) -> Optional[str]:
        # In-memory value wins, so a failed storage write cannot log the user out.
        return self._auth_token

    def is_authenticated(self) -> bool:
        return bool(self.auth_token)

    def login(self, email: str, password: str, token: Optional[str] = None) -> User:
        """Accept any non-empty credentials and sign the demo user in."""
        if not email or not password:
            raise InvalidCredentialsError("Invalid credentials")
        self.current_user = demo_user()
        self.store.save(USER_KEY, self.current_user.to_dict())
        self._auth_token = token or DEFAULT_TOKEN
        self.store.save(TOKEN_KEY, self._auth_token)
        logger.info("User %s logged in", self.current_user.email)
        return self.current_user

    def logout(self) -> None:
        self.current_user = None
        self._auth_token = None
        self.store.remove(USER_KEY)
        self.store.remove(TOKEN_KEY)

    @property
    def is_dark(self) -> bool:
        return self.theme == "dark"

    def toggle_theme(self) -> str:
        self.theme = "light" if self.is_dark else "dark"
        self.store.save(THEME_KEY, self.theme)
        return self.theme

    def close(self) -> None:
        self.current_user = None
        self._auth_token = None
        self.theme = self.default_theme
