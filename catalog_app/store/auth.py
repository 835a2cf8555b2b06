# catalog_app/store/auth.py

import json
import logging

from catalog_app.services.api import ApiError, MovieApi


logger = logging.getLogger(__name__)

TOKEN_KEY = "access_token"
USER_KEY = "user"


class AuthStore:
    """
    Holds {isAuthenticated, user, token} inside the injected `state`
    mapping and mirrors it into `storage` so the session survives reloads.
    """

    key = "auth"

    def __init__(self, state, api: MovieApi, storage=None):
        self.state = state
        self.api = api
        self.storage = storage if storage is not None else {}
        if self.key not in self.state:
            self.state[self.key] = self._empty()

    @staticmethod
    def _empty():
        return {"isAuthenticated": False, "user": None, "token": None}

    # -------------------------------
    # State access
    # -------------------------------

    @property
    def snapshot(self) -> dict:
        return self.state[self.key]

    @property
    def is_authenticated(self) -> bool:
        return self.snapshot["isAuthenticated"]

    @property
    def user(self):
        return self.snapshot["user"]

    @property
    def token(self):
        return self.snapshot["token"]

    # -------------------------------
    # Persistence
    # -------------------------------

    def _persist(self):
        if self.token:
            self.storage[TOKEN_KEY] = self.token
            self.storage[USER_KEY] = json.dumps(self.user)
        else:
            for k in (TOKEN_KEY, USER_KEY):
                if k in self.storage:
                    del self.storage[k]
        if hasattr(self.storage, "save"):
            self.storage.save()

    def restore(self):
        """
        Loads a previously persisted session, if any, and checks the token
        against /auth/me. A rejected token clears the session; when the
        server cannot be reached the saved session is kept.
        """
        if self.is_authenticated:
            return
        token = self.storage.get(TOKEN_KEY)
        if not token:
            return
        try:
            user = json.loads(self.storage.get(USER_KEY) or "null")
        except ValueError:
            user = None
        self.state[self.key] = {"isAuthenticated": True, "user": user, "token": token}

        try:
            me = self.api.get_me()
        except ApiError as e:
            if e.status_code == 401:
                logger.info("Saved session expired, logging out")
                self.logout()
            return
        self.set_auth(me, token)

    # -------------------------------
    # Actions
    # -------------------------------

    def set_auth(self, user, token):
        self.state[self.key] = {"isAuthenticated": True, "user": user, "token": token}
        self._persist()

    def login(self, email, password):
        try:
            response = self.api.login(email, password)
        except Exception as e:
            logger.error(f"Login failed: {e}")
            raise
        self.set_auth(response["user"], response["token"])

    def register(self, username, email, password, first_name=None, last_name=None):
        try:
            response = self.api.register(username, email, password, first_name, last_name)
        except Exception as e:
            logger.error(f"Registration failed: {e}")
            raise
        self.set_auth(response["user"], response["token"])

    def logout(self):
        self.state[self.key] = self._empty()
        self._persist()
