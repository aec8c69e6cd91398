"""
Authentication session state.

State changes go through `reduce`, a pure function of (state, action); the
session object applies the token-store side effects around it.
"""
import enum
import logging
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from evservice.errors import ApiError, AuthError
from evservice.resources import EVServiceAPI
from evservice.schemas.user import User

logger = logging.getLogger(__name__)


class Action(str, enum.Enum):
    LOGIN_START = "LOGIN_START"
    LOGIN_SUCCESS = "LOGIN_SUCCESS"
    LOGIN_FAILURE = "LOGIN_FAILURE"
    LOGOUT = "LOGOUT"
    UPDATE_USER = "UPDATE_USER"
    SET_LOADING = "SET_LOADING"
    SET_READY = "SET_READY"


class AuthState(BaseModel):
    """Snapshot of who is signed in."""
    user: Optional[User] = None
    token: Optional[str] = None
    is_loading: bool = True
    is_authenticated: bool = False
    # Auth has been resolved; safe to make API calls.
    ready: bool = False


def reduce(state: AuthState, action: Action, payload: Any = None) -> AuthState:
    if action == Action.LOGIN_START:
        return state.model_copy(update={"is_loading": True})
    if action == Action.LOGIN_SUCCESS:
        return state.model_copy(update={
            "user": payload["user"],
            "token": payload["token"],
            "is_loading": False,
            "is_authenticated": True,
            "ready": True,
        })
    if action == Action.LOGIN_FAILURE:
        return state.model_copy(update={
            "user": None,
            "token": None,
            "is_loading": False,
            "is_authenticated": False,
            "ready": True,
        })
    if action == Action.LOGOUT:
        return state.model_copy(update={
            "user": None,
            "token": None,
            "is_loading": False,
            "is_authenticated": False,
            "ready": False,
        })
    if action == Action.UPDATE_USER:
        return state.model_copy(update={"user": payload})
    if action == Action.SET_LOADING:
        return state.model_copy(update={"is_loading": bool(payload)})
    if action == Action.SET_READY:
        return state.model_copy(update={"ready": bool(payload)})
    return state


def _failure_message(exc: Exception, default: str) -> str:
    if isinstance(exc, ApiError) and exc.server_message:
        return exc.server_message
    if isinstance(exc, AuthError):
        return str(exc)
    return default


class AuthSession:
    """The signed-in user, backed by the persisted token."""

    def __init__(self, api: EVServiceAPI, token_store=None):
        self.api = api
        self.token_store = token_store or api.token_store
        self.state = AuthState(token=self.token_store.get())

    def dispatch(self, action: Action, payload: Any = None) -> AuthState:
        if action == Action.LOGIN_SUCCESS:
            self.token_store.set(payload["token"])
        elif action in (Action.LOGIN_FAILURE, Action.LOGOUT):
            self.token_store.remove()
        self.state = reduce(self.state, action, payload)
        return self.state

    @property
    def user(self) -> Optional[User]:
        return self.state.user

    @property
    def is_authenticated(self) -> bool:
        return self.state.is_authenticated

    @property
    def ready(self) -> bool:
        return self.state.ready

    def bootstrap(self) -> AuthState:
        """
        Resolve the stored token once at start-up.
        """
        token = self.token_store.get()
        if not token:
            self.dispatch(Action.SET_LOADING, False)
            return self.dispatch(Action.SET_READY, True)

        try:
            response = self.api.auth.get_profile()
            user = User.model_validate(response.unwrap("user"))
        except (ApiError, ValidationError) as exc:
            logger.warning("Auth check failed: %s", exc)
            return self.dispatch(Action.LOGIN_FAILURE)

        return self.dispatch(Action.LOGIN_SUCCESS, {"user": user, "token": token})

    def _establish(self, response) -> AuthState:
        token = response.unwrap("token")
        user_data = response.unwrap("user")
        if not token or not user_data:
            raise AuthError("Invalid response from server")
        try:
            user = User.model_validate(user_data)
        except ValidationError as exc:
            raise AuthError("Invalid response from server") from exc
        return self.dispatch(Action.LOGIN_SUCCESS, {"user": user, "token": token})

    def login(self, email: str, password: str) -> AuthState:
        self.dispatch(Action.LOGIN_START)
        try:
            response = self.api.auth.login(email, password)
            return self._establish(response)
        except (ApiError, AuthError) as exc:
            self.dispatch(Action.LOGIN_FAILURE)
            raise AuthError(_failure_message(exc, "Login failed")) from exc

    def register(self, user_data) -> AuthState:
        self.dispatch(Action.LOGIN_START)
        try:
            response = self.api.auth.register(user_data)
            return self._establish(response)
        except (ApiError, AuthError) as exc:
            self.dispatch(Action.LOGIN_FAILURE)
            raise AuthError(_failure_message(exc, "Registration failed")) from exc

    def logout(self) -> AuthState:
        return self.dispatch(Action.LOGOUT)

    def update_profile(self, user_data) -> AuthState:
        try:
            response = self.api.auth.update_profile(user_data)
            user = User.model_validate(response.unwrap("user"))
        except ApiError as exc:
            raise AuthError(_failure_message(exc, "Profile update failed")) from exc
        except ValidationError as exc:
            raise AuthError("Profile update failed") from exc
        return self.dispatch(Action.UPDATE_USER, user)

    def change_password(self, current_password: str, new_password: str) -> None:
        try:
            self.api.auth.change_password(current_password, new_password)
        except ApiError as exc:
            raise AuthError(_failure_message(exc, "Password change failed")) from exc
