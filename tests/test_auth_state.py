import pytest

from instantshare.auth_state import AuthState, AuthStatus, AuthUser


def test_default_is_loading():
    state = AuthState()
    assert state == AuthState.loading()
    assert state.status is AuthStatus.LOADING
    assert not state.is_signed_in()
    assert state.user is None


def test_unauthenticated_has_no_user():
    state = AuthState.unauthenticated()
    assert not state.is_signed_in()
    assert state.user is None


def test_guest_is_signed_in():
    user = AuthUser(id="u1")
    state = AuthState.guest(user)
    assert state.is_signed_in()
    assert state.user == user
    assert state.status is AuthStatus.GUEST


def test_authenticated_is_signed_in():
    user = AuthUser(id="u2", email="alice@example.com", refresh_token="token")
    state = AuthState.authenticated(user)
    assert state.is_signed_in()
    assert state.user.email == "alice@example.com"
    assert state.user.refresh_token == "token"


def test_auth_user_defaults():
    user = AuthUser(id="u3")
    assert user.email is None
    assert user.refresh_token is None


def test_signed_in_state_requires_user():
    with pytest.raises(ValueError):
        AuthState(AuthStatus.GUEST)


def test_user_rejected_when_not_signed_in():
    with pytest.raises(ValueError):
        AuthState(AuthStatus.LOADING, AuthUser(id="u1"))


def test_guest_and_authenticated_differ():
    user = AuthUser(id="u1")
    assert AuthState.guest(user) != AuthState.authenticated(user)