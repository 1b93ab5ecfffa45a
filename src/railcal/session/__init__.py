# src/railcal/session/__init__.py
"""
railcal.session
~~~~~~~~~~~~~~~

Placeholder login session for pages that host the railway calendar.  A
schema-validated ``AuthSession`` record is kept as JSON in any key/value
store; ``SessionGuard`` checks it and builds the login redirect.

Basic usage::

    from railcal.session import SessionGuard

    store: dict[str, str] = {}
    guard = SessionGuard(store)
    guard.require_auth("calendar.html")   # → "login.html?redirect=calendar.html"
    guard.login(ttl_ms=8 * 3600 * 1000)
    guard.require_auth("calendar.html")   # → None

Public API
----------
SessionGuard   Checks, creates and clears the stored session.
AuthSession    Typed ``{authenticated, expiry}`` record.
SessionConfig  Store key and page names.
SessionError   Raised for unparseable session data.
"""

from railcal.session.session import AuthSession, SessionConfig, SessionError, SessionGuard

__all__ = [
    "AuthSession",
    "SessionConfig",
    "SessionError",
    "SessionGuard",
]
