"""
fortnite: async client for the Epic Games / Fortnite account services.

Password and two-factor login, transparent token refresh, and thin
accessors for account, profile, leaderboard, store, news and status data.
"""

from fortnite.client import Fortnite, AsyncFortnite
from fortnite.auth import Auth, Unauthenticated, ChallengePending, Authenticated
from fortnite.leaderboards import Platform, Mode
from fortnite.errors import (
    FortniteError,
    TransportError,
    ServiceError,
    TwoFactorRequired,
    PreconditionError,
    NotAuthenticatedError,
)

__version__ = "0.1.0"
__all__ = [
    "Fortnite",
    "AsyncFortnite",
    "Auth",
    "Unauthenticated",
    "ChallengePending",
    "Authenticated",
    "Platform",
    "Mode",
    "FortniteError",
    "TransportError",
    "ServiceError",
    "TwoFactorRequired",
    "PreconditionError",
    "NotAuthenticatedError",
]
