"""
Auth module: password grant, two-factor completion and pipeline swap.

    Unauthenticated --login()--> Authenticated
    Unauthenticated --login()--> ChallengePending --two_factor()--> Authenticated

Exactly one HttpClient is live at a time. Before a successful grant it carries
DeviceAuth; afterwards it carries TokenAuth.
"""

import hashlib
import logging
import uuid
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from fortnite.account import AccountAPI
from fortnite.constants import OAUTH_TOKEN_ENDPOINT, TOKEN_TYPE
from fortnite.errors import NotAuthenticatedError, PreconditionError, ServiceError, TwoFactorRequired
from fortnite.models.session import AccountSession
from fortnite.models.token import TokenResponse
from fortnite.transport.auth import DeviceAuth, TokenAuth
from fortnite.transport.http import DEFAULT_TIMEOUT, HttpClient

logger = logging.getLogger(__name__)


class Unauthenticated(BaseModel):
    model_config = ConfigDict(frozen=True)


class ChallengePending(BaseModel):
    model_config = ConfigDict(frozen=True)

    challenge: str


class Authenticated(BaseModel):
    model_config = ConfigDict(frozen=True)

    session: AccountSession


AuthState = Union[Unauthenticated, ChallengePending, Authenticated]


def generate_device_id() -> str:
    """Random md5 hex digest, stable for the lifetime of one client."""
    return hashlib.md5(uuid.uuid4().bytes).hexdigest()


class Auth:
    def __init__(self, device_id: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT, **http_options: Any):
        self.device_id = device_id or generate_device_id()
        self.state: AuthState = Unauthenticated()
        self._timeout = timeout
        self._http_options = http_options
        self._http: Optional[HttpClient] = None

    @property
    def authenticated(self) -> bool:
        return isinstance(self.state, Authenticated)

    @property
    def session(self) -> AccountSession:
        if not isinstance(self.state, Authenticated):
            raise NotAuthenticatedError()
        return self.state.session

    @property
    def http(self) -> HttpClient:
        """The authenticated pipeline. Never hands out the pre-login one."""
        if not isinstance(self.state, Authenticated) or self._http is None:
            raise NotAuthenticatedError()
        return self._http

    async def _install(self, auth: Union[DeviceAuth, TokenAuth]) -> HttpClient:
        previous = self._http
        self._http = HttpClient(auth, timeout=self._timeout, **self._http_options)
        if previous is not None:
            await previous.close()
        logger.debug("Installed %s pipeline", type(auth).__name__)
        return self._http

    async def login(self, email: str, password: str, device_id: Optional[str] = None) -> AccountSession:
        """Password grant. Raises TwoFactorRequired if the account has 2FA enabled.

        Pass a device_id that already completed two-factor once to skip the challenge.
        """
        if device_id:
            self.device_id = device_id

        self.state = Unauthenticated()
        http = await self._install(DeviceAuth(self.device_id))

        try:
            payload = await http.post(OAUTH_TOKEN_ENDPOINT, data={
                "grant_type": "password",
                "username": email,
                "password": password,
                "includePerms": "false",
                "token_type": TOKEN_TYPE,
            })
        except TwoFactorRequired as e:
            self.state = ChallengePending(challenge=e.challenge)
            logger.debug("Two factor challenge received, awaiting code")
            raise

        return await self._authenticate(payload)

    async def two_factor(self, code: str) -> AccountSession:
        """OTP grant completing the challenge captured by the last login()."""
        state = self.state
        if not isinstance(state, ChallengePending) or self._http is None:
            raise PreconditionError("Two factor challenge has not been set.", code="no_pending_challenge")

        payload = await self._http.post(OAUTH_TOKEN_ENDPOINT, data={
            "grant_type": "otp",
            "otp": code,
            "challenge": state.challenge,
            "includePerms": "true",
            "token_type": TOKEN_TYPE,
        })

        return await self._authenticate(payload)

    async def _authenticate(self, payload: Any) -> AccountSession:
        try:
            token = TokenResponse.model_validate(payload)
        except ValidationError as e:
            raise ServiceError("invalid_token_response", f"Malformed token response: {e}", body=payload) from e

        session = AccountSession(account_id=token.account_id, in_app_id=token.in_app_id)
        http = await self._install(TokenAuth(token, self.device_id))
        self.state = Authenticated(session=session)
        logger.debug("Authenticated account %s", session.account_id)

        # A failure here propagates to the caller; the new session stays installed.
        await AccountAPI(http, session.account_id).kill_session()
        return session

    async def close(self) -> None:
        if self._http is not None:
            await self._http.close()
