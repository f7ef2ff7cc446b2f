import jwt
import time
import logging
from typing import Callable

from app.core.errors import AuthError, BackendError
from app.core.logger import logs

ALGORITHM = "HS256"

class TokenService:
    """
    Issues and verifies the shared bearer credential.

    The only claim is `exp`; there is no subject and no revocation, so
    expiry is the sole validity boundary.
    """

    def __init__(self, secret_key: str, ttl_hours: int = 24, clock: Callable[[], float] = time.time):
        self.secret_key = secret_key
        self.ttl_seconds = ttl_hours * 3600
        self.clock = clock

    def issue_token(self) -> str:
        claims = {"exp": int(self.clock()) + self.ttl_seconds}
        try:
            return jwt.encode(claims, self.secret_key, algorithm=ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise BackendError(f"Error signing token: {e}", "Error generating token") from e

    def verify_token(self, token: str) -> dict:
        """Return the claims of a valid token, AuthError otherwise."""
        try:
            claims = jwt.decode(
                token,
                self.secret_key,
                algorithms=[ALGORITHM],
                # expiry is checked below against the same clock that issued it
                options={"require": ["exp"], "verify_exp": False},
            )
        except jwt.PyJWTError as e:
            logs.log(logging.INFO, f"Rejected bearer token: {e.__class__.__name__}: {e}")
            raise AuthError("Invalid token") from e

        exp = claims["exp"]
        if not isinstance(exp, (int, float)) or isinstance(exp, bool):
            logs.log(logging.INFO, f"Rejected bearer token: non-numeric exp {exp!r}")
            raise AuthError("Invalid token")
        if self.clock() > exp:
            logs.log(logging.INFO, f"Rejected bearer token: expired at {exp}")
            raise AuthError("Invalid token")
        return claims
