"""
Token storage for E*TRADE OAuth integration.

Access tokens are kept in a small JSON file readable only by the owner.
E*TRADE access tokens expire at midnight US Eastern time on the day they
were issued, so expiry is computed from the issue timestamp rather than
stored. Sandbox and production issue separate tokens; each stored token
records the environment it belongs to.
"""

import json
import logging
import os
import tempfile
from dataclasses import asdict, dataclass
from datetime import datetime, time, timedelta, timezone
from pathlib import Path
from typing import Optional

import pytz

from .exceptions import TokenStorageError

logger = logging.getLogger(__name__)

EASTERN = pytz.timezone("America/New_York")


@dataclass
class TokenData:
    """
    Stored OAuth 1.0a access token.

    Attributes:
        oauth_token: Access token
        oauth_token_secret: Access token secret
        issued_at: ISO timestamp of when the token was issued
        environment: "sandbox" or "production"
    """

    oauth_token: str
    oauth_token_secret: str
    issued_at: str
    environment: str = "sandbox"

    @property
    def expires_at(self) -> datetime:
        """Midnight US/Eastern following the issue time, as an aware UTC datetime."""
        issued = datetime.fromisoformat(self.issued_at)
        if issued.tzinfo is None:
            issued = issued.replace(tzinfo=timezone.utc)

        next_day = issued.astimezone(EASTERN).date() + timedelta(days=1)
        midnight = EASTERN.localize(datetime.combine(next_day, time(0, 0)))
        return midnight.astimezone(timezone.utc)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Whether midnight US/Eastern has passed since issue (now defaults to current time)."""
        return (now or datetime.now(timezone.utc)) >= self.expires_at

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "TokenData":
        """
        Build a token from its stored form.

        Files written before the environment was recorded are read as sandbox.

        Raises:
            KeyError: If a token field is missing
            ValueError: If issued_at is not an ISO timestamp
        """
        datetime.fromisoformat(data["issued_at"])

        return cls(
            oauth_token=data["oauth_token"],
            oauth_token_secret=data["oauth_token_secret"],
            issued_at=data["issued_at"],
            environment=data.get("environment", "sandbox"),
        )


class TokenStorage:
    """
    JSON file holding the current access token.

    Writes go to a temporary file in the same directory which then replaces
    the token file, so a crash never leaves a half-written token behind.
    """

    def __init__(self, token_file: str):
        self.token_file = Path(token_file).expanduser()

    def save(self, token_data: TokenData) -> None:
        """
        Write the token, replacing any previous one.

        Raises:
            TokenStorageError: If the file cannot be written
        """
        directory = self.token_file.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            # mkstemp creates the file with mode 0600
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tokens-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w") as f:
                    json.dump(token_data.to_dict(), f, indent=2)
                os.replace(tmp_path, self.token_file)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error(f"Could not write token file {self.token_file}: {e}")
            raise TokenStorageError(f"Failed to save tokens: {e}") from e

        logger.info(f"Saved {token_data.environment} access token to {self.token_file}")

    def load(self) -> Optional[TokenData]:
        """
        Read the stored token.

        Returns:
            TokenData, or None when there is no file or it cannot be used
            (the user is asked to log in again in both cases)
        """
        try:
            data = json.loads(self.token_file.read_text())
        except FileNotFoundError:
            logger.debug(f"No token file at {self.token_file}")
            return None
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable token file {self.token_file}: {e}")
            return None

        try:
            return TokenData.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring invalid token file {self.token_file}: {e!r}")
            return None

    def delete(self) -> bool:
        """
        Remove the token file.

        Returns:
            True if a file was removed, False if there was none

        Raises:
            TokenStorageError: If the file exists but cannot be removed
        """
        try:
            self.token_file.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise TokenStorageError(f"Failed to delete token file: {e}") from e

        logger.info(f"Deleted token file {self.token_file}")
        return True

    def exists(self) -> bool:
        return self.token_file.exists()
