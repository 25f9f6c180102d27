"""Tests for OAuth token storage module."""

import json
import stat
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from src.oauth.exceptions import TokenStorageError
from src.oauth.token_storage import TokenData, TokenStorage


def make_token(issued_at: str = "2024-01-15T15:00:00+00:00") -> TokenData:
    return TokenData(
        oauth_token="token_123",
        oauth_token_secret="secret_456",
        issued_at=issued_at,
    )


class TestTokenData:
    """Tests for TokenData class."""

    def test_token_data_creation(self):
        """TokenData can be created with all required fields."""
        token = make_token()

        assert token.oauth_token == "token_123"
        assert token.oauth_token_secret == "secret_456"
        assert token.issued_at == "2024-01-15T15:00:00+00:00"

    def test_expires_at_midnight_eastern_winter(self):
        """Token issued at 10:00 EST expires at the next midnight EST (05:00 UTC)."""
        token = make_token("2024-01-15T15:00:00+00:00")

        assert token.expires_at == datetime(2024, 1, 16, 5, 0, tzinfo=timezone.utc)

    def test_expires_at_midnight_eastern_summer(self):
        """Eastern date is used, not the UTC date (23:00 EDT on July 14)."""
        token = make_token("2024-07-15T03:00:00+00:00")

        assert token.expires_at == datetime(2024, 7, 15, 4, 0, tzinfo=timezone.utc)

    def test_expires_at_with_naive_datetime(self):
        """expires_at treats a naive timestamp as UTC."""
        naive = make_token("2024-01-15T15:00:00")
        aware = make_token("2024-01-15T15:00:00+00:00")

        assert naive.expires_at == aware.expires_at

    def test_is_expired(self):
        token = make_token("2024-01-15T15:00:00+00:00")

        assert not token.is_expired(datetime(2024, 1, 16, 4, 59, tzinfo=timezone.utc))
        assert token.is_expired(datetime(2024, 1, 16, 5, 0, tzinfo=timezone.utc))

    def test_is_expired_defaults_to_now(self):
        fresh = make_token(datetime.now(timezone.utc).isoformat())
        stale = make_token((datetime.now(timezone.utc) - timedelta(days=2)).isoformat())

        assert not fresh.is_expired()
        assert stale.is_expired()

    def test_round_trip_dict(self):
        token = make_token()

        assert TokenData.from_dict(token.to_dict()) == token

    def test_from_dict_defaults_to_sandbox(self):
        token = TokenData.from_dict(
            {"oauth_token": "t", "oauth_token_secret": "s", "issued_at": "2024-01-15T15:00:00"}
        )

        assert token.environment == "sandbox"

    def test_from_dict_missing_field(self):
        with pytest.raises(KeyError):
            TokenData.from_dict({"oauth_token": "t"})


    def test_from_dict_invalid_issued_at(self):
        with pytest.raises(ValueError):
            TokenData.from_dict(
                {"oauth_token": "t", "oauth_token_secret": "s", "issued_at": "garbage"}
            )


class TestTokenStorage:
    """Tests for TokenStorage class."""

    @pytest.fixture
    def token_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            yield Path(tmpdir) / "nested" / "tokens.json"

    def test_save_and_load(self, token_file):
        storage = TokenStorage(str(token_file))
        token = make_token()

        storage.save(token)

        assert storage.exists()
        assert storage.load() == token

    def test_save_creates_parent_and_restricts_permissions(self, token_file):
        storage = TokenStorage(str(token_file))

        storage.save(make_token())

        mode = stat.S_IMODE(token_file.stat().st_mode)
        assert mode == 0o600

    def test_save_writes_json(self, token_file):
        TokenStorage(str(token_file)).save(make_token())

        data = json.loads(token_file.read_text())
        assert data["oauth_token"] == "token_123"
        assert data["oauth_token_secret"] == "secret_456"

    def test_save_replaces_previous_token(self, token_file):
        storage = TokenStorage(str(token_file))
        storage.save(make_token())
        replacement = TokenData("new", "new_secret", "2024-02-01T12:00:00+00:00", "production")

        storage.save(replacement)

        assert storage.load() == replacement
        assert [p.name for p in token_file.parent.iterdir()] == ["tokens.json"]

    def test_load_missing_file(self, token_file):
        assert TokenStorage(str(token_file)).load() is None

    def test_load_corrupted_file(self, token_file):
        token_file.parent.mkdir(parents=True)
        token_file.write_text("{not json")

        assert TokenStorage(str(token_file)).load() is None

    def test_load_incomplete_file(self, token_file):
        token_file.parent.mkdir(parents=True)
        token_file.write_text('{"oauth_token": "t"}')

        assert TokenStorage(str(token_file)).load() is None

    def test_load_invalid_issued_at(self, token_file):
        token_file.parent.mkdir(parents=True)
        token_file.write_text(
            json.dumps({"oauth_token": "t", "oauth_token_secret": "s", "issued_at": "garbage"})
        )

        assert TokenStorage(str(token_file)).load() is None

    def test_delete(self, token_file):
        storage = TokenStorage(str(token_file))
        storage.save(make_token())

        assert storage.delete() is True
        assert not storage.exists()
        assert storage.delete() is False

    def test_save_failure_raises(self, token_file):
        token_file.parent.mkdir(parents=True)
        # Parent path is a file, so the token file cannot be created
        blocker = token_file.parent / "blocker"
        blocker.write_text("")
        storage = TokenStorage(str(blocker / "tokens.json"))

        with pytest.raises(TokenStorageError):
            storage.save(make_token())
