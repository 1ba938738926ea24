"""Unit tests for domain validators and Annotated types."""

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.domain.types import Email, Password, RawToken, Username
from src.domain.validators import (
    validate_email,
    validate_password,
    validate_token_format,
    validate_username,
)


class _Registration(BaseModel):
    username: Username
    email: Email
    password: Password


class _TokenInput(BaseModel):
    token: RawToken


@pytest.mark.unit
class TestValidateEmail:
    """Email format and normalization."""

    def test_normalizes_to_lowercase(self):
        assert validate_email("Bob@Example.COM") == "bob@example.com"

    def test_strips_whitespace(self):
        assert validate_email("  bob@example.com ") == "bob@example.com"

    @pytest.mark.parametrize("value", ["bob", "bob@", "@example.com", "bob@@x.io"])
    def test_rejects_malformed(self, value):
        with pytest.raises(ValueError, match="Invalid email format"):
            validate_email(value)


@pytest.mark.unit
class TestValidateUsername:
    """Username character set."""

    @pytest.mark.parametrize("value", ["bob", "bob.smith", "bob_smith-2"])
    def test_accepts_allowed_characters(self, value):
        assert validate_username(value) == value

    @pytest.mark.parametrize("value", ["bob smith", "bob!", "bób"])
    def test_rejects_other_characters(self, value):
        with pytest.raises(ValueError):
            validate_username(value)


@pytest.mark.unit
class TestValidatePassword:
    """Password byte length (bcrypt input limit)."""

    def test_accepts_72_bytes(self):
        assert validate_password("a" * 72) == "a" * 72

    def test_rejects_multibyte_over_72_bytes(self):
        # 30 characters, 90 bytes
        with pytest.raises(ValueError, match="72 bytes"):
            validate_password("€" * 30)


@pytest.mark.unit
class TestValidateTokenFormat:
    """Raw token shape."""

    def test_accepts_urlsafe_token(self):
        assert validate_token_format("abc-DEF_123") == "abc-DEF_123"

    @pytest.mark.parametrize("value", ["", "   ", "abc def", "abc\n"])
    def test_rejects_blank_or_whitespace(self, value):
        with pytest.raises(ValueError):
            validate_token_format(value)


@pytest.mark.unit
class TestAnnotatedTypes:
    """Types wire Field constraints and validators together."""

    def test_registration_model_normalizes_email(self):
        model = _Registration(
            username="bob", email="BOB@example.com", password="Password123"
        )
        assert model.email == "bob@example.com"

    def test_short_password_rejected(self):
        with pytest.raises(PydanticValidationError):
            _Registration(username="bob", email="bob@example.com", password="short")

    def test_short_username_rejected(self):
        with pytest.raises(PydanticValidationError):
            _Registration(username="bo", email="bob@example.com", password="Password123")

    def test_raw_token_rejects_whitespace(self):
        with pytest.raises(PydanticValidationError):
            _TokenInput(token="has space")
