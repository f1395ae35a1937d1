"""Tests for hashing utilities."""

import pytest

from src.utils.hashing import HashingService


def test_hash_password_creates_different_hashes_for_same_input():
    """Test that hashing the same password twice produces different hashes due to salt."""
    password = "test_password_123"

    hash1 = HashingService.hash_password(password)
    hash2 = HashingService.hash_password(password)

    # Hashes should be different due to random salt
    assert hash1 != hash2
    # But both should be valid bcrypt hashes
    assert hash1.startswith("$2b$")
    assert hash2.startswith("$2b$")


def test_verify_password_with_correct_password_returns_true():
    """Test that password verification succeeds with the correct password."""
    password = "secure_password_456"
    hashed_password = HashingService.hash_password(password)

    assert HashingService.verify_password(password, hashed_password) is True


def test_verify_password_with_incorrect_password_returns_false():
    """Test that password verification fails with an incorrect password."""
    password = "secure_password_789"
    wrong_password = "wrong_password_123"
    hashed_password = HashingService.hash_password(password)

    assert HashingService.verify_password(wrong_password, hashed_password) is False


def test_verify_password_with_invalid_hash_returns_false():
    """Test that password verification fails gracefully with invalid hash format."""
    password = "test_password_def"
    invalid_hash = "not_a_valid_bcrypt_hash"

    assert HashingService.verify_password(password, invalid_hash) is False


def test_guest_accounts_without_hash_never_verify():
    assert HashingService.verify_password("anything", None) is False
    assert HashingService.verify_password("anything", "") is False


@pytest.mark.parametrize(
    "password",
    [
        "short",
        "a" * 100,
        "pass-with-special-chars!@#$%^&*()",
        "pass_with_unicode_ñ_characters",
    ],
)
def test_hash_and_verify_with_various_password_formats(password: str):
    """Long passwords are pre-hashed so bcrypt's 72-byte limit does not truncate."""
    hashed = HashingService.hash_password(password)
    assert HashingService.verify_password(password, hashed) is True
    assert HashingService.verify_password(password + "x", hashed) is False


def test_temporary_password_is_random():
    first = HashingService.generate_temporary_password()
    second = HashingService.generate_temporary_password()

    assert first != second
    assert len(first) >= 16
