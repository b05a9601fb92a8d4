"""Tests for password hashing helpers."""

from mentorhub.core.passwords import hash_password, verify_password


def test_hash_password_should_not_store_plaintext():
    hashed = hash_password("hunter2")

    assert hashed != "hunter2"
    assert hashed.startswith("$pbkdf2-sha256$")


def test_verify_password_should_accept_correct_password():
    hashed = hash_password("hunter2")

    assert verify_password("hunter2", hashed) is True


def test_verify_password_should_reject_wrong_password():
    hashed = hash_password("hunter2")

    assert verify_password("hunter3", hashed) is False


def test_verify_password_should_reject_malformed_hash():
    assert verify_password("hunter2", "not-a-hash") is False
