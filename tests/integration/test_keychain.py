"""Integration tests for the keychain-backed access code."""

import pytest

from midcar.core.keychain import SERVICE_NAME, AccessCodeKeychain


class TestAccessCodeKeychain:
    def test_store_and_retrieve(self, mock_keyring):
        AccessCodeKeychain.store("s3cret")
        assert AccessCodeKeychain.retrieve() == "s3cret"
        assert mock_keyring[f"{SERVICE_NAME}:access_code"] == "s3cret"

    def test_retrieve_empty(self, mock_keyring):
        assert AccessCodeKeychain.retrieve() is None

    def test_exists(self, mock_keyring):
        assert AccessCodeKeychain.exists() is False
        AccessCodeKeychain.store("s3cret")
        assert AccessCodeKeychain.exists() is True

    def test_delete(self, mock_keyring):
        AccessCodeKeychain.store("s3cret")
        AccessCodeKeychain.delete()
        assert AccessCodeKeychain.retrieve() is None

    def test_delete_when_missing(self, mock_keyring):
        AccessCodeKeychain.delete()  # Should not raise

    def test_store_empty_rejected(self, mock_keyring):
        with pytest.raises(ValueError):
            AccessCodeKeychain.store("")

    def test_overwrite(self, mock_keyring):
        AccessCodeKeychain.store("old")
        AccessCodeKeychain.store("new")
        assert AccessCodeKeychain.retrieve() == "new"
