"""OS keychain storage for the shared access code."""

from typing import Optional

import keyring
from keyring.errors import PasswordDeleteError

SERVICE_NAME = "midcar"


class AccessCodeKeychain:
    """Secure storage for the access code using the OS keychain."""

    KEY_ACCESS_CODE = "access_code"

    @classmethod
    def store(cls, code: str) -> None:
        """Store the access code.

        Raises:
            ValueError: If code is empty
        """
        if not code:
            raise ValueError("Access code cannot be empty")
        keyring.set_password(SERVICE_NAME, cls.KEY_ACCESS_CODE, code)

    @classmethod
    def retrieve(cls) -> Optional[str]:
        """Return the stored access code, or None."""
        return keyring.get_password(SERVICE_NAME, cls.KEY_ACCESS_CODE) or None

    @classmethod
    def delete(cls) -> None:
        """Remove the access code from the keychain."""
        try:
            keyring.delete_password(SERVICE_NAME, cls.KEY_ACCESS_CODE)
        except PasswordDeleteError:
            pass  # Nothing stored

    @classmethod
    def exists(cls) -> bool:
        """Check if an access code is stored."""
        return cls.retrieve() is not None
