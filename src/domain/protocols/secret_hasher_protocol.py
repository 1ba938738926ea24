"""Secret hashing protocol for domain layer.

One interface covers every secret the service stores: passwords and the raw
secrets of verification, reset and refresh tokens. Only the digest is ever
persisted.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptSecretHasher)
"""

from typing import Protocol


class SecretHasherProtocol(Protocol):
    """Secret hashing and verification interface.

    Implementations:
        - BcryptSecretHasher: bcrypt with a configurable cost factor

    Usage:
        digest = hasher.hash("Password123")
        hasher.verify("Password123", digest)  # True
    """

    def hash(self, raw: str) -> str:
        """Hash a raw secret with a fresh random salt.

        Args:
            raw: Plaintext secret (password or raw token).

        Returns:
            Digest string (bcrypt format: $2b$12$...).
        """
        ...

    def verify(self, raw: str, digest: str) -> bool:
        """Verify a raw secret against a stored digest.

        Args:
            raw: Plaintext secret to check.
            digest: Digest produced by hash().

        Returns:
            True if the secret matches, False otherwise. Malformed digests
            return False (no exceptions).
        """
        ...
