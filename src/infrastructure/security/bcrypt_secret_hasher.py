"""Bcrypt secret hashing (adapter).

Implements SecretHasherProtocol for passwords and raw token secrets alike.

Security:
    - Fresh random salt per call
    - Adaptive cost factor (BCRYPT_ROUNDS, default 12 = ~250ms per hash)
    - Constant-time verification
    - Raw input is never logged
"""

import bcrypt


class BcryptSecretHasher:
    """Bcrypt secret hasher.

    Usage:
        from src.core.container import get_secret_hasher

        hasher = get_secret_hasher()
        digest = hasher.hash("Password123")
        hasher.verify("Password123", digest)  # True
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt hasher.

        Args:
            cost_factor: Bcrypt log2 cost (default: 12). Each +1 doubles
                computation time. Tests use 4.

        Raises:
            ValueError: If cost_factor is outside bcrypt's 4-31 range.
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash(self, raw: str) -> str:
        """Hash a raw secret using bcrypt.

        Args:
            raw: Plaintext secret.

        Returns:
            Digest string ($2b$<cost>$<salt><hash>), always 60 characters.

        Example:
            >>> hasher = BcryptSecretHasher(cost_factor=4)
            >>> hasher.hash("s3cret") != hasher.hash("s3cret")  # Different salts
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(raw.encode("utf-8"), salt).decode("utf-8")

    def verify(self, raw: str, digest: str) -> bool:
        """Verify a raw secret against a bcrypt digest.

        Args:
            raw: Plaintext secret to verify.
            digest: Stored digest.

        Returns:
            True if the secret matches, False otherwise (including malformed
            digests).
        """
        try:
            return bcrypt.checkpw(raw.encode("utf-8"), digest.encode("utf-8"))
        except (ValueError, AttributeError):
            # Invalid hash format or encoding error
            return False
