"""Capability token codec.

Share links and invites are bearer capabilities: whoever holds the token
holds the access. Tokens are drawn from the ``secrets`` CSPRNG, one
character at a time, uniformly over a 62-symbol alphabet.
"""

import math
import secrets
import string

ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits

DEFAULT_TOKEN_LENGTH = 40

# 62^21 > 2^122 (the entropy of a version-4 UUID)
MIN_TOKEN_LENGTH = 21


def generate_token(length: int = DEFAULT_TOKEN_LENGTH) -> str:
    """Generate an unguessable token.

    Args:
        length: Number of characters

    Returns:
        Random alphanumeric token

    Raises:
        ValueError: If length would give fewer than 122 bits of entropy
    """
    if length < MIN_TOKEN_LENGTH:
        raise ValueError(
            f"Token length must be at least {MIN_TOKEN_LENGTH}, got {length}"
        )
    return "".join(secrets.choice(ALPHABET) for _ in range(length))


def token_entropy_bits(length: int) -> float:
    """Entropy in bits of a token of the given length."""
    return length * math.log2(len(ALPHABET))
