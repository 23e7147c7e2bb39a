"""Digests written to the audit log.

Identifiers are personal data and the space of valid bodies is small
enough to enumerate, so a plain hash would not hide them. Input values are
therefore logged as an HMAC keyed with a secret that lives only as long as
the run. Output artifacts are ordinary files and get a plain sha256.
"""

import hashlib
import hmac
import secrets
from pathlib import Path

__all__ = [
    "DIGEST_KEY_BYTES",
    "file_digest",
    "new_digest_key",
    "value_digest",
]

DIGEST_KEY_BYTES = 32


def new_digest_key() -> bytes:
    """Return a fresh random key for one run's value digests."""
    return secrets.token_bytes(DIGEST_KEY_BYTES)


def value_digest(key: bytes, value: str) -> str:
    """Keyed digest of an input value.

    Equal values give equal digests under the same key, so repeated entries
    can still be spotted within one log. Without the key the digest cannot
    be checked against candidate identifiers.

    Parameters
    ----------
    key : bytes
        Per-run secret from ``new_digest_key``.
    value : str
        Cleaned input value.

    Returns
    -------
    str
        Digest with "hmac-sha256:" prefix.
    """
    mac = hmac.new(key, value.encode("utf-8"), hashlib.sha256)
    return f"hmac-sha256:{mac.hexdigest()}"


def file_digest(path: Path) -> str:
    """Calculate the sha256 of a written artifact.

    Parameters
    ----------
    path : Path
        Path to file.

    Returns
    -------
    str
        Digest with "sha256:" prefix.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    """
    with path.open("rb") as f:
        digest = hashlib.file_digest(f, "sha256")
    return f"sha256:{digest.hexdigest()}"
