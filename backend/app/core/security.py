import hashlib

from app.core.config import settings

IP_HASH_LENGTH = 16


def hash_client_address(address: str | None, *, salt: str | None = None) -> str | None:
    """
    One-way digest of a caller's network address for spell records.
    The digest is truncated and never looked up or reversed.
    """
    if not address:
        return None
    salt = settings.IP_HASH_SALT if salt is None else salt
    digest = hashlib.sha256(f"{salt}{address}".encode("utf-8", errors="ignore")).hexdigest()
    return digest[:IP_HASH_LENGTH]
