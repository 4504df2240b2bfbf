"""Signing and repository credentials sourced from the property cache."""

import sys
from typing import Optional

from .property_cache import PropertyOverlayCache
from .publication_models import SigningInfo
from .publishing import SigningExtension


def signing_info_from(cache: PropertyOverlayCache) -> SigningInfo:
    """Read ``SIGNING_KEY_ID``, ``SIGNING_PASSWORD`` and ``SIGNING_PGP_B64``."""
    return SigningInfo(
        key_id=cache.lookup("SIGNING_KEY_ID", ""),
        password=cache.lookup("SIGNING_PASSWORD", ""),
        pgp_key_b64=cache.lookup("SIGNING_PGP_B64", ""),
    )


def nexus_credentials(cache: PropertyOverlayCache) -> tuple[Optional[str], Optional[str], Optional[str]]:
    """Return the ``(profile_id, username, password)`` staging credentials."""
    return (
        cache.lookup("OSSRH_PROFILE_ID"),
        cache.lookup("OSSRH_USERNAME"),
        cache.lookup("OSSRH_PASSWORD"),
    )


def sign_publications(extension: SigningExtension, info: SigningInfo, publications) -> bool:
    """Configure in-memory PGP keys and sign every publication.

    Args:
        extension: The host signing extension.
        info: Key material.
        publications: Publications to sign.

    Returns:
        ``True`` if signing was configured, ``False`` if the key material is
        incomplete or not valid base64 (a warning is printed and nothing is
        signed).
    """
    if not info.is_complete:
        print("WARNING: Signing key id or key material missing, publications will not be signed",
              file=sys.stderr)
        return False
    extension.use_in_memory_pgp_keys(info.key_id, info.pgp_key_b64, info.password)
    try:
        extension.key_material()
    except ValueError as e:
        print(f"WARNING: {e}, publications will not be signed", file=sys.stderr)
        return False
    extension.sign(*publications)
    return True
