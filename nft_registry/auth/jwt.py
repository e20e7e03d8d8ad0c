"""
JWT bearer token validation with JWKS caching.
The validated ``sub`` claim is the caller identifier handed to the registry.
"""

import time
from typing import Any

import httpx
from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError

from nft_registry.config import get_settings
from nft_registry.core.exceptions import UnauthorizedException

settings = get_settings()


# JWKS cache
_jwks_cache: dict[str, Any] = {}
_jwks_cache_time: float = 0


async def fetch_jwks() -> dict[str, Any]:
    """
    Fetch the JSON Web Key Set from the identity provider.
    Cached for JWKS_CACHE_TTL seconds; a stale cache is used if refresh fails.

    Returns:
        Key set as published at JWKS_URL

    Raises:
        UnauthorizedException: If JWKS cannot be fetched and nothing is cached
    """
    global _jwks_cache, _jwks_cache_time

    current_time = time.time()
    if _jwks_cache and (current_time - _jwks_cache_time) < settings.JWKS_CACHE_TTL:
        return _jwks_cache

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(settings.JWKS_URL, timeout=10.0)
            response.raise_for_status()

            _jwks_cache = response.json()
            _jwks_cache_time = current_time

            return _jwks_cache

    except httpx.HTTPError as e:
        if _jwks_cache:
            return _jwks_cache
        raise UnauthorizedException(f"Failed to fetch JWKS: {str(e)}")


def get_rsa_key(jwks: dict[str, Any], kid: str) -> dict[str, Any] | None:
    """
    Pick the RSA public key a token was signed with.

    Args:
        jwks: Key set returned by fetch_jwks()
        kid: Key ID from the token header

    Returns:
        Key parameters for jose, or None if the set has no such key
    """
    for key in jwks.get("keys", []):
        if key.get("kid") == kid:
            return {
                "kty": key.get("kty"),
                "kid": key.get("kid"),
                "use": key.get("use"),
                "n": key.get("n"),
                "e": key.get("e"),
            }
    return None


async def validate_token(token: str) -> dict[str, Any]:
    """
    Validate a bearer JWT.

    Performs signature verification against the JWKS key named in the
    token header, then expiration, issuer and audience checks.

    Args:
        token: Raw token from the Authorization header

    Returns:
        Decoded token claims

    Raises:
        UnauthorizedException: If token is invalid
    """
    try:
        unverified_header = jwt.get_unverified_header(token)
        kid = unverified_header.get("kid")

        if not kid:
            raise UnauthorizedException("Token missing key ID")

        jwks = await fetch_jwks()
        rsa_key = get_rsa_key(jwks, kid)

        if not rsa_key:
            raise UnauthorizedException("Unable to find appropriate key")

        return jwt.decode(
            token,
            rsa_key,
            algorithms=["RS256"],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )

    except ExpiredSignatureError:
        raise UnauthorizedException("Token has expired")
    except JWTError as e:
        raise UnauthorizedException(f"Invalid token: {str(e)}")


def extract_caller(payload: dict[str, Any]) -> str:
    """
    Extract the caller identifier from validated claims.

    Args:
        payload: Claims returned by validate_token()

    Returns:
        The ``sub`` claim, compared against the registry controller

    Raises:
        UnauthorizedException: If the token carries no subject
    """
    subject = payload.get("sub")
    if not subject:
        raise UnauthorizedException("Token missing subject claim")
    return subject
