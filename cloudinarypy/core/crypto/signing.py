"""SHA-1 request signatures for the upload API."""
import hashlib
import time
from typing import Mapping, Any

# Sent with signed requests but never part of the signed string
UNSIGNED_PARAMS = frozenset({'api_key', 'file', 'resource_type', 'signature'})


def timestamp_now() -> str:
    """Current Unix time in seconds, as sent in the timestamp field."""
    return str(int(time.time()))


def string_to_sign(params: Mapping[str, Any]) -> str:
    """
    Builds the ``key=value&...`` string, keys sorted, empty values dropped.
    
    Example:
        >>> string_to_sign({'timestamp': '1369431906', 'public_id': 'images/logo'})
        'public_id=images/logo&timestamp=1369431906'
    """
    if not isinstance(params, Mapping):
        raise ValueError(f"Parameters must be a mapping, got {type(params).__name__}")
    
    parts = []
    for key in sorted(params):
        if key in UNSIGNED_PARAMS:
            continue
        value = params[key]
        if value is None or value == '':
            continue
        parts.append(f"{key}={value}")
    return '&'.join(parts)


def sign_params(params: Mapping[str, Any], api_secret: str) -> str:
    """
    Computes the lowercase hex SHA-1 signature of a request.
    
    The secret is appended to the string to sign with no separator.
    
    Args:
        params: Request parameters
        api_secret: API secret of the account
        
    Returns:
        40 character hex digest
    """
    if not api_secret:
        raise ValueError("Cannot sign a request without an API secret")
    to_sign = string_to_sign(params) + api_secret
    return hashlib.sha1(to_sign.encode('utf-8')).hexdigest()
