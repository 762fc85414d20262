"""
Request signing utilities.
"""
from .signing import string_to_sign, sign_params, timestamp_now

__all__ = [
    'string_to_sign',
    'sign_params',
    'timestamp_now',
]
