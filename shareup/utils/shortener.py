"""Short ID generation utility

Functions:
    generate_short_id(length=6, alphabet=ShortID.ALPHABET):
        Generate a random, URL-safe identifier for a short link.

Example:
    >>> from shareup.utils import generate_short_id
    >>> generate_short_id()
    'V1StGX'
"""

import secrets

from shareup.constants import ShortID


def generate_short_id(length: int = ShortID.LENGTH, alphabet: str = ShortID.ALPHABET) -> str:
    """Generate a random short ID drawn uniformly from a URL-safe alphabet.

    With the default 64-symbol alphabet and 6 characters the ID space holds
    64**6 (about 6.8e10) values. Collisions are rare but possible, so callers
    must rely on the data store to reject duplicates.

    Args:
        length (int, optional):
            Number of characters in the ID. Defaults to 6.

        alphabet (str, optional):
            Symbols to draw from. Defaults to [A-Za-z0-9_-].

    Returns:
        str: A random identifier of exactly `length` characters.

    NOTE:
        - Uses `secrets` (CSPRNG), so IDs are not guessable from previous ones.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')
    if not alphabet:
        raise ValueError('Alphabet must be a non-empty string.')

    return ''.join(secrets.choice(alphabet) for _ in range(length))
