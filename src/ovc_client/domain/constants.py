from enum import Enum


class IdentityProvider(str, Enum):
    """Identity providers whose tokens the SDK knows how to handle."""
    IYO = "IYO"


class TokenState(Enum):
    VALID = "valid"
    STALE_REFRESHABLE = "stale_refreshable"
    STALE_TERMINAL = "stale_terminal"


EXPIRY_CLAIM = "exp"
REFRESH_TOKEN_CLAIM = "refresh_token"

# Seconds before the literal expiry at which a token is already treated as expired.
DEFAULT_EXPIRATION_BUFFER = 30.0

# ItsYouOnline signs its JWTs with ES384.
DEFAULT_ALGORITHMS = ("ES384",)

DEFAULT_IYO_BASE_URL = "https://itsyou.online"
