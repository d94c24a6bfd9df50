"""
Shared fixtures: a real ES384 keypair, a token factory and a controllable clock.
"""

import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from ovc_client.adapters.jwt.decoder import JWTClaimDecoder
from ovc_client.adapters.jwt.keys import VerificationKeyConfig
from ovc_client.application.expiry import ExpiryPolicy
from ovc_client.application.registry import RefreshStrategy, RefreshStrategyRegistry
from ovc_client.application.token_holder import TokenHolder
from ovc_client.domain.constants import IdentityProvider

NOW = 1_700_000_000
BUFFER = 30


class FakeClock:
    def __init__(self, now: float = NOW) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def _public_pem(private_key) -> str:
    return private_key.public_key().public_bytes(
        Encoding.PEM, PublicFormat.SubjectPublicKeyInfo
    ).decode()


@pytest.fixture(scope="session")
def private_key():
    return ec.generate_private_key(ec.SECP384R1())


@pytest.fixture(scope="session")
def public_pem(private_key):
    return _public_pem(private_key)


@pytest.fixture(scope="session")
def other_public_pem():
    return _public_pem(ec.generate_private_key(ec.SECP384R1()))


@pytest.fixture
def make_token(private_key):
    """Sign a token that expires `valid_for` seconds after NOW."""

    def _make(valid_for: float = 24 * 3600, *, exp=None, **claims) -> str:
        payload = {"exp": int(NOW + valid_for) if exp is None else exp, "scope": ""}
        payload.update(claims)
        return jwt.encode(payload, private_key, algorithm="ES384")

    return _make


@pytest.fixture
def key_config(public_pem):
    return VerificationKeyConfig(public_pem)


@pytest.fixture
def decoder(key_config):
    return JWTClaimDecoder(key_config)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_holder(decoder, clock):
    def _make(token: str, refresh=None, provider=IdentityProvider.IYO) -> TokenHolder:
        registry = RefreshStrategyRegistry({IdentityProvider.IYO: RefreshStrategy(refresh=refresh)})
        return TokenHolder(
            token,
            provider,
            decoder=decoder,
            registry=registry,
            expiry=ExpiryPolicy(buffer=BUFFER, clock=clock),
        )

    return _make
