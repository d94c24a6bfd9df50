import jwt
import pytest

from ovc_client.adapters.jwt.decoder import JWTClaimDecoder
from ovc_client.adapters.jwt.keys import VerificationKeyConfig
from ovc_client.domain.exceptions import ConfigurationError, InvalidTokenError

from .conftest import NOW


def test_decode_returns_all_claims(decoder, make_token):
    token = make_token(3600, hello="world", refresh_token="foobar")

    claims = decoder.decode(token)

    assert claims["exp"] == NOW + 3600
    assert claims["hello"] == "world"
    assert claims["refresh_token"] == "foobar"
    with pytest.raises(TypeError):
        claims["hello"] = "changed"


def test_expired_token_still_decodes(decoder, make_token):
    # expiry is decided by the ExpiryPolicy, not the decoder
    claims = decoder.decode(make_token(-3600))
    assert claims["exp"] == NOW - 3600


def test_missing_key_is_a_configuration_error(make_token):
    decoder = JWTClaimDecoder(VerificationKeyConfig())

    with pytest.raises(ConfigurationError):
        decoder.decode(make_token())


@pytest.mark.parametrize("token", ["Foo.Bar.Token", "not-a-jwt", "a.b", "", None])
def test_malformed_tokens(decoder, token):
    with pytest.raises(InvalidTokenError):
        decoder.decode(token)


def test_signature_mismatch(make_token, other_public_pem):
    decoder = JWTClaimDecoder(VerificationKeyConfig(other_public_pem))

    with pytest.raises(InvalidTokenError):
        decoder.decode(make_token())


def test_wrong_algorithm_rejected(decoder):
    token = jwt.encode({"exp": NOW + 3600}, "s" * 64, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        decoder.decode(token)


def test_exp_is_required(decoder, private_key):
    token = jwt.encode({"scope": ""}, private_key, algorithm="ES384")

    with pytest.raises(InvalidTokenError):
        decoder.decode(token)


def test_exp_must_be_numeric(decoder, make_token):
    with pytest.raises(InvalidTokenError):
        decoder.decode(make_token(exp="tomorrow"))


@pytest.mark.parametrize("exp", [float("nan"), float("inf"), float("-inf")])
def test_exp_must_be_finite(decoder, make_token, exp):
    with pytest.raises(InvalidTokenError, match="finite"):
        decoder.decode(make_token(exp=exp))


@pytest.mark.parametrize("exp", [10**12, -(10**12), 10**400])
def test_exp_must_be_a_representable_time(decoder, make_token, exp):
    with pytest.raises(InvalidTokenError, match="out of range"):
        decoder.decode(make_token(exp=exp))


# --- verification key config ---


def test_key_config_rejects_garbage():
    config = VerificationKeyConfig()

    with pytest.raises(ConfigurationError):
        config.install("-----BEGIN PUBLIC KEY-----\nnope\n-----END PUBLIC KEY-----\n")

    assert not config.is_configured
    with pytest.raises(ConfigurationError):
        _ = config.key


def test_last_installed_key_wins(public_pem, other_public_pem, make_token):
    config = VerificationKeyConfig(other_public_pem)
    decoder = JWTClaimDecoder(config)
    token = make_token()

    with pytest.raises(InvalidTokenError):
        decoder.decode(token)

    config.install(public_pem.encode())

    assert config.is_configured
    assert decoder.decode(token)["exp"] == NOW + 24 * 3600
