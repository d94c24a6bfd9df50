import json
from unittest.mock import MagicMock

import pytest

from ovc_client.adapters.jwt.keys import VerificationKeyConfig
from ovc_client.api import cli
from ovc_client.api.env import settings_from_env
from ovc_client.api.settings import OvcSettings
from ovc_client.domain.constants import DEFAULT_EXPIRATION_BUFFER
from ovc_client.domain.exceptions import ConfigurationError, InvalidTokenError, UnsupportedProviderError
from ovc_client.factory import create_client, create_token_holder, default_registry


def test_create_token_holder(public_pem, make_token):
    token = make_token(refresh_token="foobar")

    holder = create_token_holder(token, public_key=public_pem)

    assert holder.provider == "IYO"
    assert holder.refreshable
    assert holder.claim("refresh_token") == "foobar"


def test_create_token_holder_shared_key_config(public_pem, make_token):
    key_config = VerificationKeyConfig()

    with pytest.raises(ConfigurationError):
        create_token_holder(make_token(), key_config=key_config)

    key_config.install(public_pem)
    assert create_token_holder(make_token(), key_config=key_config).claim("scope") == ""


def test_create_token_holder_unknown_provider(public_pem, make_token):
    with pytest.raises(UnsupportedProviderError):
        create_token_holder(make_token(), "FOO", public_key=public_pem)


def test_default_registry_binds_refresher():
    refresher = MagicMock()
    assert default_registry(refresher).lookup("IYO").refresh is refresher


def test_create_client_logs_in(public_pem, make_token):
    token = make_token(refresh_token="foobar")
    iyo = MagicMock()
    iyo.login.return_value = token
    settings = OvcSettings(
        server_url="https://ovc.example.com",
        client_id="client",
        client_secret="secret",
        jwt_public_key=public_pem,
        scopes=["offline_access"],
    )

    with create_client(settings, iyo=iyo) as client:
        assert client.token_holder.token == token
        assert client.token_holder.refreshable

    iyo.login.assert_called_once_with("client", "secret", scopes=["offline_access"])


def test_create_client_requires_credentials(public_pem):
    settings = OvcSettings(server_url="https://ovc.example.com", jwt_public_key=public_pem)

    with pytest.raises(ConfigurationError) as exc_info:
        create_client(settings, iyo=MagicMock())
    assert "OVC_CLIENT_ID" in str(exc_info.value)


# --- env + cli ---


@pytest.fixture
def ovc_env(monkeypatch, public_pem):
    for key in ("OVC_CLIENT_ID", "OVC_CLIENT_SECRET", "OVC_EXPIRATION_BUFFER", "OVC_SCOPES", "VERIFY_SSL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("OVC_SERVER_URL", "https://ovc.example.com/")
    monkeypatch.setenv("OVC_JWT_PUBLIC_KEY", public_pem)
    return monkeypatch


def test_settings_from_env(ovc_env):
    ovc_env.setenv("OVC_EXPIRATION_BUFFER", "45")
    ovc_env.setenv("OVC_SCOPES", "offline_access, user:name")
    ovc_env.setenv("VERIFY_SSL", "no")

    settings = settings_from_env()

    assert settings.base_url == "https://ovc.example.com"
    assert settings.identity_provider == "IYO"
    assert settings.expiration_buffer == 45.0
    assert settings.scopes == ["offline_access", "user:name"]
    assert settings.verify_ssl is False


def test_settings_from_env_defaults(ovc_env):
    settings = settings_from_env()
    assert settings.expiration_buffer == DEFAULT_EXPIRATION_BUFFER
    assert settings.verify_ssl is True


def test_settings_from_env_missing(monkeypatch):
    monkeypatch.delenv("OVC_SERVER_URL", raising=False)
    monkeypatch.delenv("OVC_JWT_PUBLIC_KEY", raising=False)

    with pytest.raises(ConfigurationError) as exc_info:
        settings_from_env()
    assert "OVC_SERVER_URL" in str(exc_info.value)
    assert "OVC_JWT_PUBLIC_KEY" in str(exc_info.value)


def test_settings_from_env_bad_number(ovc_env):
    ovc_env.setenv("OVC_EXPIRATION_BUFFER", "soon")

    with pytest.raises(ConfigurationError):
        settings_from_env()


def test_cli_claims(ovc_env, make_token, capsys):
    # the CLI uses the real clock, so NOW-based tokens are long expired
    token = make_token(hello="world")

    cli.main(["claims", token])

    out = json.loads(capsys.readouterr().out)
    assert out["ok"] is True
    assert out["provider"] == "IYO"
    assert out["state"] == "stale_terminal"
    assert out["claims"]["hello"] == "world"


def test_cli_claims_invalid(ovc_env, capsys):
    with pytest.raises(InvalidTokenError):
        cli.main(["claims", "Foo.Bar.Token"])

    out = json.loads(capsys.readouterr().out)
    assert out["ok"] is False
