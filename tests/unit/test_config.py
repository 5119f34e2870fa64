"""Unit tests for maas_netbridge.config.MaasConfig."""

from __future__ import annotations

import pytest

from maas_netbridge.client.errors import MaasConfigError
from maas_netbridge.client.session import MaasSession
from maas_netbridge.config import MaasConfig

_ENV = {
    "MAAS_API_URL": "http://maas.test:5240/MAAS",
    "MAAS_API_KEY": "ckey:tkey:tsecret",
}


class TestFromEnv:
    def test_defaults(self) -> None:
        cfg = MaasConfig.from_env(_ENV)
        assert cfg.api_url == "http://maas.test:5240/MAAS"
        assert cfg.api_key == "ckey:tkey:tsecret"
        assert cfg.api_version == "2.0"
        assert cfg.timeout_s == 30.0
        assert cfg.verify_tls is True

    def test_optional_overrides(self) -> None:
        env = dict(_ENV, MAAS_API_VERSION="2.1", MAAS_TIMEOUT="5.5", MAAS_VERIFY_TLS="no")
        cfg = MaasConfig.from_env(env)
        assert cfg.api_version == "2.1"
        assert cfg.timeout_s == 5.5
        assert cfg.verify_tls is False

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key, value in _ENV.items():
            monkeypatch.setenv(key, value)
        monkeypatch.delenv("MAAS_TIMEOUT", raising=False)
        assert MaasConfig.from_env().api_url == _ENV["MAAS_API_URL"]

    def test_missing_required_lists_names(self) -> None:
        with pytest.raises(MaasConfigError) as exc_info:
            MaasConfig.from_env({})
        assert "MAAS_API_URL" in str(exc_info.value)
        assert "MAAS_API_KEY" in str(exc_info.value)

    def test_bad_timeout(self) -> None:
        with pytest.raises(MaasConfigError):
            MaasConfig.from_env(dict(_ENV, MAAS_TIMEOUT="soon"))

    def test_bad_verify_tls(self) -> None:
        with pytest.raises(MaasConfigError):
            MaasConfig.from_env(dict(_ENV, MAAS_VERIFY_TLS="maybe"))


class TestOpenSession:
    def test_builds_session(self) -> None:
        session = MaasConfig.from_env(_ENV).open_session()
        assert isinstance(session, MaasSession)
        assert session.base_url == "http://maas.test:5240/MAAS"
        session.close()

    def test_malformed_key_raises(self) -> None:
        cfg = MaasConfig(api_url="http://maas.test/MAAS", api_key="not-a-key")
        with pytest.raises(MaasConfigError):
            cfg.open_session()
