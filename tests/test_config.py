"""Tests for ClientConfig and its loaders."""

import pytest

from horace_payments import (
    DEFAULT_BASE_URL,
    ClientConfig,
    ConfigError,
    load_client_config,
)


class TestClientConfigCreate:
    def test_defaults(self):
        config = ClientConfig.create(access_token="tok")

        assert config.access_token == "tok"
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout_seconds is None

    @pytest.mark.parametrize("token", [None, "", "   ", 123])
    def test_requires_token(self, token):
        with pytest.raises(ConfigError) as exc_info:
            ClientConfig.create(access_token=token)

        assert exc_info.value.is_local

    def test_base_url_gets_single_trailing_slash(self):
        config = ClientConfig.create(access_token="t", base_url="https://x.test/api//")

        assert config.base_url == "https://x.test/api/"
        assert config.method_url("merchant.get") == "https://x.test/api/merchant.get"

    def test_rejects_non_http_base_url(self):
        with pytest.raises(ConfigError):
            ClientConfig.create(access_token="t", base_url="ftp://x.test/")

    @pytest.mark.parametrize("raw, expected", [("2.5", 2.5), (3, 3.0), ("", None), ("none", None)])
    def test_timeout_parsing(self, raw, expected):
        config = ClientConfig.create(access_token="t", timeout_seconds=raw)

        assert config.timeout_seconds == expected

    @pytest.mark.parametrize("raw", ["abc", "0", "-1", "inf"])
    def test_rejects_bad_timeout(self, raw):
        with pytest.raises(ConfigError):
            ClientConfig.create(access_token="t", timeout_seconds=raw)

    def test_repr_hides_token(self):
        assert "secret" not in repr(ClientConfig.create(access_token="secret"))


class TestLoadClientConfig:
    def test_reads_environment_mapping(self):
        config = load_client_config(
            env_file=None,
            base={
                "HORACE_ACCESS_TOKEN": "env-token",
                "HORACE_BASE_URL": "https://env.test/api",
                "HORACE_TIMEOUT_SECONDS": "10",
            },
        )

        assert config == ClientConfig(
            access_token="env-token",
            base_url="https://env.test/api/",
            timeout_seconds=10.0,
        )

    def test_keyword_arguments_win_over_overrides(self):
        config = load_client_config(
            env_file=None,
            base={"HORACE_ACCESS_TOKEN": "env-token"},
            overrides={"HORACE_ACCESS_TOKEN": "override-token"},
            access_token="kwarg-token",
        )

        assert config.access_token == "kwarg-token"

    def test_missing_token(self):
        with pytest.raises(ConfigError, match="HORACE_ACCESS_TOKEN"):
            load_client_config(env_file=None, base={})

    def test_env_file_fills_gaps(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("HORACE_ACCESS_TOKEN=file-token\n", encoding="utf-8")

        config = load_client_config(env_file=str(env_file), base={})

        assert config.access_token == "file-token"

    def test_env_file_layering(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# HORACE_ACCESS_TOKEN=commented-out\n"
            "\n"
            "HORACE_ACCESS_TOKEN=from-file\n"
            "HORACE_BASE_URL='https://file.example/api'\n"
            "export HORACE_TIMEOUT_SECONDS=5\n"
            "not a pair\n",
            encoding="utf-8",
        )

        config = load_client_config(
            env_file=str(env_file),
            base={"HORACE_ACCESS_TOKEN": "from-base"},
            overrides={"HORACE_TIMEOUT_SECONDS": "9"},
        )

        assert config.access_token == "from-base"
        assert config.base_url == "https://file.example/api/"
        assert config.timeout_seconds == 9.0

    def test_missing_env_file_is_ignored(self, tmp_path):
        config = load_client_config(
            env_file=str(tmp_path / "absent.env"),
            base={"HORACE_ACCESS_TOKEN": "tok"},
        )

        assert config.access_token == "tok"

    def test_empty_base_does_not_fall_back_to_os_environ(self, monkeypatch):
        monkeypatch.setenv("HORACE_ACCESS_TOKEN", "process-token")

        with pytest.raises(ConfigError):
            load_client_config(env_file=None, base={})

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("HORACE_ACCESS_TOKEN", "process-token")

        assert load_client_config(env_file=None).access_token == "process-token"


class TestAccessTokenIsKeptVerbatim:
    @pytest.mark.parametrize("token", [" tok ", "tok\n", "\ttok"])
    def test_surrounding_whitespace_is_preserved(self, token):
        assert ClientConfig.create(access_token=token).access_token == token

    def test_client_sends_token_unchanged(self, session, respond):
        from horace_payments import HoraceClient

        respond({"response": {"msg": "ok"}})

        HoraceClient(" tok ", session=session).call("merchant.get")

        assert session.post.call_args.kwargs["json"] == {"access_token": " tok "}
