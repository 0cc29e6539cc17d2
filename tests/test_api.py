"""Tests for the public facade helpers."""

from unittest.mock import MagicMock

import pytest

from horace_payments import ClientConfig, HoraceClient, call_remote, create_client


def test_create_client_from_config(session):
    config = ClientConfig.create(access_token="tok", base_url="https://x.test/api/")

    client = create_client(config=config, session=session)

    assert isinstance(client, HoraceClient)
    assert client.config == config
    assert client.session is session


def test_create_client_from_environment(session):
    client = create_client(
        env_file=None,
        base={"HORACE_ACCESS_TOKEN": "env-token"},
        session=session,
    )

    assert client.config.access_token == "env-token"


def test_create_client_rejects_mixed_inputs():
    config = ClientConfig.create(access_token="tok")

    with pytest.raises(ValueError):
        create_client(config=config, access_token="other")


def test_call_remote_uses_resolved_config(session, respond):
    respond({"response": {"msg": "https://hook.example"}})

    result = call_remote(
        "webhooks.get",
        config=ClientConfig.create(access_token="tok", base_url="https://x.test/api"),
        session=session,
    )

    assert result == "https://hook.example"
    args, kwargs = session.post.call_args
    assert args[0] == "https://x.test/api/webhooks.get"
    assert kwargs["json"] == {"access_token": "tok"}


def test_call_remote_closes_the_session_it_creates(session, respond, monkeypatch):
    respond({"response": {"msg": 1}})
    session_factory = MagicMock()
    session_factory.return_value.__enter__.return_value = session
    monkeypatch.setattr("horace_payments.api.requests.Session", session_factory)

    result = call_remote("merchant.get", config=ClientConfig.create(access_token="tok"))

    assert result == 1
    session.post.assert_called_once()
    session_factory.return_value.__exit__.assert_called_once()


def test_call_remote_leaves_caller_session_open(session, respond):
    respond({"response": {"msg": 1}})

    call_remote("merchant.get", config=ClientConfig.create(access_token="tok"), session=session)

    session.close.assert_not_called()
