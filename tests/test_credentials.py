"""Tests for credential resolution."""

from unittest.mock import call, patch

import pytest

from updater.core.credentials import CredentialSource, resolve_credential


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so values loaded from .env are undone after each test
    for name in ("MY_APP_USER", "MY_APP_PASSWORD"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_resolves_from_environment(monkeypatch):
    monkeypatch.setenv("MY_APP_USER", "alice")
    monkeypatch.setenv("MY_APP_PASSWORD", "s3cret")

    with patch("updater.core.credentials.click.prompt") as mock_prompt:
        credential = resolve_credential(load_env=False)

    mock_prompt.assert_not_called()
    assert credential.user == "alice"
    assert credential.password == "s3cret"
    assert credential.user_source == CredentialSource.ENV
    assert credential.password_source == CredentialSource.ENV


def test_prompts_when_missing():
    with patch(
        "updater.core.credentials.click.prompt", side_effect=["bob", "hunter2"]
    ) as mock_prompt:
        credential = resolve_credential(load_env=False)

    assert credential.user == "bob"
    assert credential.password == "hunter2"
    assert credential.user_source == CredentialSource.PROMPT
    assert credential.password_source == CredentialSource.PROMPT

    user_call, password_call = mock_prompt.call_args_list
    assert user_call.kwargs["hide_input"] is False
    assert password_call.kwargs["hide_input"] is True


def test_empty_prompt_answer_is_empty_credential():
    with patch("updater.core.credentials.click.prompt", side_effect=["", ""]):
        credential = resolve_credential(load_env=False)

    assert credential.user == ""
    assert credential.password == ""


def test_empty_env_value_is_used(monkeypatch):
    """Test a variable set to an empty string does not trigger a prompt."""
    monkeypatch.setenv("MY_APP_USER", "")
    monkeypatch.setenv("MY_APP_PASSWORD", "pw")

    with patch("updater.core.credentials.click.prompt") as mock_prompt:
        credential = resolve_credential(load_env=False)

    mock_prompt.assert_not_called()
    assert credential.user == ""


def test_custom_variable_names(monkeypatch):
    monkeypatch.setenv("SVC_LOGIN", "carol")

    with patch(
        "updater.core.credentials.click.prompt", return_value="pw"
    ) as mock_prompt:
        credential = resolve_credential("SVC_LOGIN", "SVC_PASS", load_env=False)

    assert credential.user == "carol"
    assert credential.password_source == CredentialSource.PROMPT
    assert mock_prompt.call_args == call(
        "Please enter the password",
        default="",
        show_default=False,
        hide_input=True,
        err=True,
    )


def test_loads_dotenv_file(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("MY_APP_USER=dave\nMY_APP_PASSWORD=pw\n")
    monkeypatch.chdir(tmp_path)

    credential = resolve_credential()

    assert credential.user == "dave"
    assert credential.user_source == CredentialSource.ENV


def test_password_hidden_from_repr():
    with patch("updater.core.credentials.click.prompt", side_effect=["eve", "topsecret"]):
        credential = resolve_credential(load_env=False)

    assert "topsecret" not in repr(credential)
