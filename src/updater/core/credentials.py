"""Credential resolution from environment variables with prompt fallback."""

import logging
import os
from enum import Enum

import click
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_USER_ENV = "MY_APP_USER"
DEFAULT_PASSWORD_ENV = "MY_APP_PASSWORD"


class CredentialSource(str, Enum):
    ENV = "env"
    PROMPT = "prompt"


class Credential(BaseModel):
    user: str
    password: str = Field(repr=False)
    user_source: CredentialSource
    password_source: CredentialSource


def _lookup(name: str, prompt: str, hide_input: bool) -> tuple[str, CredentialSource]:
    value = os.environ.get(name)
    if value is not None:
        return value, CredentialSource.ENV

    # An empty answer is accepted and becomes an empty credential
    answer = click.prompt(
        prompt,
        default="",
        show_default=False,
        hide_input=hide_input,
        err=True,
    )
    return answer, CredentialSource.PROMPT


def resolve_credential(
    user_env: str = DEFAULT_USER_ENV,
    password_env: str = DEFAULT_PASSWORD_ENV,
    *,
    load_env: bool = True,
) -> Credential:
    """Resolve the user and password used by the pipeline.

    Environment variables win (a `.env` file in the working directory is
    loaded first without overriding variables already set). Anything still
    missing is asked for interactively, the password with hidden input.
    """
    if load_env:
        load_dotenv(find_dotenv(usecwd=True), override=False)

    user, user_source = _lookup(user_env, "Please enter the username", False)
    password, password_source = _lookup(
        password_env, "Please enter the password", True
    )

    logger.debug(
        "Resolved credentials (user from %s, password from %s)",
        user_source.value,
        password_source.value,
    )
    return Credential(
        user=user,
        password=password,
        user_source=user_source,
        password_source=password_source,
    )
