"""Recorded package-manager invocation.

When npm runs a lifecycle script it exports the command line that
triggered it. Older releases publish a JSON document under
``npm_config_argv``::

    {"remain": ["confsweep"], "cooked": ["uninstall", "-g", "confsweep"],
     "original": ["uninstall", "-g", "confsweep"]}

Newer releases drop that variable and expose only the subcommand name
under ``npm_command``. Both are read here and reduced to a plain list of
command tokens.
"""

import json
import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

NPM_ARGV_ENV = "npm_config_argv"
NPM_COMMAND_ENV = "npm_command"


class InvocationError(Exception):
    """Raised when the recorded invocation cannot be decoded."""


class RecordedArgv(BaseModel):
    """Decoded ``npm_config_argv`` document.

    Attributes:
        remain: Positional arguments left after option parsing.
        cooked: Arguments after alias expansion.
        original: Arguments exactly as typed by the user.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    remain: list[str] = Field(default_factory=list)
    cooked: list[str] = Field(default_factory=list)
    original: list[str] = Field(default_factory=list)


def parse_recorded_argv(raw: str) -> RecordedArgv:
    """Decode a JSON-encoded ``npm_config_argv`` value.

    Args:
        raw: Raw environment variable value.

    Returns:
        Validated RecordedArgv.

    Raises:
        InvocationError: If the value is not JSON or has the wrong shape.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvocationError(f"{NPM_ARGV_ENV} is not valid JSON: {e}") from e

    try:
        return RecordedArgv.model_validate(data)
    except ValidationError as e:
        raise InvocationError(f"{NPM_ARGV_ENV} has an unexpected shape: {e}") from e


def read_command_tokens(environ: Mapping[str, str] | None = None) -> tuple[str, ...]:
    """Return the command tokens of the invocation that fired the hook.

    ``npm_config_argv`` takes precedence; ``npm_command`` is used as a
    single-token fallback. With neither present the result is empty.

    Args:
        environ: Environment to read. Defaults to ``os.environ``.

    Returns:
        Tuple of command tokens, e.g. ``("uninstall", "-g", "confsweep")``.

    Raises:
        InvocationError: If ``npm_config_argv`` is present but malformed.
    """
    env = os.environ if environ is None else environ

    raw = env.get(NPM_ARGV_ENV)
    if raw:
        argv = parse_recorded_argv(raw)
        logger.debug("Recorded invocation from %s: %s", NPM_ARGV_ENV, argv.original)
        return tuple(argv.original)

    command = env.get(NPM_COMMAND_ENV, "").strip()
    if command:
        logger.debug("Recorded invocation from %s: %s", NPM_COMMAND_ENV, command)
        return (command,)

    logger.debug("No recorded package-manager invocation in environment")
    return ()
