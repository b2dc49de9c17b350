"""Environment-driven configuration for the DocBase MCP server."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

TOKEN_VARIABLE = "DOCBASE_TOKEN"
DOMAIN_VARIABLE = "DOCBASE_DOMAIN"


class ConfigurationError(ValueError):
    """Raised when required configuration is missing."""


@dataclass(frozen=True, slots=True)
class Settings:
    token: str
    domain: str
    log_level: str = "INFO"


def _require(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name, "")
    if not value.strip():
        raise ConfigurationError(f"{name} environment variable is not set")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Load configuration from environment variables.

    When *environ* is omitted, a ``.env`` file in the working directory is
    loaded first; variables already present in the process environment win.
    """

    if environ is None:
        load_dotenv()
        environ = os.environ

    token = _require(environ, TOKEN_VARIABLE)
    domain = _require(environ, DOMAIN_VARIABLE)
    log_level = environ.get("LOG_LEVEL", "info").upper()

    return Settings(token=token, domain=domain, log_level=log_level)


def configure_logging(level: str) -> None:
    # stdout carries the MCP stream, basicConfig writes to stderr
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO))
