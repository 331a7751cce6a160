"""Resolución del token bearer.

Orden de precedencia:
1) `access_token` explícito en la config (recortado).
2) Variable de entorno nombrada por `token_source_name` (recortada).
3) Si nada de lo anterior: `MissingCredentialError`.
"""

from __future__ import annotations

import os

from core.config import SpotifyToolsConfig
from core.errors import MissingCredentialError


def resolve_access_token(runtime: SpotifyToolsConfig) -> str:
    explicit = (runtime.access_token or "").strip()
    if explicit:
        return explicit

    from_env = (os.environ.get(runtime.token_source_name) or "").strip()
    if from_env:
        return from_env

    raise MissingCredentialError(runtime.token_source_name)


def describe_token_source(runtime: SpotifyToolsConfig) -> str | None:
    """Indica de dónde saldría el token (`config`, nombre de env var) o None."""

    if (runtime.access_token or "").strip():
        return "config"
    if (os.environ.get(runtime.token_source_name) or "").strip():
        return runtime.token_source_name
    return None
