from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 10001


def _env_flag(raw: str | None, *, default: bool) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() not in ("", "0", "false")


@dataclass(frozen=True)
class SyncConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    # Re-send the whole snapshot after every line read from a config file
    # (wire parity with the runtime's own config panel). False flushes once at EOF.
    flush_per_line: bool = True

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "SyncConfig":
        env = os.environ if environ is None else environ
        return SyncConfig(
            host=env.get("HANDCONFIG_HOST", "").strip() or DEFAULT_HOST,
            port=int(env.get("HANDCONFIG_PORT", "").strip() or DEFAULT_PORT),
            flush_per_line=_env_flag(env.get("HANDCONFIG_FLUSH_PER_LINE"), default=True),
        )
