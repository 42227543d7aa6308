# src/crdpmap/services/settings.py
from __future__ import annotations
from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values

from crdpmap.config import const


def _read_env_file(path: Optional[str]) -> Dict[str, str]:
    if not path or not Path(path).exists():
        return {}
    return {k: v for k, v in dotenv_values(path).items() if v is not None}


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class Settings:
    schema_path: Path = Path(const.DEFAULT_SCHEMA_PATH)
    output_path: Path = Path(const.DEFAULT_OUTPUT_PATH)
    root_name: str = const.ROOT_CLIENT_NAME
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    strict_duplicates: bool = False

    @staticmethod
    def from_sources(env_file: Optional[str] = ".env") -> "Settings":
        env_file_vars = _read_env_file(env_file)

        def pick_env(key: str, default: Optional[str] = None) -> str:
            # процесс важнее .env
            return os.environ.get(key) or env_file_vars.get(key) or (default or "")

        log_file = pick_env("CRDPMAP_LOG_FILE")
        return Settings(
            schema_path=Path(pick_env("CRDPMAP_SCHEMA", const.DEFAULT_SCHEMA_PATH)).expanduser(),
            output_path=Path(pick_env("CRDPMAP_OUTPUT", const.DEFAULT_OUTPUT_PATH)).expanduser(),
            root_name=pick_env("CRDPMAP_ROOT", const.ROOT_CLIENT_NAME),
            log_level=pick_env("CRDPMAP_LOG_LEVEL", "INFO").upper(),
            log_file=Path(log_file).expanduser() if log_file else None,
            strict_duplicates=_as_bool(pick_env("CRDPMAP_STRICT_DUPLICATES", "0")),
        )

    def with_overrides(self, **kw) -> "Settings":
        # None means "not given on the command line"
        allowed = {"schema_path", "output_path", "log_level"}
        safe = {k: v for k, v in kw.items() if k in allowed and v is not None}
        if "schema_path" in safe:
            safe["schema_path"] = Path(safe["schema_path"])
        if "output_path" in safe:
            safe["output_path"] = Path(safe["output_path"])
        if "log_level" in safe:
            safe["log_level"] = str(safe["log_level"]).upper()
        return replace(self, **safe)
