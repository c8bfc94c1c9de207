from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .schema.duplicates import DUPLICATE_POLICIES, DuplicatePolicy

log = logging.getLogger("schemadoc.config")


@dataclass(frozen=True)
class SchemaDocConfig:
    # "ignore" keeps the first schema seen per name, "fail" raises on conflicts
    duplicate_policy: str = "ignore"

    # honour "x-forwarded-proto: https" when computing basePath
    trust_forwarded_proto: bool = True

    docs_path: str = "/swagger.json"

    def duplicate_policy_fn(self) -> DuplicatePolicy:
        return DUPLICATE_POLICIES[self.duplicate_policy]


def _env_str(key: str, default: str) -> str:
    v = (os.getenv(key) or "").strip()
    return v or default


def _env_bool(key: str, default: bool) -> bool:
    v = (os.getenv(key) or "").strip().lower()
    if not v:
        return default
    return v in ("1", "true", "yes")


def load_config() -> SchemaDocConfig:
    policy = _env_str("SCHEMADOC_DUPLICATE_POLICY", "ignore").lower()
    if policy not in DUPLICATE_POLICIES:
        log.warning("unknown SCHEMADOC_DUPLICATE_POLICY=%s, using 'ignore'", policy)
        policy = "ignore"

    docs_path = _env_str("SCHEMADOC_DOCS_PATH", "/swagger.json")
    if not docs_path.startswith("/"):
        docs_path = "/" + docs_path

    return SchemaDocConfig(
        duplicate_policy=policy,
        trust_forwarded_proto=_env_bool("SCHEMADOC_TRUST_FORWARDED_PROTO", True),
        docs_path=docs_path,
    )
