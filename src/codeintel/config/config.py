"""Configuration management."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from codeintel.assignment.shard_router import ShardRouter
from codeintel.exceptions import InvalidArgument


class CodeIntelConfig(BaseModel):
    """Main config loader - supports YAML and ENV."""

    shard_addrs: List[str] = Field(
        default_factory=list,
        description="Ordered list of backend shard addresses",
        examples=[["gitserver-0:3178", "gitserver-1:3178"]],
    )
    max_traversal_distance: int = Field(
        150,
        ge=0,
        description="Maximum number of commit edges walked when resolving the nearest indexed commit",
    )
    log_level: str = Field("INFO", description="Log level name")
    json_logs: bool = Field(False, description="Render logs as JSON instead of console output")

    @classmethod
    def from_env(cls) -> "CodeIntelConfig":
        addrs_raw = os.getenv("CODEINTEL_SHARD_ADDRS", "")
        addrs = [addr.strip() for addr in addrs_raw.split(",") if addr.strip()]

        try:
            return cls(
                shard_addrs=addrs,
                max_traversal_distance=int(
                    os.getenv("CODEINTEL_MAX_TRAVERSAL_DISTANCE", "150")
                ),
                log_level=os.getenv("LOG_LEVEL", "INFO"),
                json_logs=os.getenv("CODEINTEL_JSON_LOGS", "false").lower() == "true",
            )
        except (ValueError, ValidationError) as exc:
            raise InvalidArgument(f"invalid configuration: {exc}") from exc

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "CodeIntelConfig":
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        if not isinstance(data, dict):
            raise InvalidArgument(f"{path}: expected a mapping at top level")

        try:
            return cls(**data)
        except ValidationError as exc:
            raise InvalidArgument(f"invalid configuration in {path}: {exc}") from exc

    def build_router(self) -> ShardRouter:
        if not self.shard_addrs:
            raise InvalidArgument("no shard addresses configured (CODEINTEL_SHARD_ADDRS)")
        return ShardRouter(self.shard_addrs)


__all__ = ["CodeIntelConfig"]
