"""Request option dataclass."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any


@dataclass
class RequestOptions:
    method: str = "GET"
    content_type: str = "application/json"
    post_fields: dict[str, Any] = field(default_factory=dict)
    query_params: dict[str, Any] = field(default_factory=dict)
    file: str | Path | None = None

    def __post_init__(self) -> None:
        self.method = self.method.upper()

    @classmethod
    def merge(cls, options: RequestOptions | Mapping[str, Any] | None = None) -> RequestOptions:
        """Merge caller options over the defaults.

        Mappings may only use the dataclass field names; anything else is a TypeError.
        """
        if options is None:
            return cls()
        if isinstance(options, RequestOptions):
            return replace(options)
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise TypeError(f"unknown request option(s): {', '.join(unknown)}")
        return cls(**options)

    def headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": self.content_type,
        }
