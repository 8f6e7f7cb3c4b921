"""Capsule manifests — build a registry from a static TOML file.

Each ``[[capsule]]`` table declares one capsule::

    [[capsule]]
    name = "Home"
    description = "Landing page"
    uri = "/"
    template = "index"

    [[capsule]]
    name = "Contact"
    uri = "/contact"
    template = "contact"
    method = "POST"
    data = { email = "hello@example.com" }

``name``, ``uri`` and ``template`` are required strings; ``description``
defaults to ``""``, ``method`` to ``"GET"`` and ``data`` to ``{}``.
Unknown keys are rejected. URIs are stored in canonical form
(``"/blog/"`` becomes ``"/blog"``).
"""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from capsula.capsule import Capsule, Method
from capsula.dispatch import normalize_path
from capsula.errors import ConfigurationError
from capsula.registry import CapsuleRegistry


class CapsuleEntry(BaseModel):
    """One ``[[capsule]]`` table."""

    name: str
    uri: str
    template: str
    description: str = ""
    method: Method = Method.GET
    data: Any = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("uri")
    @classmethod
    def _canonical_uri(cls, value: str) -> str:
        return normalize_path([part for part in value.split("/") if part])

    def to_capsule(self) -> Capsule:
        return Capsule(
            name=self.name,
            description=self.description,
            uri=self.uri,
            template=self.template,
            method=self.method,
            data=self.data,
        )


class CapsuleManifest(BaseModel):
    """Top level of a manifest file."""

    capsule: list[CapsuleEntry] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


def load_manifest(path: str | Path) -> CapsuleRegistry:
    """Read a TOML manifest and return a registry of its capsules.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid TOML,
            or declares an invalid capsule.
    """
    try:
        with open(path, "rb") as handle:
            raw = tomllib.load(handle)
    except OSError as exc:
        raise ConfigurationError(f"Unable to read manifest {str(path)!r}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in manifest {str(path)!r}: {exc}") from exc

    return parse_manifest(raw)


def parse_manifest(raw: dict[str, Any]) -> CapsuleRegistry:
    """Build a registry from an already-parsed manifest mapping."""
    try:
        manifest = CapsuleManifest.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid manifest: {exc}") from exc
    return CapsuleRegistry.from_capsules(entry.to_capsule() for entry in manifest.capsule)
