"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from opensearch_mapping_builder.schema_compilation.schema_compiler import DEFAULT_MAX_DEPTH
from opensearch_mapping_builder.schema_serialization.index_settings import IndexSettings


@dataclass(frozen=True)
class CompilerSettings:
    """Schema compiler behavior."""

    max_depth: int = DEFAULT_MAX_DEPTH
    omit_unsupported_types: bool = False


@dataclass(frozen=True)
class IndexOutputSettings:
    """Index document generation settings."""

    strict_mapping: bool = False
    settings: IndexSettings | None = None


@dataclass(frozen=True)
class GenerationConfig:
    """Top-level configuration aggregate."""

    path: Path
    record: str
    compiler: CompilerSettings = field(default_factory=CompilerSettings)
    index: IndexOutputSettings = field(default_factory=IndexOutputSettings)
