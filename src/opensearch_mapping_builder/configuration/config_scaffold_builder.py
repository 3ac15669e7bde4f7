"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "mapping.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generation configuration for opensearch-mapping-builder.
# Replace the <REQUIRED> placeholder before running generate-index or generate-mapping.

# Import path of the dataclass describing one indexed document.
# Modules next to this file import without setting PYTHONPATH.
record: "<REQUIRED>"  # e.g. "myapp.documents:Product"

compiler:
  # Nesting levels of records to map; the record itself is level 1.
  max_depth: 2
  # Skip fields whose type cannot be mapped instead of failing.
  omit_unsupported_types: false

index:
  # Reject documents containing fields missing from the mapping.
  strict_mapping: false
  # Index settings, sent verbatim. Remove the section to omit settings.
  settings:
    number_of_shards: 1
    number_of_replicas: 1
    # refresh_interval: "1s"
    # default_pipeline: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generation configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder generation configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
