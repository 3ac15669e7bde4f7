"""CLI orchestration integration tests."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner
from opensearch_mapping_builder.cli import cli, main

_RECORDS_MODULE = "cli_records"
_RECORDS_SOURCE = '''
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from opensearch_mapping_builder import TimeBasicDate


@dataclass
class Location:
    full_address: str = ""
    confirmed: bool = False


@dataclass
class Listing:
    id: int = 0
    price: float = 0.0
    title: str = field(default="", metadata={"opensearch": "type:text,analyzer:english"})
    listed_on: TimeBasicDate | None = None
    location: Location = field(default_factory=Location)


@dataclass
class Broken:
    created: datetime | None = None
'''


@pytest.fixture(name="records_path")
def _records_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / f"{_RECORDS_MODULE}.py").write_text(_RECORDS_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, _RECORDS_MODULE, raising=False)
    return tmp_path


def _write_config(directory: Path, record: str = "Listing", extra: str = "") -> Path:
    path = directory / "mapping.yaml"
    path.write_text(f'record: "{_RECORDS_MODULE}:{record}"\n{extra}', encoding="utf-8")
    return path


def test_generate_index_command_prints_document(records_path: Path) -> None:
    config_path = _write_config(
        records_path, extra="index:\n  settings:\n    number_of_shards: 1\n"
    )

    result = CliRunner().invoke(cli, ["generate-index", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    document = json.loads(result.output)
    assert document == {
        "mappings": {
            "properties": {
                "id": {"type": "integer"},
                "listed_on": {"format": "basic_date", "type": "date"},
                "location": {
                    "properties": {
                        "confirmed": {"type": "boolean"},
                        "full_address": {"type": "text"},
                    }
                },
                "price": {"type": "float"},
                "title": {"analyzer": "english", "type": "text"},
            }
        },
        "settings": {"number_of_shards": 1},
    }


def test_generate_index_strict_flag_overrides_configuration(records_path: Path) -> None:
    config_path = _write_config(records_path, extra="index:\n  strict_mapping: false\n")
    output_path = records_path / "out" / "index.json"

    result = CliRunner().invoke(
        cli,
        ["generate-index", "--config", str(config_path), "--output", str(output_path), "--strict"],
    )

    assert result.exit_code == 0, result.output
    assert result.output.strip() == str(output_path.resolve())
    document = json.loads(output_path.read_text(encoding="utf-8"))
    assert document["mappings"]["dynamic"] == "strict"


def test_generate_mapping_command_respects_max_depth(records_path: Path) -> None:
    config_path = _write_config(records_path, extra="compiler:\n  max_depth: 1\n")

    result = CliRunner().invoke(cli, ["generate-mapping", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    document = json.loads(result.output)
    assert set(document) == {"properties"}
    assert "location" not in document["properties"]


def test_compilation_errors_are_reported_without_traceback(records_path: Path, capsys) -> None:
    config_path = _write_config(records_path, record="Broken")

    exit_code = main(["generate-index", "--config", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "created" in captured.err
    assert "Traceback" not in captured.err


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    output_path = tmp_path / "mapping.yaml"

    result = CliRunner().invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert output_path.exists()
    assert "record:" in output_path.read_text(encoding="utf-8")


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "mapping.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(output_path)])

    assert exit_code == 1
    assert "already exists" in capsys.readouterr().err


def test_record_module_next_to_configuration_imports_without_pythonpath(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "sibling_records.py").write_text(_RECORDS_SOURCE, encoding="utf-8")
    monkeypatch.setattr(sys, "path", list(sys.path))
    monkeypatch.delitem(sys.modules, "sibling_records", raising=False)
    config_path = tmp_path / "mapping.yaml"
    config_path.write_text('record: "sibling_records:Location"\n', encoding="utf-8")

    result = CliRunner().invoke(cli, ["generate-mapping", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "properties": {"confirmed": {"type": "boolean"}, "full_address": {"type": "text"}}
    }
