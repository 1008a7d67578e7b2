"""End-to-end tests: RIS file to validated JSONL and audit log."""

import json
from pathlib import Path

import jsonschema
import pytest
from click.testing import CliRunner

from risparse import Citation, parse_file, parse_records_file, write_jsonl
from risparse.audit import AuditLogger, generate_run_id
from risparse.cli.main import cli

_ROOT = Path(__file__).parent.parent.parent
_SCHEMAS_DIR = _ROOT / "schemas"
_FIXTURES_DIR = _ROOT / "tests" / "fixtures" / "synthetic"


def _load_schema(name: str) -> dict:
    with (_SCHEMAS_DIR / name).open() as f:
        return json.load(f)


@pytest.mark.integration
def test_library_to_jsonl_with_audit(tmp_path: Path) -> None:
    """Parse a library, export it and check both outputs against schemas."""
    output = tmp_path / "library.jsonl"
    log_path = tmp_path / "events.jsonl"

    with AuditLogger(generate_run_id(), log_path) as logger:
        citations, errors = parse_records_file(_FIXTURES_DIR / "library.ris", logger=logger)
        write_jsonl(citations, output)

    assert errors == []

    citation_schema = _load_schema("citation.schema.json")
    rows = [json.loads(line) for line in output.read_text(encoding="utf-8").splitlines()]
    for row in rows:
        jsonschema.validate(instance=row, schema=citation_schema)
    assert [Citation.from_dict(row) for row in rows] == citations

    event_schema = _load_schema("log_event.schema.json")
    events = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    for event in events:
        jsonschema.validate(instance=event, schema=event_schema)
    assert {e["source"] for e in events} == {"library.ris"}


@pytest.mark.integration
def test_cli_parse_round_trip(tmp_path: Path) -> None:
    """CLI output for the sample file rebuilds the same citation as the API."""
    runner = CliRunner()
    output = tmp_path / "sample.jsonl"

    result = runner.invoke(cli, ["parse", str(_FIXTURES_DIR / "sample.ris"), "-o", str(output)])

    assert result.exit_code == 0
    row = json.loads(output.read_text(encoding="utf-8"))
    assert Citation.from_dict(row) == parse_file(_FIXTURES_DIR / "sample.ris")
