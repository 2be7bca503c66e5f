"""Tests for the command line entry point."""

import json
from pathlib import Path

import pytest
import yaml

from doxyview.cli import main


def write_dumps(input_dir: Path) -> None:
    """Write a namespace and a class as two dump files."""
    input_dir.mkdir()
    (input_dir / "namespacens.yml").write_text(
        yaml.dump(
            {
                "id": "namespacens",
                "kind": "namespace",
                "compound_name": "ns",
                "inner_classes": ["classns_1_1foo"],
            }
        )
    )
    (input_dir / "classns_1_1foo.yml").write_text(
        yaml.dump({"id": "classns_1_1foo", "kind": "class", "compound_name": "ns::Foo"})
    )
    (input_dir / "notes.txt").write_text("not a dump")


def test_main_writes_report(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Verify a full run writes the report and prints a summary."""
    input_dir = tmp_path / "xml"
    write_dumps(input_dir)
    out = tmp_path / "view_model.json"

    assert main([str(input_dir), "--out", str(out)]) == 0

    content = json.loads(out.read_text(encoding="utf-8"))
    assert content["permalinks"] == {
        "namespacens": "namespaces/ns",
        "classns_1_1foo": "classes/ns/foo",
    }
    assert "Resolved 2 compounds" in capsys.readouterr().out


def test_main_with_config(tmp_path: Path) -> None:
    """Verify the config file reaches the workspace."""
    input_dir = tmp_path / "xml"
    write_dumps(input_dir)
    config = tmp_path / "config.yml"
    config.write_text(yaml.dump({"page_base_url": "/api/"}))
    out = tmp_path / "view_model.json"

    main([str(input_dir), "--out", str(out), "--config", str(config)])

    content = json.loads(out.read_text(encoding="utf-8"))
    assert content["permalinks"]["namespacens"] == "/api/namespaces/ns"


def test_main_without_dumps_exits(tmp_path: Path) -> None:
    """Verify an input directory without dumps is an error."""
    with pytest.raises(SystemExit):
        main([str(tmp_path)])
