"""
Tests for the command line interface.
"""

import json

import pytest

from relay_module_formatter import __version__
from relay_module_formatter.cli.__main__ import main

RECORD = {
  "moduleName": "AppQuery.graphql",
  "documentType": "ConcreteRequest",
  "docText": "query AppQuery { viewer { id } }",
  "concreteText": "{ fragment: require('./AppFragment.graphql.ts') }",
  "typeText": "export type AppQuery = {};",
  "hash": "deadbeef",
  "sourceHash": "abc123",
}


@pytest.fixture
def record_file(tmp_path):
  fpath = tmp_path / "AppQuery.graphql.json"
  fpath.write_text(json.dumps(RECORD), encoding="utf-8")
  return fpath


def test_format_single_file_to_out(tmp_path, record_file):
  outfile = tmp_path / "out" / "AppQuery.graphql.ts"

  code = main(["format", str(record_file), "--out", str(outfile), "--module", "es2015"])

  assert code == 0
  content = outfile.read_text(encoding="utf-8")
  assert content.startswith("/* tslint:disable */\n/* eslint-disable */\n// @ts-nocheck\n/* deadbeef */\n")
  assert 'import { AppFragment } from "./AppFragment.graphql";' in content
  assert "const node: ConcreteRequest = { fragment: AppFragment };" in content


def test_format_single_file_to_stdout(record_file, capsys):
  code = main(["format", str(record_file), "--module", "esnext", "--no-implicit-any"])

  assert code == 0
  out = capsys.readouterr().out
  assert "await import('./AppFragment.graphql')" in out
  assert "} as any;" in out


def test_format_reads_module_from_tsconfig(tmp_path, record_file, capsys):
  (tmp_path / "tsconfig.json").write_text('{"compilerOptions": {"module": "commonjs"}}', encoding="utf-8")

  code = main(["format", str(record_file)])

  assert code == 0
  assert "require('./AppFragment.graphql.ts')" in capsys.readouterr().out


def test_format_directory(tmp_path):
  src = tmp_path / "records"
  (src / "nested").mkdir(parents=True)
  (src / "A.json").write_text(json.dumps(RECORD), encoding="utf-8")
  (src / "nested" / "B.json").write_text(json.dumps({**RECORD, "hash": None}), encoding="utf-8")
  out = tmp_path / "generated"

  code = main(["format", str(src), "--out", str(out), "--module", "es2020"])

  assert code == 0
  assert (out / "A.ts").exists()
  assert (out / "nested" / "B.ts").exists()
  assert "/* deadbeef */" not in (out / "nested" / "B.ts").read_text(encoding="utf-8")


def test_format_directory_requires_out(tmp_path):
  src = tmp_path / "records"
  src.mkdir()

  assert main(["format", str(src)]) == 1


def test_format_invalid_record_fails(tmp_path):
  bad = tmp_path / "bad.json"
  bad.write_text(json.dumps({"moduleName": "x"}), encoding="utf-8")

  assert main(["format", str(bad)]) == 1


def test_format_unknown_module_fails(record_file):
  assert main(["format", str(record_file), "--module", "es1999"]) == 1


def test_format_missing_input(tmp_path):
  assert main(["format", str(tmp_path / "missing.json")]) == 1


def test_rewrite_command(tmp_path, capsys):
  infile = tmp_path / "Legacy.graphql.ts"
  infile.write_text("const a = require('./b.ts');\nconst c = require('./a.ts');\n", encoding="utf-8")

  code = main(["rewrite", str(infile)])

  assert code == 0
  out = capsys.readouterr().out
  assert out.startswith('import { a } from "./a";\nimport { b } from "./b";\nconst a = b;\nconst c = a;\n')


def test_rewrite_command_dynamic_to_file(tmp_path):
  infile = tmp_path / "Legacy.graphql.ts"
  infile.write_text("x(require('./b.ts'));", encoding="utf-8")
  outfile = tmp_path / "New.graphql.ts"

  code = main(["rewrite", str(infile), "--mode", "dynamic", "--out", str(outfile)])

  assert code == 0
  assert outfile.read_text(encoding="utf-8") == "x(await import('./b'));"


def test_rewrite_rejects_unknown_mode(tmp_path):
  infile = tmp_path / "x.ts"
  infile.write_text("", encoding="utf-8")

  with pytest.raises(SystemExit):
    main(["rewrite", str(infile), "--mode", "lazy"])


def test_version(capsys):
  with pytest.raises(SystemExit):
    main(["--version"])

  assert __version__ in capsys.readouterr().out


def test_format_single_file_into_existing_directory(tmp_path, record_file):
  out_dir = tmp_path / "generated"
  out_dir.mkdir()

  code = main(["format", str(record_file), "--out", str(out_dir), "--module", "es2015"])

  assert code == 0
  written = out_dir / "AppQuery.graphql.ts"
  assert written.is_file()
  assert 'import { AppFragment } from "./AppFragment.graphql";' in written.read_text(encoding="utf-8")


def test_format_unwritable_destination_fails(tmp_path, record_file):
  blocker = tmp_path / "blocker.txt"
  blocker.write_text("", encoding="utf-8")

  code = main(["format", str(record_file), "--out", str(blocker / "AppQuery.graphql.ts")])

  assert code == 1


def test_rewrite_undecodable_input_fails(tmp_path):
  infile = tmp_path / "Binary.graphql.ts"
  infile.write_bytes(b"\xff\xfe\xfa require('./a.ts')")

  assert main(["rewrite", str(infile)]) == 1


def test_rewrite_unwritable_destination_fails(tmp_path):
  infile = tmp_path / "Legacy.graphql.ts"
  infile.write_text("x(require('./b.ts'));", encoding="utf-8")
  blocker = tmp_path / "blocker.txt"
  blocker.write_text("", encoding="utf-8")

  assert main(["rewrite", str(infile), "--out", str(blocker / "New.graphql.ts")]) == 1
