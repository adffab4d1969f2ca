# tests/test_demo.py
from __future__ import annotations

import json

from haystack_fuzzy import demo


def _run(capsys, argv):
    code = demo.main(argv)
    out = capsys.readouterr()
    return code, out


def test_demo_prints_json_results(capsys):
    code, out = _run(capsys, ["jan", "January", "February", "March"])
    assert code == 0
    assert json.loads(out.out) == ["january"]


def test_demo_flags_map_to_options(capsys):
    code, out = _run(capsys, ["jun", "June", "July", "August", "--limit", "2", "--flexibility", "0"])
    assert code == 0
    assert json.loads(out.out) == ["june"]

    code, out = _run(capsys, ["May", "April", "May", "--case-sensitive"])
    assert json.loads(out.out) == ["May"]


def test_demo_delimited_and_json_source(capsys, tmp_path):
    code, out = _run(capsys, ["sample", "sample_sentence", "--delimiter", "_"])
    assert code == 0
    assert json.loads(out.out) == ["sample"]

    src = tmp_path / "pool.json"
    src.write_text(json.dumps({"name": "Joe", "location": {"city": "NY"}}), encoding="utf-8")
    code, out = _run(capsys, ["joe", "--source", str(src)])
    assert json.loads(out.out) == ["joe"]


def test_demo_options_file_and_missing_file(capsys, tmp_path, monkeypatch):
    conf = tmp_path / "config"
    conf.mkdir()
    (conf / "strict.json").write_text(json.dumps({"flexibility": 0}), encoding="utf-8")
    monkeypatch.setenv("HAYSTACK_CONFIG_DIR", str(conf))

    code, out = _run(capsys, ["jon", "John", "--options", "strict"])
    assert code == 0
    assert json.loads(out.out) == []

    code, out = _run(capsys, ["jon", "John", "--options", "missing"])
    assert code == 1
    assert "Error" in out.err


def test_demo_delimiter_splits_each_candidate():
    args = demo.build_parser().parse_args(["q", "a_b", "c_d", "--delimiter", "_"])
    assert demo._load_source(args) == ["a", "b", "c", "d"]


def test_demo_source_goes_through_config_loader(capsys, tmp_path):
    bad = tmp_path / "broken.json"
    bad.write_text("{not json", encoding="utf-8")
    code, out = _run(capsys, ["joe", "--source", str(bad)])
    assert code == 1
    assert "Invalid JSON" in out.err

    code, out = _run(capsys, ["joe", "--source", str(tmp_path / "missing.json")])
    assert code == 1
    assert "Config file not found" in out.err

    pool = tmp_path / "names.json"
    pool.write_text(json.dumps({"names": ["Joe", "Ann"]}), encoding="utf-8")
    code, out = _run(capsys, ["ann", "--source", str(pool)])
    assert code == 0
    assert json.loads(out.out) == ["joe,ann"]
