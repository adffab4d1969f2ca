# tests/test_matching_utils.py
"""End-to-end tests for search utils (load_config, stage tracer) and SearchOptions config loading."""

from __future__ import annotations

import io
import json
import logging
import re
from dataclasses import FrozenInstanceError
from importlib import import_module

import pytest

from haystack_fuzzy.matching.options import DEFAULT_OPTIONS, SearchOptions, merge_options
from haystack_fuzzy.matching.utils import log as LOG

# utils/__init__ re-exports the load_config function under the module name
LC = import_module("haystack_fuzzy.matching.utils.load_config")

ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
ConfigValueError = LC.ConfigValueError
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_config_dir(tmp_path, monkeypatch):
    """Provide an isolated config/ dir and point loader via HAYSTACK_CONFIG_DIR."""
    conf = tmp_path / "config"
    conf.mkdir()
    monkeypatch.setenv("HAYSTACK_CONFIG_DIR", str(conf))
    clear_config_cache()
    return conf


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and config cache between tests."""
    monkeypatch.delenv("HAYSTACK_DEBUG_TOPICS", raising=False)
    clear_config_cache()
    LOG.reload_topics()


# ---------- load_config tests ----------
def test_load_config_raw_and_cache_hit(tmp_config_dir):
    p = tmp_config_dir / "months.json"
    p.write_text(json.dumps(["January", "February"]), encoding="utf-8")

    out1 = load_config("months", mode="raw")
    assert out1 == ["January", "February"]
    assert load_config("months.json") is out1

    clear_config_cache()
    p.write_text(json.dumps({"q1": ["March"]}), encoding="utf-8")
    assert load_config("months") == {"q1": ["March"]}


def test_load_config_validated_dict_and_errors(tmp_config_dir):
    conf = tmp_config_dir / "settings.json"
    conf.write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d["beta"] = "ok"
        return d

    out = load_config("settings", mode="validated_dict", validator=validator)
    assert out == {"alpha": 1, "beta": "ok"}
    # cached data is not modified by the validator
    assert load_config("settings", mode="validated_dict") == {"alpha": 1}

    (tmp_config_dir / "oops.json").write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("oops", mode="validated_dict")

    with pytest.raises(ValueError):
        load_config("settings", mode="set")  # type: ignore[arg-type]

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist", mode="raw")


def test_load_config_parse_and_validator_errors(tmp_config_dir):
    (tmp_config_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")

    (tmp_config_dir / "ok.json").write_text("{}", encoding="utf-8")

    def boom(d: dict) -> dict:
        raise RuntimeError("nope")

    with pytest.raises(ConfigParseError):
        load_config("ok", mode="validated_dict", validator=boom)


def test_load_config_refuses_escape_from_config_dir(tmp_config_dir):
    outside = tmp_config_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret", mode="raw")


def test_load_config_explicit_base_dir_and_discovery(tmp_path, monkeypatch):
    monkeypatch.delenv("HAYSTACK_CONFIG_DIR", raising=False)
    conf = tmp_path / "config"
    conf.mkdir()
    (conf / "a.json").write_text("[1]", encoding="utf-8")
    nested = tmp_path / "deep" / "er"
    nested.mkdir(parents=True)

    assert load_config("a", base_dir=conf) == [1]
    monkeypatch.chdir(nested)
    assert load_config("a") == [1]


# ---------- stage tracer tests ----------
def test_trace_stage_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("HAYSTACK_DEBUG_TOPICS", "match")
    LOG.reload_topics()

    LOG.trace_stage("match", hits=["june"])
    LOG.trace_stage("rank", results=["june"])

    err = capsys.readouterr().err
    assert "[match] hits=['june']" in err
    assert "[rank]" not in err
    assert LOG.stage_enabled("match") and not LOG.stage_enabled("normalize")


def test_trace_stage_all_and_unset_enable_every_stage(monkeypatch):
    monkeypatch.setenv("HAYSTACK_DEBUG_TOPICS", "all")
    LOG.reload_topics()
    assert all(LOG.stage_enabled(s) for s in LOG.STAGES)

    monkeypatch.delenv("HAYSTACK_DEBUG_TOPICS")
    LOG.reload_topics()
    assert all(LOG.stage_enabled(s) for s in LOG.STAGES)


def test_trace_stage_unknown_names(monkeypatch, caplog):
    monkeypatch.setenv("HAYSTACK_DEBUG_TOPICS", "rank, bogus")
    with caplog.at_level(logging.WARNING, logger="haystack_fuzzy.matching.utils.log"):
        LOG.reload_topics()
    assert "bogus" in caplog.text
    assert LOG.stage_enabled("rank") and not LOG.stage_enabled("source")

    with pytest.raises(ValueError):
        LOG.trace_stage("extraction", msg="x")


def test_trace_stage_truncates_long_lists():
    buf = io.StringIO()
    LOG.trace_stage("source", stream=buf, leaves=list(range(LOG.MAX_ITEMS + 3)))
    assert buf.getvalue().rstrip().endswith(", 9, …(+3)]")


# ---------- SearchOptions ----------
def test_options_defaults_and_frozen():
    opts = SearchOptions()
    assert opts == DEFAULT_OPTIONS
    assert opts.case_sensitive is False
    assert opts.flexibility == 2
    assert opts.exclusions == ()
    assert opts.ignore_stop_words is False
    assert opts.stemming is False
    with pytest.raises(FrozenInstanceError):
        opts.flexibility = 5  # type: ignore[misc]


def test_merge_options_camel_snake_and_none():
    pattern = re.compile(r"\d+")
    opts = merge_options(
        {
            "caseSensitive": True,
            "ignore_stop_words": True,
            "exclusions": ["foo", pattern],
            "stemming": None,
            "unknown": "ignored",
        }
    )
    assert opts.case_sensitive is True
    assert opts.ignore_stop_words is True
    assert opts.exclusions == ("foo", pattern)
    assert opts.stemming is False


def test_merge_options_is_pure():
    base = SearchOptions(flexibility=1)
    merged = merge_options({"flexibility": 4}, base=base)
    assert base.flexibility == 1
    assert merged.flexibility == 4
    assert merge_options(None) is merge_options({})


@pytest.mark.parametrize(
    "overrides,exc",
    [
        ({"flexibility": -1}, ConfigValueError),
        ({"flexibility": "2"}, ConfigTypeError),
        ({"flexibility": True}, ConfigTypeError),
        ({"caseSensitive": "yes"}, ConfigTypeError),
        ({"exclusions": [1]}, ConfigTypeError),
        ({"exclusions": 5}, ConfigTypeError),
    ],
)
def test_merge_options_validates(overrides, exc):
    with pytest.raises(exc):
        merge_options(overrides)


def test_single_exclusion_string_is_wrapped():
    assert SearchOptions(exclusions="foo").exclusions == ("foo",)  # type: ignore[arg-type]


def test_options_from_file(tmp_config_dir):
    (tmp_config_dir / "search.json").write_text(
        json.dumps({"caseSensitive": True, "flexibility": 0, "exclusions": ["please"]}),
        encoding="utf-8",
    )
    opts = SearchOptions.from_file("search")
    assert opts == SearchOptions(case_sensitive=True, flexibility=0, exclusions=("please",))

    (tmp_config_dir / "bad.json").write_text(json.dumps({"flexibility": -3}), encoding="utf-8")
    with pytest.raises(ConfigValueError):
        SearchOptions.from_file("bad")
