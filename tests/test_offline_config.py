import logging

import pytest

from appcache.config import OfflineConfig, OfflineConfigBuilder


def test_declaration_block_populates_all_sections():
    def declare(m):
        m.cache("index.html", "style.css")
        m.network("/api")
        m.fallback({"/offline.html": "/offline.html"})

    config = OfflineConfig("/app", declare)

    assert config.root == "/app"
    assert config.cache_entries == ["index.html", "style.css"]
    assert config.network_entries == ["/api"]
    assert config.fallback_entries == {"/offline.html": "/offline.html"}
    assert config.settings_entries == []


def test_no_block_yields_empty_sections():
    config = OfflineConfig("/root")

    assert config.root == "/root"
    assert config.cache_entries == []
    assert config.network_entries == []
    assert config.fallback_entries == {}
    assert config.settings_entries == []


def test_block_runs_once_before_constructor_returns():
    calls = []

    def declare(m):
        calls.append(m)

    OfflineConfig("/app", declare)

    assert len(calls) == 1
    assert isinstance(calls[0], OfflineConfigBuilder)


@pytest.mark.parametrize("section", ["cache", "network", "settings"])
def test_sequence_sections_concatenate_calls_in_order(section):
    config = OfflineConfig("/app")
    register = getattr(config, section)

    register("a", "b")
    register()
    register("c", "a")

    entries = getattr(config, f"{section}_entries")
    assert entries == ["a", "b", "c", "a"]


def test_duplicates_are_retained():
    config = OfflineConfig("/app")
    config.cache("x")
    config.cache("x")

    assert config.cache_entries == ["x", "x"]


def test_fallback_later_value_wins_and_first_seen_order_is_kept():
    config = OfflineConfig("/app")
    config.fallback({"a": "1", "c": "9"})
    config.fallback({"a": "2", "b": "3"})

    assert config.fallback_entries == {"a": "2", "c": "9", "b": "3"}
    assert list(config.fallback_entries) == ["a", "c", "b"]


def test_fallback_without_argument_is_a_no_op():
    config = OfflineConfig("/app")
    config.fallback({"a": "1"})
    config.fallback()
    config.fallback({})

    assert config.fallback_entries == {"a": "1"}


def test_empty_registrations_leave_everything_unchanged():
    config = OfflineConfig("/app", lambda m: m.cache("x").network("y").fallback({"k": "v"}).settings("s"))
    before = config.snapshot()

    config.cache()
    config.network()
    config.settings()
    config.fallback()

    assert config.snapshot() == before


def test_root_cannot_be_rebound_from_block():
    def declare(m):
        m.root = "/elsewhere"

    with pytest.raises(AttributeError):
        OfflineConfig("/app", declare)


def test_block_cannot_reach_accumulator_state():
    def declare(m):
        m._cache = ["sneaky"]

    with pytest.raises(AttributeError):
        OfflineConfig("/app", declare)


def test_builder_exposes_root_read_only():
    seen = []
    OfflineConfig("/app", lambda m: seen.append(m.root))

    assert seen == ["/app"]


def test_root_is_unchanged_by_registrations():
    config = OfflineConfig("/app")
    config.cache("a").network("b").fallback({"c": "d"}).settings("e")

    assert config.root == "/app"

    with pytest.raises(AttributeError):
        config.root = "/other"  # type: ignore[misc]


def test_registration_methods_chain():
    config = OfflineConfig("/app")
    returned = config.cache("a").network("b").settings("c")

    assert returned is config
    assert config.cache_entries == ["a"]
    assert config.network_entries == ["b"]
    assert config.settings_entries == ["c"]


def test_inputs_are_accepted_without_validation():
    config = OfflineConfig(None, lambda m: m.cache(1, None).fallback({2: 3}))

    assert config.root is None
    assert config.cache_entries == [1, None]
    assert config.fallback_entries == {2: 3}


def test_reads_do_not_clear_state():
    config = OfflineConfig("/app", lambda m: m.cache("a"))

    assert config.cache_entries == ["a"]
    assert config.cache_entries == ["a"]


def test_snapshot_is_detached_from_later_registrations():
    config = OfflineConfig("/app", lambda m: m.cache("a").fallback({"k": "v"}))
    snap = config.snapshot()

    config.cache("b")
    config.fallback({"k": "w"})

    assert snap.root == "/app"
    assert snap.cache == ("a",)
    assert snap.fallback == {"k": "v"}


def test_exception_in_block_propagates():
    def declare(m):
        m.cache("a")
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        OfflineConfig("/app", declare)


def test_fallback_accepts_iterable_of_pairs(caplog):
    config = OfflineConfig("/app")

    with caplog.at_level(logging.DEBUG, logger="appcache"):
        config.fallback(iter([("a", "1"), ("b", "2")]))

    assert config.fallback_entries == {"a": "1", "b": "2"}
    assert any("'a': '1'" in r.getMessage() for r in caplog.records)


def test_snapshot_sequences_cannot_be_mutated():
    config = OfflineConfig("/app", lambda m: m.cache("a").network("b").settings("c"))
    snap = config.snapshot()

    with pytest.raises(AttributeError):
        snap.cache.append("x")  # type: ignore[attr-defined]

    snap.fallback["k"] = "v"

    assert config.fallback_entries == {}
    assert snap.network == ("b",)
    assert snap.settings == ("c",)
