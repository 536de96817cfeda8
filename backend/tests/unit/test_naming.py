"""Unit tests for client slugs, humanized names and stored-file naming."""

import pytest

from app.domain.naming import (
    StoredNameGenerator,
    humanize_client_id,
    normalize_filename,
    slugify_client_name,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Acme Co", "acme-co"),
        ("Highway Projects Inc.", "highway-projects-inc"),
        ("  Acme & Sons,  Ltd ", "acme-sons-ltd"),
        ("!!!", ""),
    ],
)
def test_slugify_client_name(name, expected):
    assert slugify_client_name(name) == expected


def test_humanize_client_id():
    assert humanize_client_id("highway-projects") == "Highway Projects"
    assert humanize_client_id("acme") == "Acme"


def test_normalize_filename_collapses_whitespace():
    assert normalize_filename("4650 highway  A1A\trevised.glb") == "4650_highway_A1A_revised.glb"


def test_normalize_filename_drops_directories():
    assert normalize_filename("../../etc/passwd.glb") == "passwd.glb"
    assert normalize_filename("C:\\models\\my bridge.glb") == "my_bridge.glb"


class TestStoredNameGenerator:
    def test_same_millisecond_gets_distinct_tokens(self):
        gen = StoredNameGenerator(clock=lambda: 1_000)
        names = [gen.stored_name("model.glb") for _ in range(3)]
        assert names == ["1000-model.glb", "1001-model.glb", "1002-model.glb"]

    def test_clock_going_backwards_stays_monotonic(self):
        ticks = iter([5_000, 4_000, 6_000])
        gen = StoredNameGenerator(clock=lambda: next(ticks))
        assert [gen.next_token() for _ in range(3)] == [5_000, 5_001, 6_000]

    def test_default_clock_yields_unique_names(self):
        gen = StoredNameGenerator()
        names = {gen.stored_name("same name.glb") for _ in range(200)}
        assert len(names) == 200
