"""Tests for the bundled documentation."""

import rampart


def test_docs_are_loaded():
    assert set(rampart.docs) == {"readme", "api"}
    assert rampart.docs["readme"].startswith("# rampart")
    assert "relate(x, y)" in rampart.docs["api"]


def test_public_api_is_exported():
    for name in rampart.__all__:
        assert hasattr(rampart, name)
