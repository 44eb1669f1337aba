import pytest

from mexpr.config import get_builtin_groups, list_from_env


def test_default_groups(monkeypatch):
    monkeypatch.delenv("MEXPR_BUILTINS", raising=False)
    assert get_builtin_groups() == ["math"]


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("math", ["math"]),
        (" math , extra ,", ["math", "extra"]),
        ("", []),
        ("none", []),
        ("NONE", []),
    ],
)
def test_groups_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("MEXPR_BUILTINS", raw)
    assert get_builtin_groups() == expected


def test_list_from_env_defaults(monkeypatch):
    monkeypatch.delenv("MEXPR_TEST_LIST", raising=False)
    assert list_from_env("MEXPR_TEST_LIST", ("a", "b")) == ["a", "b"]
