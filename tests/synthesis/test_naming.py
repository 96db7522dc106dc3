"""Tests for name, namespace and module-key derivation."""

from __future__ import annotations

import pytest

from polydts.config import DEFAULT_DEPENDENCY_ROOTS
from polydts.synthesis.naming import derive_module_key, split_identifier, to_identifier_case


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("my-element", "MyElement"),
        ("already-Capped", "AlreadyCapped"),
        ("MyElement", "MyElement"),
        ("paper-input-container", "PaperInputContainer"),
        ("x", "X"),
        ("a--b", "AB"),
        ("-leading", "Leading"),
        ("", ""),
    ],
)
def test_to_identifier_case(raw: str, expected: str) -> None:
    assert to_identifier_case(raw) == expected


def test_to_identifier_case_is_idempotent() -> None:
    for raw in ["my-element", "already-Capped", "iron-a11y-keys"]:
        once = to_identifier_case(raw)
        assert to_identifier_case(once) == once


def test_split_identifier_uses_final_dot_segment() -> None:
    assert split_identifier("Polymer.IronButtonState", None) == ("IronButtonState", "Polymer")
    assert split_identifier("Polymer.Templatizer.Behavior", "x-y") == ("Behavior", "Polymer.Templatizer")


def test_split_identifier_falls_back_to_tag_name() -> None:
    assert split_identifier(None, "my-element") == ("my-element", None)
    assert split_identifier("MyElement", "my-element") == ("MyElement", None)
    assert split_identifier(None, None) == ("", None)


def test_module_key_rewrites_dependency_roots() -> None:
    roots = DEFAULT_DEPENDENCY_ROOTS
    assert derive_module_key("bower_components/paper-input/paper-input.html", None, roots) == (
        "bower:paper-input/paper-input.html"
    )
    assert derive_module_key("node_modules/@polymer/polymer/polymer.js", None, roots) == (
        "npm:@polymer/polymer/polymer.js"
    )
    assert derive_module_key("./bower_components/a/a.html", None, roots) == "bower:a/a.html"


def test_module_key_only_rewrites_leading_segment() -> None:
    roots = DEFAULT_DEPENDENCY_ROOTS
    assert derive_module_key("src/node_modules/a.html", None, roots) == "src/node_modules/a.html"
    assert derive_module_key("bower_components", None, roots) == "bower_components"


def test_module_key_appends_namespace() -> None:
    roots = DEFAULT_DEPENDENCY_ROOTS
    plain = derive_module_key("bower_components/polymer/polymer.html", None, roots)
    namespaced = derive_module_key("bower_components/polymer/polymer.html", "Polymer", roots)

    assert namespaced == "bower:polymer/polymer.html#Polymer"
    assert plain != namespaced


def test_module_keys_stay_distinct_within_and_across_roots() -> None:
    roots = DEFAULT_DEPENDENCY_ROOTS
    keys = {
        derive_module_key(path, None, roots)
        for path in [
            "bower_components/a/x.html",
            "bower_components/b/x.html",
            "node_modules/a/x.html",
            "a/x.html",
        ]
    }
    assert len(keys) == 4


def test_module_key_normalises_backslashes() -> None:
    key = derive_module_key("bower_components\\a\\a.html", None, DEFAULT_DEPENDENCY_ROOTS)
    assert key == "bower:a/a.html"
