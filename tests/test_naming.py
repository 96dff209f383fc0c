from __future__ import annotations

import pytest

from json_to_swift.codegen import Property
from json_to_swift.codegen.core.naming import (
    NameSanitizer,
    NamingCase,
    split_segments,
    swift_identifier,
    type_name_for,
)


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("miscellaneous scores", "miscellaneousScores"),
        ("first-name", "firstName"),
        ("first.name", "firstName"),
        ("  padded  key ", "paddedKey"),
        ("Name", "name"),
        ("firstName", "firstName"),
        ("user_id", "user_id"),
        ("2fa code", "_2faCode"),
        ("", "field"),
        ("!!!", "field"),
        ('say "hi"', "sayHi"),
        ("URL", "url"),
        ("URLPath", "urlPath"),
        ("ID number", "idNumber"),
        ("userID", "userID"),
        ("café", "café"),
        ("prix (€)", "prix"),
        ("名前", "名前"),
        ("Émile zola", "émileZola"),
    ],
)
def test_swift_identifier(key, expected) -> None:
    assert swift_identifier(key) == expected


def test_reserved_words_get_suffix() -> None:
    assert swift_identifier("default") == "default_"
    assert swift_identifier("class") == "class_"
    assert swift_identifier("dictionary") == "dictionary_"


def test_same_key_same_name() -> None:
    sanitizer = NameSanitizer()
    first = sanitizer.sanitize_name("user name")
    second = sanitizer.sanitize_name("user name")
    assert first == second == "userName"
    # A fresh sanitizer agrees as well: no per-instance collision tracking
    assert NameSanitizer().sanitize_name("user name") == first


def test_pascal_case() -> None:
    sanitizer = NameSanitizer()
    assert sanitizer.sanitize_name("user profile", NamingCase.PASCAL_CASE) == "UserProfile"


def test_split_segments() -> None:
    assert split_segments("a b-c.d") == ["a", "b", "c", "d"]
    assert split_segments("") == []
    assert split_segments("café au-lait") == ["café", "au", "lait"]


def test_type_name_for() -> None:
    assert type_name_for("info") == "InfoType"
    assert type_name_for("miscellaneousScores") == "MiscellaneousScoresType"
    assert type_name_for("user", "Model") == "UserModel"


def test_non_ascii_keys_stay_distinct(indent, generator) -> None:
    prop = Property.from_json('{"café": 1, "名前": "a", "年齢": 2}')
    assert [child.name for child in prop.children.values()] == ["café", "名前", "年齢"]
    assert generator.property_content(prop, indent) == (
        "    let café: Int!\n"
        "    let 名前: String!\n"
        "    let 年齢: Int!\n"
    )


def test_type_names_use_pascal_case() -> None:
    assert type_name_for("urlPath") == "UrlPathType"
    assert type_name_for("_2faCode") == "_2faCodeType"
    assert type_name_for("名前") == "名前Type"
