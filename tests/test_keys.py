from __future__ import annotations

from json_to_swift.codegen.core.keys import collect_keys
from json_to_swift.codegen.core.schema import Property


def test_unique_keys(bilbo) -> None:
    keys = bilbo.all_keys()
    # "weight" only appears in the second array element and is not discovered
    assert len(keys) == 6
    assert "weight" not in keys
    assert keys == [
        "name",
        "info",
        "age",
        "attributes",
        "strength",
        "miscellaneous scores",
    ]


def test_keys_deduplicated_across_depths() -> None:
    prop = Property.from_json('{"id": 1, "owner": {"id": 2, "name": "x"}, "name": "y"}')
    assert collect_keys(prop) == ["id", "owner", "name"]


def test_keys_are_stable(bilbo) -> None:
    assert collect_keys(bilbo) == collect_keys(bilbo)


def test_root_key_included_when_set() -> None:
    prop = Property("root", name="root", children={})
    assert collect_keys(prop) == ["root"]
    assert collect_keys(Property("", name="", children={})) == []


def test_empty_child_key_is_collected(indent, make_generator) -> None:
    prop = Property.from_json('{"": 1, "a": 2}')
    assert collect_keys(prop) == ["", "a"]

    generator = make_generator(add_init_and_dictionary=True)
    keys = generator.property_keys(prop, indent)
    assert '    let field = ""\n' in keys
    assert "field = dictionary[Key().field] as? Int" in generator.init_content(prop, indent)
