from __future__ import annotations

import json

import pytest

from json_to_swift.codegen import (
    Configuration,
    DeclarationKeyword,
    RegistryError,
    get_generator,
    list_supported_languages,
)
from json_to_swift.codegen.registry import get_generator_class, is_language_supported
from json_to_swift.codegen.languages.swift import SwiftGenerator


def test_swift_is_registered() -> None:
    assert list_supported_languages() == ["swift"]
    assert is_language_supported("swift")
    assert is_language_supported("Swift")
    assert not is_language_supported("go")
    assert get_generator_class("SWIFT") is SwiftGenerator


def test_get_generator_accepts_config_forms(tmp_path) -> None:
    snapshot = Configuration(declaration=DeclarationKeyword.MUTABLE)
    assert get_generator("swift", snapshot).config is snapshot

    from_dict = get_generator("swift", {"addDefaultValue": True})
    assert isinstance(from_dict, SwiftGenerator)
    assert from_dict.config.add_default_value

    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"typeUnwrapping": "?"}), encoding="utf-8")
    assert get_generator("swift", str(settings)).config.unwrap_marker == "?"

    assert get_generator().config == Configuration()


def test_get_generator_errors(tmp_path) -> None:
    with pytest.raises(RegistryError, match="No generator registered"):
        get_generator("kotlin")

    with pytest.raises(RegistryError, match="Failed to create swift generator"):
        get_generator("swift", {"declaration": "const"})

    with pytest.raises(RegistryError, match="Failed to create swift generator"):
        get_generator("swift", tmp_path / "missing.json")

    with pytest.raises(RegistryError, match="Invalid config type"):
        get_generator("swift", 42)
