from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


import pytest

from json_to_swift.codegen import Configuration, LineIndent, Property
from json_to_swift.codegen.languages.swift import SwiftGenerator

BILBO_JSON = (
    '{ "name": "Bilbo", "info": [ { "age": 111 }, { "weight": 25.8 } ], '
    '"attributes": { "strength": 12 }, "miscellaneous scores": [2, 3] }'
)


@pytest.fixture
def bilbo() -> Property:
    prop = Property.from_json(BILBO_JSON)
    assert prop is not None
    return prop


@pytest.fixture
def indent() -> LineIndent:
    return LineIndent(use_tabs=False, width=4)


@pytest.fixture
def generator() -> SwiftGenerator:
    return SwiftGenerator(Configuration())


@pytest.fixture
def make_generator():
    def _make(**options) -> SwiftGenerator:
        return SwiftGenerator(Configuration(**options))

    return _make
