"""
Pytest configuration and shared fixtures for loosejson tests.

Provides immutable test data fixtures for the accepted grammar, the inputs
that must still be rejected, and the strict-JSON violations this parser
deliberately tolerates.
"""

from dataclasses import dataclass
from typing import Any

import pytest


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    skip_reason: str = ""


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides documents that must fail even under the lenient grammar.

    Drawn from the json.org JSON_checker suite, keeping the cases that
    comments, optional commas and ignored trailing content do not rescue.
    """
    fail_docs = [
        # https://json.org/JSON_checker/test/fail2.json
        '["Unclosed array"',
        # https://json.org/JSON_checker/test/fail3.json
        '{unquoted_key: "keys must be quoted"}',
        # https://json.org/JSON_checker/test/fail5.json
        '["double extra comma",,]',
        # https://json.org/JSON_checker/test/fail6.json
        '[   , "<-- missing value"]',
        # https://json.org/JSON_checker/test/fail11.json
        '{"Illegal expression": 1 + 2}',
        # https://json.org/JSON_checker/test/fail12.json
        '{"Illegal invocation": alert()}',
        # https://json.org/JSON_checker/test/fail14.json
        '{"Numbers cannot be hex": 0x14}',
        # https://json.org/JSON_checker/test/fail15.json
        '["Illegal backslash escape: \\x15"]',
        # https://json.org/JSON_checker/test/fail16.json
        "[\\naked]",
        # https://json.org/JSON_checker/test/fail19.json
        '{"Missing colon" null}',
        # https://json.org/JSON_checker/test/fail20.json
        '{"Double colon":: null}',
        # https://json.org/JSON_checker/test/fail21.json
        '{"Comma instead of colon", null}',
        # https://json.org/JSON_checker/test/fail22.json
        '["Colon instead of comma": false]',
        # https://json.org/JSON_checker/test/fail23.json
        '["Bad value", truth]',
        # https://json.org/JSON_checker/test/fail24.json
        "['single quote']",
        # https://json.org/JSON_checker/test/fail26.json
        '["tab\\   character\\   in\\  string\\  "]',
        # https://json.org/JSON_checker/test/fail28.json
        '["line\\\nbreak"]',
        # https://json.org/JSON_checker/test/fail29.json
        "[0e]",
        # https://json.org/JSON_checker/test/fail30.json
        "[0e+]",
        # https://json.org/JSON_checker/test/fail31.json
        "[0e+-1]",
        # https://json.org/JSON_checker/test/fail32.json
        '{"Comma instead if closing brace": true,',
        # https://json.org/JSON_checker/test/fail33.json
        '["mismatch"}',
    ]

    return [
        JsonTestCase(
            description=f"checker fail case {idx + 1}",
            input_data=doc,
            should_fail=True,
        )
        for idx, doc in enumerate(fail_docs)
    ]


@pytest.fixture
def lenient_cases() -> list[JsonTestCase]:
    """
    Provides JSON_checker failure documents that this grammar accepts.

    Each entry records the value produced so the leniency stays deliberate.
    """
    return [
        JsonTestCase(
            "fail1.json - scalar payload",
            '"A JSON payload should be an object or array, not a string."',
            False,
            "A JSON payload should be an object or array, not a string.",
        ),
        JsonTestCase(
            "fail4.json - trailing comma in array",
            '["extra comma",]',
            False,
            ["extra comma"],
        ),
        JsonTestCase(
            "fail7.json - content after the value is ignored",
            '["Comma after the close"],',
            False,
            ["Comma after the close"],
        ),
        JsonTestCase(
            "fail8.json - extra close is ignored",
            '["Extra close"]]',
            False,
            ["Extra close"],
        ),
        JsonTestCase(
            "fail9.json - trailing comma in object",
            '{"Extra comma": true,}',
            False,
            {"Extra comma": True},
        ),
        JsonTestCase(
            "fail10.json - value after the close is ignored",
            '{"Extra value after close": true} "misplaced quoted value"',
            False,
            {"Extra value after close": True},
        ),
        JsonTestCase(
            "fail13.json - leading zeroes",
            '{"Numbers cannot have leading zeroes": 013}',
            False,
            {"Numbers cannot have leading zeroes": 13.0},
        ),
        JsonTestCase(
            "fail17.json - \\0 is a NUL escape",
            '["Illegal backslash escape: \\017"]',
            False,
            ["Illegal backslash escape: \x0017"],
        ),
        JsonTestCase(
            "fail18.json - nineteen levels are within the depth limit",
            '[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]',
            False,
            [[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]],
        ),
        JsonTestCase(
            "fail25.json - raw tabs in strings",
            '["\ttab\tcharacter\tin\tstring\t"]',
            False,
            ["\ttab\tcharacter\tin\tstring\t"],
        ),
        JsonTestCase(
            "fail27.json - raw line break in strings",
            '["line\nbreak"]',
            False,
            ["line\nbreak"],
        ),
        JsonTestCase(
            "missing separator between elements",
            "[1 2 3]",
            False,
            [1.0, 2.0, 3.0],
        ),
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides documents that must parse successfully.

    pass1.json is taken without its ``\\/`` escape, which this grammar
    does not define.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & /",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    }
]""",
            should_fail=False,
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
            should_fail=False,
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
            should_fail=False,
        ),
        JsonTestCase(
            description="commented configuration",
            input_data="""// settings
{
    "name": "demo", // trailing note
    "ports": [80, 443,],
    // "disabled": true,
    "ratio": +.5,
}
""",
            should_fail=False,
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic value test cases for fundamental parsing.

    Covers every value type and basic container structures.
    """
    return [
        JsonTestCase("null value", "null", False, None),
        JsonTestCase("true boolean", "true", False, True),
        JsonTestCase("false boolean", "false", False, False),
        JsonTestCase("integer", "42", False, 42.0),
        JsonTestCase("negative integer", "-17", False, -17.0),
        JsonTestCase("explicit plus", "+8", False, 8.0),
        JsonTestCase("float", "3.14", False, 3.14),
        JsonTestCase("leading dot", ".25", False, 0.25),
        JsonTestCase("trailing dot", "5.", False, 5.0),
        JsonTestCase("exponent", "1.5e3", False, 1500.0),
        JsonTestCase("empty string", '""', False, ""),
        JsonTestCase("simple string", '"hello"', False, "hello"),
        JsonTestCase("empty array", "[]", False, []),
        JsonTestCase("empty object", "{}", False, {}),
        JsonTestCase("simple array", "[1, 2, 3]", False, [1, 2, 3]),
        JsonTestCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
        JsonTestCase("lone dot", ".", True),
        JsonTestCase("lone sign", "-", True),
        JsonTestCase("capitalised literal", "True", True),
        JsonTestCase("truncated literal", "nul", True),
        JsonTestCase("misspelt literal", "flase", True),
        JsonTestCase("empty input", "", True),
    ]
