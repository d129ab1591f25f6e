"""
Test data generators for parsing benchmarks.

Creates documents that every compared library accepts:
- Different sizes (small/large)
- Different shapes (flat/nested/mixed arrays)
- String-heavy content with escape sequences

``commented_config`` additionally uses comments and trailing commas and is
only meaningful for loosejson.
"""

import json
import random
import string
from typing import Any

_INT_TYPE = 1
_FLOAT_TYPE = 2
_STRING_TYPE = 3
_BOOL_TYPE = 4
_NULL_TYPE = 5
_ESCAPE_PROBABILITY = 0.3

# Escapes shared by strict JSON and loosejson; \/ is JSON-only
_COMMON_ESCAPES = ['\\"', "\\\\", "\\b", "\\f", "\\n", "\\r", "\\t"]

COMPARABLE_DATA_TYPES = [
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
]


def generate_test_data(data_type: str) -> str:
    """Generates benchmark input of the requested type."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
        "commented_config": _generate_commented_config,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type]()


def _generate_small_object() -> str:
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }
    return json.dumps(data)


def _generate_large_object() -> str:
    """Generates an object over 10KB: a profile with long histories."""
    data = {
        "user_id": random.randint(1000000, 9999999),
        "profile": {
            "first_name": _random_string(10),
            "last_name": _random_string(12),
            "language": random.choice(["en", "es", "fr", "de", "zh"]),
            "notifications": {
                "email": random.choice([True, False]),
                "push": random.choice([True, False]),
            },
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(random.uniform(1.0, 1000.0), 2),
                "currency": random.choice(["USD", "EUR", "GBP", "JPY"]),
                "description": f"Payment for {_random_string(20)}",
                "status": random.choice(["completed", "pending", "failed"]),
            }
            for i in range(50)
        ],
        "activity_log": [
            {
                "action": random.choice(["login", "logout", "purchase"]),
                "ip_address": ".".join(
                    str(random.randint(1, 255)) for _ in range(4)
                ),
                "user_agent": f"Mozilla/5.0 ({_random_string(20)})",
            }
            for _ in range(30)
        ],
    }
    return json.dumps(data)


def _generate_mixed_array() -> str:
    array: list[Any] = []

    for i in range(200):
        choice = random.randint(1, 6)
        if choice == _INT_TYPE:
            array.append(random.randint(-1000, 1000))
        elif choice == _FLOAT_TYPE:
            array.append(round(random.uniform(-100.0, 100.0), 3))
        elif choice == _STRING_TYPE:
            array.append(_random_string(random.randint(5, 30)))
        elif choice == _BOOL_TYPE:
            array.append(random.choice([True, False]))
        elif choice == _NULL_TYPE:
            array.append(None)
        else:
            array.append({"index": i, "value": _random_string(10)})

    return json.dumps(array)


def _generate_nested_structure() -> str:
    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(10)}

        return {
            "level": depth,
            "items": [create_nested_dict(depth - 1) for _ in range(3)],
            "nested": create_nested_dict(depth - 1),
        }

    return json.dumps(create_nested_dict(7))


def _generate_string_heavy() -> str:
    """Builds raw JSON text so escapes reach the parser undecoded."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            if random.random() < _ESCAPE_PROBABILITY:
                chars.append(random.choice(_COMMON_ESCAPES))
            else:
                chars.append(
                    random.choice(string.ascii_letters + string.digits + " ")
                )
        return '"' + "".join(chars) + '"'

    strings = ", ".join(create_escaped_string() for _ in range(100))
    unicode = ", ".join(
        f'"Unicode: \\u{random.randint(0x0020, 0x007E):04x}"'
        for _ in range(50)
    )
    return f'{{"strings": [{strings}], "unicode": [{unicode}]}}'


def _generate_commented_config() -> str:
    lines = ["// generated service configuration", "{"]
    for i in range(100):
        lines.append(f"    // service {i}")
        lines.append(
            f'    "svc_{i}": {{"port": {8000 + i}, "weight": +.{i % 10},'
            f' "tags": ["{_random_string(6)}", "{_random_string(6)}",],}},'
        )
    lines.append("}")
    return "\n".join(lines)


def _random_string(length: int) -> str:
    return "".join(random.choices(string.ascii_letters, k=length))
