"""
Test data generators for rendering benchmarks.

Creates plain Python structures of different shapes:
- Different sizes (small/large)
- Different complexity levels (flat/nested/mixed)
- String-heavy content that needs escaping
"""

import random
import string
from typing import Any

# Constants for random data generation
_INT_TYPE = 1
_FLOAT_TYPE = 2
_STRING_TYPE = 3
_BOOL_TYPE = 4
_NULL_TYPE = 5
_ESCAPE_PROBABILITY = 0.3


def generate_test_data(data_type: str) -> dict[str, Any]:
    """Generates benchmark data based on specified type."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    random.seed(data_type)
    return generators[data_type]()


def _random_string(length: int) -> str:
    return "".join(random.choices(string.ascii_letters, k=length))


def _random_scalar(i: int) -> Any:
    choice = random.randint(1, 5)
    if choice == _INT_TYPE:
        return random.randint(-1000, 1000)
    elif choice == _FLOAT_TYPE:
        return round(random.uniform(-100.0, 100.0), 3)
    elif choice == _STRING_TYPE:
        return _random_string(random.randint(5, 30))
    elif choice == _BOOL_TYPE:
        return random.choice([True, False])
    elif choice == _NULL_TYPE:
        return None
    return i


def _generate_small_object() -> dict[str, Any]:
    """Generates a small object with a handful of properties."""
    return {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }


def _generate_large_object() -> dict[str, Any]:
    """Generates a wide object with many mixed properties and records."""
    data: dict[str, Any] = {
        f"field_{i}": _random_scalar(i) for i in range(200)
    }
    data["transactions"] = [
        {
            "id": f"txn_{i:06d}",
            "amount": round(random.uniform(1.0, 1000.0), 2),
            "currency": random.choice(["USD", "EUR", "GBP", "JPY"]),
            "status": random.choice(["completed", "pending", "failed"]),
        }
        for i in range(50)
    ]
    return data


def _generate_nested_structure() -> dict[str, Any]:
    """Generates a deeply nested structure."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(10)}

        return {
            "level": depth,
            "data": _random_string(15),
            "items": [create_nested_dict(depth - 1) for _ in range(2)],
            "nested": create_nested_dict(depth - 1),
        }

    return create_nested_dict(6)


def _generate_string_heavy() -> dict[str, Any]:
    """Generates strings full of characters that need escaping."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            if random.random() < _ESCAPE_PROBABILITY:
                chars.append(random.choice('"\\\b\f\n\r\t\x01'))
            else:
                chars.append(
                    random.choice(string.ascii_letters + string.digits + " ")
                )
        return "".join(chars)

    return {
        "strings": [create_escaped_string() for _ in range(100)],
        "mixed_content": {
            f"key_{i}\n": {"description": create_escaped_string()}
            for i in range(20)
        },
    }
