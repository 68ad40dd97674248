"""String helpers."""

import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_constant_case(value: str) -> str:
    """Convert a CamelCase name into CONSTANT_CASE.

    Example:
        ```python
        to_constant_case("AlgorithmMismatchError")  # "ALGORITHM_MISMATCH_ERROR"
        to_constant_case("HS256Algorithm")  # "HS256_ALGORITHM"
        ```

    """
    return _CAMEL_BOUNDARY.sub("_", value).upper()
