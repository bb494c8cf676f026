"""
Typed conversion of property values.

Conversions go through pydantic's lax validation, so ``"42"`` converts to
``int`` and a list of strings converts to ``list[int]`` when every element
parses. A value already of the requested class is returned untouched.
"""

from functools import lru_cache
from typing import Any, get_origin

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError


@lru_cache(maxsize=256)
def _adapter_for(target_type: Any) -> TypeAdapter:
    return TypeAdapter(target_type)


def try_convert(value: Any, target_type: Any) -> tuple[bool, Any]:
    """
    Attempt to convert ``value`` to ``target_type``.

    Params:
        value: Raw or converter-produced property value
        target_type: A class or typing construct (e.g. ``list[int]``)

    Returns:
        Tuple of (success, converted value); the value is None on failure
    """
    is_plain_class = isinstance(target_type, type) and get_origin(target_type) is None
    if is_plain_class and isinstance(value, target_type):
        return True, value

    try:
        adapter = _adapter_for(target_type)
    except (PydanticSchemaGenerationError, TypeError):
        # Arbitrary classes without a schema only match by isinstance
        return False, None

    try:
        return True, adapter.validate_python(value)
    except ValidationError:
        return False, None
