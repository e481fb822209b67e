"""Config-file decoding and JSON output.

Map-to-model decoding is pydantic's job: a ``StringDuration`` field on a
``BaseModel`` validates string input through ``unmarshal_text``, so
``Model.model_validate(mapping)`` is the generic decoder.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

import toml
from pydantic import BaseModel

from strdur._errors import DecodeError
from strdur._value import StringDuration

ModelT = TypeVar("ModelT", bound=BaseModel)


def loads_toml(text: str, model: type[ModelT]) -> ModelT:
    """Parse a TOML document and validate it into ``model``.

    Raises:
        DecodeError: If the document is not valid TOML.
        pydantic.ValidationError: If a value does not fit its field.
    """
    try:
        data = toml.loads(text)
    except toml.TomlDecodeError as exc:
        raise DecodeError("invalid TOML document", str(exc), wrapped=exc) from exc
    return model.model_validate(data)


class DurationJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes StringDuration values as canonical strings."""

    def default(self, o: Any) -> Any:
        if isinstance(o, StringDuration):
            return str(o)
        return super().default(o)
