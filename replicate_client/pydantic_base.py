"""
NOTE:
pydantic v1 and v2 are both common in downstream environments. We always code against the v1 API
and import it from `pydantic.v1` when v2 is installed.
"""
from typing import TYPE_CHECKING, Any, Type, TypeVar

from .errors import DecodingError

if TYPE_CHECKING:
    # Backwards compatibility is even uglier with mypy
    from pydantic.v1 import BaseModel, ValidationError
else:
    try:
        from pydantic.v1 import (  # pylint: disable=no-name-in-module
            BaseModel,
            ValidationError,
        )
    except ImportError:
        from pydantic import BaseModel, ValidationError


class ImmutableModel(BaseModel):  # pylint: disable=used-before-assignment
    class Config:
        allow_mutation = False


class DictCompatibleModel(BaseModel):
    """Response schema that can also be read like the raw dictionary.

    Allows us to access model.key with model["key"].
    """

    def __getitem__(self, key):
        return getattr(self, key)


Schema_T = TypeVar("Schema_T", bound=BaseModel)


def parse_payload(schema: Type[Schema_T], payload: Any) -> Schema_T:
    """Validates a response payload against ``schema``.

    Raises:
        DecodingError: the payload is not a mapping or misses required fields.
    """
    try:
        return schema.parse_obj(payload)
    except ValidationError as err:  # pylint: disable=used-before-assignment
        raise DecodingError(schema.__name__, err, payload) from err
