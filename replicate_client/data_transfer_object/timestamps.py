# pylint: disable=E0213

from datetime import datetime
from typing import TYPE_CHECKING, Optional, Union

from dateutil.parser import ParserError, isoparse

if TYPE_CHECKING:
    # Backwards compatibility is even uglier with mypy
    from pydantic.v1 import validator
else:
    try:
        from pydantic.v1 import validator
    except ImportError:
        from pydantic import validator


def parse_timestamp(value: Optional[Union[str, datetime]]) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    try:
        return isoparse(value)
    except (ParserError, ValueError) as err:
        raise ValueError(f"Timestamp {value} is not in ISO 8601 format.") from err


def timestamp_validator(*fields: str):
    """Parses the given fields with dateutil before pydantic sees them."""
    return validator(  # pylint: disable=used-before-assignment
        *fields, pre=True, allow_reuse=True
    )(lambda cls, value: parse_timestamp(value))
