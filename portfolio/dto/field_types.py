from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, AnyUrl, BeforeValidator, EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from portfolio.utils.date_time_parser import to_utc_instant

_any_url_adapter = TypeAdapter(AnyUrl)
_email_adapter = TypeAdapter(EmailStr)


def _validate_absolute_url(value: str) -> str:
    try:
        _any_url_adapter.validate_python(value)
    except PydanticValidationError as e:
        raise ValueError(f"'{value}' is not a valid absolute URL") from e
    return value


def _validate_email(value: str) -> str:
    try:
        _email_adapter.validate_python(value)
    except PydanticValidationError as e:
        raise ValueError("value is not a valid email address") from e
    return value


# Any ISO 8601 date/datetime (or date/datetime object), normalized to UTC.
Instant = Annotated[datetime, BeforeValidator(to_utc_instant)]

# Stored verbatim once it parses as an absolute URL.
AbsoluteUrl = Annotated[str, AfterValidator(_validate_absolute_url)]

# Stored verbatim once it parses as an email address; the domain is not lower-cased.
Email = Annotated[str, AfterValidator(_validate_email)]
