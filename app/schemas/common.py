from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def normalize_email(value: str) -> str:
    """Stored form of an address: domain lowercased, local part as given.

    Unparseable input comes back stripped but otherwise untouched, so a
    lookup with it simply finds nothing.
    """
    value = value.strip()
    try:
        return validate_email(value, check_deliverability=False).normalized
    except EmailNotValidError:
        return value


def _check_email(value: str) -> str:
    value = value.strip()
    try:
        normalized = validate_email(value, check_deliverability=False).normalized
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    # only domain case may change; "Name <addr>" and friends are refused
    if normalized.lower() != value.lower():
        raise ValueError("value is not a valid email address")
    return normalized


Email = Annotated[str, AfterValidator(_check_email)]


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; also reads ORM objects."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageOut(BaseModel):
    message: str
