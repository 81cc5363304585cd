"""Phone numbers are parsed with phonenumbers and kept in E.164 form, e.g. "+6581234567"."""

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberFormat

from addressbook.domain.errors import ValidationError

PHONE_CONSTRAINTS = (
    "Phone numbers should be valid numbers, with a leading + and country code "
    "or in the default region"
)


def to_e164(raw: object, default_region: str | None = None) -> str:
    """
    Return raw as an E.164 string.

    default_region ("SG", "US", ...) is used only for numbers written without a
    leading +. Raises ValidationError for blank input, unparseable text and
    numbers that are not valid in their region.
    """
    text = str(raw or "").strip()
    if not text:
        raise ValidationError(PHONE_CONSTRAINTS)
    try:
        number = phonenumbers.parse(text, default_region)
    except NumberParseException as e:
        raise ValidationError(PHONE_CONSTRAINTS) from e
    if not phonenumbers.is_valid_number(number):
        raise ValidationError(PHONE_CONSTRAINTS)
    return phonenumbers.format_number(number, PhoneNumberFormat.E164)
