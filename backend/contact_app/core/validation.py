"""
Declarative form validation

Each form field maps to an ordered list of rules (a predicate plus the
message shown when the predicate fails). Values are trimmed before the
rules run and every rule of every field is evaluated, so a single
submission reports all of its problems at once.
"""
import re
from dataclasses import asdict, dataclass, field
from typing import Callable, Dict, List, Mapping, Optional

import phonenumbers
from email_validator import EmailNotValidError, validate_email

from contact_app.core.logging_config import LoggingConfig

logger = LoggingConfig.get_logger(__name__)

_DIGITS = re.compile(r"^[0-9]+$")

NAME_REQUIRED = "Name must not be empty"
NAME_TAKEN = "Name is already used"
EMAIL_REQUIRED = "Email must not be empty"
EMAIL_INVALID = "Invalid email format"
PHONE_REQUIRED = "Phone number must not be empty"
PHONE_NOT_NUMERIC = "Phone number must contain only digits"
PHONE_INVALID = "Invalid phone number format"

MOBILE_TYPES = (
    phonenumbers.PhoneNumberType.MOBILE,
    phonenumbers.PhoneNumberType.FIXED_LINE_OR_MOBILE,
)


@dataclass(frozen=True)
class Rule:
    """A single check on a trimmed field value"""
    check: Callable[[str], bool]
    message: str


@dataclass(frozen=True)
class FieldError:
    """One failed rule, shaped for templates and the flash session"""
    field: str
    msg: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


FieldRules = Dict[str, List[Rule]]


@dataclass
class ValidationResult:
    values: Dict[str, str]
    errors: List[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, field_name: str, message: str):
        self.errors.append(FieldError(field=field_name, msg=message))

    def error_dicts(self) -> List[Dict[str, str]]:
        return [error.to_dict() for error in self.errors]


def is_present(value: str) -> bool:
    return value != ""


def is_email(value: str) -> bool:
    """Syntax-only email check (no DNS lookups)"""
    try:
        validate_email(value, check_deliverability=False)
        return True
    except EmailNotValidError:
        return False


def is_numeric(value: str) -> bool:
    return bool(_DIGITS.match(value))


def is_mobile_phone(region: str) -> Callable[[str], bool]:
    """
    Build a predicate accepting mobile numbers of ``region``.

    Numbers are written in national form (``0812...``) or with the country
    code but without the plus sign (``62812...``).
    """
    country_code = str(phonenumbers.country_code_for_region(region))

    def check(value: str) -> bool:
        candidates = [value]
        if value.startswith(country_code):
            candidates.append(f"+{value}")
        for candidate in candidates:
            try:
                number = phonenumbers.parse(candidate, region)
            except phonenumbers.NumberParseException as e:
                logger.debug(f"Could not parse phone number '{candidate}': {e}")
                continue
            if (phonenumbers.is_valid_number_for_region(number, region)
                    and phonenumbers.number_type(number) in MOBILE_TYPES):
                return True
        return False

    return check


def contact_rules(phone_region: str) -> FieldRules:
    """Rules shared by the add and edit contact forms"""
    return {
        "name": [
            Rule(is_present, NAME_REQUIRED),
        ],
        "email": [
            Rule(is_present, EMAIL_REQUIRED),
            Rule(is_email, EMAIL_INVALID),
        ],
        "nohp": [
            Rule(is_present, PHONE_REQUIRED),
            Rule(is_numeric, PHONE_NOT_NUMERIC),
            Rule(is_mobile_phone(phone_region), PHONE_INVALID),
        ],
    }


def validate(data: Mapping[str, Optional[str]], rules: FieldRules) -> ValidationResult:
    """Trim every ruled field and collect all failing rules"""
    values = {name: (data.get(name) or "").strip() for name in rules}
    result = ValidationResult(values=values)
    for name, field_rules in rules.items():
        for rule in field_rules:
            if not rule.check(values[name]):
                result.add_error(name, rule.message)
    return result
