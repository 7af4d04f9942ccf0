"""
Field validation for Team records.

One function per governed field. Each returns the list of violations for
the given value (empty when the value is acceptable), so callers can report
every problem with a write at once instead of stopping at the first.
"""

from typing import Any, Callable, Dict, List, Optional

from pydantic import AnyHttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from teamspace.errors import ValidationError
from teamspace.utils.domains import RESERVED_SUBDOMAINS, SUBDOMAIN_PATTERN, is_fqdn, is_url

USER_ROLES = ("viewer", "member")

_http_url = TypeAdapter(AnyHttpUrl)


def validate_name(name: Optional[str]) -> List[ValidationError]:
    if name is None or not 2 <= len(name) <= 255:
        return [ValidationError("name", "name must be between 2 to 255 characters")]
    if is_url(name):
        return [ValidationError("name", "name must not contain a URL")]
    return []


def validate_subdomain(subdomain: Optional[str]) -> List[ValidationError]:
    if subdomain is None:
        return []

    errors = []
    if subdomain != subdomain.lower():
        errors.append(ValidationError("subdomain", "subdomain must be lowercase"))
    if not 2 <= len(subdomain) <= 32:
        errors.append(ValidationError("subdomain", "subdomain must be between 2 and 32 characters"))
    if not SUBDOMAIN_PATTERN.match(subdomain):
        errors.append(ValidationError("subdomain", "Must be only alphanumeric and dashes"))
    if subdomain.lower() in RESERVED_SUBDOMAINS:
        errors.append(ValidationError("subdomain", "You chose a restricted word, please try another."))
    return errors


def validate_domain(domain: Optional[str]) -> List[ValidationError]:
    if domain is None:
        return []

    errors = []
    if len(domain) > 255:
        errors.append(ValidationError("domain", "domain must be 255 characters or less"))
    if not is_fqdn(domain):
        errors.append(ValidationError("domain", "domain must be a valid fully qualified domain name"))
    return errors


def validate_avatar_url(avatar_url: Optional[str]) -> List[ValidationError]:
    if avatar_url is None:
        return []

    if len(avatar_url) > 4096:
        return [ValidationError("avatar_url", "avatarUrl must be 4096 characters or less")]

    try:
        _http_url.validate_python(avatar_url)
    except PydanticValidationError:
        return [ValidationError("avatar_url", "avatarUrl must be a valid URL")]
    return []


def validate_default_user_role(role: Optional[str]) -> List[ValidationError]:
    if role not in USER_ROLES:
        return [ValidationError("default_user_role", f"default_user_role must be one of {', '.join(USER_ROLES)}")]
    return []


FIELD_VALIDATORS: Dict[str, Callable[[Any], List[ValidationError]]] = {
    "name": validate_name,
    "subdomain": validate_subdomain,
    "domain": validate_domain,
    "avatar_url": validate_avatar_url,
    "default_user_role": validate_default_user_role,
}


def validate_team_fields(values: Dict[str, Any]) -> List[ValidationError]:
    """
    Validate the governed fields present in values.

    Fields missing from values are not checked; pass the full record state
    to validate a whole team.

    Returns:
        Every violation found, in field order
    """
    errors: List[ValidationError] = []
    for field, validator in FIELD_VALIDATORS.items():
        if field in values:
            errors.extend(validator(values[field]))
    return errors
