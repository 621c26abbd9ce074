import datetime
import re

from google.api_core.exceptions import GoogleAPIError, InvalidArgument, PermissionDenied, \
    ResourceExhausted, Unauthenticated
from google.auth.exceptions import GoogleAuthError

ISO_DATE = r"^\d{4}-\d{2}-\d{2}$"
RELATIVE_DATE = r"^((today)|(yesterday)|(\d+daysAgo))$"

RE_ISO_DATE = re.compile(ISO_DATE)
RE_RELATIVE_DATE = re.compile(RELATIVE_DATE)


def ga4_date_string(d: str | datetime.date) -> str:
    """
    Render a date in the GA4 date grammar: `YYYY-MM-DD`, `today`, `yesterday` or `NdaysAgo`.
    Dates are returned as `YYYY-MM-DD`, strings are checked and returned unchanged.
    """
    if isinstance(d, datetime.datetime):
        d = d.date()
    if isinstance(d, datetime.date):
        return d.strftime("%Y-%m-%d")

    if not isinstance(d, str):
        raise TypeError(f"date must be a str or datetime.date, not {type(d).__name__}")

    if RE_RELATIVE_DATE.match(d):
        return d
    if RE_ISO_DATE.match(d):
        # raises ValueError on impossible dates such as 2023-02-30
        datetime.datetime.strptime(d, "%Y-%m-%d")
        return d

    raise ValueError(f"Cannot parse date string '{d}'")


def property_resource_name(property_id: str) -> str:
    if not isinstance(property_id, str) or not property_id.strip():
        raise ValueError("property_id must be a non-empty string")
    property_id = property_id.strip()
    if property_id.startswith('properties/'):
        return property_id
    return f"properties/{property_id}"


def error_type(error: BaseException) -> str:
    if isinstance(error, PermissionDenied):
        return 'PermissionDenied'
    if isinstance(error, ResourceExhausted):
        return 'ResourceExhausted'
    if isinstance(error, InvalidArgument):
        if re.search(r"Invalid property ID", str(error.message)):
            return 'InvalidPropertyID'
        return 'InvalidArgument'
    if isinstance(error, Unauthenticated):
        return 'Unauthenticated'
    if isinstance(error, GoogleAPIError):
        return 'GoogleAPIError'
    if isinstance(error, GoogleAuthError):
        return 'GoogleAuthError'
    if isinstance(error, FileNotFoundError):
        return 'FileNotFound'
    if isinstance(error, (ValueError, IndexError)):
        return 'ParseError'
    return error.__class__.__name__
