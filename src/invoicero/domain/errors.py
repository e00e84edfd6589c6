"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ParseError(DomainError):
    """Text input could not be turned into a value object."""


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class InvalidRegistrationNumberError(ParseError):
    """Registration number (IČO) has a wrong length, characters or check digit."""


class InvalidIbanError(ParseError):
    """IBAN is malformed or fails the mod-97 check."""


class UnsupportedCurrencyError(ParseError):
    """Currency code is not one of the supported ISO codes."""


class InvalidVariableSymbolError(ParseError):
    """Variable symbol is not 1-10 digits."""


class InvalidInvoiceNumberError(ParseError, ValidationError):
    """Invoice number does not match the YYYYNN format."""


class EmptyInvoiceError(ValidationError):
    """Invoice has no items."""


class InvalidDateRangeError(ValidationError):
    """Due date precedes issue date."""


class RegistryLookupError(DomainError):
    """Registry could not resolve a registration number."""


class EntityNotFoundError(RegistryLookupError):
    """Registry has no record for the registration number."""


class RegistryUnavailableError(RegistryLookupError):
    """Registry service is unreachable or returned an unusable answer."""


def invalid_registration_number(value: str, reason: str) -> str:
    """Return message for a rejected registration number."""
    return f"Invalid registration number '{value}': {reason}"


def invalid_iban(value: str, reason: str) -> str:
    """Return message for a rejected IBAN."""
    return f"Invalid IBAN '{value}': {reason}"


def unsupported_currency(code: str, supported: list[str]) -> str:
    """Return message for an unknown currency code."""
    return f"Unsupported currency '{code}'. Supported currencies: {', '.join(supported)}"


def invalid_invoice_number(value: str) -> str:
    """Return message for an invoice number in the wrong format."""
    return (
        f"Invalid invoice number '{value}': expected a four-digit year followed "
        "by a 2-6 digit sequence (e.g. 202403)"
    )


def invalid_variable_symbol(value: str) -> str:
    """Return message for a variable symbol that is not 1-10 digits."""
    return f"Invalid variable symbol '{value}': expected 1-10 digits"


def empty_invoice() -> str:
    """Return message for an invoice without items."""
    return "Invoice must contain at least one item"


def invalid_date_range(issue_date, due_date) -> str:
    """Return message when the due date precedes the issue date."""
    return f"Due date {due_date.isoformat()} precedes issue date {issue_date.isoformat()}"


def entity_not_found(registration_number: str) -> str:
    """Return message for a registration number unknown to the registry."""
    return f"No registry record for registration number {registration_number}"


def registry_unavailable(registration_number: str, detail: str) -> str:
    """Return message when the registry cannot be queried."""
    return f"Registry lookup for {registration_number} failed: {detail}"
