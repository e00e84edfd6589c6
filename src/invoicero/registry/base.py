"""Entity resolution interface.

A resolver is any callable that turns a registration number into an Entity.
It is passed to the code that needs it rather than subclassed, so tests can
substitute a plain function.
"""

from typing import Callable, Union

from invoicero.domain.entity import Entity
from invoicero.domain.identifiers import RegistrationNumber

EntityResolver = Callable[[RegistrationNumber], Entity]


def resolve_entity(
    registration_number: Union[RegistrationNumber, str], resolver: EntityResolver
) -> Entity:
    """Resolve a registration number to a legal entity.

    Args:
        registration_number: Parsed registration number or its text form
        resolver: Resolver to query, e.g. an AresResolver

    Returns:
        Entity with the registered name and address

    Raises:
        InvalidRegistrationNumberError: If the text is not a valid registration number
        EntityNotFoundError: If the registry has no record
        RegistryUnavailableError: If the registry cannot be reached
    """
    if isinstance(registration_number, str):
        registration_number = RegistrationNumber.parse(registration_number)
    return resolver(registration_number)
