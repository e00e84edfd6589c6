"""Legal entities appearing on an invoice."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from invoicero.domain.identifiers import RegistrationNumber


class EntityRole(Enum):
    """Side of the invoice an entity appears on."""

    CONTRACTOR = "DODAVATEL"
    CLIENT = "ODBĚRATEL"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    """Registered address of an entity."""

    street: str
    house_number: str
    city: str
    postal_code: str
    orientation_number: Optional[str] = None
    country_code: str = "CZ"

    @property
    def first_line(self) -> str:
        """Street with house and orientation number, e.g. ``Jankovcova 1522/53``."""
        line = f"{self.street} {self.house_number}"
        if self.orientation_number:
            line += f"/{self.orientation_number}"
        return line

    @property
    def second_line(self) -> str:
        """Postal code and city, e.g. ``170 00 Praha 7``."""
        postal_code = self.postal_code.replace(" ", "")
        if len(postal_code) == 5 and postal_code.isdigit():
            postal_code = f"{postal_code[:3]} {postal_code[3:]}"
        return f"{postal_code} {self.city}"


@dataclass(frozen=True)
class Entity:
    """Contractor or client of an invoice.

    Entities are normally built by an entity resolver from a registration
    number. Foreign or unregistered parties are constructed directly and may
    leave ``registration_number`` empty.
    """

    name: str
    address: Address
    registration_number: Optional[RegistrationNumber] = None
    vat_number: Optional[str] = None

    @property
    def is_vat_payer(self) -> bool:
        return bool(self.vat_number)
