"""Mapper functions to convert ARES registry records into domain entities.

This layer isolates the ARES field names so that changes to the registry's
JSON schema only touch this module.
"""

from typing import Any, Optional

from invoicero.domain.entity import Address, Entity
from invoicero.domain.identifiers import RegistrationNumber


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def ares_seat_to_address(seat: dict[str, Any]) -> Address:
    """Convert an ARES ``sidlo`` record to a domain Address.

    Cities with districts (``Praha-Holešovice``) are written with spaced
    hyphens. Places without named streets use the municipality part instead.
    """
    city_part = seat.get("nazevMestskeCastiObvodu")
    if city_part:
        city = " - ".join(city_part.split("-"))
    else:
        city = seat["nazevObce"]

    street = seat.get("nazevUlice") or seat.get("nazevCastiObce") or city
    postal_code = str(seat["psc"]).zfill(5)

    return Address(
        street=street,
        house_number=str(seat["cisloDomovni"]),
        city=city,
        postal_code=postal_code,
        orientation_number=_optional_str(seat.get("cisloOrientacni")),
        country_code=seat.get("kodStatu") or "CZ",
    )


def ares_subject_to_entity(
    record: dict[str, Any], registration_number: RegistrationNumber
) -> Entity:
    """Convert an ARES ``ekonomicke-subjekty`` record to a domain Entity."""
    return Entity(
        name=record["obchodniJmeno"],
        address=ares_seat_to_address(record["sidlo"]),
        registration_number=registration_number,
        vat_number=_optional_str(record.get("dic")),
    )
