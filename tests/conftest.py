"""Shared pytest fixtures for invoicero tests."""

from datetime import date
from decimal import Decimal

import pytest

from invoicero.domain.entity import Address, Entity
from invoicero.domain.errors import EntityNotFoundError, entity_not_found
from invoicero.domain.identifiers import RegistrationNumber
from invoicero.domain.invoice import Invoice
from invoicero.domain.items import Hours, InvoiceItem, Quantity
from invoicero.domain.payment import BankTransfer

IBAN = "CZ6508000000192000145399"


@pytest.fixture
def contractor():
    """Create a sample contractor (a VAT payer)."""
    return Entity(
        name="Alza.cz a.s.",
        address=Address(
            street="Jankovcova",
            house_number="1522",
            orientation_number="53",
            city="Praha 7",
            postal_code="17000",
        ),
        registration_number=RegistrationNumber.parse("27082440"),
        vat_number="CZ27082440",
    )


@pytest.fixture
def client():
    """Create a sample client that is not a VAT payer."""
    return Entity(
        name="Jan Novák",
        address=Address(
            street="Dlouhá",
            house_number="12",
            city="Brno",
            postal_code="60200",
        ),
        registration_number=RegistrationNumber.parse("29210372"),
    )


@pytest.fixture
def sample_items():
    """Two hours at 400.00 and three pieces at 150.00 (1250.00 in total)."""
    return [
        InvoiceItem(Hours(2, 0), "Consulting", Decimal("400.00")),
        InvoiceItem(Quantity(3), "Licences", Decimal("150.00")),
    ]


@pytest.fixture
def make_invoice(contractor, client, sample_items):
    """Return a factory building a valid invoice with overridable fields."""

    def _make(**overrides):
        fields = dict(
            number="202403",
            contractor=contractor,
            client=client,
            iban=IBAN,
            payment_method=BankTransfer(),
            items=sample_items,
            issue_date=date(2024, 3, 1),
            due_date=date(2024, 3, 15),
        )
        fields.update(overrides)
        return Invoice(**fields)

    return _make


@pytest.fixture
def fake_resolver(contractor, client):
    """Resolver backed by a dict instead of the ARES service."""
    entities = {
        str(contractor.registration_number): contractor,
        str(client.registration_number): client,
    }

    def _resolve(registration_number):
        try:
            return entities[str(registration_number)]
        except KeyError:
            raise EntityNotFoundError(entity_not_found(str(registration_number)))

    return _resolve


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
