"""Domain layer for invoicero."""

from invoicero.domain.identifiers import Currency, Iban, InvoiceNumber, RegistrationNumber
from invoicero.domain.entity import Address, Entity, EntityRole
from invoicero.domain.items import Hours, InvoiceItem, Other, Quantity
from invoicero.domain.payment import BankTransfer, Card, Cash
from invoicero.domain.invoice import Invoice, derive_due_date
from invoicero.domain.money import money

__all__ = [
    "Currency",
    "Iban",
    "InvoiceNumber",
    "RegistrationNumber",
    "Address",
    "Entity",
    "EntityRole",
    "Hours",
    "InvoiceItem",
    "Other",
    "Quantity",
    "BankTransfer",
    "Card",
    "Cash",
    "Invoice",
    "derive_due_date",
    "money",
]
