"""Tests for entity resolution and the ARES resolver."""

import pytest
import requests

from invoicero.domain.entity import Address, Entity
from invoicero.domain.errors import (
    EntityNotFoundError,
    InvalidRegistrationNumberError,
    RegistryLookupError,
    RegistryUnavailableError,
)
from invoicero.domain.identifiers import RegistrationNumber
from invoicero.registry.ares import DEFAULT_ARES_URL, AresResolver
from invoicero.registry.base import resolve_entity
from invoicero.registry.factories import create_ares_resolver
from invoicero.registry.mappers import ares_seat_to_address, ares_subject_to_entity

ALZA_RECORD = {
    "ico": "27082440",
    "obchodniJmeno": "Alza.cz a.s.",
    "sidlo": {
        "kodStatu": "CZ",
        "nazevStatu": "Česká republika",
        "kodKraje": 19,
        "nazevKraje": "Hlavní město Praha",
        "kodObce": 554782,
        "nazevObce": "Praha",
        "cisloDomovni": 1522,
        "kodCastiObce": 490067,
        "nazevCastiObce": "Holešovice",
        "kodAdresnihoMista": 22295194,
        "psc": 17000,
        "textovaAdresa": "Jankovcova 1522/53, Holešovice, 17000 Praha 7",
        "typCisloDomovni": 1,
        "standardizaceAdresy": True,
        "cisloOrientacni": 53,
        "nazevUlice": "Jankovcova",
        "nazevMestskeCastiObvodu": "Praha 7",
    },
    "adresaDorucovaci": {
        "radekAdresy1": "Jankovcova 1522/53",
        "radekAdresy2": "17000 Praha 7",
    },
    "dic": "CZ27082440",
}


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Records requested URLs and returns a canned response or raises."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def alza_number():
    return RegistrationNumber.parse("27082440")


class TestMappers:
    """Tests for ARES record mapping."""

    def test_subject_to_entity(self, alza_number):
        """Test mapping a full ARES record."""
        entity = ares_subject_to_entity(ALZA_RECORD, alza_number)
        assert entity.name == "Alza.cz a.s."
        assert entity.registration_number == alza_number
        assert entity.vat_number == "CZ27082440"
        assert entity.address.first_line == "Jankovcova 1522/53"
        assert entity.address.second_line == "170 00 Praha 7"
        assert entity.address.country_code == "CZ"

    def test_city_district_hyphens_spaced(self):
        """Test that hyphenated district names get spaced hyphens."""
        seat = dict(ALZA_RECORD["sidlo"], nazevMestskeCastiObvodu="Brno-střed")
        assert ares_seat_to_address(seat).city == "Brno - střed"

    def test_fallbacks_without_street_and_district(self):
        """Test villages without streets or city districts."""
        seat = {
            "nazevObce": "Lhota",
            "nazevCastiObce": "Lhota",
            "cisloDomovni": 7,
            "psc": 5601,
        }
        address = ares_seat_to_address(seat)
        assert address.city == "Lhota"
        assert address.street == "Lhota"
        assert address.postal_code == "05601"
        assert address.orientation_number is None
        assert address.first_line == "Lhota 7"

    def test_missing_vat_number(self, alza_number):
        """Test that non-payers have no VAT number."""
        record = {key: value for key, value in ALZA_RECORD.items() if key != "dic"}
        entity = ares_subject_to_entity(record, alza_number)
        assert entity.vat_number is None
        assert not entity.is_vat_payer


class TestAresResolver:
    """Tests for AresResolver with a fake HTTP session."""

    def test_resolve(self, alza_number):
        """Test a successful lookup."""
        session = FakeSession(FakeResponse(200, ALZA_RECORD))
        resolver = AresResolver(base_url="https://ares.example/rest/", timeout=3, session=session)

        entity = resolver(alza_number)

        assert entity.name == "Alza.cz a.s."
        assert session.calls == [("https://ares.example/rest/ekonomicke-subjekty/27082440", 3)]

    def test_not_found(self, alza_number):
        """Test that HTTP 404 becomes EntityNotFoundError."""
        resolver = AresResolver(session=FakeSession(FakeResponse(404)))
        with pytest.raises(EntityNotFoundError, match="27082440"):
            resolver.resolve(alza_number)

    def test_server_error(self, alza_number):
        """Test that HTTP 5xx becomes RegistryUnavailableError."""
        resolver = AresResolver(session=FakeSession(FakeResponse(503)))
        with pytest.raises(RegistryUnavailableError, match="HTTP 503"):
            resolver.resolve(alza_number)

    def test_connection_error(self, alza_number):
        """Test that network failures become RegistryUnavailableError."""
        session = FakeSession(error=requests.ConnectionError("connection refused"))
        resolver = AresResolver(session=session)
        with pytest.raises(RegistryUnavailableError, match="connection refused"):
            resolver.resolve(alza_number)

    def test_timeout_not_retried(self, alza_number):
        """Test that a timeout is surfaced after a single attempt."""
        session = FakeSession(error=requests.Timeout("timed out"))
        resolver = AresResolver(session=session)
        with pytest.raises(RegistryLookupError):
            resolver.resolve(alza_number)
        assert len(session.calls) == 1

    def test_malformed_body(self, alza_number):
        """Test that unreadable records become RegistryUnavailableError."""
        for response in [FakeResponse(200, None), FakeResponse(200, {"ico": "27082440"})]:
            resolver = AresResolver(session=FakeSession(response))
            with pytest.raises(RegistryUnavailableError, match="unexpected response"):
                resolver.resolve(alza_number)


class TestResolveEntity:
    """Tests for resolve_entity with plain function resolvers."""

    def test_parses_text(self, fake_resolver, contractor):
        """Test that text registration numbers are parsed first."""
        assert resolve_entity("27082440", fake_resolver) == contractor

    def test_invalid_text(self, fake_resolver):
        """Test that invalid numbers never reach the resolver."""
        calls = []

        def resolver(number):
            calls.append(number)

        with pytest.raises(InvalidRegistrationNumberError):
            resolve_entity("27082441", resolver)
        assert calls == []

    def test_not_found(self, fake_resolver):
        """Test that resolver errors propagate."""
        with pytest.raises(EntityNotFoundError):
            resolve_entity("45274649", fake_resolver)

    def test_manual_entity(self):
        """Test building a foreign entity without resolution."""
        entity = Entity(
            name="Example GmbH",
            address=Address(
                street="Hauptstraße",
                house_number="1",
                city="Berlin",
                postal_code="10115",
                country_code="DE",
            ),
            vat_number="DE123456789",
        )
        assert entity.registration_number is None
        assert entity.address.second_line == "101 15 Berlin"


class TestFactories:
    """Tests for create_ares_resolver."""

    def test_defaults(self, monkeypatch):
        """Test defaults when no environment variables are set."""
        monkeypatch.delenv("INVOICERO_ARES_URL", raising=False)
        monkeypatch.delenv("INVOICERO_ARES_TIMEOUT", raising=False)
        resolver = create_ares_resolver()
        assert resolver.base_url == DEFAULT_ARES_URL
        assert resolver.timeout == 10.0

    def test_environment(self, monkeypatch):
        """Test configuration from environment variables."""
        monkeypatch.setenv("INVOICERO_ARES_URL", "http://localhost:8000/rest/")
        monkeypatch.setenv("INVOICERO_ARES_TIMEOUT", "2.5")
        resolver = create_ares_resolver()
        assert resolver.base_url == "http://localhost:8000/rest"
        assert resolver.timeout == 2.5

    def test_explicit_arguments_win(self, monkeypatch):
        """Test that arguments override the environment."""
        monkeypatch.setenv("INVOICERO_ARES_URL", "http://localhost:8000/rest")
        resolver = create_ares_resolver(base_url="http://other/rest", timeout=1)
        assert resolver.base_url == "http://other/rest"
        assert resolver.timeout == 1

    def test_invalid_timeout(self, monkeypatch):
        """Test that a non-numeric timeout is rejected."""
        monkeypatch.setenv("INVOICERO_ARES_TIMEOUT", "soon")
        with pytest.raises(ValueError, match="INVOICERO_ARES_TIMEOUT"):
            create_ares_resolver()
