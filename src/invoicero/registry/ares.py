"""ARES (Czech business registry) resolver."""

import logging
from typing import Optional

import requests

from invoicero.domain.entity import Entity
from invoicero.domain.errors import (
    EntityNotFoundError,
    RegistryUnavailableError,
    entity_not_found,
    registry_unavailable,
)
from invoicero.domain.identifiers import RegistrationNumber
from invoicero.registry.mappers import ares_subject_to_entity

DEFAULT_ARES_URL = "https://ares.gov.cz/ekonomicke-subjekty-v-be/rest"
DEFAULT_TIMEOUT = 10.0


class AresResolver:
    """Resolve registration numbers against the ARES REST API.

    Instances are callable, so they can be passed wherever an
    ``EntityResolver`` is expected. Lookups are never retried.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_ARES_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize ARES resolver.

        Args:
            base_url: ARES REST base URL
            timeout: Request timeout in seconds
            session: Optional requests session (a new one is created if None)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = logging.getLogger(__name__)

    def __call__(self, registration_number: RegistrationNumber) -> Entity:
        return self.resolve(registration_number)

    def resolve(self, registration_number: RegistrationNumber) -> Entity:
        """Fetch the entity registered under ``registration_number``.

        Args:
            registration_number: Validated registration number

        Returns:
            Entity with name, registered seat and VAT number

        Raises:
            EntityNotFoundError: If ARES has no record for the number
            RegistryUnavailableError: If ARES cannot be reached or answers
                with an error or an unreadable record
        """
        number = str(registration_number)
        url = f"{self.base_url}/ekonomicke-subjekty/{number}"
        self.logger.debug("Looking up %s in ARES: %s", number, url)

        try:
            response = self.session.get(
                url, headers={"Accept": "application/json"}, timeout=self.timeout
            )
        except requests.RequestException as e:
            self.logger.warning("ARES request for %s failed: %s", number, e)
            raise RegistryUnavailableError(registry_unavailable(number, str(e))) from e

        if response.status_code == 404:
            raise EntityNotFoundError(entity_not_found(number))
        if not response.ok:
            self.logger.warning("ARES returned HTTP %s for %s", response.status_code, number)
            raise RegistryUnavailableError(
                registry_unavailable(number, f"HTTP {response.status_code}")
            )

        try:
            return ares_subject_to_entity(response.json(), registration_number)
        except (ValueError, KeyError, TypeError) as e:
            self.logger.warning("Unreadable ARES record for %s: %s", number, e)
            raise RegistryUnavailableError(
                registry_unavailable(number, f"unexpected response: {e}")
            ) from e
