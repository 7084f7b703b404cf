"""FHIR terminology server client.

Only ``$expand`` is implemented. The other terminology operations are
part of ``TerminologyServicePort`` and raise ``NotImplementedError`` until
a caller needs them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, override

import requests

from ...application.ports.services import TerminologyServicePort
from ...domain.exceptions import AcceleratorKitError, InvalidConfigurationError
from ...domain.services.canonical import get_id, get_version, strip_version

if TYPE_CHECKING:
    from ...application.ports.services import LoggerPort

FHIR_JSON = "application/fhir+json"
DEFAULT_TIMEOUT_SECONDS = 30


class TerminologyServiceError(AcceleratorKitError, RuntimeError):
    pass


def parse_headers(
    headers: Sequence[str], logger: LoggerPort | None = None
) -> dict[str, str]:
    """Parse ``Name: value`` header strings; malformed entries are skipped."""
    parsed: dict[str, str] = {}
    for header in headers:
        parts = header.split(":")
        if len(parts) != 2 or not parts[0].strip():
            if logger is not None:
                logger.warning(f"Ignoring malformed header: {header!r}")
            continue
        parsed[parts[0].strip()] = parts[1].strip()
    return parsed


def outcome_to_error(outcome: Mapping[str, Any]) -> TerminologyServiceError:
    issues = outcome.get("issue") or []
    if not issues:
        return TerminologyServiceError("Errors occurred but no details were returned")
    first = issues[0]
    details = first.get("details") or {}
    text = details.get("text") or first.get("diagnostics") or ""
    return TerminologyServiceError(f"{first.get('code', '')}.{text}")


class FhirTerminologyClient(TerminologyServicePort):
    pass

    def __init__(
        self,
        address: str,
        *,
        headers: Sequence[str] = (),
        treat_canonical_tail_as_logical_id: bool = False,
        session: requests.Session | None = None,
        logger: LoggerPort | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        super().__init__()
        if not address:
            raise InvalidConfigurationError("endpoint address is required")
        self.address = address.rstrip("/")
        self.treat_canonical_tail_as_logical_id = treat_canonical_tail_as_logical_id
        self.timeout = timeout
        self.logger = logger
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": FHIR_JSON})
        self.session.headers.update(parse_headers(headers, logger))

    @override
    def expand(
        self, url: str, system_versions: Iterable[str] | None = None
    ) -> dict[str, Any]:
        canonical = strip_version(url)
        version = get_version(url)
        params: list[tuple[str, str]] = []
        if self.treat_canonical_tail_as_logical_id:
            endpoint = f"{self.address}/ValueSet/{get_id(canonical)}/$expand"
        else:
            endpoint = f"{self.address}/ValueSet/$expand"
            params.append(("url", canonical))
        if version is not None:
            params.append(("valueSetVersion", version))
        for system_version in system_versions or ():
            params.append(("system-version", system_version))
        return self._expect_value_set(self._get(endpoint, params))

    def _get(self, endpoint: str, params: list[tuple[str, str]]) -> dict[str, Any] | None:
        try:
            response = self.session.get(endpoint, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise TerminologyServiceError(f"Request to {endpoint} failed: {e}") from e
        try:
            body = response.json() if response.content else None
        except ValueError as e:
            raise TerminologyServiceError(
                f"Invalid JSON from {endpoint} (HTTP {response.status_code})"
            ) from e
        if not response.ok and not (
            isinstance(body, dict) and body.get("resourceType") == "OperationOutcome"
        ):
            raise TerminologyServiceError(
                f"HTTP {response.status_code} from {endpoint}"
            )
        return body

    def _expect_value_set(self, result: dict[str, Any] | None) -> dict[str, Any]:
        if result is None:
            raise TerminologyServiceError("No result returned when invoking expand")
        resource_type = result.get("resourceType")
        if resource_type == "ValueSet":
            return result
        if resource_type == "OperationOutcome":
            raise outcome_to_error(result)
        raise TerminologyServiceError(
            f"Unexpected result type {resource_type} when invoking expand"
        )

    @override
    def lookup(self, code: str, system_url: str) -> dict[str, Any]:
        raise NotImplementedError("lookup(code, system_url)")

    @override
    def validate_code_in_value_set(
        self, url: str, code: str, system_url: str, display: str | None = None
    ) -> dict[str, Any]:
        raise NotImplementedError("validate_code_in_value_set(url, code, system_url, display)")

    @override
    def validate_coding_in_value_set(
        self, url: str, coding: dict[str, Any]
    ) -> dict[str, Any]:
        raise NotImplementedError("validate_coding_in_value_set(url, coding)")

    @override
    def validate_codeable_concept_in_value_set(
        self, url: str, concept: dict[str, Any]
    ) -> dict[str, Any]:
        raise NotImplementedError("validate_codeable_concept_in_value_set(url, concept)")

    @override
    def validate_code_in_code_system(
        self, url: str, code: str, system_url: str, display: str | None = None
    ) -> dict[str, Any]:
        raise NotImplementedError("validate_code_in_code_system(url, code, system_url, display)")

    @override
    def validate_coding_in_code_system(
        self, url: str, coding: dict[str, Any]
    ) -> dict[str, Any]:
        raise NotImplementedError("validate_coding_in_code_system(url, coding)")

    @override
    def validate_codeable_concept_in_code_system(
        self, url: str, concept: dict[str, Any]
    ) -> dict[str, Any]:
        raise NotImplementedError("validate_codeable_concept_in_code_system(url, concept)")

    @override
    def subsumes(self, code_a: str, code_b: str, system_url: str) -> str:
        raise NotImplementedError("subsumes(code_a, code_b, system_url)")
