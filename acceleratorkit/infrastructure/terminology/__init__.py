"""Terminology server adapters."""

from .fhir_terminology_client import FhirTerminologyClient, TerminologyServiceError

__all__ = ["FhirTerminologyClient", "TerminologyServiceError"]
