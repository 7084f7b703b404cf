"""Serialization of synthesized artifacts to FHIR JSON or FHIR XML.

Both encodings start from the artifact's JSON-shaped dict. The XML form
follows the FHIR rules: primitives become ``value`` attributes, arrays
become repeated elements and the ``id`` of a nested element is carried
as an attribute.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeAlias, override
from xml.etree import ElementTree as ET
from xml.etree.ElementTree import Element

from ...application.ports.services import ArtifactWriterPort
from ...constants import Encodings, FhirDefaults
from ...domain.exceptions import ArtifactWriteError, InvalidConfigurationError
from .xml_utils import primitive_text, tag

if TYPE_CHECKING:
    from ...domain.entities.artifacts import FhirArtifact

    XmlElement: TypeAlias = Element[str]
else:
    XmlElement: TypeAlias = Element


def artifact_filename(resource_type: str, resource_id: str, encoding: str) -> str:
    return f"{resource_type.lower()}-{resource_id}.{encoding}"


def to_json_text(resource: dict[str, Any]) -> str:
    return json.dumps(resource, indent=2, ensure_ascii=False) + "\n"


def build_fhir_tree(resource: dict[str, Any]) -> XmlElement:
    ET.register_namespace("", FhirDefaults.NAMESPACE)
    root: XmlElement = ET.Element(tag(FhirDefaults.NAMESPACE, resource["resourceType"]))
    for key, value in resource.items():
        if key == "resourceType":
            continue
        _append_value(root, key, value)
    return root


def _append_value(parent: XmlElement, key: str, value: Any) -> None:
    if isinstance(value, list):
        for item in value:
            _append_value(parent, key, item)
        return
    child: XmlElement = ET.SubElement(parent, tag(FhirDefaults.NAMESPACE, key))
    if isinstance(value, dict):
        for nested_key, nested_value in value.items():
            if nested_key == "id" and not isinstance(nested_value, dict | list):
                child.set("id", primitive_text(nested_value))
                continue
            _append_value(child, nested_key, nested_value)
    else:
        child.set("value", primitive_text(value))


def to_xml_text(resource: dict[str, Any]) -> str:
    root = build_fhir_tree(resource)
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


class FhirArtifactWriter(ArtifactWriterPort):
    pass

    @override
    def write(self, artifact: FhirArtifact, output_dir: Path, encoding: str) -> Path:
        if encoding not in Encodings.SUPPORTED:
            raise InvalidConfigurationError(f"Unsupported encoding: {encoding}")
        resource = artifact.to_fhir()
        text = to_json_text(resource) if encoding == Encodings.JSON else to_xml_text(resource)
        kind_dir = Path(output_dir) / artifact.resource_type.lower()
        path = kind_dir / artifact_filename(artifact.resource_type, artifact.id, encoding)
        try:
            kind_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise ArtifactWriteError(artifact.id) from e
        return path
