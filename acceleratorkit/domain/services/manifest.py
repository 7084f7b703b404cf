"""Implementation guide manifest fragments.

Each written artifact contributes one entry to the ``ig.json`` resource map
and one ``<resource>`` entry to the ``ig.xml`` resource list. Fragments keep
the tab indentation and CRLF line endings of the hand-maintained IG files
they are pasted into.
"""

from __future__ import annotations

from ...constants import Encodings, FhirDefaults

CRLF = "\r\n"

PROFILE_JSON_FRAGMENT = (
    '\t\t"StructureDefinition/{id}": {{\r\n'
    '\t\t\t"source": "structuredefinition/structuredefinition-{id}.{ext}",\r\n'
    '\t\t\t"defns": "StructureDefinition-{id}-definitions.html",\r\n'
    '\t\t\t"base": "StructureDefinition-{id}.html"\r\n'
    "\t\t}}"
)

RESOURCE_JSON_FRAGMENT = (
    '\t\t"{kind}/{id}": {{\r\n'
    '\t\t\t"source": "{folder}/{folder}-{id}.{ext}",\r\n'
    '\t\t\t"base": "{kind}-{id}.html"\r\n'
    "\t\t}}"
)

RESOURCE_XML_FRAGMENT = (
    "\t\t\t<resource>\r\n"
    "\t\t\t\t<reference>\r\n"
    '\t\t\t\t\t<reference value="{kind}/{id}"/>\r\n'
    "\t\t\t\t</reference>\r\n"
    '\t\t\t\t<groupingId value="{grouping}"/>\r\n'
    "\t\t\t</resource>"
)


class ManifestFragmentCollector:
    pass

    def __init__(self, encoding: str = Encodings.JSON) -> None:
        super().__init__()
        self.encoding = encoding
        self.json_fragments: list[str] = []
        self.resource_fragments: list[str] = []

    def add(self, resource_type: str, resource_id: str) -> None:
        if resource_type == "StructureDefinition":
            json_fragment = PROFILE_JSON_FRAGMENT.format(id=resource_id, ext=self.encoding)
        else:
            json_fragment = RESOURCE_JSON_FRAGMENT.format(
                kind=resource_type,
                folder=resource_type.lower(),
                id=resource_id,
                ext=self.encoding,
            )
        self.json_fragments.append(json_fragment)
        self.resource_fragments.append(
            RESOURCE_XML_FRAGMENT.format(
                kind=resource_type, id=resource_id, grouping=FhirDefaults.GROUPING_ID
            )
        )

    def render_ig_json(self) -> str:
        return f"{{{CRLF}{(',' + CRLF).join(self.json_fragments)}{CRLF}}}"

    def render_ig_xml(self) -> str:
        return CRLF.join(self.resource_fragments)

    def __len__(self) -> int:
        return len(self.json_fragments)
