from __future__ import annotations

from pathlib import Path
from typing import override

from ...application.ports.services import ManifestWriterPort
from ...domain.exceptions import ArtifactWriteError

IG_JSON_FILENAME = "ig.json"
IG_XML_FILENAME = "ig.xml"


class ManifestWriter(ManifestWriterPort):
    """Writes the two implementation guide manifest files.

    The text is written untouched: ``newline=""`` keeps the CRLF line
    endings the fragments already carry.
    """

    @override
    def write(self, output_dir: Path, *, ig_json: str, ig_xml: str) -> tuple[Path, Path]:
        output_dir = Path(output_dir)
        json_path = output_dir / IG_JSON_FILENAME
        xml_path = output_dir / IG_XML_FILENAME
        for path, text in ((json_path, ig_json), (xml_path, ig_xml)):
            try:
                output_dir.mkdir(parents=True, exist_ok=True)
                with path.open("w", encoding="utf-8", newline="") as handle:
                    handle.write(text)
            except OSError as e:
                raise ArtifactWriteError(path.stem) from e
        return json_path, xml_path
