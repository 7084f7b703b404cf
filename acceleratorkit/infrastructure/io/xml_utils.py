from typing import Any


def tag(namespace: str, name: str) -> str:
    return f"{{{namespace}}}{name}"


def primitive_text(value: Any) -> str:
    """Render a JSON primitive the way FHIR XML spells it in ``value``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
