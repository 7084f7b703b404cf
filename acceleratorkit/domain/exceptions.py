"""Error taxonomy for a dictionary processing run.

Every error defined here is fatal: the run is expected to be corrected and
repeated in full. Soft absences (missing columns, empty cells, missing
terminology codes) are never reported through exceptions.
"""


class AcceleratorKitError(Exception):
    pass


class InvalidConfigurationError(AcceleratorKitError, ValueError):
    pass


class UnrecognizedElementNameError(AcceleratorKitError, ValueError):
    pass


class UnrecognizedTypeError(AcceleratorKitError, ValueError):
    def __init__(self, type_code: str, element_name: str | None = None) -> None:
        self.type_code = type_code
        self.element_name = element_name
        message = f"Unknown type code {type_code}"
        if element_name:
            message += f" (data element {element_name})"
        super().__init__(message)


class UnsupportedResourceKindError(AcceleratorKitError, ValueError):
    def __init__(self, resource_type: str, element_name: str | None = None) -> None:
        self.resource_type = resource_type
        self.element_name = element_name
        message = f"Unrecognized baseType: {resource_type}"
        if element_name:
            message += f" (data element {element_name})"
        super().__init__(message)


class ArtifactWriteError(AcceleratorKitError, RuntimeError):
    def __init__(self, artifact_id: str) -> None:
        self.artifact_id = artifact_id
        super().__init__(f"Error writing resource: {artifact_id}")
