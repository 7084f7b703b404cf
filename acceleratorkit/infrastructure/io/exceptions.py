from ...domain.exceptions import AcceleratorKitError


class AcceleratorKitInfrastructureError(AcceleratorKitError):
    pass


class DataSourceError(AcceleratorKitInfrastructureError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass
