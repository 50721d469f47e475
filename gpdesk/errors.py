class GpdeskError(RuntimeError):
    pass


class ServiceError(GpdeskError):
    pass


class DataSourceError(GpdeskError):
    pass
