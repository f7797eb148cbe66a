"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that does not belong to a single
    entity: ingestion policy, thread assembly, counters.
    """

    pass
