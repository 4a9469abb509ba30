"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business rules that span several entities, such as
    the partnership state machine, and coordinate repositories to apply them.
    """

    pass
