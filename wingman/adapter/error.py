"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class EmailDeliveryError(AdapterError):
    """Outbound email could not be delivered."""

    pass
