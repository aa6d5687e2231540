"""Error types for protocol-playground."""


class InvalidArgumentError(ValueError):
    """Raised when an operation receives an argument outside its valid domain.

    Examples: a die with zero sides, a generator range whose low bound is
    above its high bound, or an unregistered generator name.
    """
