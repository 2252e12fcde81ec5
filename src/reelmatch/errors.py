class ConfigurationError(ValueError):
    """Board generation parameters that can never produce a valid board.

    Raised before any sequence generation or offset sampling starts.
    """
