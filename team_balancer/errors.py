class InvalidInput(ValueError):
    """Raised for inputs the balancer cannot work with.

    The message is a short snake_case code, e.g. ``"not_enough_players"``.
    """
