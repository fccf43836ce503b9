"""
Exceptions raised by combined_damage.

Configuration problems are fatal and surface during setup. Nothing here is
raised while evaluating damage at a point.
"""


class ConfigurationError(ValueError):
    """
    Invalid material configuration.

    Parameters
    ----------
    param : str
        Name of the offending parameter
    message : str
        Human readable description of the problem
    """

    def __init__(self, param: str, message: str):
        self.param = param
        self.message = message
        super().__init__(f"{param}: {message}")


class MaterialNotFoundError(KeyError):
    """Raised by the material registry when a name is not registered."""

    def __init__(self, name: str, available=None):
        self.name = name
        self.available = list(available or [])
        super().__init__(name)

    def __str__(self):
        return (
            f"Material '{self.name}' not found in registry.\n"
            f"Available materials: {self.available}"
        )
