class TreeError(Exception):
    pass


class ConfigurationError(TreeError):
    pass


class StructuralCycleError(TreeError):
    pass
