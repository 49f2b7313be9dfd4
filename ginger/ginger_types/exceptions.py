"""Holds exceptions used by ginger"""


class GingerError(Exception):
    """Base class for every error ginger reports to the user"""


class ConfigurationError(GingerError):
    """Raised when the parsed project cannot produce a build graph"""


class MissingDirectiveError(ConfigurationError):
    """Raised when a mandatory directive never appeared in the ginger file"""
    def __init__(self, directive: str):
        self.directive = directive
        super().__init__(f"invalid ginger file: {directive} not defined")


class NoSourceFilesError(ConfigurationError):
    """Raised when the tree walk found nothing to compile"""
    def __init__(self):
        super().__init__("no source files detected")


class InvalidConfigError(GingerError):
    """Raised when a YAML configuration file cannot be used"""
    def __init__(self, config_file, reason: str):
        self.config_file = config_file
        self.reason = reason
        super().__init__(f"invalid config file {config_file}: {reason}")
