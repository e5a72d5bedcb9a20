"""Exception types raised by updater itself.

Errors raised by a step's work are never wrapped in these.
"""


class UpdaterError(Exception):
    pass


class ConfigError(UpdaterError):
    pass
