"""Exceptions raised by the wizard; the CLI turns them into exit code 1."""


class WizardError(Exception):
    """Base class. ``hint`` is an optional follow-up line shown to the user."""

    def __init__(self, message: str, hint: str = None, command: str = None):
        super().__init__(message)
        self.hint = hint
        self.command = command


class ProjectError(WizardError):
    pass


class PackageManagerError(WizardError):
    pass


class ConfigError(WizardError):
    pass
