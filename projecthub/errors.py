"""Exceptions raised by the data-access layer and translated by the views."""


class ProjectHubError(Exception):
    """Base class for every error raised by projecthub."""


class NotFoundError(ProjectHubError):
    """The project or task an operation targets does not exist."""


class ValidationError(ProjectHubError):
    """Submitted fields failed the checks done before calling the repository."""


class InvalidCredentialsError(ProjectHubError):
    """Login was attempted with an empty email or password."""


class StorageError(ProjectHubError):
    """A storage backend could not read or write a record."""
