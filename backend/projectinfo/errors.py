class ProjectInfoError(Exception):
    """Base exception for the project info service."""
    pass


class ConfigurationError(ProjectInfoError):
    """Raised when the process configuration is missing or invalid."""
    pass
