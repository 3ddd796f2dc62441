"""
Exception hierarchy for campus_map.
"""


class CampusMapError(Exception):
    """Base class for all campus_map errors."""
    pass


class DrawingLoadError(CampusMapError):
    """Raised when the vector drawing cannot be read or parsed."""
    pass


class ManifestError(CampusMapError):
    """Raised when the campus manifest is missing or doesn't match the schema."""
    pass


class SceneBuildError(CampusMapError):
    """Raised when an expected drawing element is absent or of the wrong kind.

    Scene construction is all-or-nothing, so this error always means that no
    scene was produced and the drawing was left untouched.
    """

    def __init__(self, message: str, element_id: str | None = None):
        super().__init__(message)
        self.element_id = element_id


class NotReadyError(CampusMapError):
    """Raised when a mapping is requested before the view size is known."""
    pass


class ConfigError(CampusMapError):
    """Raised when configuration is invalid or cannot be accessed."""
    pass
