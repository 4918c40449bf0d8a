class SingleFileError(Exception):
    """Base exception for single-file generation errors."""
    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path


class ProjectFileError(SingleFileError):
    """Raised when the project descriptor cannot be used."""
    pass

class InvalidProjectExtensionError(ProjectFileError):
    """Raised when the descriptor does not have the project file extension."""
    pass

class ProjectNotFoundError(ProjectFileError):
    """Raised when the descriptor does not exist."""
    pass

class InvalidProjectFormatError(ProjectFileError):
    """Raised when the descriptor is not a well-formed project document."""
    pass


class GenerationError(SingleFileError):
    """Raised when loading, assembling or writing the merged file fails."""
    pass
