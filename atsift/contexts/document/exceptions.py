"""Custom exceptions for the document context."""


class InvalidResumeStructureError(ValueError):
    """
    Exception raised when a resume tree doesn't conform to the document schema.

    Raised while loading (e.g., an unknown section type or a non-list
    'sections' field). Missing optional fields are never an error; they
    degrade to empty values.
    """

    pass
