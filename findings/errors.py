"""Error taxonomy for the findings tool.

The analytical layer (catalog, filters, aggregation, export) never raises on
well-typed input.  These exceptions belong to the collaborator boundaries:
loading the catalog, loading and inserting records, and validating a new
finding before it reaches the store.
"""


class FindingsError(Exception):
    """Base class for all findings errors."""


class LoadError(FindingsError):
    """Fetching records (or the catalog) from a collaborator failed."""


class CatalogLoadError(LoadError):
    """The part catalog could not be read.  Non-fatal for the host."""


class InsertError(FindingsError):
    """The record store rejected a new finding."""


class ValidationError(ValueError, FindingsError):
    """A new finding is missing required fields or has invalid values.

    Subclasses ``ValueError`` so the API's generic ``ValueError`` handler
    turns it into a 400 response.
    """

    def __init__(self, fields: list[str], message: str | None = None):
        self.fields = list(fields)
        if message is None:
            message = "Missing or invalid fields: " + ", ".join(self.fields)
        super().__init__(message)
