class InvariantViolation(Exception):
    """A domain rule was broken by the requested change."""


class InvalidContent(InvariantViolation):
    """Content failed structural or schema validation on write."""


class IllegalTransition(InvariantViolation):
    """A document status change that the lifecycle does not allow."""


class ResourceNotFound(Exception):
    entity = "Resource"

    def __init__(self, identifier=None):
        self.identifier = identifier
        message = f"{self.entity} not found"
        if identifier is not None:
            message = f"{message}: {identifier}"
        super().__init__(message)


class DocumentNotFound(ResourceNotFound):
    entity = "Document"


class RevisionNotFound(ResourceNotFound):
    entity = "Revision"


class CollectionNotFound(ResourceNotFound):
    entity = "Collection"


class SlugConflict(InvariantViolation):
    """Another live document of the tenant already uses this slug."""
