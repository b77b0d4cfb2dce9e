class ResourceNotFoundError(Exception):
    """Raised when an id given to a catalog operation does not resolve.

    The message names the entity type and the id. The HTTP layer turns it into
    a 404 response; services never recover from it.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
