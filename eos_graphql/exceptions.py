from typing import Optional


class ChainAPIError(Exception):
    """Base error for everything that can go wrong while talking to the EOS node."""
    code = "RPC_ERROR"

    def __init__(self, message: str, node_error: Optional[str] = None):
        self.node_error = node_error
        super().__init__(message)


class RemoteUnavailableError(ChainAPIError):
    """The node could not be reached or did not answer with usable JSON."""
    code = "REMOTE_UNAVAILABLE"


class NotFoundError(ChainAPIError):
    """The requested block or account does not exist on the chain."""
    code = "NOT_FOUND"


class InvalidInputError(ChainAPIError):
    """A malformed argument or a malformed document from the node."""
    code = "INVALID_INPUT"
