class WalletLookupError(Exception):
    pass


class ValidationError(WalletLookupError):
    pass


class TransportError(WalletLookupError):
    pass


class RemoteProtocolError(WalletLookupError):
    """JSON-RPC error envelope returned by the node. Message is kept verbatim."""

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
