class OAEPError(ValueError):
    """Base class for OAEP encoding errors."""


class MessageTooLongError(OAEPError):
    """The message does not fit into the encoded block."""

    def __init__(self, message_length: int, max_length: int):
        super().__init__("message too long")
        self.message_length = message_length
        self.max_length = max_length


class LengthMismatchError(OAEPError):
    # Raised on XOR of unequal buffers; a correct encoder never hits this.
    pass


class MaskTooLongError(OAEPError):
    pass
