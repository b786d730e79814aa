"""
The custom exceptions used throughout fancy_ip
"""
__all__ = ["LiteralError", "AddressLiteralError", "LiteralArgumentError", "DecodedAddressError", "StreamError",
           "ReadError"]


class LiteralError(Exception):
    """
    Raised by the scanner and decoder. Carries the Diagnostic describing the failure
    """

    def __init__(self, diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)


class AddressLiteralError(LiteralError):
    """
    Raised by the address constructors when the literal is invalid
    """

    def __init__(self, diagnostic, text: str):
        self.text = text
        super().__init__(diagnostic)

    def __str__(self):
        return self.diagnostic.render(self.text)


class LiteralArgumentError(Exception):
    """
    For extra constructor arguments (flow info, scope id) that are not 32 bit integers
    """
    pass


class DecodedAddressError(Exception):
    """
    For decoded address values built directly with the wrong number of components or out of range values
    """
    pass


class StreamError(Exception):
    """
    Catchall for stream errors
    """
    pass


class ReadError(StreamError):
    """
    For when trying to read data of length n from the stream and receiving data of length < n
    """
    pass
