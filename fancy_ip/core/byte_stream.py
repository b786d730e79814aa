"""
Methods for reading packed addresses from byte streams
"""
from io import BytesIO
from typing import Optional

from .exceptions import ReadError

__all__ = ["get_stream", "read_stream", "read_big_int", "read_remaining"]


def get_stream(byte_stream: bytes | bytearray | BytesIO) -> BytesIO:
    """Convert bytes or BytesIO to BytesIO stream"""
    if isinstance(byte_stream, (bytes, bytearray)):
        return BytesIO(bytes(byte_stream))
    elif isinstance(byte_stream, BytesIO):
        return byte_stream
    else:
        raise TypeError(f"Expected bytes or BytesIO but received: {type(byte_stream)}")


def read_stream(stream: BytesIO, length: int, data_type: Optional[str] = None) -> bytes:
    """Read exact number of bytes from stream with error checking"""
    data = stream.read(length)

    # Verify data integrity
    if len(data) != length:
        if data_type:
            raise ReadError(f"Error reading stream. Insufficient data. Data type: {data_type}")
        else:
            raise ReadError("Error reading stream. Insufficient data.")

    return data


def read_big_int(stream: BytesIO, length: int, data_type: Optional[str] = None) -> int:
    """Read big-endian integer from stream"""
    data = read_stream(stream, length, data_type)
    return int.from_bytes(data, "big")


def read_remaining(stream: BytesIO) -> int:
    """Number of unread bytes left in the stream"""
    position = stream.tell()
    remaining = len(stream.getbuffer()) - position
    return remaining
