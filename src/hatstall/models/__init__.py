from .errors import (
    ConfigurationError,
    DecodeError,
    HatstallError,
    HTTPStatusError,
    RequestError,
    TransportError,
)
from .requestable import Decoder, ModelDecoder, Requestable, ResourceDescriptor

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "HatstallError",
    "HTTPStatusError",
    "RequestError",
    "TransportError",
    "Decoder",
    "ModelDecoder",
    "Requestable",
    "ResourceDescriptor",
]
