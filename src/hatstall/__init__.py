from ._config import Config
from ._services import RequestClient
from ._utils import (
    Dispatcher,
    HttpMethod,
    LoadingIndicator,
    NullLoadingIndicator,
    RequestSpec,
    merge_params,
    run_inline,
)
from .grouping import group_by_section_key, grouped, section_titles
from .models import (
    ConfigurationError,
    Decoder,
    DecodeError,
    HatstallError,
    HTTPStatusError,
    ModelDecoder,
    RequestError,
    Requestable,
    ResourceDescriptor,
    TransportError,
)

__all__ = [
    "Config",
    "RequestClient",
    "Dispatcher",
    "HttpMethod",
    "LoadingIndicator",
    "NullLoadingIndicator",
    "RequestSpec",
    "merge_params",
    "run_inline",
    "group_by_section_key",
    "grouped",
    "section_titles",
    "ConfigurationError",
    "Decoder",
    "DecodeError",
    "HatstallError",
    "HTTPStatusError",
    "ModelDecoder",
    "RequestError",
    "Requestable",
    "ResourceDescriptor",
    "TransportError",
]
