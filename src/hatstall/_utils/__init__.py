from ._auth import basic_auth_header, mask_headers
from ._dispatch import Dispatcher, LoadingIndicator, NullLoadingIndicator, run_inline
from ._encoding import encode_query, split_multipart
from ._errors import handle_errors
from ._logs import setup_logging
from ._merge import merge_params
from ._request_spec import HttpMethod, RequestSpec
from ._user_agent import user_agent_value

__all__ = [
    "basic_auth_header",
    "mask_headers",
    "Dispatcher",
    "LoadingIndicator",
    "NullLoadingIndicator",
    "run_inline",
    "encode_query",
    "split_multipart",
    "handle_errors",
    "setup_logging",
    "merge_params",
    "HttpMethod",
    "RequestSpec",
    "user_agent_value",
]
