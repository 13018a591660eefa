from concurrent.futures import Executor, Future, ThreadPoolExecutor
from contextlib import contextmanager
from logging import getLogger
from typing import (
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Type,
    TypeVar,
    Union,
)

import httpx

from .._config import Config
from .._utils import (
    Dispatcher,
    HttpMethod,
    LoadingIndicator,
    NullLoadingIndicator,
    RequestSpec,
    basic_auth_header,
    encode_query,
    handle_errors,
    mask_headers,
    merge_params,
    run_inline,
    setup_logging,
    split_multipart,
    user_agent_value,
)
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import (
    APP_NAME_PARAM,
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT,
    HEADER_USER_AGENT,
    RESULT_KEY,
)
from ..models import (
    ConfigurationError,
    Decoder,
    DecodeError,
    HatstallError,
    ModelDecoder,
    RequestError,
    Requestable,
)

T = TypeVar("T", bound=Requestable)
R = TypeVar("R")

Params = Optional[Mapping[str, Any]]
ErrorHandler = Callable[[HatstallError], None]


class RequestClient:
    """Issues CRUD-style calls against a JSON REST backend.

    Each call builds one request, sends it on a worker thread, decodes the
    response and hands the outcome to exactly one of ``on_success`` or
    ``on_error``. Handlers run through ``dispatch``, which lets UI code
    route them onto its own thread. Every public call also has an
    awaitable ``*_async`` twin that returns the decoded value or raises.

    Subclasses usually override :meth:`host_path` and
    :meth:`custom_headers`.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        decoder: Optional[Decoder] = None,
        dispatch: Dispatcher = run_inline,
        loading_indicator: Optional[LoadingIndicator] = None,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        self._logger = getLogger("hatstall")
        self._config = config if config is not None else Config.from_env()
        self._decoder: Decoder = decoder or ModelDecoder()
        self._dispatch = dispatch
        self._loading_indicator = loading_indicator or NullLoadingIndicator()

        setup_logging(self._config.debug)
        self._logger.debug(f"CONFIG: {self._config.model_dump()}")

        client_kwargs = get_httpx_client_kwargs(self._config.timeout)
        self._client = httpx.Client(transport=transport, **client_kwargs)
        self._client_async = httpx.AsyncClient(
            transport=async_transport, **client_kwargs
        )

        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            thread_name_prefix="hatstall"
        )

    def __enter__(self) -> "RequestClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "RequestClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def close(self) -> None:
        """Release the worker pool and the sync httpx client.

        Enough for code that only uses the callback API. Code that awaited
        any ``*_async`` call should use :meth:`aclose` or ``async with``
        instead, which also closes the async httpx client.
        """
        if self._owns_executor:
            self._executor.shutdown(wait=True)
        self._client.close()

    async def aclose(self) -> None:
        """Release the async httpx client, then everything :meth:`close` does."""
        await self._client_async.aclose()
        self.close()

    def host_path(self) -> str:
        """Origin every request path is appended to."""
        if not self._config.base_url:
            raise ConfigurationError()
        return self._config.base_url.rstrip("/")

    def default_headers(self) -> Dict[str, str]:
        return {
            HEADER_ACCEPT: CONTENT_TYPE_JSON,
            HEADER_USER_AGENT: user_agent_value(),
            **self.custom_headers(),
        }

    def custom_headers(self) -> Dict[str, str]:
        return {}

    def raw_request(
        self,
        method: Union[HttpMethod, str],
        path: str,
        params: Params = None,
        show_loading: bool = True,
        headers: Optional[Mapping[str, str]] = None,
        *,
        on_error: ErrorHandler,
        on_success: Callable[[Dict[str, Any]], None],
    ) -> Future:
        """Send a request to ``host_path() + path`` and deliver the JSON object.

        Params go to the JSON body for POST, PUT and PATCH and to the query
        string for every other method.

        Returns:
            Future: Completes once the handler has been dispatched.
        """

        def job() -> Dict[str, Any]:
            spec = self._build_spec(method, path, params, show_loading, headers)
            return self._send(spec)

        return self._submit(job, show_loading, on_error, on_success)

    def fetch_one(
        self,
        model: Type[T],
        path: str = "",
        params: Params = None,
        show_loading: bool = True,
        *,
        on_error: ErrorHandler,
        on_success: Callable[[T], None],
    ) -> Future:
        """GET ``model.base_path + path`` and decode a single object.

        Examples:
            ```python
            client.fetch_one(
                Contact,
                "/42",
                on_error=show_error,
                on_success=render_contact,
            )
            ```
        """

        def job() -> T:
            spec = self._resource_spec(
                model, HttpMethod.GET, path, params, show_loading
            )
            return self._decode(model, self._send(spec))

        return self._submit(job, show_loading, on_error, on_success)

    def fetch_many(
        self,
        model: Type[T],
        path: str = "",
        params: Params = None,
        show_loading: bool = True,
        *,
        on_error: ErrorHandler,
        on_success: Callable[[List[T]], None],
    ) -> Future:
        """GET ``model.base_path + path`` and decode the ``result`` list."""

        def job() -> List[T]:
            spec = self._resource_spec(
                model, HttpMethod.GET, path, params, show_loading
            )
            return self._decode_result(model, self._send(spec))

        return self._submit(job, show_loading, on_error, on_success)

    def update_one(
        self,
        model: Type[T],
        path: str = "",
        params: Params = None,
        show_loading: bool = True,
        *,
        on_error: ErrorHandler,
        on_success: Callable[[T], None],
    ) -> Future:
        """POST the merged params to ``model.base_path + path``."""

        def job() -> T:
            spec = self._resource_spec(
                model, HttpMethod.POST, path, params, show_loading
            )
            return self._decode(model, self._send(spec))

        return self._submit(job, show_loading, on_error, on_success)

    def delete_one(
        self,
        model: Type[T],
        path: str = "",
        params: Params = None,
        show_loading: bool = True,
        *,
        on_error: ErrorHandler,
        on_success: Callable[[T], None],
    ) -> Future:
        def job() -> T:
            spec = self._resource_spec(
                model, HttpMethod.DELETE, path, params, show_loading
            )
            return self._decode(model, self._send(spec))

        return self._submit(job, show_loading, on_error, on_success)

    def login_basic(
        self,
        model: Type[T],
        path: str,
        email: str,
        password: str,
        params: Params = None,
        show_loading: bool = True,
        *,
        on_error: ErrorHandler,
        on_success: Callable[[T], None],
    ) -> Future:
        """POST with HTTP basic credentials and decode the returned object."""

        def job() -> T:
            spec = self._resource_spec(
                model,
                HttpMethod.POST,
                path,
                params,
                show_loading,
                headers=basic_auth_header(email, password),
            )
            return self._decode(model, self._send(spec))

        return self._submit(job, show_loading, on_error, on_success)

    def upload(
        self,
        model: Type[T],
        path: str = "",
        params: Params = None,
        show_loading: bool = True,
        *,
        on_error: ErrorHandler,
        on_success: Callable[[T], None],
    ) -> Future:
        """POST the merged params as multipart form data.

        Binary values (``bytes``, file objects, ``(filename, content)``
        tuples) are sent as file parts, everything else as form fields.
        Without any binary value the params are sent as a JSON body.
        """

        def job() -> T:
            spec = self._upload_spec(model, path, params, show_loading)
            return self._decode(model, self._send(spec))

        return self._submit(job, show_loading, on_error, on_success)

    async def raw_request_async(
        self,
        method: Union[HttpMethod, str],
        path: str,
        params: Params = None,
        show_loading: bool = False,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        with self._loading(show_loading):
            spec = self._build_spec(method, path, params, show_loading, headers)
            return await self._send_async(spec)

    async def fetch_one_async(
        self,
        model: Type[T],
        path: str = "",
        params: Params = None,
        show_loading: bool = False,
    ) -> T:
        with self._loading(show_loading):
            spec = self._resource_spec(
                model, HttpMethod.GET, path, params, show_loading
            )
            return self._decode(model, await self._send_async(spec))

    async def fetch_many_async(
        self,
        model: Type[T],
        path: str = "",
        params: Params = None,
        show_loading: bool = False,
    ) -> List[T]:
        with self._loading(show_loading):
            spec = self._resource_spec(
                model, HttpMethod.GET, path, params, show_loading
            )
            return self._decode_result(model, await self._send_async(spec))

    async def update_one_async(
        self,
        model: Type[T],
        path: str = "",
        params: Params = None,
        show_loading: bool = False,
    ) -> T:
        with self._loading(show_loading):
            spec = self._resource_spec(
                model, HttpMethod.POST, path, params, show_loading
            )
            return self._decode(model, await self._send_async(spec))

    async def delete_one_async(
        self,
        model: Type[T],
        path: str = "",
        params: Params = None,
        show_loading: bool = False,
    ) -> T:
        with self._loading(show_loading):
            spec = self._resource_spec(
                model, HttpMethod.DELETE, path, params, show_loading
            )
            return self._decode(model, await self._send_async(spec))

    async def login_basic_async(
        self,
        model: Type[T],
        path: str,
        email: str,
        password: str,
        params: Params = None,
        show_loading: bool = False,
    ) -> T:
        with self._loading(show_loading):
            spec = self._resource_spec(
                model,
                HttpMethod.POST,
                path,
                params,
                show_loading,
                headers=basic_auth_header(email, password),
            )
            return self._decode(model, await self._send_async(spec))

    async def upload_async(
        self,
        model: Type[T],
        path: str = "",
        params: Params = None,
        show_loading: bool = False,
    ) -> T:
        with self._loading(show_loading):
            spec = self._upload_spec(model, path, params, show_loading)
            return self._decode(model, await self._send_async(spec))

    def _merged_params(
        self, model: Type[Requestable], params: Params
    ) -> Dict[str, Any]:
        defaults: Mapping[str, Any] = model.descriptor().default_params
        if self._config.app_name:
            defaults = merge_params(
                {APP_NAME_PARAM: self._config.app_name}, defaults
            )
        return merge_params(defaults, params)

    def _build_spec(
        self,
        method: Union[HttpMethod, str],
        path: str,
        params: Params,
        show_loading: bool,
        headers: Optional[Mapping[str, str]] = None,
        files: Optional[Mapping[str, Any]] = None,
    ) -> RequestSpec:
        return RequestSpec(
            method=HttpMethod(method),
            path=self.host_path() + path,
            params=params or {},
            headers={**self.default_headers(), **(headers or {})},
            show_loading=show_loading,
            files=files or {},
        )

    def _resource_spec(
        self,
        model: Type[Requestable],
        method: HttpMethod,
        path: str,
        params: Params,
        show_loading: bool,
        headers: Optional[Mapping[str, str]] = None,
    ) -> RequestSpec:
        return self._build_spec(
            method,
            model.descriptor().base_path + path,
            self._merged_params(model, params),
            show_loading,
            headers,
        )

    def _upload_spec(
        self, model: Type[Requestable], path: str, params: Params, show_loading: bool
    ) -> RequestSpec:
        data, files = split_multipart(self._merged_params(model, params))
        return self._build_spec(
            HttpMethod.POST,
            model.descriptor().base_path + path,
            data,
            show_loading,
            files=files,
        )

    def _request_kwargs(self, spec: RequestSpec) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"headers": dict(spec.headers)}
        if spec.is_multipart:
            kwargs["data"] = dict(spec.params)
            kwargs["files"] = dict(spec.files)
        elif spec.method.has_body:
            kwargs["json"] = dict(spec.params)
        elif spec.params:
            kwargs["params"] = encode_query(spec.params)
        return kwargs

    def _log_request(self, spec: RequestSpec) -> None:
        self._logger.debug(f"Request: {spec.method.value} {spec.path}")
        self._logger.debug(f"HEADERS: {mask_headers(spec.headers)}")

    def _send(self, spec: RequestSpec) -> Dict[str, Any]:
        self._log_request(spec)
        with handle_errors():
            response = self._client.request(
                spec.method.value, spec.path, **self._request_kwargs(spec)
            )
            response.raise_for_status()
            payload = response.json()
        return self._expect_object(payload)

    async def _send_async(self, spec: RequestSpec) -> Dict[str, Any]:
        self._log_request(spec)
        with handle_errors():
            response = await self._client_async.request(
                spec.method.value, spec.path, **self._request_kwargs(spec)
            )
            response.raise_for_status()
            payload = response.json()
        return self._expect_object(payload)

    def _expect_object(self, payload: Any) -> Dict[str, Any]:
        if not isinstance(payload, dict):
            raise DecodeError(
                f"Expected a JSON object, got {type(payload).__name__}",
                payload=payload,
            )
        return payload

    def _decode(self, model: Type[T], value: Any, many: bool = False) -> Any:
        try:
            if many:
                return self._decoder.decode_many(model, value)
            return self._decoder.decode(model, value)
        except HatstallError:
            raise
        except Exception as e:
            raise DecodeError(
                f"Could not decode {model.__name__}: {e!r}", payload=value
            ) from e

    def _decode_result(self, model: Type[T], payload: Dict[str, Any]) -> List[T]:
        if RESULT_KEY not in payload:
            raise DecodeError(
                f"Response has no '{RESULT_KEY}' field", payload=payload
            )
        return self._decode(model, payload[RESULT_KEY], many=True)

    @contextmanager
    def _loading(self, show_loading: bool) -> Iterator[None]:
        if show_loading:
            self._loading_indicator.show()
        try:
            yield
        finally:
            if show_loading:
                self._loading_indicator.hide()

    def _submit(
        self,
        job: Callable[[], R],
        show_loading: bool,
        on_error: ErrorHandler,
        on_success: Callable[[R], None],
    ) -> Future:
        if show_loading:
            self._loading_indicator.show()
        return self._executor.submit(
            self._complete, job, show_loading, on_error, on_success
        )

    def _complete(
        self,
        job: Callable[[], R],
        show_loading: bool,
        on_error: ErrorHandler,
        on_success: Callable[[R], None],
    ) -> None:
        handler: Callable[[Any], None]
        try:
            value: Any = job()
            handler = on_success
        except HatstallError as e:
            self._logger.debug(f"Request failed: {e!r}")
            value = e
            handler = on_error
        except Exception as e:
            self._logger.warning("Request failed unexpectedly", exc_info=True)
            value = RequestError(f"{type(e).__name__}: {e}")
            value.__cause__ = e
            handler = on_error

        def deliver() -> None:
            try:
                if show_loading:
                    self._loading_indicator.hide()
            finally:
                try:
                    handler(value)
                except Exception:
                    self._logger.warning("Response handler raised", exc_info=True)
                    raise

        self._dispatch(deliver)


