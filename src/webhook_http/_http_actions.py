import asyncio
from functools import partial
from logging import getLogger
from typing import Any, Awaitable, Callable, Optional, TypeVar

from httpx import AsyncClient, Headers, Response

from ._config import HttpActionsConfig
from ._services import RequestExecutor
from ._services._request_executor import PayloadBuilder, ResponseHandler
from ._utils._retry import retry_on_fail
from ._utils._ssl_context import get_httpx_client_kwargs
from ._utils.constants import HEADER_USER_AGENT, LOGGER_NAME
from .models.auth import AuthorizationInput, resolve_authorization
from .models.web_request import WebRequestData

T = TypeVar("T")


class HttpActions:
    """Generic JSON HTTP actions with optional authorization and retries.

    One instance holds one long-lived ``httpx.AsyncClient`` that is shared by
    every call and is safe to use from concurrent tasks. Create it once and
    reuse it; close it with :meth:`aclose` or use the instance as an async
    context manager.

    Every verb accepts ``auth`` as an authorization descriptor, a compact
    ``"<AuthType>:<value>"`` string, a descriptor mapping or ``None`` for an
    unauthorized call. It is resolved before anything is sent, so an invalid
    value fails without a network call and is never retried.

    Examples:
        ```python
        from webhook_http import BearerAuth, HttpActions

        async with HttpActions() as actions:
            order = await actions.get(
                "https://api.example.com/orders",
                "id=42",
                auth=BearerAuth(token="abc123"),
                retry=True,
            )
            await actions.post(
                "https://api.example.com/events",
                {"type": "order.viewed"},
                auth="XAPIKey:secret",
            )
        ```
    """

    def __init__(
        self,
        config: Optional[HttpActionsConfig] = None,
        *,
        client: Optional[AsyncClient] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config or HttpActionsConfig()
        self._owns_client = client is None

        if client is None:
            client = AsyncClient(
                **get_httpx_client_kwargs(self._config.follow_redirects),
                headers=Headers({HEADER_USER_AGENT: self._config.user_agent}),
            )
        self._client = client
        self._executor = RequestExecutor(client)

    @property
    def config(self) -> HttpActionsConfig:
        return self._config

    @property
    def client(self) -> AsyncClient:
        return self._client

    async def aclose(self) -> None:
        """Close the transport client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpActions":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _run(self, operation: Callable[[], Awaitable[T]], retry: bool) -> T:
        if retry:
            return await retry_on_fail(operation, attempts=self._config.retry_attempts)
        return await operation()

    async def get(
        self,
        url: str,
        query_string: Optional[str] = None,
        *,
        auth: AuthorizationInput = None,
        response_type: Any = Any,
        response_handler: Optional[ResponseHandler[Any, Any]] = None,
        retry: bool = False,
        cancel: Optional[asyncio.Event] = None,
    ) -> Any:
        """Make a GET request and return its decoded JSON body.

        Args:
            url: Target URL.
            query_string: Already encoded query string appended to ``url``.
            auth: Authorization for the request, ``None`` for none.
            response_type: Type the body is validated into, e.g. a pydantic
                model or ``list[int]``.
            response_handler: Maps the decoded body to the returned value.
            retry: Retry failed attempts up to ``config.retry_attempts`` calls.
            cancel: Event that aborts the in-flight request when set.

        Returns:
            The decoded body, or the handler's result when one is given.
        """
        descriptor = resolve_authorization(auth)
        operation = partial(
            self._executor.get,
            url,
            query_string,
            descriptor,
            response_type=response_type,
            response_handler=response_handler,
            cancel=cancel,
        )
        return await self._run(operation, retry)

    async def get_raw(
        self,
        url: str,
        response_handler: ResponseHandler[Response, Any],
        query_string: Optional[str] = None,
        *,
        auth: AuthorizationInput = None,
        retry: bool = False,
        cancel: Optional[asyncio.Event] = None,
    ) -> Any:
        """Make a GET request and return ``response_handler(response)``.

        The handler receives the untouched ``httpx.Response`` of a 2xx reply.
        """
        descriptor = resolve_authorization(auth)
        operation = partial(
            self._executor.get_raw,
            url,
            query_string,
            descriptor,
            response_handler,
            cancel=cancel,
        )
        return await self._run(operation, retry)

    async def post(
        self,
        url: str,
        payload: Any,
        *,
        auth: AuthorizationInput = None,
        response_handler: Optional[ResponseHandler[Response, Any]] = None,
        result_type: Optional[type] = None,
        retry: bool = False,
        cancel: Optional[asyncio.Event] = None,
    ) -> Any:
        """Make a JSON POST request.

        On a 2xx reply the raw response is passed to ``response_handler`` and
        its result returned. Without a handler the call succeeds with the
        empty value of ``result_type`` (``None`` when unset).
        """
        descriptor = resolve_authorization(auth)
        operation = partial(
            self._executor.post,
            url,
            payload,
            descriptor,
            response_handler=response_handler,
            result_type=result_type,
            cancel=cancel,
        )
        return await self._run(operation, retry)

    async def put(
        self,
        url: str,
        payload: Any,
        *,
        auth: AuthorizationInput = None,
        retry: bool = False,
        cancel: Optional[asyncio.Event] = None,
    ) -> bool:
        """Make a JSON PUT request. Returns ``True`` on a 2xx reply."""
        descriptor = resolve_authorization(auth)
        operation = partial(self._executor.put, url, payload, descriptor, cancel=cancel)
        return await self._run(operation, retry)

    async def put_from_builder(
        self,
        url: str,
        build_payload: PayloadBuilder,
        *,
        auth: AuthorizationInput = None,
        response_type: Any = Any,
        retry: bool = False,
        cancel: Optional[asyncio.Event] = None,
    ) -> Any:
        """Make a PUT request with a body from ``build_payload(url, "Put")``.

        The builder runs again on every attempt. Returns the decoded reply.
        """
        descriptor = resolve_authorization(auth)
        operation = partial(
            self._executor.put_from_builder,
            url,
            build_payload,
            descriptor,
            response_type=response_type,
            cancel=cancel,
        )
        return await self._run(operation, retry)

    async def delete(
        self,
        url: str,
        query_params: Optional[str] = None,
        *,
        auth: AuthorizationInput = None,
        retry: bool = False,
        cancel: Optional[asyncio.Event] = None,
    ) -> bool:
        """Make a DELETE request. Returns ``True`` on a 2xx reply."""
        descriptor = resolve_authorization(auth)
        operation = partial(
            self._executor.delete, url, query_params, descriptor, cancel=cancel
        )
        return await self._run(operation, retry)

    async def send(
        self,
        method: str,
        url: str,
        data: WebRequestData[Any],
        *,
        auth: AuthorizationInput = None,
        response_handler: Optional[ResponseHandler[Any, Any]] = None,
        retry: bool = False,
        cancel: Optional[asyncio.Event] = None,
    ) -> Any:
        """Dispatch a :class:`WebRequestData` to the matching verb.

        GET and DELETE use ``data.query_params``; POST and PUT use
        ``data.payload``. ``response_handler`` is passed to GET (decoded body)
        and POST (raw response); PUT and DELETE return a success flag.
        """
        match method.upper():
            case "GET":
                return await self.get(
                    url,
                    data.query_params,
                    auth=auth,
                    response_handler=response_handler,
                    retry=retry,
                    cancel=cancel,
                )
            case "POST":
                return await self.post(
                    url,
                    data.payload,
                    auth=auth,
                    response_handler=response_handler,
                    retry=retry,
                    cancel=cancel,
                )
            case "PUT":
                return await self.put(
                    url, data.payload, auth=auth, retry=retry, cancel=cancel
                )
            case "DELETE":
                return await self.delete(
                    url, data.query_params, auth=auth, retry=retry, cancel=cancel
                )
            case _:
                raise ValueError(f"Unsupported HTTP method: {method}")
