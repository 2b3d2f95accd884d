import asyncio
import inspect
from logging import getLogger
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from httpx import AsyncClient, Request, Response

from .._utils._errors import handle_errors
from .._utils._json import default_value, deserialize_json, serialize_json
from .._utils._query import merge_query
from .._utils._sanitize import sanitize_headers
from .._utils.constants import APPLICATION_JSON, HEADER_CONTENT_TYPE, LOGGER_NAME
from ..models.auth import ApiKeyAuth, AuthorizationDescriptor, authorization_headers
from ..models.errors import RequestCancelledError, RequestFailure

T = TypeVar("T")
TReturn = TypeVar("TReturn")

ResponseHandler = Callable[[T], Union[TReturn, Awaitable[TReturn]]]
PayloadBuilder = Callable[[str, str], Any]


async def _invoke_handler(handler: Callable[[Any], Any], value: Any) -> Any:
    result = handler(value)
    if inspect.isawaitable(result):
        result = await result
    return result


class RequestExecutor:
    """Builds, sends and classifies single HTTP requests.

    Every method builds a fresh request, so a call can be repeated safely by
    a retry loop. Only the ``AsyncClient`` (and its connection pool) is shared
    between calls.
    """

    def __init__(self, client: AsyncClient) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._client = client

    def _build_request(
        self,
        method: str,
        url: str,
        auth: AuthorizationDescriptor,
        content: Optional[bytes] = None,
    ) -> Request:
        headers = authorization_headers(auth)
        if content is not None:
            headers[HEADER_CONTENT_TYPE] = APPLICATION_JSON

        sensitive = [auth.header_name] if isinstance(auth, ApiKeyAuth) else []
        self._logger.debug(f"Request: {method} {url}")
        self._logger.debug(f"HEADERS: {sanitize_headers(headers, sensitive)}")

        return self._client.build_request(method, url, headers=headers, content=content)

    async def _send(
        self, request: Request, url: str, cancel: Optional[asyncio.Event]
    ) -> Response:
        method = request.method

        with handle_errors(method, url):
            if cancel is None:
                response = await self._client.send(request)
            else:
                response = await self._send_cancellable(request, url, cancel)

        self._logger.debug(f"Response: {response.status_code} {method} {url}")

        if not response.is_success:
            body = response.text
            await response.aclose()
            raise RequestFailure(
                response.status_code,
                body,
                url,
                method,
                reason=response.reason_phrase,
            )

        return response

    async def _send_cancellable(
        self, request: Request, url: str, cancel: asyncio.Event
    ) -> Response:
        if cancel.is_set():
            raise RequestCancelledError(request.method, url)

        send_task = asyncio.ensure_future(self._client.send(request))
        cancel_task = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait(
                {send_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            for task in (send_task, cancel_task):
                if not task.done():
                    task.cancel()

        if send_task.done() and not send_task.cancelled():
            return send_task.result()

        # let the aborted send release its connection before failing
        await asyncio.gather(send_task, return_exceptions=True)
        self._logger.debug(f"Cancelled: {request.method} {url}")
        raise RequestCancelledError(request.method, url)

    async def get(
        self,
        url: str,
        query_string: Optional[str],
        auth: AuthorizationDescriptor,
        *,
        response_type: Any = Any,
        response_handler: Optional[ResponseHandler[Any, Any]] = None,
        cancel: Optional[asyncio.Event] = None,
    ) -> Any:
        """Send a GET request and decode its JSON body.

        Args:
            url: Target URL, possibly with a query string already.
            query_string: Caller-encoded ``key=value&...`` pairs to append.
            auth: Resolved authorization descriptor.
            response_type: Type the JSON body is validated into.
            response_handler: Called with the decoded body; its result (awaited
                when it is awaitable) is returned instead of the body.
            cancel: Event that aborts the request when set.

        Returns:
            The decoded body, or the handler's result.

        Raises:
            RequestFailure: On a non-2xx response.
            TransportError: If no response was received.
            SerializationError: If the body does not match ``response_type``.
        """
        request_url = merge_query(url, query_string)
        request = self._build_request("GET", request_url, auth)
        response = await self._send(request, request_url, cancel)

        result = deserialize_json(response.content, response_type)
        if response_handler is None:
            return result
        return await _invoke_handler(response_handler, result)

    async def get_raw(
        self,
        url: str,
        query_string: Optional[str],
        auth: AuthorizationDescriptor,
        response_handler: ResponseHandler[Response, Any],
        *,
        cancel: Optional[asyncio.Event] = None,
    ) -> Any:
        """Send a GET request and hand the untouched response to ``response_handler``."""
        request_url = merge_query(url, query_string)
        request = self._build_request("GET", request_url, auth)
        response = await self._send(request, request_url, cancel)

        return await _invoke_handler(response_handler, response)

    async def post(
        self,
        url: str,
        payload: Any,
        auth: AuthorizationDescriptor,
        *,
        response_handler: Optional[ResponseHandler[Response, Any]] = None,
        result_type: Optional[type] = None,
        cancel: Optional[asyncio.Event] = None,
    ) -> Any:
        """Send ``payload`` as a JSON POST body.

        A non-2xx response raises before ``response_handler`` is called. On
        success the handler receives the raw response; without a handler the
        empty value of ``result_type`` is returned (``None`` when unset).
        """
        content = serialize_json(payload)
        request = self._build_request("POST", url, auth, content)
        response = await self._send(request, url, cancel)

        if response_handler is not None:
            return await _invoke_handler(response_handler, response)
        return default_value(result_type)

    async def put(
        self,
        url: str,
        payload: Any,
        auth: AuthorizationDescriptor,
        *,
        cancel: Optional[asyncio.Event] = None,
    ) -> bool:
        content = serialize_json(payload)
        request = self._build_request("PUT", url, auth, content)
        response = await self._send(request, url, cancel)

        return response.is_success

    async def put_from_builder(
        self,
        url: str,
        build_payload: PayloadBuilder,
        auth: AuthorizationDescriptor,
        *,
        response_type: Any = Any,
        cancel: Optional[asyncio.Event] = None,
    ) -> Any:
        """Send a PUT whose body is produced by ``build_payload(url, "Put")``.

        Returns the response body decoded into ``response_type``.
        """
        content = serialize_json(build_payload(url, "Put"))
        request = self._build_request("PUT", url, auth, content)
        response = await self._send(request, url, cancel)

        return deserialize_json(response.content, response_type)

    async def delete(
        self,
        url: str,
        query_params: Optional[str],
        auth: AuthorizationDescriptor,
        *,
        cancel: Optional[asyncio.Event] = None,
    ) -> bool:
        request_url = merge_query(url, query_params)
        request = self._build_request("DELETE", request_url, auth)
        response = await self._send(request, request_url, cancel)

        return response.is_success
