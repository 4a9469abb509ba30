"""ASGI middleware."""

from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from wingman.domain.error import DomainError
from wingman.interface.error import to_http_exception


class DomainErrorMiddleware:
    """Turn domain errors raised by routes into JSON error responses.

    Must sit outside the dishka container middleware: the error has to pass
    through the request container first so the request's database session
    is rolled back before the response is written.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except DomainError as e:
            if response_started:
                raise
            http_error = to_http_exception(e)
            response = JSONResponse(
                {"detail": http_error.detail}, status_code=http_error.status_code
            )
            await response(scope, receive, send)
