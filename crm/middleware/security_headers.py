"""Security headers middleware.

Adds hardening headers to every HTTP response that does not already set them.
Interactive API docs load Swagger/ReDoc assets from a CDN, so the strict
Content-Security-Policy is left off those paths. Raw ASGI.
"""

from typing import Callable

API_SECURITY_HEADERS: dict[str, str] = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}
DOCS_PATHS = ("/docs", "/redoc")


def SecurityHeadersMiddleware(
    app: Callable,
    headers: dict[str, str] | None = None,
    docs_paths: tuple[str, ...] = DOCS_PATHS,
) -> Callable:
    """Set security headers on HTTP responses. Raw ASGI."""
    configured = API_SECURITY_HEADERS if headers is None else headers
    full = [(k.lower().encode(), v.encode()) for k, v in configured.items()]
    without_csp = [h for h in full if h[0] != b"content-security-policy"]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        extra = without_csp if scope["path"].startswith(docs_paths) else full

        async def send_with_headers(message: dict) -> None:
            if message["type"] == "http.response.start":
                current = list(message.get("headers", []))
                present = {name.lower() for name, _ in current}
                current.extend(h for h in extra if h[0] not in present)
                message["headers"] = current
            await send(message)

        await app(scope, receive, send_with_headers)

    return asgi_app
