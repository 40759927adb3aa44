"""ASGI middleware (raw ASGI callables, added via app.add_middleware)."""

from crm.middleware.request_id import RequestIDMiddleware
from crm.middleware.security_headers import SecurityHeadersMiddleware

__all__ = ["RequestIDMiddleware", "SecurityHeadersMiddleware"]
