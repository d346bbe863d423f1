"""HTTP middleware: timeout, request ID, security headers.

Applied in portal.main; first added is outermost.
"""

from portal.middleware.request_id import RequestIDMiddleware
from portal.middleware.security_headers import SecurityHeadersMiddleware
from portal.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
