from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from src.api.core.constants import API_VERSION_HEADER
from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.utils.logger import get_client_ip, get_logger
from src.utils.settings.app import AppSettings

logger = get_logger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    def __init__(self, app, is_production: bool = False):
        super().__init__(app)
        self.is_production = is_production
        self.app_settings = AppSettings()

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        headers = {
            "X-Content-Type-Options": "nosniff",
            "X-Frame-Options": "DENY",
            "Referrer-Policy": "strict-origin-when-cross-origin",
            "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
            "X-Permitted-Cross-Domain-Policies": "none",
            API_VERSION_HEADER: self.app_settings.API_VERSION,
        }

        if self.is_production:
            headers["Content-Security-Policy"] = self._get_csp()
            if request.url.scheme == "https":
                headers["Strict-Transport-Security"] = (
                    "max-age=31536000; includeSubDomains"
                )

        # CORSMiddleware owns the Access-Control-* headers
        for key, value in headers.items():
            if key not in response.headers:
                response.headers[key] = value

        return response

    def _get_csp(self) -> str:
        """Generate Content Security Policy."""
        csp = {
            "default-src": ["'self'"],
            "script-src": ["'self'", "https://js.stripe.com"],
            "img-src": ["'self'", "data:", "https:", "blob:"],
            "connect-src": ["'self'", "https://api.stripe.com"],
            "frame-src": ["https://js.stripe.com", "https://connect.stripe.com"],
            "object-src": ["'none'"],
            "base-uri": ["'self'"],
            "frame-ancestors": ["'none'"],
        }
        return "; ".join(
            f"{directive} {' '.join(sources)}" for directive, sources in csp.items()
        )


class PayloadSizeMiddleware(BaseHTTPMiddleware):
    """Reject request bodies larger than ``MAX_REQUEST_SIZE``."""

    def __init__(self, app, max_request_size: int | None = None):
        super().__init__(app)
        self.max_request_size = max_request_size or AppSettings().MAX_REQUEST_SIZE

    async def dispatch(self, request: Request, call_next) -> Response:
        content_length = request.headers.get("Content-Length")
        if content_length and content_length.isdigit():
            if int(content_length) > self.max_request_size:
                logger.warning(
                    "Request too large",
                    content_length=int(content_length),
                    ip_address=get_client_ip(request),
                )
                # Raised exceptions bypass the app handlers at this layer
                error = DonorHubException(
                    MessageCode.BAD_REQUEST,
                    status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                    details={
                        "description": f"Request size ({content_length} bytes) exceeds "
                        f"maximum allowed ({self.max_request_size} bytes)"
                    },
                )
                return JSONResponse(
                    status_code=error.status_code, content=error.to_response_dict()
                )

        return await call_next(request)
