"""
Request logging middleware: one line per request with status and duration.
"""
import time
import logging

from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(MiddlewareMixin):
    def process_request(self, request):
        request._start_time = time.monotonic()

    def process_response(self, request, response):
        started = getattr(request, "_start_time", None)
        duration = (time.monotonic() - started) * 1000.0 if started is not None else 0.0
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s -> %s (%.2fms)",
            request.method,
            request.get_full_path(),
            response.status_code,
            duration,
        )
        return response
