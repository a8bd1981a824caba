from unittest import mock

from django.http import HttpResponse
from django.test import RequestFactory

from tool_inventory.apps.common.middleware import ip_logging_middleware
from tool_inventory.apps.common.middleware.ip_logging_middleware import LogIPMiddleware


class TestLogIPMiddleware:
    def setup_method(self):
        self.factory = RequestFactory()
        self.middleware = LogIPMiddleware(lambda request: HttpResponse(status=200))

    def test_logs_remote_address(self):
        request = self.factory.get('/api/analytics/vendor-summary/', REMOTE_ADDR='10.0.0.7')

        with mock.patch.object(ip_logging_middleware, 'logger') as logger:
            response = self.middleware(request)

        assert response.status_code == 200
        logger.info.assert_called_once_with('GET /api/analytics/vendor-summary/ from IP: 10.0.0.7 -> 200')

    def test_prefers_forwarded_for_header(self):
        request = self.factory.get('/', HTTP_X_FORWARDED_FOR='203.0.113.5, 10.0.0.1')

        with mock.patch.object(ip_logging_middleware, 'logger') as logger:
            self.middleware(request)

        assert 'from IP: 203.0.113.5' in logger.info.call_args[0][0]
