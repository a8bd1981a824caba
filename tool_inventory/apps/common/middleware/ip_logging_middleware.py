import logging

logger = logging.getLogger('django.server')


class LogIPMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
        if x_forwarded_for:
            ip = x_forwarded_for.split(',')[0].strip()
        else:
            ip = request.META.get('REMOTE_ADDR')

        response = self.get_response(request)
        logger.info(f"{request.method} {request.path} from IP: {ip} -> {response.status_code}")
        return response
