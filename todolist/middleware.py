"""WSGI middleware letting HTML forms reach PATCH, PUT and DELETE routes."""
import logging
from io import BytesIO
from urllib.parse import parse_qs

log = logging.getLogger(__name__)

OVERRIDABLE_METHODS = frozenset(['PATCH', 'PUT', 'DELETE'])
FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'


class MethodOverrideMiddleware:
    """Rewrite a POST using the ``X-HTTP-Method-Override`` header or a
    ``_method`` form field.

    The form body is read once and put back on ``wsgi.input`` so the
    application still sees every field.
    """

    def __init__(self, app, field='_method'):
        self.app = app
        self.field = field

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            method = environ.get('HTTP_X_HTTP_METHOD_OVERRIDE') or self._form_method(environ)
            method = (method or '').upper()
            if method in OVERRIDABLE_METHODS:
                log.debug('method override POST -> %s for %s', method, environ.get('PATH_INFO'))
                environ['REQUEST_METHOD'] = method
        return self.app(environ, start_response)

    def _form_method(self, environ):
        content_type = environ.get('CONTENT_TYPE', '')
        if not content_type.startswith(FORM_CONTENT_TYPE):
            return None
        try:
            length = int(environ.get('CONTENT_LENGTH') or 0)
        except ValueError:
            return None
        if length <= 0:
            return None

        body = environ['wsgi.input'].read(length)
        environ['wsgi.input'] = BytesIO(body)
        values = parse_qs(body.decode('latin-1')).get(self.field)
        return values[0] if values else None
