"""Response-mode negotiation and Turbo Stream rendering.

A single action serves two response shapes. Browsers navigating normally get
a full page or a redirect; Turbo form submissions advertise
``text/vnd.turbo-stream.html`` in their Accept header and get a short list of
``<turbo-stream>`` elements that append, replace or remove one row of the
rendered list.
"""
import enum
from dataclasses import dataclass
from typing import Optional

from flask import Response, request
from markupsafe import Markup

TURBO_STREAM_MIMETYPE = 'text/vnd.turbo-stream.html'

STREAM_ACTIONS = ('append', 'prepend', 'replace', 'update', 'remove', 'before', 'after')


class ResponseMode(enum.Enum):
    PAGE = 'page'
    STREAM = 'stream'

    @classmethod
    def from_request(cls, req=None):
        """Pick the response shape a client declared it can apply.

        Only an explicit turbo-stream entry counts; ``*/*`` does not.
        """
        req = req if req is not None else request
        accepted = (mimetype for mimetype, _quality in req.accept_mimetypes)
        if TURBO_STREAM_MIMETYPE in accepted:
            return cls.STREAM
        return cls.PAGE


@dataclass(frozen=True)
class StreamAction:
    action: str
    target: str
    html: Optional[str] = None

    def __post_init__(self):
        if self.action not in STREAM_ACTIONS:
            raise ValueError(f'unknown turbo-stream action: {self.action!r}')
        if self.action != 'remove' and self.html is None:
            raise ValueError(f'{self.action!r} needs a template body')

    def render(self):
        opening = Markup('<turbo-stream action="{}" target="{}">').format(
            self.action, self.target)
        if self.action == 'remove':
            return opening + Markup('</turbo-stream>')
        # html comes from render_template and is already escaped
        return opening + Markup('<template>') + Markup(self.html) + \
            Markup('</template></turbo-stream>')


def append(target, html):
    return StreamAction('append', target, html)


def replace(target, html):
    return StreamAction('replace', target, html)


def remove(target):
    return StreamAction('remove', target)


def stream_response(*actions, status=200):
    body = Markup('\n').join(action.render() for action in actions)
    return Response(str(body), status=status, mimetype=TURBO_STREAM_MIMETYPE)
