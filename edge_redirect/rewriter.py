"""Canonical host redirect and default document rewriting for edge requests.

Rules are evaluated in order and the first match wins:

1. ``www.`` hosts are redirected (301) to the bare host, uri untouched.
2. Directory paths (trailing ``/``) get ``index.html`` appended.
3. Paths without any ``.`` get ``/index.html`` appended.
4. Everything else passes through.

The dot test in rule 3 looks at the whole uri, not the last path segment, so
``/a.b/c`` passes through unchanged. Routing on the live site depends on this,
keep it as is.
"""
from dataclasses import dataclass, replace
from typing import Union

WWW_PREFIX = "www."
DEFAULT_DOCUMENT = "index.html"


@dataclass(frozen=True)
class InboundRequest:
    uri: str
    host: str


@dataclass(frozen=True)
class Redirect:
    location: str
    status_code: int = 301
    status_description: str = "Moved Permanently"


@dataclass(frozen=True)
class RewrittenRequest:
    request: InboundRequest
    rewritten: bool = False

    @property
    def uri(self) -> str:
        return self.request.uri


RewriteResult = Union[Redirect, RewrittenRequest]


def rewrite(request: InboundRequest) -> RewriteResult:
    host = request.host
    uri = request.uri

    if host.startswith(WWW_PREFIX):
        canonical_host = host[len(WWW_PREFIX):]
        return Redirect(location="https://" + canonical_host + uri)

    if uri.endswith("/"):
        return RewrittenRequest(replace(request, uri=uri + DEFAULT_DOCUMENT), rewritten=True)

    if "." not in uri:
        return RewrittenRequest(replace(request, uri=uri + "/" + DEFAULT_DOCUMENT), rewritten=True)

    return RewrittenRequest(request)
