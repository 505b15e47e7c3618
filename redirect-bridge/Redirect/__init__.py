import logging
import os
from urllib.parse import urlsplit, urlunsplit
import azure.functions as func

from edge_redirect import InboundRequest, Redirect, rewrite

logger = logging.getLogger(__name__)


def main(req: func.HttpRequest) -> func.HttpResponse:
    orig = urlsplit(req.url)
    host = req.headers.get("host") or orig.netloc

    # www. hosts never reach the origin, check them before config
    result = rewrite(InboundRequest(uri=orig.path or "/", host=host))
    if isinstance(result, Redirect):
        location = result.location
        if orig.query:
            location += "?" + orig.query
        logger.debug("Redirecting %s to %s", req.url, location)
        # 308 instead of the edge's 301, the bridge also takes POST/PUT/PATCH
        return func.HttpResponse(status_code=308, headers={"Location": location})

    target = os.environ.get("REDIRECT_TARGET") or os.environ.get("REDIRECT_TARGET_HOST")
    if not target:
        logger.error("REDIRECT_TARGET is not configured")
        return func.HttpResponse("Missing REDIRECT_TARGET", status_code=500)

    # Normalize target base (no trailing slash)
    target = target.rstrip('/')

    # Rebuild destination URL: rewritten path+original query on the target's scheme+host
    base = urlsplit(target)
    dest = urlunsplit((base.scheme, base.netloc, result.uri, orig.query, ""))
    logger.debug("Forwarding %s to %s", req.url, dest)

    # 308 to preserve method + body on POST/PUT/PATCH
    return func.HttpResponse(status_code=308, headers={"Location": dest})
