import logging
from dataclasses import replace

from edge_redirect.rewriter import InboundRequest, Redirect, rewrite

logger = logging.getLogger(__name__)


def handler(event: dict) -> dict:
    """CloudFront Functions viewer-request entry point.

    Returns a redirect response dict, or the event's request dict with
    ``uri`` updated in place.
    """
    request = event["request"]
    host = request["headers"]["host"]["value"]

    result = rewrite(InboundRequest(uri=request["uri"], host=host))
    if isinstance(result, Redirect):
        logger.debug("Redirecting %s%s to %s", host, request["uri"], result.location)
        return {
            "statusCode": result.status_code,
            "statusDescription": result.status_description,
            "headers": {"location": {"value": result.location}},
        }

    if result.rewritten:
        logger.debug("Rewrote %s to %s", request["uri"], result.uri)
        request["uri"] = result.uri
    return request


def _http_redirect(redirect: Redirect) -> dict:
    return {
        "status": str(redirect.status_code),
        "statusDescription": redirect.status_description,
        "headers": {
            "location": [{"key": "Location", "value": redirect.location}],
        },
    }


def lambda_handler(event: dict, context) -> dict:
    # Lambda@Edge viewer-request: headers are lists and the query string is
    # kept apart from the uri.
    request = event["Records"][0]["cf"]["request"]
    host = request["headers"]["host"][0]["value"]
    qs = request.get("querystring", "")

    result = rewrite(InboundRequest(uri=request["uri"], host=host))
    if isinstance(result, Redirect):
        location = result.location
        if qs:
            location += f"?{qs}"
        logger.debug("Redirecting %s%s to %s", host, request["uri"], location)
        return _http_redirect(replace(result, location=location))

    if result.rewritten:
        logger.debug("Rewrote %s to %s", request["uri"], result.uri)
        request["uri"] = result.uri
    return request
