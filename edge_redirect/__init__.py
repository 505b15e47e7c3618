from edge_redirect.rewriter import (
    DEFAULT_DOCUMENT,
    InboundRequest,
    Redirect,
    RewriteResult,
    RewrittenRequest,
    rewrite,
)

__all__ = [
    "DEFAULT_DOCUMENT",
    "InboundRequest",
    "Redirect",
    "RewriteResult",
    "RewrittenRequest",
    "rewrite",
]
