from contextvars import ContextVar

# Visitor id for the current request, set by VisitorMiddleware. Lets storage
# helpers scope the durable store without threading the request through.
visitor_id_var: ContextVar[str | None] = ContextVar("visitor_id", default=None)
