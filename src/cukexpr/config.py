TRACE_LOGGING = False
"""Log internal parser failures (with tracebacks) at debug level."""
