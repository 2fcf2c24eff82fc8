"""Infrastructure layer — observability for the ToMusic client.

Modules:
    log_config  stderr logging setup for embedding applications.
    metrics     Prometheus request counters and latency histogram.
"""
