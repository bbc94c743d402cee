# Middleware package init
"""
Hauge API — Middleware Package
===============================

Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    Request ID runs first so every log line of the request carries its id;
    the access log measures status and duration on the way back out.
"""
