# Middleware package init
"""
Memos Backend — Middleware Package
===================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the access log line and any error response
    share the same correlation id.
"""
