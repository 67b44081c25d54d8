# Middleware package init
"""
Board Backend — Middleware Package
===================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation ID for logs and error bodies
    2. Logging: one access line per request, tagged with the request ID
    3. CORS: FastAPI's CORSMiddleware (handles preflight)
"""
