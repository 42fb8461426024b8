"""
Path2Hack Backend: Middleware Package
======================================

Middleware Chain (request direction):
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    1. Request ID first, so every later log line can carry it
    2. Access logging measures the full handler duration and final status
    3. GZip and CORS come from FastAPI/Starlette
"""
