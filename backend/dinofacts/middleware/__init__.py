# Middleware package init
"""
Dinosaur Facts Backend — Middleware Package
============================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → Route Handler

    1. Request ID first so every later log line can carry it
    2. Logging measures the full handler time and sees the final status
    3. GZip compresses large fact lists on the way out
"""
