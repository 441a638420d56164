"""Observability helpers.

Structured logging with per-request context, plus the process-local hit counter
behind the admin metrics page.
"""
