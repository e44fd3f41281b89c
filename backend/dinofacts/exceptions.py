"""
Dinosaur Facts Backend — Custom Exception Hierarchy
====================================================

What:  Application-specific exceptions for the few error scenarios we have.
Why:   Store failures must never leak raw driver messages to clients; a
       dedicated type lets us log the detail and answer with a generic body.
How:   Each exception carries a message and an optional context dict.
       The record store raises StoreError; FactService captures it into a
       FactQueryResult so the router maps it to a status code. Global
       handlers in main.py cover anything raised outside that path.

Exception Hierarchy:
    DinoFactsError (base)
    ├── NotFoundError   → 404 Not Found
    └── StoreError      → 500 Internal Server Error

Note:
    An empty search result is NOT an exception. It is a normal outcome that
    the router turns into a 404 body of its own.
"""

from typing import Any, Dict, Optional


class DinoFactsError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Error description (logged; only returned when safe)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(DinoFactsError):
    """
    Raised when a static resource does not exist.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StoreError(DinoFactsError):
    """
    Raised when the external record store fails.

    What:    Network failure, authentication failure, missing table, bad query.
    HTTP:    500 Internal Server Error

    Security Note:
        `message` holds the driver's text and may name hosts, roles or
        tables. It is logged server-side only; clients get a generic body.
        No distinction is made between transient and permanent failures.
    """

    def __init__(
        self,
        message: str = "The record store request failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
