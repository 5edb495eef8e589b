"""
Error taxonomy — closed set of failure categories.

  ConfigurationError  — missing/invalid startup settings (fatal)
  ValidationError     — tool arguments rejected by the schema
  NotFoundError       — unknown tool name
  BadRequestError     — malformed method or missing routing field
  ExecutionError      — executor / remote GraphQL failure of any kind

The front ends match on these at their outermost boundary and turn them
into response envelopes.
"""

from typing import Optional


class ShopifyMCPError(Exception):
    """Base class for every error the dispatch layer knows how to format."""

    status_code = 500

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(ShopifyMCPError):
    status_code = 500


class ValidationError(ShopifyMCPError):
    status_code = 400

    def __init__(self, path: str, reason: str, *, cause: Optional[BaseException] = None):
        where = path or "arguments"
        super().__init__(f"Invalid argument '{where}': {reason}", cause=cause)
        self.path = path
        self.reason = reason


class NotFoundError(ShopifyMCPError):
    status_code = 404


class BadRequestError(ShopifyMCPError):
    status_code = 400


class ExecutionError(ShopifyMCPError):
    status_code = 500
