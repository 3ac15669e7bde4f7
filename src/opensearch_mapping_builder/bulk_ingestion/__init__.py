"""Bulk ingestion exports."""

from .request_body_builder import BulkBodyError, BulkDocument, RequestBodyBuilder

__all__ = ["BulkBodyError", "BulkDocument", "RequestBodyBuilder"]
