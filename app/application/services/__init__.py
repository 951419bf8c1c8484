"""Application services: filter normalization, enrichment, assembly, error classification."""

from app.application.services.error_classifier import classify_store_error
from app.application.services.filter_normalizer import normalize_search_params
from app.application.services.response_assembler import (
    assemble,
    build_pagination,
    empty_result,
)
from app.application.services.result_enricher import ResultEnricher

__all__ = [
    "ResultEnricher",
    "assemble",
    "build_pagination",
    "classify_store_error",
    "empty_result",
    "normalize_search_params",
]
