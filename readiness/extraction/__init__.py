"""Page classification and content extraction package."""

# Lazy imports - use explicit imports when needed:
# from readiness.extraction.extractor import ContentExtractor, ExtractorConfig, extract_content
# from readiness.extraction.signals import PageSignals, collect_page_signals
# from readiness.extraction.page_type import classify_page_type, detect_page_type
# from readiness.extraction.business_type import detect_business_type
# from readiness.extraction.error_page import check_error_page, is_error_page

__all__ = [
    # Extractor
    "ContentExtractor",
    "ExtractorConfig",
    "extract_content",
    # Signals
    "PageSignals",
    "collect_page_signals",
    # Classification
    "PageTypeResult",
    "classify_page_type",
    "detect_page_type",
    "detect_business_type",
    # Error pages
    "ErrorPageCheck",
    "check_error_page",
    "is_error_page",
]
