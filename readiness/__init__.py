"""AI Search Readiness Analyzer."""

# Lazy imports to avoid parsing dependencies at import time
# Use explicit imports when these are needed:
# from readiness.pipeline import analyze_page, PageAnalysis
# from readiness.extraction.extractor import extract_content
# from readiness.scoring.calculator import score
# from readiness.fixes.generator import generate_recommendations

__all__ = [
    "PageAnalysis",
    "analyze_page",
    "extract_content",
    "score",
    "generate_recommendations",
]


from typing import Any


def __getattr__(name: str) -> Any:
    """Lazy import for readiness submodules."""
    if name in ("PageAnalysis", "analyze_page"):
        from readiness.pipeline import PageAnalysis, analyze_page

        return locals()[name]
    elif name == "extract_content":
        from readiness.extraction.extractor import extract_content

        return extract_content
    elif name == "score":
        from readiness.scoring.calculator import score

        return score
    elif name == "generate_recommendations":
        from readiness.fixes.generator import generate_recommendations

        return generate_recommendations
    raise AttributeError(f"module 'readiness' has no attribute '{name}'")
