from comment_resolver.core.application.context.code_context_extractor import (
    extract_context,
    extract_exact_slice,
)
from comment_resolver.core.application.context.language_detector import infer_language

__all__ = ["extract_context", "extract_exact_slice", "infer_language"]
