from comment_resolver.core.application.parsing.suggestion_response_parser import (
    extract_rationale,
    generation_failure,
    parse_suggestion_response,
)

__all__ = ["extract_rationale", "generation_failure", "parse_suggestion_response"]
