from comment_resolver.core.domain.review import PromptPayload


class SuggestionPromptBuilder:
    """Builds the two-part suggestion prompt.

    The system part is a fixed preamble; the user part embeds one comment's
    payload between explicit start/end markers. Output is deterministic for a
    given payload.
    """

    # ── System Prompt ──────────────────────────────────────────────

    @staticmethod
    def build_system_prompt() -> str:
        sections = [
            _role_section(),
            _output_format_section(),
            _fallback_section(),
        ]
        return "\n\n".join(sections)

    # ── User Prompt ────────────────────────────────────────────────

    @staticmethod
    def build_user_prompt(payload: PromptPayload) -> str:
        sections = [
            _reviewer_comment_section(payload.reviewer_comment),
            _code_context_section(payload),
            _original_code_section(payload.original_code),
        ]
        if payload.project_rules:
            sections.append(_project_rules_section(payload.project_rules))
        sections.append(_final_instruction_section())
        return "\n\n".join(sections)

    def build(self, payload: PromptPayload) -> tuple[str, str]:
        """Return ``(system_prompt, user_prompt)`` for the payload."""
        return self.build_system_prompt(), self.build_user_prompt(payload)


# ── System Prompt Helpers ────────────────────────────────────────────


def _role_section() -> str:
    return (
        "You are an expert software developer assisting with code reviews. "
        "Your task is to provide a code suggestion that addresses a reviewer's comment."
    )


def _output_format_section() -> str:
    return (
        "Respond ONLY with one commit suggestion markdown block followed by a "
        "one-line rationale for the change.\n\n"
        "The response must look like:\n"
        "```suggestion\n"
        "<replacement code for the exact original lines>\n"
        "```\n"
        "Rationale: <your one-line rationale>"
    )


def _fallback_section() -> str:
    return (
        "If you cannot provide a suggestion or the request is unclear, respond with:\n"
        "```suggestion\n"
        "// No suggestion could be generated for this comment.\n"
        "```\n"
        "Rationale: <brief reason why no suggestion could be made>"
    )


# ── User Prompt Helpers ──────────────────────────────────────────────


def _reviewer_comment_section(comment: str) -> str:
    return f'A reviewer has made the following comment:\n"{comment}"'


def _code_context_section(payload: PromptPayload) -> str:
    header = "Here is the relevant code context"
    if payload.file_path:
        header += f" from file `{payload.file_path}`"
    if payload.language:
        header += f" (language: {payload.language})"
    return (
        f"{header}:\n"
        "--- start of extended code context ---\n"
        f"{payload.code_context}\n"
        "--- end of extended code context ---"
    )


def _original_code_section(original_code: str) -> str:
    return (
        "Here is the original code the suggestion must replace:\n"
        "--- start of exact original code lines ---\n"
        f"{original_code}\n"
        "--- end of exact original code lines ---"
    )


def _project_rules_section(rules: str) -> str:
    return f"Please ensure your suggestion complies with the following project rules:\n{rules}"


def _final_instruction_section() -> str:
    return (
        "Based on the comment and the code, provide a commit suggestion markdown "
        "block and a one-line rationale."
    )
