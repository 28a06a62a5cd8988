"""Unit tests: SuggestionPromptBuilder."""

import pytest

from comment_resolver.core.application.prompts import SuggestionPromptBuilder
from comment_resolver.core.domain.review import PromptPayload


@pytest.fixture()
def payload() -> PromptPayload:
    return PromptPayload(
        reviewer_comment="Rename `x` to something meaningful.",
        code_context="def total(items):\n    x = 0\n    for i in items:\n        x += i\n    return x",
        original_code="    x = 0",
        file_path="src/billing.py",
        language="python",
    )


class TestSystemPrompt:
    def test_describes_the_expected_grammar(self) -> None:
        system = SuggestionPromptBuilder.build_system_prompt()

        assert "```suggestion" in system
        assert "Rationale:" in system

    def test_includes_fallback_answer(self) -> None:
        system = SuggestionPromptBuilder.build_system_prompt()

        assert "No suggestion could be generated" in system


class TestUserPrompt:
    def test_embeds_comment_context_and_original_code(self, payload: PromptPayload) -> None:
        user = SuggestionPromptBuilder.build_user_prompt(payload)

        assert '"Rename `x` to something meaningful."' in user
        assert f"--- start of extended code context ---\n{payload.code_context}\n" in user
        assert "--- start of exact original code lines ---\n    x = 0\n" in user
        assert "`src/billing.py` (language: python)" in user

    def test_project_rules_only_when_configured(self, payload: PromptPayload) -> None:
        without_rules = SuggestionPromptBuilder.build_user_prompt(payload)
        with_rules = SuggestionPromptBuilder.build_user_prompt(
            PromptPayload(**{**payload.__dict__, "project_rules": "Use snake_case."})
        )

        assert "project rules" not in without_rules
        assert "project rules:\nUse snake_case." in with_rules

    def test_sections_are_ordered(self, payload: PromptPayload) -> None:
        user = SuggestionPromptBuilder.build_user_prompt(payload)

        assert user.index("reviewer has made") < user.index("extended code context")
        assert user.index("extended code context") < user.index("exact original code")
        assert user.rstrip().endswith("one-line rationale.")

    def test_build_is_deterministic(self, payload: PromptPayload) -> None:
        builder = SuggestionPromptBuilder()

        assert builder.build(payload) == builder.build(payload)
