from promptdirector.core.prompts import (
    SCRIPT_PLACEHOLDER,
    SYSTEM_INSTRUCTION,
    THEME_PLACEHOLDER,
    build_continuation_prompt,
    build_initial_prompt,
)


def test_initial_prompt_embeds_inputs() -> None:
    """
    Test that the initial prompt carries the theme, template, script and format rules.
    """
    prompt = build_initial_prompt(
        theme="  Lost City  ",
        script="The explorer walked in.",
        template="[Theme: YYYYYYYYYY]\n[Paste Script]",
    )
    assert 'replace YYYYYYYYYY with: "Lost City"' in prompt
    assert THEME_PLACEHOLDER in prompt
    assert SCRIPT_PLACEHOLDER in prompt
    assert "The explorer walked in." in prompt
    assert "Source Context 1: [Exact text copy-pasted from Script]" in prompt
    assert "Prompt 1: ..." in prompt


def test_initial_prompt_keeps_braces_in_user_text() -> None:
    """
    Test that braces in the template or script are passed through untouched.
    """
    prompt = build_initial_prompt("t", "a {b} c", "{theme} {0}")
    assert "a {b} c" in prompt
    assert "{theme} {0}" in prompt


def test_continuation_prompt_contains_next_indices() -> None:
    """
    Test that counters at (5, 5) produce a request that asks to start at 6 and 6.
    """
    prompt = build_continuation_prompt("Next part.", 5, 5)
    assert "likely around 5. The new one MUST start at 6." in prompt
    assert prompt.count("MUST start at 6") == 2
    assert "Next part." in prompt


def test_continuation_prompt_uses_each_counter() -> None:
    """
    Test that the source and prompt hints are computed independently.
    """
    prompt = build_continuation_prompt("x", 3, 11)
    assert "Source Context index was likely around 3. The new one MUST start at 4." in prompt
    assert "Prompt index was likely around 11. The new one MUST start at 12." in prompt


def test_system_instruction_requires_continuous_numbering() -> None:
    """
    Test that the system instruction asks for verbatim excerpts and continuous numbering.
    """
    assert "EXACT VERBATIM EXCERPT" in SYSTEM_INSTRUCTION
    assert "N+1" in SYSTEM_INSTRUCTION
