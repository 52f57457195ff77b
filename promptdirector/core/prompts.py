"""
Request text sent to the Gemini chat session.

The template placeholders ``[Theme: YYYYYYYYYY]`` and ``[Paste Script]`` are
filled in by the model itself, following the instructions composed here.
"""

import textwrap

THEME_PLACEHOLDER = "[Theme: YYYYYYYYYY]"
SCRIPT_PLACEHOLDER = "[Paste Script]"

SYSTEM_INSTRUCTION = textwrap.dedent(
    """\
    You are an expert Visual Prompt Director.
    Your task is to take a Video Script and a Visual Prompt Template, and generate a specific output format containing "Source Context" and "Prompts".

    CRITICAL RULES:
    1. "Source Context" MUST be an EXACT VERBATIM EXCERPT from the provided "Script Content". Do NOT rephrase, summarize, or hallucinate text that is not in the script.
    2. Strictly follow the user's requested output format.
    3. Do not include commentary, conversational filler, or Markdown formatting like bolding headers unless the template asks for it.
    4. Maintain continuous numbering for "Source Context" and "Prompt" across multiple interactions.
    5. If the previous context ended at N, the next one starts at N+1.
    """
)

_INITIAL_TEMPLATE = """\
I have a "Prompt Visual Image" template and a "Script Content".

PLEASE PERFORM THE FOLLOWING ACTIONS:
1. Take the {theme_placeholder} section in the template below and replace YYYYYYYYYY with: "{theme}".
2. Take the {script_placeholder} section in the template below and replace it with the "SCRIPT CONTENT" provided below.
3. Generate the output based on the logic inside the "Prompt Visual Image" file.

--- "PROMPT VISUAL IMAGE" TEMPLATE START ---
{template}
--- "PROMPT VISUAL IMAGE" TEMPLATE END ---

--- SCRIPT CONTENT START ---
{script}
--- SCRIPT CONTENT END ---

OUTPUT FORMAT REQUIREMENTS:
Source Context:
Source Context 1: [Exact text copy-pasted from Script]
Source Context 2: [Exact text copy-pasted from Script]

Prompt:
Prompt 1: ...
Prompt 2: ...

IMPORTANT: ensure every "Source Context" is a direct copy-paste from the "SCRIPT CONTENT" provided above.
(List only the prompts. No commentary, no spacing between lines.)
"""

_CONTINUATION_TEMPLATE = """\
Here is the NEW SCRIPT CONTENT to continue the story:

--- NEW SCRIPT START ---
{new_script}
--- NEW SCRIPT END ---

INSTRUCTIONS:
1. Continue generating Source Context and Visual Prompts for this new script section based on the previous "Prompt Visual Image" template logic.
2. IMPORTANT: "Source Context" MUST be exactly extracted (copy-paste) from the new script provided above.
3. IMPORTANT: Verify the numbering.
   - The last Source Context index was likely around {last_source}. The new one MUST start at {next_source}.
   - The last Prompt index was likely around {last_prompt}. The new one MUST start at {next_prompt}.
4. Keep the same strict Output Format.
"""


def build_initial_prompt(theme: str, script: str, template: str) -> str:
    """
    Compose the first request of a session.

    Args:
        theme (str): Title substituted into the template's theme placeholder.
        script (str): Raw script substituted into the template's script placeholder.
        template (str): The "Prompt Visual Image" template.

    Returns:
        str: The request text.
    """
    # str.format does not re-scan substituted values, so braces in user text are safe.
    return _INITIAL_TEMPLATE.format(
        theme_placeholder=THEME_PLACEHOLDER,
        script_placeholder=SCRIPT_PLACEHOLDER,
        theme=theme.strip(),
        template=template,
        script=script,
    )


def build_continuation_prompt(
    new_script: str, last_source_index: int, last_prompt_index: int
) -> str:
    """
    Compose a follow-up request that carries the numbering hint.

    Args:
        new_script (str): The next chunk of the script.
        last_source_index (int): Highest ``Source Context`` index seen so far.
        last_prompt_index (int): Highest ``Prompt`` index seen so far.

    Returns:
        str: The request text.
    """
    return _CONTINUATION_TEMPLATE.format(
        new_script=new_script,
        last_source=last_source_index,
        next_source=last_source_index + 1,
        last_prompt=last_prompt_index,
        next_prompt=last_prompt_index + 1,
    )
