# /app/services/prompt_library.py

"""
Central library for the prompts sent to the generative API. The content proxy
fills these templates; nothing else should build prompt text inline.
"""

CONTENT_VARIATIONS_PROMPT = """Create 4 variations of content to promote the "{card_name}" credit card from {bank_name}.
Platform: {platform}
Audience: {audience}
Language: {language}
Tone: {tone}

{custom_instruction}

The content should be platform-appropriate, concise, and persuasive. Return exactly 4 different variations, each on a new line, numbered 1-4."""

CUSTOM_INSTRUCTION_LINE = "Additional instruction: {custom_prompt}"

FALLBACK_VARIATION = "{card_name} from {bank_name} - Great choice for {audience}!"
