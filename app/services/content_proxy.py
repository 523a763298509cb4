# /app/services/content_proxy.py

"""
The server-side content proxy: turns the marketer's selections into a prompt,
asks the text-generation client for a numbered list, and shapes the answer into
exactly four variations.
"""

import re
from typing import List

from ..models.content_model import ContentProxyRequest, VARIATION_COUNT
from . import prompt_library
from .gemini_service import GeminiTextClient

# A numbered-list marker such as "1." or "12.".
VARIATION_MARKER = re.compile(r"\d+\.")


def build_prompt(request: ContentProxyRequest) -> str:
    custom_instruction = ""
    if request.customPrompt:
        custom_instruction = prompt_library.CUSTOM_INSTRUCTION_LINE.format(custom_prompt=request.customPrompt)
    return prompt_library.CONTENT_VARIATIONS_PROMPT.format(
        card_name=request.cardName,
        bank_name=request.bankName,
        platform=request.platform,
        audience=request.audience,
        language=request.language,
        tone=request.tone,
        custom_instruction=custom_instruction,
    )


def fallback_variation(card_name: str, bank_name: str, audience: str) -> str:
    return prompt_library.FALLBACK_VARIATION.format(
        card_name=card_name, bank_name=bank_name, audience=audience.lower()
    )


def split_variations(generated_text: str, card_name: str, bank_name: str, audience: str) -> List[str]:
    """
    Splits a numbered-list answer on its digit-dot markers, keeps at most four
    non-empty trimmed segments, and pads with the templated fallback until
    there are exactly four.
    """
    segments = [segment.strip() for segment in VARIATION_MARKER.split(generated_text or "")]
    variations = [segment for segment in segments if segment][:VARIATION_COUNT]

    while len(variations) < VARIATION_COUNT:
        variations.append(fallback_variation(card_name, bank_name, audience))
    return variations


async def generate_variations(request: ContentProxyRequest, text_client: GeminiTextClient) -> List[str]:
    """
    Runs one proxy round trip. MissingCredentialError and UpstreamGenerationError
    from the client propagate unchanged; there is no retry.
    """
    prompt = build_prompt(request)
    print(f"Sending prompt to Gemini: {prompt}")

    generated_text = await text_client.generate_text(prompt)
    variations = split_variations(generated_text, request.cardName, request.bankName, request.audience)

    print(f"Generated variations: {variations}")
    return variations
