"""Prompt templates and fallback values for the two analysis phases.

Placeholder strings are kept byte-for-byte stable: they end up in stored
records whenever the model returns an unusable body.

Dependencies: google.genai.types
System role: Prompt definitions for the analysis engine
"""

from google.genai import types

MAX_ELEMENTS = 4

ORIGINAL_DESCRIPTION_PLACEHOLDER = "Unable to analyze image"
MIRROR_DESCRIPTION_PLACEHOLDER = "Unable to generate mirror analysis"
MOOD_PLACEHOLDER = "Unknown"

ORIGINAL_SYSTEM_INSTRUCTION = (
    "You are an expert image analyst. Analyze the image and provide a detailed "
    "description, key elements, and mood."
)

ORIGINAL_ANALYSIS_PROMPT = (
    "Analyze this image in detail. Describe what you see, identify key visual "
    f"elements (limit to {MAX_ELEMENTS} most important), and describe the overall "
    "mood or atmosphere.\n\n"
    'Respond with JSON in this exact format: { "description": "detailed description", '
    '"elements": ["element1", "element2", "element3", "element4"], '
    '"mood": "mood description" }'
)

MIRROR_SYSTEM_INSTRUCTION = (
    "You are a creative AI that generates 'mirror universe' interpretations. "
    "Given an original image analysis, create a completely opposite, alternative "
    "reality version that inverts the key concepts, mood, and elements while "
    "maintaining the same structural format. Be creative and imaginative."
)

MIRROR_ANALYSIS_TEMPLATE = """Create a mirror universe interpretation of this image analysis. Invert and reverse all concepts to create an opposite reality version:

Original Analysis:
- Description: {description}
- Elements: {elements}
- Mood: {mood}

Generate the complete opposite interpretation as if this image existed in a parallel universe where everything is inverted."""

PERSPECTIVE_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "description": types.Schema(type=types.Type.STRING),
        "elements": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
            max_items=MAX_ELEMENTS,
        ),
        "mood": types.Schema(type=types.Type.STRING),
    },
    required=["description", "elements", "mood"],
)


def build_mirror_prompt(description: str, elements: list[str], mood: str) -> str:
    """Render the phase-2 prompt from a phase-1 perspective.

    Args:
        description: Literal description from phase 1
        elements: Key elements from phase 1, joined into a readable list
        mood: Mood from phase 1

    Returns:
        str: Prompt text for the mirror analysis call
    """
    return MIRROR_ANALYSIS_TEMPLATE.format(
        description=description,
        elements=", ".join(elements),
        mood=mood,
    )
