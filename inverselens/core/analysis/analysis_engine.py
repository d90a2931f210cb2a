"""Two-phase image analysis engine backed by Google Gemini.

Phase 1 reads the image literally. Phase 2 feeds that reading back to the
model and asks for its mirror-universe inversion, so the mirror is grounded
in the engine's own interpretation instead of being invented independently.

Dependencies: asyncio, json, logging, google.genai
System role: Analysis Engine (external AI capability adapter)
"""

import asyncio
import json
import logging
from typing import Any

from google import genai
from google.genai import types

from inverselens.core.analysis.analysis_prompt import (
    MAX_ELEMENTS,
    MIRROR_DESCRIPTION_PLACEHOLDER,
    MIRROR_SYSTEM_INSTRUCTION,
    MOOD_PLACEHOLDER,
    ORIGINAL_ANALYSIS_PROMPT,
    ORIGINAL_DESCRIPTION_PLACEHOLDER,
    ORIGINAL_SYSTEM_INSTRUCTION,
    PERSPECTIVE_RESPONSE_SCHEMA,
    build_mirror_prompt,
)
from inverselens.core.analysis.analysis_schema import (
    AnalysisPerspective,
    AnalysisResult,
)
from inverselens.core.exceptions import AnalysisError

logger = logging.getLogger(__name__)

DEFAULT_MODEL_ID = "gemini-2.5-pro"
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_MIME_TYPE = "image/jpeg"


def parse_perspective(raw_text: str | None, description_placeholder: str) -> AnalysisPerspective:
    """Parse a model response body into a perspective, defaulting per field.

    Never raises: an unparsable body, a non-object payload, or a missing,
    empty or mistyped field each fall back to the placeholder for that field.
    Non-string elements are dropped and the list is capped at MAX_ELEMENTS.

    Args:
        raw_text: Response text from the model (JSON expected)
        description_placeholder: Fallback description for this phase

    Returns:
        AnalysisPerspective: Normalized perspective
    """
    try:
        payload: Any = json.loads(raw_text or "{}")
    except json.JSONDecodeError as e:
        logger.warning(
            f"{__name__}:parse_perspective - Unparsable response body, using defaults - {e}"
        )
        payload = {}

    if not isinstance(payload, dict):
        logger.warning(
            f"{__name__}:parse_perspective - Expected JSON object, got {type(payload).__name__}"
        )
        payload = {}

    description = payload.get("description")
    if not isinstance(description, str) or not description:
        description = description_placeholder

    elements = payload.get("elements")
    if isinstance(elements, list):
        elements = [item for item in elements if isinstance(item, str)][:MAX_ELEMENTS]
    else:
        elements = []

    mood = payload.get("mood")
    if not isinstance(mood, str) or not mood:
        mood = MOOD_PLACEHOLDER

    return AnalysisPerspective(description=description, elements=elements, mood=mood)


class AnalysisEngine:
    """Produces original and mirror perspectives for an image.

    Each phase is one Gemini call with no retry. The blocking SDK call runs in
    a worker thread and is bounded by ``timeout_seconds``.
    """

    def __init__(
        self,
        client: genai.Client,
        model_id: str = DEFAULT_MODEL_ID,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize engine with a Gemini client.

        Args:
            client: Google Gen AI client (or compatible stub in tests)
            model_id: Gemini model used for both phases
            timeout_seconds: Upper bound for each individual call
        """
        self._client = client
        self._model_id = model_id
        self._timeout_seconds = timeout_seconds

    @classmethod
    def from_api_key(
        cls,
        google_api_key: str | None,
        model_id: str = DEFAULT_MODEL_ID,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> "AnalysisEngine":
        """Build an engine with a fresh Gemini client.

        Raises:
            ValueError: If google_api_key is not provided
        """
        if not google_api_key:
            raise ValueError("GOOGLE_API_KEY environment variable is required")
        logger.debug(f"{__name__}:from_api_key - Creating Google Gemini client")
        return cls(
            client=genai.Client(api_key=google_api_key),
            model_id=model_id,
            timeout_seconds=timeout_seconds,
        )

    async def analyze(
        self,
        image_bytes: bytes,
        mime_type: str = DEFAULT_MIME_TYPE,
    ) -> AnalysisResult:
        """Run the literal analysis, then the mirror analysis derived from it.

        Args:
            image_bytes: Raw image content; not validated here
            mime_type: MIME type sent alongside the inline image

        Returns:
            AnalysisResult: Original and mirror perspectives

        Raises:
            AnalysisError: If either Gemini call fails or times out
        """
        logger.info(
            f"{__name__}:analyze - START image_bytes={len(image_bytes)}, mime_type={mime_type}"
        )

        original_text = await self._generate(
            phase="original",
            contents=[
                types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                ORIGINAL_ANALYSIS_PROMPT,
            ],
            system_instruction=ORIGINAL_SYSTEM_INSTRUCTION,
        )
        original = parse_perspective(original_text, ORIGINAL_DESCRIPTION_PLACEHOLDER)

        mirror_text = await self._generate(
            phase="mirror",
            contents=build_mirror_prompt(
                description=original.description,
                elements=original.elements,
                mood=original.mood,
            ),
            system_instruction=MIRROR_SYSTEM_INSTRUCTION,
        )
        mirror = parse_perspective(mirror_text, MIRROR_DESCRIPTION_PLACEHOLDER)

        logger.info(
            f"{__name__}:analyze - END "
            f"original_elements={len(original.elements)}, mirror_elements={len(mirror.elements)}"
        )
        return AnalysisResult(original=original, mirror=mirror)

    async def _generate(
        self,
        phase: str,
        contents: Any,
        system_instruction: str,
    ) -> str | None:
        """Make one structured-output call and return the raw response text."""
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            response_mime_type="application/json",
            response_schema=PERSPECTIVE_RESPONSE_SCHEMA,
        )

        try:
            logger.debug(f"{__name__}:_generate - Calling Gemini API phase={phase}")
            response = await asyncio.wait_for(
                asyncio.to_thread(
                    self._client.models.generate_content,
                    model=self._model_id,
                    contents=contents,
                    config=config,
                ),
                timeout=self._timeout_seconds,
            )
            text = getattr(response, "text", None)
        except asyncio.TimeoutError as e:
            logger.error(
                f"{__name__}:_generate - FAILED phase={phase} - "
                f"timed out after {self._timeout_seconds}s"
            )
            raise AnalysisError(phase=phase) from e
        except Exception as e:
            logger.error(
                f"{__name__}:_generate - FAILED phase={phase} - {type(e).__name__}: {e}",
                exc_info=True,
            )
            raise AnalysisError(phase=phase) from e

        logger.info(f"{__name__}:_generate - Gemini API called successfully phase={phase}")
        return text
