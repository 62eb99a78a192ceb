"""
Card Format Detector
===================

Classifies character card JSON by spec version.
"""

import json
import logging
from enum import Enum
from typing import Any, Dict

from chara_card.png import PngInvalidCharacterError

logger = logging.getLogger(__name__)


class CardSpec(Enum):
    """Character card specification versions."""
    V1 = "v1"
    V2 = "chara_card_v2"
    V3 = "chara_card_v3"
    UNKNOWN = "unknown"


class FormatDetector:
    """Detect character card spec version from decoded JSON."""

    @classmethod
    def detect(cls, json_text: str) -> CardSpec:
        """
        Detect the spec version of a card.

        Args:
            json_text: Card JSON as returned by ``PngCodec.parse``

        Returns:
            CardSpec of the card

        Raises:
            PngInvalidCharacterError: If the text is not a JSON object
        """
        try:
            parsed = json.loads(json_text)
        except json.JSONDecodeError as e:
            raise PngInvalidCharacterError(f"Character data is not valid JSON: {e}") from e

        if not isinstance(parsed, dict):
            raise PngInvalidCharacterError(
                f"Character data must be a JSON object, got {type(parsed).__name__}"
            )

        return cls.detect_dict(parsed)

    @staticmethod
    def detect_dict(card: Dict[str, Any]) -> CardSpec:
        spec = card.get("spec")
        if spec == CardSpec.V3.value:
            return CardSpec.V3
        if spec == CardSpec.V2.value:
            return CardSpec.V2
        if spec is not None:
            logger.warning(f"Unrecognized card spec: {spec!r}")
            return CardSpec.UNKNOWN

        # V1 cards are a flat object; a bare 'data' block is a V2 card missing its spec
        if isinstance(card.get("data"), dict):
            return CardSpec.V2
        if "name" in card:
            return CardSpec.V1

        return CardSpec.UNKNOWN

    @classmethod
    def get_format_name(cls, spec: CardSpec) -> str:
        """Get human-readable format name."""
        names = {
            CardSpec.V1: "Character Card V1",
            CardSpec.V2: "Character Card V2",
            CardSpec.V3: "Character Card V3",
            CardSpec.UNKNOWN: "Unknown Format"
        }
        return names.get(spec, "Unknown")
