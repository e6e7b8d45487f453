import logging
from typing import List, Protocol

from featuregen.errors import FeatureGenerationError, ModelInvocationError
from featuregen.llm.parser import extract_json_text, parse_feature_descriptors
from featuregen.pipeline.prompt_builder import build_feature_prompt
from featuregen.schemas import FeatureDescriptor

logger = logging.getLogger(__name__)


class TextModel(Protocol):
    def generate(self, prompt: str) -> str:
        ...


class FeatureGenerator:
    """
    Requirements -> prompt -> model reply -> feature descriptors.

    One model call per run, no retries.
    """

    def __init__(self, client: TextModel):
        self.client = client

    def run(self, requirements: str) -> List[FeatureDescriptor]:
        prompt = build_feature_prompt(requirements)

        try:
            raw = self.client.generate(prompt)
        except FeatureGenerationError:
            raise
        except Exception as e:
            raise ModelInvocationError(f"Model call failed: {e}") from e

        logger.debug("[Generator] Cleaned text: %s", extract_json_text(raw))

        features = parse_feature_descriptors(raw)
        logger.info("[Generator] Parsed %d features", len(features))
        return features
