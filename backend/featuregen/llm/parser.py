import json
import re
from typing import List

from pydantic import ValidationError

from featuregen.errors import ResponseDecodeError, ResponseShapeError
from featuregen.schemas import FeatureDescriptor


JSON_FENCE = re.compile(r"```json\s*([\s\S]*?)\s*```")


# ============================================================
# FENCED BLOCK EXTRACTION (LLM TRUST BOUNDARY)
# ============================================================

def extract_json_text(raw: str) -> str:
    """
    Return the body of the first ```json fenced block, trimmed.

    Falls back to the raw reply when there is no fence or the fence
    is empty.
    """
    match = JSON_FENCE.search(raw)
    if match:
        body = match.group(1).strip()
        if body:
            return body
    return raw


# ============================================================
# FEATURE DESCRIPTOR PARSER
# ============================================================

def parse_feature_descriptors(raw: str) -> List[FeatureDescriptor]:
    text = extract_json_text(raw or "")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResponseDecodeError(f"Model reply is not valid JSON: {e.msg}") from e

    if not isinstance(data, list):
        raise ResponseShapeError(
            f"Expected a JSON array of features, got {type(data).__name__}"
        )

    features = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ResponseShapeError(f"Feature #{index} is not an object")
        try:
            features.append(FeatureDescriptor.model_validate(item))
        except ValidationError as e:
            raise ResponseShapeError(f"Feature #{index} is invalid: {e}") from e

    return features
