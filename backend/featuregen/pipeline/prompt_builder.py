from featuregen.llm.client import load_prompt

PROMPT_FILE = "features.txt"
EMPTY_REQUIREMENTS_PLACEHOLDER = "Please provide your specific project requirements"


def build_feature_prompt(requirements: str) -> str:
    """
    Wrap the user's requirements in the feature-list instruction template.
    Blank input is replaced by a placeholder so the prompt stays well formed.
    """
    text = (requirements or "").strip() or EMPTY_REQUIREMENTS_PLACEHOLDER
    # Template contains literal JSON braces, so str.format is not usable here
    return load_prompt(PROMPT_FILE).replace("{requirements}", text, 1)
