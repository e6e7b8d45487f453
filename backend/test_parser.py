import pytest

from featuregen.errors import ResponseDecodeError, ResponseShapeError
from featuregen.llm.parser import extract_json_text, parse_feature_descriptors


def test_fenced_single_feature():
    features = parse_feature_descriptors('```json [ {"name":"A","description":"B"} ] ```')

    assert len(features) == 1
    assert features[0].name == "A"
    assert features[0].description == "B"
    assert features[0].user_stories == []
    assert features[0].technical_details == []
    assert features[0].priority is None


def test_unfenced_json_matches_fenced():
    body = '[{"name": "A", "description": "B", "priority": "low", "userStories": ["s"]}]'

    plain = parse_feature_descriptors(body)
    fenced = parse_feature_descriptors(f"Sure!\n```json\n{body}\n```\nDone.")

    assert plain == fenced


def test_extract_json_text_falls_back_to_raw():
    assert extract_json_text("no fence here") == "no fence here"
    assert extract_json_text("```json\n```") == "```json\n```"
    assert extract_json_text("```json\n  [1]  \n```") == "[1]"


def test_only_first_fence_is_used():
    raw = '```json\n[{"name": "first", "description": "x"}]\n```\n```json\n[]\n```'
    assert [f.name for f in parse_feature_descriptors(raw)] == ["first"]


def test_prose_is_a_decode_error():
    with pytest.raises(ResponseDecodeError):
        parse_feature_descriptors("I could not think of any features, sorry.")


def test_empty_reply_is_a_decode_error():
    with pytest.raises(ResponseDecodeError):
        parse_feature_descriptors("")


def test_object_instead_of_array_is_a_shape_error():
    with pytest.raises(ResponseShapeError):
        parse_feature_descriptors('{"name": "A", "description": "B"}')


def test_missing_required_field_is_a_shape_error():
    with pytest.raises(ResponseShapeError):
        parse_feature_descriptors('[{"name": "A"}]')


def test_non_object_item_is_a_shape_error():
    with pytest.raises(ResponseShapeError):
        parse_feature_descriptors('["just a string"]')


def test_priority_is_normalized_and_validated():
    [feature] = parse_feature_descriptors('[{"name": "A", "description": "B", "priority": " HIGH "}]')
    assert feature.priority == "high"

    with pytest.raises(ResponseShapeError):
        parse_feature_descriptors('[{"name": "A", "description": "B", "priority": "urgent"}]')


def test_null_lists_and_extra_keys_are_tolerated():
    [feature] = parse_feature_descriptors(
        '[{"name": "A", "description": "B", "userStories": null, "props": ["x"]}]'
    )
    assert feature.user_stories == []


def test_serializes_with_camel_case_aliases():
    [feature] = parse_feature_descriptors(
        '[{"name": "A", "description": "B", "technicalDetails": ["t"]}]'
    )
    dumped = feature.model_dump(by_alias=True)
    assert dumped["technicalDetails"] == ["t"]
    assert "userStories" in dumped
