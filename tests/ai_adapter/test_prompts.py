from ai_adapter.prompts import COLOR_TABLE, build_shape_prompt


def test_prompt_ends_with_user_request():
    prompt = build_shape_prompt("create a red rectangle")
    assert prompt.endswith("User request: create a red rectangle")


def test_prompt_lists_colors_and_actions():
    prompt = build_shape_prompt("x")
    assert '"red" -> {r: 255, g: 0, b: 0}' in prompt
    assert '"gray" or "grey" -> {r: 128, g: 128, b: 128}' in prompt
    assert '"needsDimensions": true' in prompt
    assert 'actionType: "text"' in prompt
    assert "Always respond with valid JSON only" in prompt


def test_prompt_keeps_braces_in_message():
    prompt = build_shape_prompt("write {hello}")
    assert prompt.endswith("User request: write {hello}")


def test_color_table():
    assert COLOR_TABLE["orange"] == (255, 165, 0)
    assert COLOR_TABLE["grey"] == COLOR_TABLE["gray"]
    assert len(COLOR_TABLE) == 11
