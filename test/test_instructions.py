from generation.instructions import build_keyword_instruction, build_prompt_instruction


def test_keyword_instruction_mentions_topic_and_count():
    text = build_keyword_instruction("nature", 12)
    assert "exactly 12" in text
    assert '"nature"' in text
    assert "1-3 words" in text
    assert "one per line" in text


def test_prompt_instruction_lists_keywords_in_order():
    text = build_prompt_instruction(["owl", "fox", "bear", "wolf"], "photography")
    assert "exactly 4" in text
    assert "owl, fox, bear, wolf" in text
    assert "1. owl, 2. fox, 3. bear, 4. wolf" in text
    # example block only shows the first three keywords
    assert "[Prompt using bear]." in text
    assert "[Prompt using wolf]." not in text


def test_prompt_instruction_style_branches():
    photo = build_prompt_instruction(["owl"], "photography")
    vector = build_prompt_instruction(["owl"], "vector")
    assert "camera settings" in photo
    assert "scalable" in vector
    assert "camera settings" not in vector
    assert "vector art prompts" in vector
    for text in (photo, vector):
        assert "end with a period" in text
        assert "one complete sentence" in text
