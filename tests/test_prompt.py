"""Tests for translation prompt construction."""

from translate_ai.prompt import Prompt, build_prompt


class TestBuildPrompt:
    def test_system_instruction(self):
        prompt = build_prompt("English", "Italian", "Hello")
        assert prompt.system == (
            "Translate the following text from English to Italian. "
            "Only return the Italian translation without any extra explanation or text."
        )

    def test_user_text_verbatim(self):
        """User text is passed through untouched, braces and whitespace included."""
        text = "  {name} said: \"hi\"\n"
        assert build_prompt("English", "French", text).user == text

    def test_same_source_and_target(self):
        prompt = build_prompt("Greek", "Greek", "καλημέρα")
        assert "from Greek to Greek" in prompt.system

    def test_messages(self):
        prompt = Prompt(system="sys", user="hello")
        assert prompt.to_messages() == [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "hello"},
        ]
