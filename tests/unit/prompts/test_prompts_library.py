from pathlib import Path

import pytest

from grounded_chat.prompts.prompt import Prompt
from grounded_chat.prompts.prompts_library import PromptsLibrary


@pytest.fixture
def prompts_dir(tmp_path: Path) -> Path:
    """Create a temp directory with sample YAML prompt files."""
    (tmp_path / "analyst.yaml").write_text(
        """name: analyst
version: "1.0"
description: Grounded analyst
inputs:
  context: Retrieved passages
template: "Use only this context: {{ context }}"
"""
    )

    # Same prompt, new version with an extra input
    (tmp_path / "analyst_v2.yaml").write_text(
        """name: analyst
version: "2.0"
description: Grounded analyst with a persona
inputs:
  context: Retrieved passages
  persona: Voice to answer in
template: |
  You are {{ persona }}.
  Context: {{context}}
"""
    )

    (tmp_path / "notes.txt").write_text("not a prompt")

    return tmp_path


class TestPromptsLibrary:
    def test_loads_only_yaml_files(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        assert library.list() == [("analyst", "1.0"), ("analyst", "2.0")]

    def test_get_prompt_by_name_and_version(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        prompt = library.get("analyst", "2.0")

        assert isinstance(prompt, Prompt)
        assert prompt.description == "Grounded analyst with a persona"
        assert set(prompt.inputs) == {"context", "persona"}

    def test_get_raises_keyerror_for_unknown_prompt(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        with pytest.raises(KeyError, match="Prompt 'unknown' version '1.0' not found"):
            library.get("unknown", "1.0")

    def test_get_raises_keyerror_for_unknown_version(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        with pytest.raises(KeyError, match="Prompt 'analyst' version '9.9' not found"):
            library.get("analyst", "9.9")

    def test_empty_directory_loads_no_prompts(self, tmp_path: Path) -> None:
        assert PromptsLibrary(str(tmp_path)).list() == []

    def test_default_library_ships_grounded_analyst(self) -> None:
        prompt = PromptsLibrary.default().get("grounded_analyst", "1.0")

        assert prompt.inputs.keys() == {"context"}
        assert "{{ context }}" in prompt.template
        assert "DO NOT HALLUCINATE" in prompt.template


class TestPromptRender:
    def test_substitutes_placeholders(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(str(prompts_dir)).get("analyst", "2.0")

        rendered = prompt.render(context="[Source Page 1]: text", persona="an analyst")

        assert rendered == "You are an analyst.\nContext: [Source Page 1]: text\n"

    def test_missing_input_raises(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(str(prompts_dir)).get("analyst", "2.0")

        with pytest.raises(KeyError, match="missing inputs: persona"):
            prompt.render(context="x")

    def test_undeclared_input_raises(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(str(prompts_dir)).get("analyst", "1.0")

        with pytest.raises(ValueError, match="undeclared inputs: persona"):
            prompt.render(context="x", persona="y")

    def test_placeholders_in_values_stay_literal(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(str(prompts_dir)).get("analyst", "1.0")

        rendered = prompt.render(context="see {{ context }}")

        assert rendered == "Use only this context: see {{ context }}"

    def test_extra_fields_are_forbidden(self) -> None:
        with pytest.raises(ValueError):
            Prompt(
                name="p",
                version="1",
                description="d",
                inputs={},
                template="t",
                author="someone",  # type: ignore[call-arg]
            )
