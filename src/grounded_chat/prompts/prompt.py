import re

from pydantic import BaseModel, ConfigDict

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class Prompt(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    version: str
    description: str
    inputs: dict[str, str]
    template: str

    def render(self, **values: str) -> str:
        """Substitute ``{{ name }}`` placeholders with the given values.

        Every declared input must be supplied, and nothing else.
        """
        missing = [name for name in self.inputs if name not in values]
        if missing:
            raise KeyError(
                f"Prompt '{self.name}' missing inputs: {', '.join(sorted(missing))}"
            )
        unknown = [name for name in values if name not in self.inputs]
        if unknown:
            raise ValueError(
                f"Prompt '{self.name}' got undeclared inputs: "
                f"{', '.join(sorted(unknown))}"
            )
        # Single pass, so placeholders inside substituted values stay literal
        return _PLACEHOLDER.sub(
            lambda m: str(values.get(m.group(1), m.group(0))), self.template
        )
