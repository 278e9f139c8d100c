from .prompt import Prompt
from .prompts_library import PromptsLibrary

__all__ = ["Prompt", "PromptsLibrary"]
