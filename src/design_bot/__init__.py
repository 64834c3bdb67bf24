"""Design Bot.

Turns a meeting transcript into a GitHub project:
- an LLM derives a project name, README and work items
- the completion text is parsed into structured data
- a repository, README and one issue per work item are created on GitHub
"""

__version__ = "0.1.0"

from design_bot.config import DesignBotSettings
from design_bot.extraction import DesignOutput, parse_design_output

__all__ = ["__version__", "DesignBotSettings", "DesignOutput", "parse_design_output"]
