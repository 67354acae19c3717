"""
Producer interfaces for the assistant tools.

A producer turns a tool's input into its result. The stores only persist what
a producer returns, so a real model integration can replace any of these
without touching the persistence code.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class SearchResult:
    summary: str
    sources: List[str] = field(default_factory=list)


@dataclass
class ChatPrompt:
    """Everything a chat responder needs to answer one user turn"""
    content: str
    system_prompt: str = ""
    gen_z_mode: bool = False
    copy_code_only_mode: bool = False
    target_language: str = "english"
    image_file_base64: Optional[str] = None
    pdf_file_content: Optional[str] = None


class DocumentAnalyzer(ABC):
    @abstractmethod
    async def analyze(self, image_url: str, prompt: str) -> str:
        """Return the analysis text for the document image"""


class ImageGenerator(ABC):
    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Return the URL of the generated image"""


class VideoGenerator(ABC):
    @abstractmethod
    async def start(self, prompt: str, initial_image_url: Optional[str] = None) -> str:
        """Kick off generation and return the initial progress message"""


class QuizGenerator(ABC):
    @abstractmethod
    async def generate(self, source_text: str) -> Dict[str, Any]:
        """Return quiz data shaped as {"quiz": [{"question", "options", "answer"}]}"""


class WebSearcher(ABC):
    @abstractmethod
    async def search(self, query: str) -> SearchResult:
        ...


class ChatResponder(ABC):
    @abstractmethod
    async def reply(self, prompt: ChatPrompt) -> str:
        ...
