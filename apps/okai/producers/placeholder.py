"""
Canned producers used until real model integrations exist
"""
from typing import Any, Dict, Optional

from apps.okai.producers.base import (
    ChatPrompt, ChatResponder, DocumentAnalyzer, ImageGenerator,
    QuizGenerator, SearchResult, VideoGenerator, WebSearcher
)

PLACEHOLDER_IMAGE_URL = "https://placeholder-image-url.com/generated.png"
VIDEO_QUEUED_MESSAGE = "Video generation queued"

SAMPLE_SOURCES = [
    "https://example.com/article1",
    "https://example.com/news2",
    "https://example.com/research3",
    "https://example.com/blog4",
]


class PlaceholderDocumentAnalyzer(DocumentAnalyzer):
    async def analyze(self, image_url: str, prompt: str) -> str:
        prompt_lower = prompt.lower()

        if "extract" in prompt_lower or "text" in prompt_lower:
            return (
                f"Text extracted from document at {image_url}:\n\n"
                "This document appears to contain structured text content. "
                "Key information has been identified and extracted for further processing."
            )
        if "summarize" in prompt_lower or "summary" in prompt_lower:
            return (
                "Document Summary:\n\n"
                "This document has been analyzed and summarized. The main points and key "
                "information have been identified and condensed into a concise overview."
            )
        if "analyze" in prompt_lower or "analysis" in prompt_lower:
            return (
                "Document Analysis:\n\n"
                f"Based on the analysis of the image at {image_url}, this document contains "
                f"structured information that has been processed according to your request: \"{prompt}\"."
            )
        return (
            f"Document processed successfully. Analysis completed for image: {image_url}\n\n"
            f"Prompt: {prompt}\n\n"
            "The document has been analyzed using multimodal AI capabilities."
        )


class PlaceholderImageGenerator(ImageGenerator):
    async def generate(self, prompt: str) -> str:
        return PLACEHOLDER_IMAGE_URL


class PlaceholderVideoGenerator(VideoGenerator):
    async def start(self, prompt: str, initial_image_url: Optional[str] = None) -> str:
        return VIDEO_QUEUED_MESSAGE


class PlaceholderQuizGenerator(QuizGenerator):
    async def generate(self, source_text: str) -> Dict[str, Any]:
        return {
            "quiz": [
                {
                    "question": "This is a sample question generated from the provided text?",
                    "options": ["Option A", "Option B", "Option C", "Option D"],
                    "answer": "Option A",
                }
            ]
        }


class PlaceholderWebSearcher(WebSearcher):
    async def search(self, query: str) -> SearchResult:
        summary = (
            f"Search results for \"{query}\": This is a comprehensive summary of findings from "
            "multiple web sources. The search covered recent developments, key information, "
            "and relevant details related to the query."
        )
        return SearchResult(summary=summary, sources=list(SAMPLE_SOURCES))


class PlaceholderChatResponder(ChatResponder):
    async def reply(self, prompt: ChatPrompt) -> str:
        if prompt.gen_z_mode:
            response = "yo that's actually fire 🔥 lemme break this down for you real quick... "
        elif prompt.copy_code_only_mode:
            response = "```javascript\n// Here's the code you requested\nconsole.log('Hello, World!');\n```"
        else:
            response = "I understand your message and I'm here to help. "

        if prompt.image_file_base64:
            response += "I can see the image you've shared. "
        if prompt.pdf_file_content:
            response += "I've reviewed the PDF content you provided. "

        return response + "Let me provide you with a comprehensive response based on your input."
