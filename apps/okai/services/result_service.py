import logging

from apps.okai.models import DocumentAnalysis, GeneratedImage, Quiz, WebSearch
from apps.okai.schemas.results import DocumentAnalysisCreate, ImageCreate, QuizCreate, WebSearchCreate
from apps.okai.services.base import StoreService
from apps.okai.producers import ResultProducers

logger = logging.getLogger(__name__)


class ResultService(StoreService):
    """Runs a tool's producer and persists input and result together"""

    def __init__(self, db, producers: ResultProducers):
        super().__init__(db)
        self.producers = producers

    async def _save(self, record, action: str):
        self.db.add(record)
        await self._commit(action)
        await self._refresh(record, action)
        return record

    async def analyze_document(self, request: DocumentAnalysisCreate) -> DocumentAnalysis:
        analysis_result = await self.producers.document_analyzer.analyze(request.image_url, request.prompt)
        return await self._save(
            DocumentAnalysis(
                image_url=request.image_url,
                prompt=request.prompt,
                analysis_result=analysis_result
            ),
            "save document analysis"
        )

    async def generate_image(self, request: ImageCreate) -> GeneratedImage:
        image_url = await self.producers.image_generator.generate(request.prompt)
        return await self._save(
            GeneratedImage(prompt=request.prompt, image_url=image_url),
            "save generated image"
        )

    async def generate_quiz(self, request: QuizCreate) -> Quiz:
        quiz_data = await self.producers.quiz_generator.generate(request.source_text)
        quiz = await self._save(
            Quiz(source_text=request.source_text, quiz_data=quiz_data),
            "save quiz"
        )
        logger.info(f"Generated quiz {quiz.id} with {quiz.question_count} question(s)")
        return quiz

    async def search_web(self, request: WebSearchCreate) -> WebSearch:
        result = await self.producers.web_searcher.search(request.query)
        return await self._save(
            WebSearch(query=request.query, summary=result.summary, sources=list(result.sources)),
            "save web search"
        )
