"""
Test cases for the recent activity feed
"""
from datetime import datetime, timedelta

from apps.okai.models import DocumentAnalysis, GeneratedImage, GeneratedVideo, Quiz, WebSearch
from apps.okai.services import ActivityService

BASE_TIME = datetime(2024, 1, 1, 9, 0, 0)


def at(minutes):
    return BASE_TIME + timedelta(minutes=minutes)


async def seed(db, rows):
    for row in rows:
        db.add(row)
    await db.commit()


class TestRecentActivities:
    """Test cases for merging the result tables"""

    def test_empty(self, run_in_db):
        async def scenario(db):
            return await ActivityService(db).list_recent()

        assert run_in_db(scenario) == []

    def test_newest_first_across_tables(self, run_in_db):
        async def scenario(db):
            await seed(db, [
                DocumentAnalysis(image_url="u", prompt="p", analysis_result="r", created_at=at(1)),
                GeneratedImage(prompt="p", image_url="u", created_at=at(5)),
                GeneratedVideo(prompt="p", created_at=at(3)),
                Quiz(source_text="t", quiz_data={"quiz": []}, created_at=at(4)),
                WebSearch(query="q", summary="s", sources=[], created_at=at(2)),
            ])
            return await ActivityService(db).list_recent(10)

        activities = run_in_db(scenario)
        assert [a.type for a in activities] == [
            "generated_image", "quiz", "generated_video", "web_search", "document_analysis"
        ]
        assert activities[2].data.status.value == "pending"

    def test_limit_applies_to_merged_feed(self, run_in_db):
        async def scenario(db):
            await seed(db, [GeneratedImage(prompt=f"img {i}", image_url="u", created_at=at(i)) for i in range(4)])
            await seed(db, [WebSearch(query=f"q {i}", summary="s", sources=[], created_at=at(10 + i)) for i in range(4)])
            return await ActivityService(db).list_recent(3)

        activities = run_in_db(scenario)
        assert [(a.type, a.data.query) for a in activities] == [
            ("web_search", "q 3"), ("web_search", "q 2"), ("web_search", "q 1")
        ]

    def test_ties_keep_table_order(self, run_in_db):
        async def scenario(db):
            await seed(db, [
                WebSearch(query="q", summary="s", sources=[], created_at=at(0)),
                Quiz(source_text="t", quiz_data={"quiz": []}, created_at=at(0)),
                DocumentAnalysis(image_url="u", prompt="p", analysis_result="r", created_at=at(0)),
            ])
            return await ActivityService(db).list_recent(10)

        assert [a.type for a in run_in_db(scenario)] == ["document_analysis", "quiz", "web_search"]
