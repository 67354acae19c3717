"""
Test cases for the chat session store
"""
import pytest
from sqlalchemy import select, func

from apps.okai.exceptions import DuplicateKey, NotFound
from apps.okai.models import ChatMessage, ChatSession, MessageRole
from apps.okai.schemas.chat import ChatSessionCreate, ChatSessionUpdate, MessageCreate
from apps.okai.services import MessageService, SessionService


async def count_messages(db, session_id=None):
    query = select(func.count()).select_from(ChatMessage)
    if session_id is not None:
        query = query.where(ChatMessage.session_id == session_id)
    return (await db.execute(query)).scalar_one()


async def add_messages(db, session_id, count):
    messages = MessageService(db)
    created = []
    for i in range(count):
        created.append(await messages.append_message(
            MessageCreate(session_id=session_id, role=MessageRole.USER, content=f"message {i}")
        ))
    return created


class TestCreateSession:
    """Test cases for session creation"""

    def test_generated_ids_are_distinct(self, run_in_db):
        """Two creates without an id get two different ids"""
        async def scenario(db):
            service = SessionService(db)
            first = await service.create_session(ChatSessionCreate())
            second = await service.create_session(ChatSessionCreate())
            return first.id, second.id

        first_id, second_id = run_in_db(scenario)
        assert first_id
        assert second_id
        assert first_id != second_id

    def test_empty_id_is_replaced(self, run_in_db):
        async def scenario(db):
            return await SessionService(db).create_session(ChatSessionCreate(id=""))

        session = run_in_db(scenario)
        assert session.id != ""

    def test_defaults(self, run_in_db):
        """Flags default to off and both timestamps start equal"""
        async def scenario(db):
            return await SessionService(db).create_session(ChatSessionCreate(id="s1", title="Hello"))

        session = run_in_db(scenario)
        assert session.id == "s1"
        assert session.title == "Hello"
        assert session.gen_z_mode is False
        assert session.copy_code_only_mode is False
        assert session.target_language is None
        assert session.created_at == session.updated_at

    def test_duplicate_id_fails(self, run_in_db):
        """Reusing an id raises DuplicateKey and keeps the original session"""
        async def scenario(db):
            service = SessionService(db)
            await service.create_session(ChatSessionCreate(id="s1", title="original"))
            with pytest.raises(DuplicateKey):
                await service.create_session(ChatSessionCreate(id="s1", title="copy"))
            return await service.list_sessions()

        sessions = run_in_db(scenario)
        assert [s.title for s in sessions] == ["original"]


class TestListSessions:
    """Test cases for session ordering"""

    def test_empty_store(self, run_in_db):
        async def scenario(db):
            return await SessionService(db).list_sessions()

        assert run_in_db(scenario) == []

    def test_most_recently_active_first(self, run_in_db):
        """Appending a message moves its session to the front"""
        async def scenario(db):
            service = SessionService(db)
            await service.create_session(ChatSessionCreate(id="a"))
            await service.create_session(ChatSessionCreate(id="b"))
            before = [s.id for s in await service.list_sessions()]
            await add_messages(db, "a", 1)
            after = [s.id for s in await service.list_sessions()]
            return before, after

        before, after = run_in_db(scenario)
        assert before == ["b", "a"]
        assert after == ["a", "b"]


class TestUpdateSession:
    """Test cases for partial session updates"""

    def test_only_sent_fields_change(self, run_in_db):
        async def scenario(db):
            service = SessionService(db)
            created = await service.create_session(
                ChatSessionCreate(id="s1", title="Old", gen_z_mode=True, target_language="french")
            )
            created_updated_at = created.updated_at
            updated = await service.update_session("s1", ChatSessionUpdate(title="New"))
            return created_updated_at, updated

        created_updated_at, updated = run_in_db(scenario)
        assert updated.title == "New"
        assert updated.gen_z_mode is True
        assert updated.copy_code_only_mode is False
        assert updated.target_language == "french"
        assert updated.updated_at > created_updated_at

    def test_null_flag_is_ignored(self, run_in_db):
        async def scenario(db):
            service = SessionService(db)
            await service.create_session(ChatSessionCreate(id="s1", copy_code_only_mode=True))
            return await service.update_session("s1", ChatSessionUpdate(copy_code_only_mode=None, title=None))

        updated = run_in_db(scenario)
        assert updated.copy_code_only_mode is True
        assert updated.title is None

    def test_missing_session(self, run_in_db):
        async def scenario(db):
            with pytest.raises(NotFound):
                await SessionService(db).update_session("nope", ChatSessionUpdate(title="x"))

        run_in_db(scenario)


class TestDeleteSession:
    """Test cases for deletion and history clearing"""

    def test_delete_removes_messages(self, run_in_db):
        """Deleting a session removes its messages and leaves other sessions alone"""
        async def scenario(db):
            service = SessionService(db)
            await service.create_session(ChatSessionCreate(id="s1"))
            await service.create_session(ChatSessionCreate(id="s2"))
            await add_messages(db, "s1", 3)
            await add_messages(db, "s2", 2)

            await service.delete_session("s1")
            return (
                await service.get_session("s1"),
                await count_messages(db, "s1"),
                await count_messages(db, "s2"),
            )

        deleted, s1_messages, s2_messages = run_in_db(scenario)
        assert deleted is None
        assert s1_messages == 0
        assert s2_messages == 2

    def test_delete_missing_session_succeeds(self, run_in_db):
        async def scenario(db):
            await SessionService(db).delete_session("does-not-exist")
            return True

        assert run_in_db(scenario) is True

    def test_clear_history(self, run_in_db):
        """Two sessions and five messages are all gone afterwards"""
        async def scenario(db):
            service = SessionService(db)
            await service.create_session(ChatSessionCreate(id="s1"))
            await service.create_session(ChatSessionCreate(id="s2"))
            messages = await add_messages(db, "s1", 3) + await add_messages(db, "s2", 2)
            message_ids = [m.id for m in messages]

            await service.clear_history()

            remaining = await db.execute(select(ChatMessage).where(ChatMessage.id.in_(message_ids)))
            sessions = await db.execute(select(ChatSession))
            return (
                len(message_ids),
                await service.list_sessions(),
                remaining.scalars().all(),
                sessions.scalars().all(),
            )

        created_count, listed, remaining_messages, remaining_sessions = run_in_db(scenario)
        assert created_count == 5
        assert listed == []
        assert remaining_messages == []
        assert remaining_sessions == []
