"""Unit tests for the comment service."""

import pytest

from backend.app.core.exceptions import IdeaNotFoundError, ValidationFailedError
from backend.app.models.idea import Idea, IdeaSection
from backend.app.services.comments import CommentService


@pytest.fixture
async def idea(test_db) -> Idea:
    idea = Idea(what="X", who="Y", features="F", done_criteria="D", inspiration="Insp")
    test_db.add(idea)
    await test_db.commit()
    await test_db.refresh(idea)
    return idea


class TestCommentService:
    """Test cases for CommentService."""

    @pytest.mark.asyncio
    async def test_create_and_list_by_section(self, test_db, make_user, idea):
        """A comment shows up under its own section only."""
        user = await make_user()
        comments = CommentService(test_db)

        created = await comments.create_comment(idea.id, "who", "Also students", user.id)

        assert created.section == "who"
        assert created.content == "Also students"
        assert created.author_username == "alice"

        who_thread = await comments.list_comments(idea.id, "who")
        assert [c.id for c in who_thread] == [created.id]
        assert await comments.list_comments(idea.id, "features") == []

    @pytest.mark.asyncio
    async def test_all_sections_accepted(self, test_db, make_user, idea):
        user = await make_user()
        comments = CommentService(test_db)

        for section in IdeaSection:
            await comments.create_comment(idea.id, section.value, f"On {section.value}", user.id)

        for section in IdeaSection:
            thread = await comments.list_comments(idea.id, section.value)
            assert len(thread) == 1
            assert thread[0].content == f"On {section.value}"

    @pytest.mark.asyncio
    async def test_unknown_section_rejected(self, test_db, make_user, idea):
        user = await make_user()
        with pytest.raises(ValidationFailedError) as exc_info:
            await CommentService(test_db).create_comment(idea.id, "budget", "Too expensive", user.id)
        assert exc_info.value.field == "section"

    @pytest.mark.asyncio
    async def test_section_is_case_sensitive(self, test_db, make_user, idea):
        user = await make_user()
        with pytest.raises(ValidationFailedError):
            await CommentService(test_db).create_comment(idea.id, "donecriteria", "Hmm", user.id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   "])
    async def test_blank_content_rejected(self, test_db, make_user, idea, content):
        user = await make_user()
        with pytest.raises(ValidationFailedError) as exc_info:
            await CommentService(test_db).create_comment(idea.id, "what", content, user.id)
        assert exc_info.value.field == "content"

    @pytest.mark.asyncio
    async def test_comment_on_missing_idea(self, test_db, make_user):
        user = await make_user()
        with pytest.raises(IdeaNotFoundError):
            await CommentService(test_db).create_comment(999, "what", "Hello", user.id)

    @pytest.mark.asyncio
    async def test_thread_order_oldest_first(self, test_db, make_user, idea):
        alice = await make_user("alice")
        bob = await make_user("bob")
        comments = CommentService(test_db)

        await comments.create_comment(idea.id, "what", "first", alice.id)
        await comments.create_comment(idea.id, "what", "second", bob.id)

        thread = await comments.list_comments(idea.id, "what")
        assert [c.content for c in thread] == ["first", "second"]
        assert [c.author_username for c in thread] == ["alice", "bob"]

    @pytest.mark.asyncio
    async def test_anonymous_comment_has_no_author(self, test_db, idea):
        created = await CommentService(test_db).create_comment(idea.id, "what", "Legacy note", None)
        assert created.author_user_id is None
        assert created.author_username is None

    @pytest.mark.asyncio
    async def test_list_unknown_idea_or_section(self, test_db, idea):
        comments = CommentService(test_db)
        assert await comments.list_comments(12345, "what") == []
        assert await comments.list_comments(idea.id, "nonsense") == []
