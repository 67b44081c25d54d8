"""
Board Backend — Post Service Unit Tests
========================================

What:  Tests for PostService business rules and its storage effects.
How:   Rules that must short-circuit before storage run against a mocked
       session; everything else runs against the SQLite test schema.

What we test:
    ✅ Listing order (createdAt descending)
    ✅ Case-insensitive search on title OR content, empty query, wildcards
    ✅ Create with and without id, upsert on existing id
    ✅ Update touches only title and content
    ✅ Delete removes comments first and is idempotent
    ✅ Comment on missing post persists nothing
    ✅ Vote bounds and counter arithmetic
"""

import pytest
from unittest.mock import AsyncMock

from board.exceptions import InvalidInputError, NotFoundError
from board.repositories import CommentRepository, PostRepository
from board.schemas.post import CommentCreate, PostCreate, PostUpdate
from board.services.post_service import PostService


async def _seed(session_factory, *posts: PostCreate):
    service = PostService()
    async with session_factory() as session:
        created = [await service.create_post(session, post) for post in posts]
        await session.commit()
    return created


class TestPostServiceRules:
    """Rules enforced before any storage access."""

    def setup_method(self):
        self.service = PostService()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [0, 2, -2, 100])
    async def test_vote_rejects_values_other_than_one(self, mock_db_session, value):
        with pytest.raises(InvalidInputError, match="1 or -1"):
            await self.service.vote(mock_db_session, "post-1", value)

        mock_db_session.get.assert_not_awaited()
        mock_db_session.flush.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_vote_invalid_message_is_not_a_not_found(self, mock_db_session):
        """An invalid vote must not be mistaken for a missing post."""
        with pytest.raises(InvalidInputError) as exc_info:
            await self.service.vote(mock_db_session, "post-1", 5)
        assert "not found" not in exc_info.value.message

    @pytest.mark.asyncio
    async def test_add_comment_missing_post_persists_nothing(self, mock_db_session):
        mock_db_session.get = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError, match="Post not found"):
            await self.service.add_comment(
                mock_db_session, "missing", CommentCreate(text="Fail comment")
            )

        mock_db_session.add.assert_not_called()
        mock_db_session.flush.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_removes_comments_before_post(self, mock_db_session):
        await self.service.delete_post(mock_db_session, "post-1")

        statements = [str(call.args[0]) for call in mock_db_session.execute.await_args_list]
        assert len(statements) == 2
        assert statements[0].startswith("DELETE FROM comments")
        assert statements[1].startswith("DELETE FROM posts")


class TestPostServiceReads:
    """list_posts, search_posts and get_post against a real schema."""

    def setup_method(self):
        self.service = PostService()

    @pytest.mark.asyncio
    async def test_list_posts_empty(self, db_session):
        assert await self.service.list_posts(db_session) == []

    @pytest.mark.asyncio
    async def test_list_posts_newest_first(self, session_factory, db_session):
        await _seed(
            session_factory,
            PostCreate(id="a", title="Old", created_at="2024-01-01T09:00:00.000Z"),
            PostCreate(id="b", title="Newest", created_at="2024-03-01T09:00:00.000Z"),
            PostCreate(id="c", title="Middle", created_at="2024-02-01T09:00:00.000Z"),
        )

        posts = await self.service.list_posts(db_session)

        assert [p.id for p in posts] == ["b", "c", "a"]

    @pytest.mark.asyncio
    async def test_search_matches_title_or_content_ignoring_case(self, session_factory, db_session):
        await _seed(
            session_factory,
            PostCreate(id="t", title="Python Tips", content="indentation"),
            PostCreate(id="c", title="Cooking", content="Best PYTHON recipes"),
            PostCreate(id="x", title="Gardening", content="tomatoes"),
        )

        posts = await self.service.search_posts(db_session, "python")

        assert sorted(p.id for p in posts) == ["c", "t"]

    @pytest.mark.asyncio
    async def test_search_without_match_returns_empty(self, session_factory, db_session):
        await _seed(session_factory, PostCreate(id="t", title="Python", content="snakes"))

        assert await self.service.search_posts(db_session, "haskell") == []

    @pytest.mark.asyncio
    async def test_search_empty_query_matches_everything(self, session_factory, db_session):
        await _seed(
            session_factory,
            PostCreate(id="a", title="Something"),
            PostCreate(id="b"),
        )

        posts = await self.service.search_posts(db_session, "")

        assert sorted(p.id for p in posts) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, session_factory, db_session):
        await _seed(
            session_factory,
            PostCreate(id="pct", title="100% done"),
            PostCreate(id="num", title="1000 things"),
        )

        posts = await self.service.search_posts(db_session, "0%")

        assert [p.id for p in posts] == ["pct"]

    @pytest.mark.asyncio
    async def test_get_post_missing_raises(self, db_session):
        with pytest.raises(NotFoundError, match="Post not found"):
            await self.service.get_post(db_session, "nope")


class TestPostServiceWrites:
    """create, update, delete, comment and vote against a real schema."""

    def setup_method(self):
        self.service = PostService()

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_defaults(self, db_session):
        post = await self.service.create_post(db_session, PostCreate(title="No id"))

        assert post.id
        assert post.upvotes == 0
        assert post.comments == []
        assert post.author is None

    @pytest.mark.asyncio
    async def test_create_keeps_client_id(self, db_session):
        post = await self.service.create_post(
            db_session, PostCreate(id="client-id", title="Mine", category="Tech")
        )

        assert post.id == "client-id"
        assert post.category == "Tech"

    @pytest.mark.asyncio
    async def test_create_with_existing_id_overwrites(self, session_factory):
        await _seed(session_factory, PostCreate(id="p1", title="Before", author="A"))
        async with session_factory() as session:
            await self.service.add_comment(session, "p1", CommentCreate(id="c1", text="kept"))
            await session.commit()

        async with session_factory() as session:
            post = await self.service.create_post(
                session, PostCreate(id="p1", title="After", author="B")
            )
            await session.commit()

        assert post.title == "After"
        assert [c.id for c in post.comments] == ["c1"]
        async with session_factory() as session:
            assert len(await PostRepository(session).find_all()) == 1
            assert [c.id for c in await CommentRepository(session).find_by_post_id("p1")] == ["c1"]

    @pytest.mark.asyncio
    async def test_comments_ordered_by_created_at(self, session_factory):
        await _seed(session_factory, PostCreate(id="p1"))
        async with session_factory() as session:
            for comment_id, created_at in [("b", "2024-01-02"), ("c", "2024-01-03"), ("a", "2024-01-01")]:
                await self.service.add_comment(
                    session, "p1", CommentCreate(id=comment_id, created_at=created_at)
                )
            await session.commit()

        async with session_factory() as session:
            post = await self.service.get_post(session, "p1")

        assert [c.id for c in post.comments] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_update_changes_only_title_and_content(self, session_factory):
        await _seed(
            session_factory,
            PostCreate(
                id="p1",
                title="Old title",
                content="Old content",
                author="Anon #1",
                category="News",
                upvotes=7,
                created_at="2024-01-01T00:00:00.000Z",
            ),
        )
        async with session_factory() as session:
            await self.service.add_comment(session, "p1", CommentCreate(id="c1", text="hi"))
            await session.commit()

        async with session_factory() as session:
            updated = await self.service.update_post(
                session, "p1", PostUpdate(title="New title", content="New content")
            )
            await session.commit()

        assert updated.title == "New title"
        assert updated.content == "New content"
        assert updated.author == "Anon #1"
        assert updated.category == "News"
        assert updated.upvotes == 7
        assert updated.created_at == "2024-01-01T00:00:00.000Z"
        assert [c.id for c in updated.comments] == ["c1"]

    @pytest.mark.asyncio
    async def test_update_missing_post_raises(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.update_post(db_session, "nope", PostUpdate(title="x", content="y"))

    @pytest.mark.asyncio
    async def test_delete_cascades_to_comments(self, session_factory):
        await _seed(session_factory, PostCreate(id="p1", title="Doomed"))
        async with session_factory() as session:
            await self.service.add_comment(session, "p1", CommentCreate(id="c1", text="one"))
            await self.service.add_comment(session, "p1", CommentCreate(id="c2", text="two"))
            await session.commit()

        async with session_factory() as session:
            await self.service.delete_post(session, "p1")
            await session.commit()

        async with session_factory() as session:
            assert await PostRepository(session).find_by_id("p1") is None
            assert await CommentRepository(session).find_by_post_id("p1") == []
            assert await CommentRepository(session).find_by_id("c1") is None

    @pytest.mark.asyncio
    async def test_delete_leaves_other_posts_comments(self, session_factory):
        await _seed(session_factory, PostCreate(id="p1"), PostCreate(id="p2"))
        async with session_factory() as session:
            await self.service.add_comment(session, "p1", CommentCreate(id="c1"))
            await self.service.add_comment(session, "p2", CommentCreate(id="c2"))
            await session.commit()

        async with session_factory() as session:
            await self.service.delete_post(session, "p1")
            await session.commit()

        async with session_factory() as session:
            remaining = await CommentRepository(session).find_all()
            assert [c.id for c in remaining] == ["c2"]

    @pytest.mark.asyncio
    async def test_delete_unknown_id_is_noop(self, db_session):
        await self.service.delete_post(db_session, "never-existed")

    @pytest.mark.asyncio
    async def test_add_comment_attaches_to_post(self, session_factory):
        await _seed(session_factory, PostCreate(id="p1"))

        async with session_factory() as session:
            comment = await self.service.add_comment(
                session,
                "p1",
                CommentCreate(text="Nice post!", author="Anon #2", created_at="2024-01-02T00:00:00Z"),
            )
            await session.commit()

        assert comment.id
        assert comment.text == "Nice post!"
        async with session_factory() as session:
            stored = await CommentRepository(session).find_by_post_id("p1")
            assert [c.id for c in stored] == [comment.id]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value, expected", [(1, 11), (-1, 9)])
    async def test_vote_moves_counter(self, session_factory, value, expected):
        await _seed(session_factory, PostCreate(id="p1", upvotes=10))

        async with session_factory() as session:
            post = await self.service.vote(session, "p1", value)
            await session.commit()

        assert post.upvotes == expected
        async with session_factory() as session:
            assert (await PostRepository(session).find_by_id("p1")).upvotes == expected

    @pytest.mark.asyncio
    async def test_vote_missing_post_raises(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.vote(db_session, "nope", 1)
