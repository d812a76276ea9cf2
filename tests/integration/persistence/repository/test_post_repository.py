"""Integration tests for PostgresPostRepository.

These run against the local development database (migrated to head) and
are skipped unless RUN_INTEGRATION_TESTS is set.
"""

import os
from uuid import uuid4

import pytest

from blog.domain.model import Comment
from blog.domain.model.post import Like
from blog.domain.repository import PostFilter, PostRepository, UserRepository
from blog.domain.value import CommentId, PostStatus
from tests.factories import make_post, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("RUN_INTEGRATION_TESTS"),
    reason="needs a migrated PostgreSQL database",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostRepositoryIntegration:
    """Round trips through PostgreSQL, including likes and comments."""

    @pytest.mark.asyncio
    async def test_save_and_load_with_engagement(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        author = await user_repo.save(make_user(name="Integration Author"))
        reader = await user_repo.save(make_user(name="Integration Reader"))
        post = await post_repo.save(
            make_post(author.id, status=PostStatus.PUBLISHED, tags=["pg", "sql"])
        )

        await post_repo.add_like(post.id, Like(user_id=reader.id))
        await post_repo.add_like(post.id, Like(user_id=reader.id))
        await post_repo.add_comment(
            Comment(
                id=CommentId(uuid4()),
                post_id=post.id,
                user_id=reader.id,
                content="Stored in Postgres",
            )
        )
        await post_repo.increment_views(post.id)

        found = await post_repo.find_by_slug(post.slug)
        assert found is not None
        assert found.tags == ["pg", "sql"]
        assert found.like_count == 1
        assert [c.content for c in found.comments] == ["Stored in Postgres"]
        assert found.views == 1

    @pytest.mark.asyncio
    async def test_tag_search(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        author = await user_repo.save(make_user(name="Tagger"))
        marker = f"tag{uuid4().hex[:8]}"
        await post_repo.save(make_post(author.id, tags=[marker]))

        assert await post_repo.count(PostFilter(search=marker.upper())) == 1
        assert await post_repo.count(PostFilter(tag=marker)) == 1

    @pytest.mark.asyncio
    async def test_purge_user_orphans_comments(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        author = await user_repo.save(make_user(name="Stays Around"))
        leaving = await user_repo.save(make_user(name="Leaving Soon"))
        post = await post_repo.save(make_post(author.id, status=PostStatus.PUBLISHED))
        own = await post_repo.save(make_post(leaving.id))
        await post_repo.add_comment(
            Comment(
                id=CommentId(uuid4()),
                post_id=post.id,
                user_id=leaving.id,
                content="Bye",
            )
        )

        await post_repo.purge_user(leaving.id)

        assert await post_repo.find_by_id(own.id) is None
        remaining = await post_repo.find_by_id(post.id)
        assert remaining.comments[0].user_id is None

    @pytest.mark.asyncio
    async def test_update_keeps_views_counted_after_load(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        author = await user_repo.save(make_user(name="Busy Author"))
        post = await post_repo.save(make_post(author.id, status=PostStatus.PUBLISHED))
        loaded = await post_repo.find_by_id(post.id)
        await post_repo.increment_views(post.id)
        await post_repo.increment_views(post.id)

        saved = await post_repo.save(loaded.model_copy(update={"category": "Edited"}))

        assert saved.views == 2
        assert (await post_repo.find_by_id(post.id)).views == 2
