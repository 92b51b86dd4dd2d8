"""
Tests for the post use cases against the in-memory repository.

Covers lookup, listing/search equivalence, creation rules, patch merging,
deletion and the engagement counters.
"""

import pytest

from simpleblog.domain.entities import Author, PostDraft, PostPatch
from simpleblog.domain.exceptions import PostNotFoundError, ValidationError
from conftest import run


class TestGetPost:

    def test_missing_id_raises_not_found(self, container):
        with pytest.raises(PostNotFoundError):
            run(container.get_post_use_case().execute("does-not-exist"))

    def test_create_then_get_round_trips(self, container, create_post):
        created = create_post(title="Round trip", content="<p>Body</p>")

        fetched = run(container.get_post_use_case().execute(created.id))

        assert fetched.title == "Round trip"
        assert fetched.content == "<p>Body</p>"


class TestCreatePost:

    def test_hello_world_scenario(self, create_post):
        """Minimal draft gets an id, stays unpublished, and derives its excerpt."""
        post = create_post(title="Hello", content="World", tags=[])

        assert post.id
        assert post.published is False
        assert post.published_at is None
        assert post.excerpt == "World"
        assert post.tags == []

    def test_title_length_boundary(self, container):
        uc = container.create_post_use_case()

        with pytest.raises(ValidationError):
            run(uc.execute(PostDraft(title="t" * 201, content="body")))

        post = run(uc.execute(PostDraft(title="t" * 200, content="body")))
        assert len(post.title) == 200

    def test_rejected_draft_is_not_stored(self, container):
        with pytest.raises(ValidationError):
            run(container.create_post_use_case().execute(PostDraft(title="", content="x")))

        page = run(container.list_posts_use_case().execute())
        assert page.total == 0

    def test_default_author_from_settings(self, create_post):
        assert create_post().author == Author(name="Test Author")

    def test_explicit_author_and_excerpt_are_kept(self, create_post):
        post = create_post(excerpt="Summary", author=Author(name="Lee", avatar="http://a/b.png"))

        assert post.excerpt == "Summary"
        assert post.author.name == "Lee"

    def test_publishing_sets_published_at(self, create_post):
        post = create_post(published=True)

        assert post.published_at == post.created_at
        assert post.was_edited is False


class TestListAndSearch:

    def test_empty_store_gives_empty_page(self, container):
        page = run(container.list_posts_use_case().execute())

        assert page.items == []
        assert page.total == 0
        assert page.has_next is False

    def test_empty_query_equals_list(self, container, create_post):
        for i in range(3):
            create_post(title=f"Post {i}", content="text", published=i % 2 == 0)
        uc = container.list_posts_use_case()

        listed = run(uc.execute())
        searched = run(uc.execute(query=""))
        blank = run(uc.execute(query="   "))

        ids = [p.id for p in listed.items]
        assert [p.id for p in searched.items] == ids
        assert [p.id for p in blank.items] == ids

    def test_search_is_case_insensitive_over_title_excerpt_content(self, container, create_post):
        by_title = create_post(title="FastAPI tips", content="x")
        by_excerpt = create_post(title="Other", content="y", excerpt="All about fastapi")
        by_content = create_post(title="Third", content="<p>Using FASTAPI</p>")
        create_post(title="Unrelated", content="z")

        page = run(container.list_posts_use_case().execute(query="FastApi"))

        assert {p.id for p in page.items} == {by_title.id, by_excerpt.id, by_content.id}

    def test_markup_alone_does_not_match(self, container, create_post):
        create_post(title="Plain", content="<strong>Bold</strong> words", excerpt="Bold words")

        for query in ("strong", "/strong"):
            page = run(container.list_posts_use_case().execute(query=query))
            assert page.items == []

        hits = run(container.list_posts_use_case().execute(query="bold"))
        assert [p.title for p in hits.items] == ["Plain"]

    def test_published_only_hides_drafts(self, container, create_post):
        create_post(title="Draft")
        published = create_post(title="Live", published=True)

        page = run(container.list_posts_use_case().execute(published_only=True))

        assert [p.id for p in page.items] == [published.id]

    def test_pagination(self, container, create_post):
        for i in range(5):
            create_post(title=f"Post {i}", published=True)
        uc = container.list_posts_use_case()

        first = run(uc.execute(limit=2, offset=0))
        last = run(uc.execute(limit=2, offset=4))

        assert first.total == 5
        assert first.has_next and not first.has_previous
        assert len(last.items) == 1
        assert last.number == 3 and last.page_count == 3
        assert not last.has_next

    def test_newest_first(self, container, create_post):
        older = create_post(title="Older", published=True)
        newer = create_post(title="Newer", published=True)

        page = run(container.list_posts_use_case().execute())

        assert [p.id for p in page.items] == [newer.id, older.id]


class TestUpdatePost:

    def test_missing_id_raises_and_creates_nothing(self, container):
        with pytest.raises(PostNotFoundError):
            run(container.update_post_use_case().execute("nope", PostPatch(title="New")))

        assert run(container.list_posts_use_case().execute()).total == 0

    def test_patch_merges_only_given_fields(self, container, create_post):
        post = create_post(title="Old", content="Body", tags=["a"])

        updated = run(container.update_post_use_case().execute(post.id, PostPatch(title="New")))

        assert updated.title == "New"
        assert updated.content == "Body"
        assert updated.tags == ["a"]
        assert updated.updated_at > post.updated_at

    def test_merged_post_is_revalidated(self, container, create_post):
        post = create_post()

        with pytest.raises(ValidationError):
            run(container.update_post_use_case().execute(post.id, PostPatch(content="  ")))

        stored = run(container.get_post_use_case().execute(post.id))
        assert stored.content == "World"

    def test_first_publication_sets_published_at_once(self, container, create_post):
        post = create_post()
        uc = container.update_post_use_case()

        published = run(uc.execute(post.id, PostPatch(published=True)))
        assert published.published_at is not None

        unpublished = run(uc.execute(post.id, PostPatch(published=False)))
        republished = run(uc.execute(post.id, PostPatch(published=True)))
        assert unpublished.published_at == published.published_at
        assert republished.published_at == published.published_at

    def test_clearing_excerpt_derives_from_content(self, container, create_post):
        post = create_post(content="Fresh content", excerpt="Manual")

        updated = run(container.update_post_use_case().execute(post.id, PostPatch(excerpt="")))

        assert updated.excerpt == "Fresh content"


class TestDeleteAndEngagement:

    def test_delete(self, container, create_post):
        post = create_post()
        uc = container.delete_post_use_case()

        run(uc.execute(post.id))

        with pytest.raises(PostNotFoundError):
            run(container.get_post_use_case().execute(post.id))
        with pytest.raises(PostNotFoundError):
            run(uc.execute(post.id))

    def test_views_and_likes_are_counted(self, container, create_post):
        post = create_post()

        run(container.record_view_use_case().execute(post.id))
        viewed = run(container.record_view_use_case().execute(post.id))
        liked = run(container.like_post_use_case().execute(post.id))

        assert viewed.metadata.views == 2
        assert liked.metadata.likes == 1

    def test_counter_on_missing_post(self, container):
        with pytest.raises(PostNotFoundError):
            run(container.like_post_use_case().execute("missing"))

    def test_update_keeps_counters_recorded_after_read(self, container, repo, create_post):
        post = create_post()
        stale = run(repo.get_by_id(post.id))

        run(container.record_view_use_case().execute(post.id))
        run(container.like_post_use_case().execute(post.id))
        stale.title = "Edited"
        run(repo.update(stale))

        stored = run(container.get_post_use_case().execute(post.id))
        assert stored.title == "Edited"
        assert stored.metadata.views == 1
        assert stored.metadata.likes == 1
