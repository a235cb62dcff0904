"""Unit tests for CommentService."""

import pytest

from collab.domain.error import ValidationError
from collab.domain.service import CommentService
from collab.domain.service.comment_service import normalize_comment_body
from collab.domain.value import ResourceId
from collab.persistence.repository.inmemory import InMemoryCommentRepository

OBJ = ResourceId("obj-1")


@pytest.fixture
def comment_service(clock):
    return CommentService(InMemoryCommentRepository(), clock=clock)


class TestNormalizeCommentBody:
    """Tests for normalize_comment_body."""

    def test_strips_whitespace(self):
        assert normalize_comment_body("  looks good \n") == "looks good"

    @pytest.mark.parametrize("body", ["", "   ", "\n\t"])
    def test_empty_rejected(self, body):
        with pytest.raises(ValidationError) as exc_info:
            normalize_comment_body(body)
        assert exc_info.value.field == "body"

    def test_too_long_rejected(self):
        with pytest.raises(ValidationError, match="5000"):
            normalize_comment_body("x" * 5001)

    def test_max_length_accepted(self):
        assert len(normalize_comment_body("x" * 5000)) == 5000


class TestCreateComment:
    """Tests for create_comment and list_comments."""

    @pytest.mark.asyncio
    async def test_guest_comment(self, comment_service, clock):
        """Guest comments carry a label and no author id."""
        comment = await comment_service.create_comment(
            OBJ, author_email="guest@example.com (guest)", body=" Nice work "
        )

        assert comment.body == "Nice work"
        assert comment.author_id is None
        assert comment.author_email == "guest@example.com (guest)"
        assert comment.created_at == clock()

    @pytest.mark.asyncio
    async def test_list_oldest_first(self, comment_service, clock):
        """Comments read in the order they were posted."""
        await comment_service.create_comment(OBJ, "a (guest)", "first")
        clock.advance(minutes=1)
        await comment_service.create_comment(OBJ, "b (guest)", "second")
        await comment_service.create_comment(ResourceId("obj-2"), "c", "elsewhere")

        comments = await comment_service.list_comments(OBJ)

        assert [c.body for c in comments] == ["first", "second"]
