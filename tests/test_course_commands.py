"""
Tests for Course commands, including the PUT and PATCH upsert flows.
"""

import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from course_library.commands.base import Created, Updated
from course_library.commands.course_commands import (
    CourseKey,
    CreateCourseCommand,
    CreateCourseInput,
    DeleteCourseCommand,
    GetCourseForAuthorCommand,
    GetCoursesForAuthorCommand,
    PatchCourseCommand,
    PatchCourseInput,
    UpsertCourseCommand,
    UpsertCourseInput,
    patch_course_document,
)
from course_library.exceptions import (
    ConflictError,
    NotFoundError,
    PatchApplicationError,
    ValidationError,
)
from course_library.schemas.course import (
    CourseForCreationDto,
    CourseForUpdateDto,
)
from course_library.schemas.patch import PatchOperation
from tests.mocks.model_factories import make_course
from tests.mocks.repository_mocks import (
    create_mock_author_repository,
    create_mock_course_repository,
)


@pytest.fixture
def authors():
    return create_mock_author_repository()


@pytest.fixture
def courses():
    return create_mock_course_repository()


def replace(path, value):
    return PatchOperation(op="replace", path=path, value=value)


class TestPatchCourseDocument:
    """Tests for applying patches to the update document."""

    def test_patch_empty_document(self):
        """Test that a complete patch on the empty document validates."""
        result = patch_course_document(
            CourseForUpdateDto.empty_document(),
            [replace("/title", "Rum"), replace("/description", "Aged")],
        )

        assert result.title == "Rum"
        assert result.description == "Aged"

    def test_missing_title_fails_validation(self):
        """Test that a patch leaving the title unset is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            patch_course_document(
                CourseForUpdateDto.empty_document(),
                [replace("/description", "Aged")],
            )

        assert "title" in exc_info.value.errors

    def test_equal_title_and_description_reported_at_root(self):
        """Test that the cross-field rule is keyed on the document."""
        with pytest.raises(ValidationError) as exc_info:
            patch_course_document(
                {"title": "Same", "description": None},
                [replace("/description", "Same")],
            )

        assert exc_info.value.errors == {
            "$": [
                "The provided description should be different from the title."
            ]
        }

    def test_unknown_member_is_rejected(self):
        """Test that only known members can be targeted."""
        with pytest.raises(PatchApplicationError):
            patch_course_document(
                CourseForUpdateDto.empty_document(),
                [replace("/authorId", str(uuid.uuid4()))],
            )


class TestGetCourses:
    """Tests for the read commands."""

    @pytest.mark.asyncio
    async def test_list_for_unknown_author(self, authors, courses):
        """Test listing courses of a missing author raises NotFoundError."""
        authors.exists.return_value = False

        with pytest.raises(NotFoundError):
            await GetCoursesForAuthorCommand(authors, courses).execute(
                uuid.uuid4()
            )

    @pytest.mark.asyncio
    async def test_list_for_author(self, authors, courses):
        """Test that listed courses are mapped."""
        author_id = uuid.uuid4()
        courses.list_for_author.return_value = [
            make_course(author_id=author_id, title="A"),
            make_course(author_id=author_id, title="B"),
        ]

        result = await GetCoursesForAuthorCommand(authors, courses).execute(
            author_id
        )

        assert [course.title for course in result] == ["A", "B"]
        assert all(course.author_id == author_id for course in result)

    @pytest.mark.asyncio
    async def test_get_course_of_other_author(self, authors, courses):
        """Test that a course is only found through its own author."""
        courses.get_for_author.return_value = None

        with pytest.raises(NotFoundError):
            await GetCourseForAuthorCommand(authors, courses).execute(
                CourseKey(author_id=uuid.uuid4(), course_id=uuid.uuid4())
            )


class TestCreateCourseCommand:
    """Tests for CreateCourseCommand."""

    @pytest.mark.asyncio
    async def test_create_course(self, authors, courses):
        """Test creating a course with a server-assigned ID."""
        author_id = uuid.uuid4()

        result = await CreateCourseCommand(authors, courses).execute(
            CreateCourseInput(
                author_id=author_id,
                course=CourseForCreationDto(title="Rum"),
            )
        )

        assert isinstance(result, Created)
        assert result.resource.author_id == author_id
        assert result.route_values == {
            "author_id": author_id,
            "course_id": result.resource.id,
        }
        courses.save.assert_called_once()

    @pytest.mark.asyncio
    async def test_create_course_unknown_author(self, authors, courses):
        """Test that nothing is stored for a missing author."""
        authors.exists.return_value = False

        with pytest.raises(NotFoundError):
            await CreateCourseCommand(authors, courses).execute(
                CreateCourseInput(
                    author_id=uuid.uuid4(),
                    course=CourseForCreationDto(title="Rum"),
                )
            )

        courses.add_for_author.assert_not_called()


class TestUpsertCourseCommand:
    """Tests for UpsertCourseCommand."""

    @pytest.mark.asyncio
    async def test_creates_absent_course_at_given_id(self, authors, courses):
        """Test that PUT on an absent course creates it with the URL ID."""
        author_id, course_id = uuid.uuid4(), uuid.uuid4()

        result = await UpsertCourseCommand(authors, courses).execute(
            UpsertCourseInput(
                author_id=author_id,
                course_id=course_id,
                course=CourseForUpdateDto(title="Rum"),
            )
        )

        assert isinstance(result, Created)
        assert result.resource.id == course_id
        assert result.resource.author_id == author_id

    @pytest.mark.asyncio
    async def test_updates_existing_course(self, authors, courses):
        """Test that PUT on an existing course replaces its fields."""
        course = make_course(description="Old")
        courses.get_for_author.return_value = course

        result = await UpsertCourseCommand(authors, courses).execute(
            UpsertCourseInput(
                author_id=course.author_id,
                course_id=course.id,
                course=CourseForUpdateDto(title="New title"),
            )
        )

        assert isinstance(result, Updated)
        assert course.title == "New title"
        assert course.description is None
        courses.update.assert_called_once_with(course)
        courses.save.assert_called_once()

    @pytest.mark.asyncio
    async def test_id_of_other_author_conflicts(self, authors, courses):
        """Test that a course is never moved to another author."""
        courses.exists.return_value = True

        with pytest.raises(ConflictError):
            await UpsertCourseCommand(authors, courses).execute(
                UpsertCourseInput(
                    author_id=uuid.uuid4(),
                    course_id=uuid.uuid4(),
                    course=CourseForUpdateDto(title="Rum"),
                )
            )

        courses.add_for_author.assert_not_called()

    @pytest.mark.asyncio
    async def test_id_taken_during_insert_conflicts(self, authors, courses):
        """Test that losing an insert race on the ID is a conflict."""
        courses.add_for_author.side_effect = IntegrityError(
            "INSERT INTO course", {}, Exception("UNIQUE constraint failed")
        )

        with pytest.raises(ConflictError):
            await UpsertCourseCommand(authors, courses).execute(
                UpsertCourseInput(
                    author_id=uuid.uuid4(),
                    course_id=uuid.uuid4(),
                    course=CourseForUpdateDto(title="Rum"),
                )
            )

        courses.save.assert_not_called()


class TestPatchCourseCommand:
    """Tests for PatchCourseCommand."""

    @pytest.mark.asyncio
    async def test_creates_absent_course(self, authors, courses):
        """Test that a valid patch on an absent course creates it."""
        course_id = uuid.uuid4()

        result = await PatchCourseCommand(authors, courses).execute(
            PatchCourseInput(
                author_id=uuid.uuid4(),
                course_id=course_id,
                operations=[replace("/title", "Rum")],
            )
        )

        assert isinstance(result, Created)
        assert result.resource.id == course_id
        assert result.resource.title == "Rum"

    @pytest.mark.asyncio
    async def test_invalid_patch_on_absent_course_stores_nothing(
        self, authors, courses
    ):
        """Test that an invalid patch never creates the course."""
        with pytest.raises(ValidationError):
            await PatchCourseCommand(authors, courses).execute(
                PatchCourseInput(
                    author_id=uuid.uuid4(),
                    course_id=uuid.uuid4(),
                    operations=[replace("/description", "No title")],
                )
            )

        courses.add_for_author.assert_not_called()
        courses.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_patches_existing_course(self, authors, courses):
        """Test that only the targeted member changes."""
        course = make_course(title="Old", description="Kept")
        courses.get_for_author.return_value = course

        result = await PatchCourseCommand(authors, courses).execute(
            PatchCourseInput(
                author_id=course.author_id,
                course_id=course.id,
                operations=[replace("/title", "New")],
            )
        )

        assert isinstance(result, Updated)
        assert course.title == "New"
        assert course.description == "Kept"

    @pytest.mark.asyncio
    async def test_invalid_patch_leaves_course_unchanged(
        self, authors, courses
    ):
        """Test that a failing patch does not touch the stored course."""
        course = make_course(title="Old", description="Kept")
        courses.get_for_author.return_value = course

        with pytest.raises(ValidationError):
            await PatchCourseCommand(authors, courses).execute(
                PatchCourseInput(
                    author_id=course.author_id,
                    course_id=course.id,
                    operations=[replace("/title", "x" * 101)],
                )
            )

        assert course.title == "Old"
        courses.update.assert_not_called()


class TestDeleteCourseCommand:
    """Tests for DeleteCourseCommand."""

    @pytest.mark.asyncio
    async def test_delete_course(self, authors, courses):
        """Test successfully deleting a course."""
        course = make_course()
        courses.get_for_author.return_value = course

        await DeleteCourseCommand(authors, courses).execute(
            CourseKey(author_id=course.author_id, course_id=course.id)
        )

        courses.delete.assert_called_once_with(course)
        courses.save.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_missing_course(self, authors, courses):
        """Test deleting a missing course raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await DeleteCourseCommand(authors, courses).execute(
                CourseKey(author_id=uuid.uuid4(), course_id=uuid.uuid4())
            )

        courses.delete.assert_not_called()
