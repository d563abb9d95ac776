"""
Tests for CourseRepository against an in-memory database.
"""

import uuid

import pytest

from course_library.repositories.author_repository import AuthorRepository
from course_library.repositories.course_repository import CourseRepository
from course_library.storage.db import create_tables
from tests.mocks.model_factories import make_author, make_course


@pytest.mark.asyncio
async def test_get_for_author_checks_owner(db_engine, session_factory):
    """Test that a course is only visible through its own author."""
    await create_tables(bind=db_engine)

    async with session_factory() as session:
        authors = AuthorRepository(session)
        courses = CourseRepository(session)
        owner = await authors.create(make_author())
        other = await authors.create(make_author())
        course = await courses.add_for_author(owner.id, make_course())
        await courses.save()

        assert await courses.get_for_author(owner.id, course.id) is not None
        assert await courses.get_for_author(other.id, course.id) is None
        assert await courses.get_for_author(owner.id, uuid.uuid4()) is None

    await db_engine.dispose()


@pytest.mark.asyncio
async def test_add_for_author_keeps_given_id(db_engine, session_factory):
    """Test that a caller-chosen course ID is stored as is."""
    await create_tables(bind=db_engine)
    course_id = uuid.uuid4()

    async with session_factory() as session:
        owner = await AuthorRepository(session).create(make_author())
        courses = CourseRepository(session)
        await courses.add_for_author(owner.id, make_course(id=course_id))
        await courses.save()

    async with session_factory() as session:
        stored = await CourseRepository(session).get_by_id(course_id)

    assert stored is not None
    assert stored.author_id == owner.id
    await db_engine.dispose()


@pytest.mark.asyncio
async def test_list_for_author_ordered_by_title(db_engine, session_factory):
    await create_tables(bind=db_engine)

    async with session_factory() as session:
        owner = await AuthorRepository(session).create(make_author())
        courses = CourseRepository(session)
        for title in ("Rum", "Maps", "Ships"):
            await courses.add_for_author(owner.id, make_course(title=title))
        await courses.save()

        listed = await courses.list_for_author(owner.id)

    assert [course.title for course in listed] == ["Maps", "Rum", "Ships"]
    await db_engine.dispose()


@pytest.mark.asyncio
async def test_deleting_author_deletes_courses(db_engine, session_factory):
    """Test that courses are removed together with their author."""
    await create_tables(bind=db_engine)

    async with session_factory() as session:
        authors = AuthorRepository(session)
        owner = await authors.create(make_author())
        courses = CourseRepository(session)
        course = await courses.add_for_author(owner.id, make_course())
        await courses.save()
        course_id = course.id

    async with session_factory() as session:
        authors = AuthorRepository(session)
        owner = await authors.get_by_id(owner.id)
        await authors.delete(owner)
        await authors.save()

    async with session_factory() as session:
        assert await CourseRepository(session).get_by_id(course_id) is None

    await db_engine.dispose()
