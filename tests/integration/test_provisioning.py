"""
Integration tests for first-collection provisioning.

Covers the created collection and documents and all-or-nothing behavior
when reading content or writing fails part way through.
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from teamspace.content import ContentSource
from teamspace.errors import NotFoundError, TransactionFailure
from teamspace.models import ONBOARDING_DOCUMENTS, Collection, CollectionPermission, Document, Team

pytestmark = pytest.mark.integration


class FailingContentSource(ContentSource):
    """Content source that fails on one title."""

    def __init__(self, fail_on: str):
        super().__init__()
        self.fail_on = fail_on

    async def read(self, title: str) -> str:
        if title == self.fail_on:
            raise NotFoundError(f"Onboarding document '{title}' not found")
        return await super().read(title)


async def count(session, model) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


@pytest.mark.asyncio
async def test_provision_first_collection(test_db, session_factory, test_team, test_user):
    collection = await test_team.provision_first_collection(test_db, test_user.id)

    async with session_factory() as session:
        collections = (await session.execute(select(Collection))).scalars().all()
        assert len(collections) == 1
        stored = collections[0]
        assert stored.id == collection.id
        assert stored.name == "Welcome"
        assert stored.team_id == test_team.id
        assert stored.created_by_id == test_user.id
        assert stored.sort == Collection.DEFAULT_SORT
        assert stored.permission == CollectionPermission.READ_WRITE.value

        documents = (await session.execute(select(Document))).scalars().all()
        assert sorted(d.title for d in documents) == sorted(ONBOARDING_DOCUMENTS)
        for document in documents:
            assert document.collection_id == collection.id
            assert document.team_id == test_team.id
            assert document.is_welcome is True
            assert document.parent_document_id is None
            assert document.version == 2
            assert document.user_id == test_user.id
            assert document.created_by_id == test_user.id
            assert document.last_modified_by_id == test_user.id
            assert document.is_published
            assert document.text

        # Each document is published to the top, so the last one created comes first
        assert [node["title"] for node in stored.document_structure] == list(reversed(ONBOARDING_DOCUMENTS))


@pytest.mark.asyncio
async def test_provision_with_custom_content(test_db, session_factory, test_team, test_user, tmp_path):
    for title in ONBOARDING_DOCUMENTS:
        (tmp_path / f"{title}.md").write_text(f"# {title}\n\nCustom", encoding="utf-8")

    await test_team.provision_first_collection(test_db, test_user.id, content_source=ContentSource(tmp_path))

    async with session_factory() as session:
        texts = (await session.execute(select(Document.text))).scalars().all()
        assert all(text.endswith("Custom") for text in texts)


@pytest.mark.asyncio
async def test_missing_content_rolls_back(test_db, session_factory, test_team, test_user):
    source = FailingContentSource(fail_on=ONBOARDING_DOCUMENTS[2])

    with pytest.raises(NotFoundError):
        await test_team.provision_first_collection(test_db, test_user.id, content_source=source)

    async with session_factory() as session:
        assert await count(session, Collection) == 0
        assert await count(session, Document) == 0


@pytest.mark.asyncio
async def test_storage_failure_rolls_back(test_db, session_factory, test_team, test_user):
    error = OperationalError("UPDATE collections", {}, Exception("disk I/O error"))

    with patch.object(Document, "publish", AsyncMock(side_effect=error)):
        with pytest.raises(TransactionFailure) as exc_info:
            await test_team.provision_first_collection(test_db, test_user.id)

    assert exc_info.value.__cause__ is error
    assert exc_info.value.cause is error

    async with session_factory() as session:
        assert await count(session, Collection) == 0
        assert await count(session, Document) == 0


@pytest.mark.asyncio
async def test_session_usable_after_rollback(test_db, test_team, test_user):
    team_id, user_id = test_team.id, test_user.id

    with pytest.raises(NotFoundError):
        await test_team.provision_first_collection(
            test_db, user_id, content_source=FailingContentSource(fail_on=ONBOARDING_DOCUMENTS[0])
        )

    # The rollback expired the team, load it again
    team = await test_db.get(Team, team_id)
    collection = await team.provision_first_collection(test_db, user_id)

    assert await count(test_db, Collection) == 1
    assert collection.name == "Welcome"


@pytest.mark.asyncio
async def test_provision_after_read_commits(test_db, session_factory, test_team, test_user):
    user_id = test_user.id
    # Reading first leaves the session inside an autobegun transaction
    assert await test_team.is_domain_allowed(test_db, "acme.com") is True
    assert test_db.in_transaction()

    collection = await test_team.provision_first_collection(test_db, user_id)

    assert not test_db.in_transaction()

    async with session_factory() as session:
        assert (await session.get(Collection, collection.id)).name == "Welcome"
        assert await count(session, Document) == len(ONBOARDING_DOCUMENTS)


@pytest.mark.asyncio
async def test_provision_after_read_rolls_back_on_failure(test_db, session_factory, test_team, test_user):
    user_id = test_user.id
    await test_team.is_domain_allowed(test_db, "acme.com")

    with pytest.raises(NotFoundError):
        await test_team.provision_first_collection(
            test_db, user_id, content_source=FailingContentSource(fail_on=ONBOARDING_DOCUMENTS[1])
        )

    await test_db.rollback()

    async with session_factory() as session:
        assert await count(session, Collection) == 0
        assert await count(session, Document) == 0
