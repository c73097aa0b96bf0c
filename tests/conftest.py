from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator, Iterable, Optional

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from folders_api.db import create_all, make_session_maker
from folders_api.db.models import (
    App,
    AppGroupPermission,
    Folder,
    FolderApp,
    GroupPermission,
    Organization,
    User,
    UserGroupPermission,
)

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


class Seeder:
    """Persists fixture rows through short-lived sessions of their own."""

    def __init__(self, maker: async_sessionmaker[AsyncSession]) -> None:
        self.maker = maker
        self._counter = 0

    def _next(self) -> int:
        self._counter += 1
        return self._counter

    async def save(self, *entities):
        async with self.maker() as session:
            session.add_all(entities)
            await session.commit()
        return entities[0] if len(entities) == 1 else entities

    async def organization(self, name: Optional[str] = None) -> Organization:
        return await self.save(Organization(name=name or f"org-{self._next()}"))

    async def group(self, org: Organization, name: str) -> GroupPermission:
        return await self.save(GroupPermission(organization_id=org.id, group=name))

    async def user(self, org: Organization, groups: Iterable[GroupPermission] = ()) -> User:
        n = self._next()
        user = await self.save(User(organization_id=org.id, email=f"user{n}@example.com", first_name=f"User{n}"))
        for g in groups:
            await self.save(UserGroupPermission(user_id=user.id, group_permission_id=g.id))
        return user

    async def app(
        self,
        owner: User,
        *,
        is_public: bool = False,
        organization: Optional[Organization] = None,
        created_at: Optional[datetime] = None,
        read_groups: Iterable[GroupPermission] = (),
        no_read_groups: Iterable[GroupPermission] = (),
    ) -> App:
        n = self._next()
        created = created_at or BASE_TIME + timedelta(minutes=n)
        app = await self.save(
            App(
                name=f"app-{n}",
                slug=f"app-{n}",
                is_public=is_public,
                organization_id=organization.id if organization else owner.organization_id,
                user_id=owner.id,
                created_at=created,
                updated_at=created,
            )
        )
        for g in read_groups:
            await self.save(AppGroupPermission(app_id=app.id, group_permission_id=g.id, read=True))
        for g in no_read_groups:
            await self.save(AppGroupPermission(app_id=app.id, group_permission_id=g.id, read=False, update=True))
        return app

    async def folder(self, org: Organization, name: str, apps: Iterable[App] = ()) -> Folder:
        folder = await self.save(Folder(organization_id=org.id, name=name))
        for a in apps:
            await self.save(FolderApp(folder_id=folder.id, app_id=a.id))
        return folder


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'folders.db'}")
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_maker(engine) -> async_sessionmaker[AsyncSession]:
    return make_session_maker(engine)


@pytest.fixture
async def session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as s:
        yield s


@pytest.fixture
def seed(session_maker) -> Seeder:
    return Seeder(session_maker)


@pytest.fixture
async def org(seed) -> Organization:
    return await seed.organization("Acme")


@pytest.fixture
async def other_org(seed) -> Organization:
    return await seed.organization("Globex")


@pytest.fixture
async def admin_group(seed, org) -> GroupPermission:
    return await seed.group(org, "admin")


@pytest.fixture
async def all_users_group(seed, org) -> GroupPermission:
    return await seed.group(org, "all_users")
