from __future__ import annotations

from datetime import timedelta
from uuid import uuid4

import pytest

from folders_api.core.errors import FolderNotFoundError
from folders_api.services.folders import APPS_PER_PAGE, FoldersService

from .conftest import BASE_TIME


class StaticGroups:
    """Group membership stub answering from a fixed mapping."""

    def __init__(self, groups_by_user):
        self.groups_by_user = groups_by_user
        self.calls = []

    async def has_group(self, user, group):
        self.calls.append((user.id, group))
        return group in self.groups_by_user.get(user.id, ())


# Creation


async def test_create_folder_in_user_organization(session, seed, org):
    user = await seed.user(org)

    folder = await FoldersService(session).create(user, "Reports")

    assert folder.id is not None
    assert folder.name == "Reports"
    assert folder.organization_id == org.id
    assert folder.created_at is not None
    assert folder.updated_at is not None
    assert folder.folder_apps == []


async def test_created_folder_can_be_found(session, seed, org):
    user = await seed.user(org)
    service = FoldersService(session)
    created = await service.create(user, "Reports")

    found = await service.find_one(created.id)

    assert found.id == created.id
    assert found.name == "Reports"


async def test_find_one_raises_for_unknown_id(session):
    missing = uuid4()
    with pytest.raises(FolderNotFoundError) as exc_info:
        await FoldersService(session).find_one(missing)
    assert exc_info.value.entity_id == missing


async def test_find_one_applies_no_permission_filter(session, seed, org, other_org):
    owner = await seed.user(other_org)
    app = await seed.app(owner)
    folder = await seed.folder(other_org, "Theirs", apps=[app])

    found = await FoldersService(session).find_one(folder.id)

    assert [fa.app_id for fa in found.folder_apps] == [app.id]


# Listing


async def test_admin_sees_every_folder_of_organization_by_name(session, seed, org, other_org, admin_group):
    admin = await seed.user(org, groups=[admin_group])
    owner = await seed.user(org)
    private = await seed.app(owner)
    await seed.folder(org, "zeta", apps=[private])
    await seed.folder(org, "alpha")
    await seed.folder(org, "mid", apps=[private])
    await seed.folder(other_org, "foreign")

    folders = await FoldersService(session).all(admin)

    assert [f.name for f in folders] == ["alpha", "mid", "zeta"]
    assert all(f.organization_id == org.id for f in folders)
    by_name = {f.name: f for f in folders}
    assert [fa.app_id for fa in by_name["zeta"].folder_apps] == [private.id]


async def test_member_sees_folders_with_viewable_apps_and_empty_folders(session, seed, org):
    user = await seed.user(org)
    owner = await seed.user(org)
    mine = await seed.app(user)
    hidden = await seed.app(owner)
    await seed.folder(org, "mine", apps=[mine])
    await seed.folder(org, "mixed", apps=[hidden, mine])
    await seed.folder(org, "hidden", apps=[hidden])
    await seed.folder(org, "empty")

    folders = await FoldersService(session).all(user)

    assert [f.name for f in folders] == ["empty", "mine", "mixed"]


async def test_member_listing_has_no_duplicates(session, seed, org):
    user = await seed.user(org)
    apps = [await seed.app(user) for _ in range(3)]
    await seed.folder(org, "many", apps=apps)

    folders = await FoldersService(session).all(user)

    assert [f.name for f in folders] == ["many"]


async def test_member_never_sees_other_organization_folders(session, seed, org, other_org):
    user = await seed.user(org)
    outsider = await seed.user(other_org)
    public_elsewhere = await seed.app(outsider, is_public=True)
    mine = await seed.app(user)
    await seed.folder(org, "ours", apps=[mine])
    await seed.folder(other_org, "theirs-empty")
    await seed.folder(other_org, "theirs", apps=[public_elsewhere])

    folders = await FoldersService(session).all(user)

    assert [f.name for f in folders] == ["ours"]
    assert all(f.organization_id == org.id for f in folders)


async def test_empty_folders_listed_for_user_without_viewable_apps(session, seed, org, other_org):
    user = await seed.user(org)
    owner = await seed.user(org)
    hidden = await seed.app(owner)
    await seed.folder(org, "empty")
    await seed.folder(org, "hidden", apps=[hidden])
    await seed.folder(other_org, "foreign-empty")

    folders = await FoldersService(session).all(user)

    assert [f.name for f in folders] == ["empty"]


async def test_member_listing_only_loads_viewable_memberships(session, seed, org):
    user = await seed.user(org)
    owner = await seed.user(org)
    mine = await seed.app(user)
    hidden = await seed.app(owner)
    await seed.folder(org, "mixed", apps=[hidden, mine])

    (folder,) = await FoldersService(session).all(user)

    assert [fa.app_id for fa in folder.folder_apps] == [mine.id]


async def test_group_membership_is_injectable(session, seed, org):
    user = await seed.user(org)
    owner = await seed.user(org)
    hidden = await seed.app(owner)
    await seed.folder(org, "hidden", apps=[hidden])
    groups = StaticGroups({user.id: {"owners"}})

    as_member = await FoldersService(session, group_membership=groups).all(user)
    as_admin = await FoldersService(session, group_membership=groups, admin_group="owners").all(user)

    assert as_member == []
    assert [f.name for f in as_admin] == ["hidden"]
    assert groups.calls == [(user.id, "admin"), (user.id, "owners")]


# Counting


async def test_count_is_zero_for_empty_folder(session, seed, org):
    user = await seed.user(org)
    folder = await seed.folder(org, "empty")

    assert await FoldersService(session).user_app_count(user, folder) == 0


async def test_count_depends_on_ownership(session, seed, org):
    owner = await seed.user(org)
    stranger = await seed.user(org)
    app = await seed.app(owner)
    folder = await seed.folder(org, "F", apps=[app])

    service = FoldersService(session)
    assert await service.user_app_count(owner, folder) == 1
    assert await service.user_app_count(stranger, folder) == 0


async def test_count_only_includes_folder_members(session, seed, org, all_users_group):
    user = await seed.user(org, groups=[all_users_group])
    owner = await seed.user(org)
    granted = await seed.app(owner, read_groups=[all_users_group])
    public = await seed.app(owner, is_public=True)
    await seed.app(owner, is_public=True)  # viewable but not in the folder
    hidden = await seed.app(owner)
    folder = await seed.folder(org, "F", apps=[granted, public, hidden])

    assert await FoldersService(session).user_app_count(user, folder) == 2


# Paging


async def test_apps_for_empty_folder(session, seed, org):
    user = await seed.user(org)
    folder = await seed.folder(org, "empty")

    assert await FoldersService(session).get_apps_for(user, folder, 1) == []


async def test_apps_are_paged_newest_first_across_whole_folder(session, seed, org):
    user = await seed.user(org)
    # inserted oldest first, so insertion order differs from the expected order
    apps = [
        await seed.app(user, created_at=BASE_TIME + timedelta(hours=i))
        for i in range(15)
    ]
    folder = await seed.folder(org, "big", apps=apps)
    newest_first = [a.id for a in reversed(apps)]

    service = FoldersService(session)
    page1 = await service.get_apps_for(user, folder, 1)
    page2 = await service.get_apps_for(user, folder, 2)
    page3 = await service.get_apps_for(user, folder, 3)

    assert len(page1) == APPS_PER_PAGE
    assert [a.id for a in page1] == newest_first[:10]
    assert [a.id for a in page2] == newest_first[10:]
    assert page3 == []


async def test_pages_are_disjoint_and_match_count(session, seed, org, all_users_group):
    user = await seed.user(org, groups=[all_users_group])
    owner = await seed.user(org)
    members = []
    for i in range(23):
        if i % 3 == 0:
            members.append(await seed.app(owner))  # hidden
        elif i % 3 == 1:
            members.append(await seed.app(owner, read_groups=[all_users_group]))
        else:
            members.append(await seed.app(owner, is_public=True))
    folder = await seed.folder(org, "mixed", apps=members)
    service = FoldersService(session)

    count = await service.user_app_count(user, folder)
    seen = []
    page = 1
    while True:
        batch = await service.get_apps_for(user, folder, page)
        assert len(batch) <= APPS_PER_PAGE
        if not batch:
            break
        seen.extend(a.id for a in batch)
        page += 1

    assert count == 15
    assert len(seen) == count
    assert len(set(seen)) == count
    assert set(seen) == {a.id for i, a in enumerate(members) if i % 3 != 0}


async def test_listed_apps_have_owner_and_permissions_loaded(session, seed, org, all_users_group):
    user = await seed.user(org, groups=[all_users_group])
    owner = await seed.user(org)
    app = await seed.app(owner, read_groups=[all_users_group])
    folder = await seed.folder(org, "F", apps=[app])

    (listed,) = await FoldersService(session).get_apps_for(user, folder, 1)

    assert listed.user.id == owner.id
    assert [g.group for g in listed.group_permissions] == ["all_users"]
    assert [p.read for p in listed.app_group_permissions] == [True]


async def test_page_must_be_positive(session, seed, org):
    user = await seed.user(org)
    folder = await seed.folder(org, "F")

    with pytest.raises(ValueError):
        await FoldersService(session).get_apps_for(user, folder, 0)
