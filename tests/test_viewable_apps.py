"""App visibility rule shared by every folder query."""

from folders_api.repositories.apps import AppRepository


async def test_owner_sees_own_private_app(session, seed, org):
    owner = await seed.user(org)
    app = await seed.app(owner)

    ids = await AppRepository(session).list_viewable_app_ids(owner)

    assert ids == [app.id]


async def test_private_app_hidden_from_other_members(session, seed, org):
    owner = await seed.user(org)
    other = await seed.user(org)
    await seed.app(owner)

    repo = AppRepository(session)
    assert await repo.list_viewable_app_ids(other) == []
    assert await repo.has_viewable_apps(other) is False


async def test_public_app_visible_within_its_organization_only(session, seed, org, other_org):
    owner = await seed.user(org)
    colleague = await seed.user(org)
    outsider = await seed.user(other_org)
    app = await seed.app(owner, is_public=True)

    repo = AppRepository(session)
    assert await repo.list_viewable_app_ids(colleague) == [app.id]
    assert await repo.list_viewable_app_ids(outsider) == []


async def test_group_read_grant_makes_app_viewable(session, seed, org, all_users_group):
    owner = await seed.user(org)
    member = await seed.user(org, groups=[all_users_group])
    non_member = await seed.user(org)
    app = await seed.app(owner, read_groups=[all_users_group])

    repo = AppRepository(session)
    assert await repo.list_viewable_app_ids(member) == [app.id]
    assert await repo.list_viewable_app_ids(non_member) == []


async def test_group_grant_without_read_is_ignored(session, seed, org, all_users_group):
    owner = await seed.user(org)
    member = await seed.user(org, groups=[all_users_group])
    await seed.app(owner, no_read_groups=[all_users_group])

    assert await AppRepository(session).list_viewable_app_ids(member) == []


async def test_each_condition_counts_once(session, seed, org, all_users_group):
    owner = await seed.user(org, groups=[all_users_group])
    # owned, public and granted at the same time
    app = await seed.app(owner, is_public=True, read_groups=[all_users_group])

    assert await AppRepository(session).list_viewable_app_ids(owner) == [app.id]


async def test_rule_does_not_depend_on_folders(session, seed, org):
    owner = await seed.user(org)
    in_folder = await seed.app(owner)
    loose = await seed.app(owner)
    await seed.folder(org, "Work", apps=[in_folder])

    ids = await AppRepository(session).list_viewable_app_ids(owner)

    assert set(ids) == {in_folder.id, loose.id}
