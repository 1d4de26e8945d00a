"""Tests for the per-entity services over the in-memory storage."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from freelance_marketplace_api.app.core.storage import MemStorage
from freelance_marketplace_api.app.schemas.connection import ConnectionCreate
from freelance_marketplace_api.app.schemas.gig import GigCreate, GigUpdate
from freelance_marketplace_api.app.schemas.notification import NotificationCreate
from freelance_marketplace_api.app.schemas.order import OrderCreate, OrderUpdate
from freelance_marketplace_api.app.schemas.profile import ProfileCreate, ProfileUpdate
from freelance_marketplace_api.app.schemas.project import ProjectCreate, ProjectUpdate
from freelance_marketplace_api.app.schemas.user import UserCreate
from freelance_marketplace_api.app.services import (
    ConnectionService,
    GigService,
    NotificationService,
    OrderService,
    ProfileService,
    ProjectService,
    UserService,
)


async def _user(storage: MemStorage, email: str = "a@x.com", account_type: str = "freelancer"):
    return await UserService(storage).create_user(
        UserCreate(email=email, password="secret", account_type=account_type)
    )


async def _profile(storage: MemStorage, user_id: str, **kwargs):
    return await ProfileService(storage).create_profile(
        ProfileCreate(user_id=user_id, first_name="A", last_name="B", country="US", phone="123", **kwargs)
    )


def _gig(freelancer_id: str, title: str = "Logo") -> GigCreate:
    return GigCreate(freelancer_id=freelancer_id, title=title, description="A logo", price=50)


def _project(client_id: str, title: str = "Site") -> ProjectCreate:
    return ProjectCreate(client_id=client_id, title=title, description="A site", budget=500)


def _order(client_id: str = "c1", freelancer_id: str = "f1") -> OrderCreate:
    return OrderCreate(gig_id="g1", client_id=client_id, freelancer_id=freelancer_id, amount=50)


@pytest.mark.asyncio
async def test_create_user_defaults(storage: MemStorage) -> None:
    """New users have no wallet and a creation timestamp."""
    user = await _user(storage)
    assert user.wallet_address is None
    assert user.created_at.tzinfo is not None
    assert await UserService(storage).get_user(user.id) == user


@pytest.mark.asyncio
async def test_ids_are_unique(storage: MemStorage) -> None:
    gigs = GigService(storage)
    created = [await gigs.create_gig(_gig("f1", title=f"Gig {i}")) for i in range(20)]
    assert len({g.id for g in created}) == 20
    assert len(storage.gigs) == 20


@pytest.mark.asyncio
async def test_get_user_by_email(storage: MemStorage) -> None:
    users = UserService(storage)
    user = await _user(storage, email="a@x.com")
    assert await users.get_user_by_email("a@x.com") == user
    # Exact, case sensitive comparison.
    assert await users.get_user_by_email("A@X.COM") is None
    assert await users.get_user_by_email("missing@x.com") is None


@pytest.mark.asyncio
async def test_update_user_wallet(storage: MemStorage) -> None:
    users = UserService(storage)
    user = await _user(storage)
    updated = await users.update_user_wallet(user.id, "0xabc")
    assert updated is not None
    assert updated.wallet_address == "0xabc"
    assert updated.email == user.email
    assert (await users.get_user(user.id)).wallet_address == "0xabc"


@pytest.mark.asyncio
async def test_update_user_wallet_missing(storage: MemStorage) -> None:
    assert await UserService(storage).update_user_wallet("nope", "0xabc") is None
    assert storage.users == {}


@pytest.mark.asyncio
async def test_authenticate(storage: MemStorage) -> None:
    users = UserService(storage)
    user = await _user(storage)
    assert await users.authenticate("a@x.com", "secret") == user
    assert await users.authenticate("a@x.com", "wrong") is None
    assert await users.authenticate("b@x.com", "secret") is None


@pytest.mark.asyncio
async def test_create_profile_defaults(storage: MemStorage) -> None:
    user = await _user(storage)
    profile = await _profile(storage, user.id)
    assert profile.bio is None
    assert profile.skills is None
    assert profile.hourly_rate is None
    assert profile.avatar is None
    assert profile.portfolio is None
    assert profile.verified is False

    profiles = ProfileService(storage)
    assert await profiles.get_profile_by_id(profile.id) == profile
    assert await profiles.get_profile(user.id) == profile
    assert await profiles.get_profile("other-user") is None


@pytest.mark.asyncio
async def test_update_profile_merges_fields(storage: MemStorage) -> None:
    user = await _user(storage)
    profile = await _profile(storage, user.id, bio="Designer")
    profiles = ProfileService(storage)

    updated = await profiles.update_profile(profile.id, ProfileUpdate(skills=["figma"], hourly_rate=40))
    assert updated.skills == ("figma",)
    assert updated.hourly_rate == 40
    assert updated.bio == "Designer"
    assert updated.first_name == "A"
    assert updated.id == profile.id

    # An explicit null clears the field.
    cleared = await profiles.update_profile(profile.id, ProfileUpdate(bio=None))
    assert cleared.bio is None
    assert cleared.skills == ("figma",)


@pytest.mark.parametrize(
    "patch_type, field",
    [
        (ProfileUpdate, "first_name"),
        (ProfileUpdate, "verified"),
        (GigUpdate, "price"),
        (GigUpdate, "title"),
        (ProjectUpdate, "budget"),
        (OrderUpdate, "status"),
        (OrderUpdate, "escrow_status"),
    ],
)
def test_patch_rejects_null_for_required_field(patch_type, field: str) -> None:
    with pytest.raises(ValidationError, match="cannot be null"):
        patch_type(**{field: None})


def test_patch_accepts_null_for_optional_field() -> None:
    assert ProfileUpdate(bio=None, skills=None).model_fields_set == {"bio", "skills"}
    assert GigUpdate(images=None).images is None
    assert ProjectUpdate(deadline=None).deadline is None
    assert OrderUpdate(delivery_date=None, completed_at=None).completed_at is None


@pytest.mark.asyncio
async def test_updated_record_keeps_field_types(storage: MemStorage) -> None:
    """A merged record is validated again, so list input is stored as a tuple."""
    gigs = GigService(storage)
    gig = await gigs.create_gig(_gig("f1"))
    updated = await gigs.update_gig(gig.id, GigUpdate(images=["a.png"]))
    assert isinstance(updated.images, tuple)
    assert isinstance(storage.gigs[gig.id].images, tuple)


@pytest.mark.asyncio
async def test_returned_records_cannot_change_storage(storage: MemStorage) -> None:
    gigs = GigService(storage)
    gig = await gigs.create_gig(
        GigCreate(freelancer_id="f1", title="Logo", description="A logo", price=50, skills=["a"])
    )
    fetched = await gigs.get_gig(gig.id)
    with pytest.raises(AttributeError):
        fetched.skills.append("injected")
    with pytest.raises(ValidationError):
        fetched.title = "changed"
    assert storage.gigs[gig.id].skills == ("a",)
    assert storage.gigs[gig.id].title == "Logo"

    user = await _user(storage)
    profile = await _profile(storage, user.id, skills=["figma"], portfolio=["https://a.example"])
    assert isinstance(profile.skills, tuple)
    assert isinstance(profile.portfolio, tuple)
    project = await ProjectService(storage).create_project(
        ProjectCreate(client_id="c1", title="Site", description="A site", budget=500, skills=["css"])
    )
    assert isinstance(project.skills, tuple)


@pytest.mark.asyncio
async def test_empty_update_returns_record_unchanged(storage: MemStorage) -> None:
    user = await _user(storage)
    profile = await _profile(storage, user.id)
    gig = await GigService(storage).create_gig(_gig(user.id))
    project = await ProjectService(storage).create_project(_project("c1"))
    order = await OrderService(storage).create_order(_order())

    assert await ProfileService(storage).update_profile(profile.id, ProfileUpdate()) == profile
    assert await GigService(storage).update_gig(gig.id, GigUpdate()) == gig
    assert await ProjectService(storage).update_project(project.id, ProjectUpdate()) == project
    assert await OrderService(storage).update_order(order.id, OrderUpdate()) == order


@pytest.mark.asyncio
async def test_update_missing_does_not_insert(storage: MemStorage) -> None:
    assert await ProfileService(storage).update_profile("nope", ProfileUpdate(bio="x")) is None
    assert await GigService(storage).update_gig("nope", GigUpdate(title="x")) is None
    assert await ProjectService(storage).update_project("nope", ProjectUpdate(title="x")) is None
    assert await OrderService(storage).update_order("nope", OrderUpdate(status="done")) is None
    assert storage.profiles == {}
    assert storage.gigs == {}
    assert storage.projects == {}
    assert storage.orders == {}


@pytest.mark.asyncio
async def test_freelancer_profiles(storage: MemStorage) -> None:
    freelancer = await _user(storage, email="a@x.com", account_type="freelancer")
    client = await _user(storage, email="b@x.com", account_type="client")
    pa = await _profile(storage, freelancer.id)
    pb = await _profile(storage, client.id)

    profiles = ProfileService(storage)
    result = await profiles.get_all_freelancer_profiles()
    assert pa in result
    assert pb not in result

    # The join reflects the users collection at call time.
    storage.users[client.id] = client.model_copy(update={"account_type": "freelancer"})
    result = await profiles.get_all_freelancer_profiles()
    assert pb in result
    del storage.users[freelancer.id]
    result = await profiles.get_all_freelancer_profiles()
    assert result == [pb]


@pytest.mark.asyncio
async def test_freelancer_profiles_empty(storage: MemStorage) -> None:
    assert await ProfileService(storage).get_all_freelancer_profiles() == []


@pytest.mark.asyncio
async def test_gig_lifecycle(storage: MemStorage) -> None:
    """Create a freelancer, a profile and a gig, then delete the gig."""
    user = await _user(storage, email="a@x.com", account_type="freelancer")
    profile = await ProfileService(storage).create_profile(
        ProfileCreate(user_id=user.id, first_name="A", last_name="B", country="US", phone="123")
    )
    assert profile.verified is False
    assert profile.portfolio is None

    gigs = GigService(storage)
    gig = await gigs.create_gig(_gig(user.id))
    assert gig.views == 0
    assert gig.skills is None
    assert gig.images is None
    assert await gigs.get_gigs_by_freelancer(user.id) == [gig]

    assert await gigs.delete_gig(gig.id) is True
    assert await gigs.get_gigs_by_freelancer(user.id) == []
    assert await gigs.get_gig(gig.id) is None


@pytest.mark.asyncio
async def test_gig_filters_and_listing(storage: MemStorage) -> None:
    gigs = GigService(storage)
    first = await gigs.create_gig(_gig("f1", title="One"))
    second = await gigs.create_gig(_gig("f2", title="Two"))
    third = await gigs.create_gig(_gig("f1", title="Three"))

    assert await gigs.get_gigs_by_freelancer("f1") == [first, third]
    assert await gigs.get_gigs_by_freelancer("nobody") == []
    assert await gigs.get_all_gigs() == [first, second, third]


@pytest.mark.asyncio
async def test_gig_update(storage: MemStorage) -> None:
    gigs = GigService(storage)
    gig = await gigs.create_gig(_gig("f1"))
    updated = await gigs.update_gig(gig.id, GigUpdate(price=75, skills=["svg"]))
    assert updated.price == 75
    assert updated.skills == ("svg",)
    assert updated.title == gig.title
    assert updated.views == 0
    assert updated.created_at == gig.created_at
    assert await gigs.get_gig(gig.id) == updated


@pytest.mark.asyncio
async def test_delete_missing_leaves_collection(storage: MemStorage) -> None:
    await GigService(storage).create_gig(_gig("f1"))
    await ProjectService(storage).create_project(_project("c1"))
    assert await GigService(storage).delete_gig("nope") is False
    assert await ProjectService(storage).delete_project("nope") is False
    assert len(storage.gigs) == 1
    assert len(storage.projects) == 1


@pytest.mark.asyncio
async def test_order_lifecycle(storage: MemStorage) -> None:
    orders = OrderService(storage)
    delivery = datetime(2030, 1, 1, tzinfo=timezone.utc)
    order = await orders.create_order(_order())
    assert order.status == "pending"
    assert order.escrow_status == "pending"
    assert order.delivery_date is None
    assert order.completed_at is None

    updated = await orders.update_order(order.id, OrderUpdate(status="in_progress", delivery_date=delivery))
    assert updated.status == "in_progress"
    assert updated.delivery_date == delivery
    assert updated.completed_at is None

    done_at = datetime(2030, 1, 2, tzinfo=timezone.utc)
    completed = await orders.update_order(order.id, OrderUpdate(status="completed", completed_at=done_at))
    assert completed.completed_at == done_at
    assert await orders.get_order(order.id) == completed


@pytest.mark.asyncio
async def test_order_filters(storage: MemStorage) -> None:
    orders = OrderService(storage)
    a = await orders.create_order(_order(client_id="c1", freelancer_id="f1"))
    b = await orders.create_order(_order(client_id="c2", freelancer_id="f1"))
    assert await orders.get_orders_by_client("c1") == [a]
    assert await orders.get_orders_by_freelancer("f1") == [a, b]
    assert await orders.get_orders_by_client("nobody") == []
    assert await orders.get_orders_by_freelancer("nobody") == []
    assert await orders.get_order("nope") is None


@pytest.mark.asyncio
async def test_connections(storage: MemStorage) -> None:
    connections = ConnectionService(storage)
    conn = await connections.create_connection(ConnectionCreate(client_id="c1", freelancer_id="f1"))
    await connections.create_connection(ConnectionCreate(client_id="c2", freelancer_id="f1"))
    assert await connections.get_connection(conn.id) == conn
    assert await connections.get_connections_by_client("c1") == [conn]
    assert await connections.get_connections_by_client("nobody") == []
    assert await connections.get_connection("nope") is None


@pytest.mark.asyncio
async def test_project_lifecycle(storage: MemStorage) -> None:
    projects = ProjectService(storage)
    project = await projects.create_project(_project("c1"))
    other = await projects.create_project(_project("c2", title="Other"))
    assert project.skills is None
    assert project.deadline is None

    assert await projects.get_projects_by_client("c1") == [project]
    assert await projects.get_all_projects() == [project, other]

    updated = await projects.update_project(project.id, ProjectUpdate(budget=750))
    assert updated.budget == 750
    assert updated.title == project.title

    assert await projects.delete_project(project.id) is True
    assert await projects.get_project(project.id) is None
    assert await projects.get_projects_by_client("c1") == []


@pytest.mark.asyncio
async def test_notifications(storage: MemStorage) -> None:
    notifications = NotificationService(storage)
    note = await notifications.create_notification(NotificationCreate(user_id="u1", message="Hello"))
    assert note.link is None
    assert note.read is False
    assert await notifications.get_notifications_by_user("u1") == [note]
    assert await notifications.get_notifications_by_user("u2") == []

    read = await notifications.mark_notification_as_read(note.id)
    assert read.read is True
    # Marking twice keeps it read.
    again = await notifications.mark_notification_as_read(note.id)
    assert again.read is True
    assert await notifications.get_notifications_by_user("u1") == [again]
    assert await notifications.mark_notification_as_read("nope") is None


@pytest.mark.asyncio
async def test_no_referential_checks(storage: MemStorage) -> None:
    """Foreign keys are stored as given, even when nothing matches them."""
    gig = await GigService(storage).create_gig(_gig("ghost"))
    assert gig.freelancer_id == "ghost"
    profile_a = await _profile(storage, "ghost")
    profile_b = await _profile(storage, "ghost")
    assert profile_a.id != profile_b.id
