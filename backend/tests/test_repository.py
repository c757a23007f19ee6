from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy import event

from travelglass.models.domain import SceneSet, ScenePhoto, SceneStatus, TravelScene, Visit
from travelglass.services.model_data import ModelData
from travelglass.storage.repository import (
    InMemoryRepository,
    SceneSetRecord,
    ScenePhotoRecord,
    TravelSceneRecord,
    parse_status,
)
from travelglass.storage.sql_repository import SqlRepository

T0 = datetime(2024, 3, 1, tzinfo=timezone.utc)


def test_save_and_reload_keeps_latest_visit_only(clock):
    repository = InMemoryRepository()
    ModelData(repository=repository, clock=clock).save()

    reloaded = ModelData(repository=repository, clock=clock)
    tokyo = next(s for s in reloaded.travel_scenes if s.name == "Tokyo")

    assert len(reloaded.travel_scenes) == 4
    assert tokyo.visit_count == 1
    assert tokyo.latest_visit.start_date == clock() - timedelta(days=35)
    assert tokyo.latest_visit.end_date == tokyo.latest_visit.start_date


def test_set_membership_survives_reload(clock):
    repository = InMemoryRepository()
    first = ModelData(repository=repository, clock=clock)
    first.save()

    reloaded = ModelData(repository=repository, clock=clock)
    bucket_list = next(s for s in reloaded.scene_sets if s.name == "Bucket List")

    assert [s.name for s in reloaded.scene_sets] == sorted(s.name for s in first.scene_sets)
    assert {s.name for s in reloaded.scenes_for(bucket_list)} == {"Sydney", "Machu Picchu"}
    assert bucket_list.color == "#AF52DE"


def test_save_drops_deleted_records(clock):
    repository = InMemoryRepository()
    model_data = ModelData(repository=repository, clock=clock)
    paris = next(s for s in model_data.travel_scenes if s.name == "Paris")
    model_data.add_photo(paris, ScenePhoto(image_data=b"img", created_at=T0))
    model_data.save()
    assert len(repository.load_photos()) == 1

    model_data.remove_travel_scene(paris)
    model_data.remove_scene_set(model_data.scene_sets[0])
    model_data.save()

    assert paris.id not in repository.scenes
    assert repository.load_photos() == []
    assert len(repository.load_scene_sets()) == 4


def test_unknown_status_loads_as_planned():
    assert parse_status("visited") is SceneStatus.visited
    assert parse_status("Planned") is SceneStatus.planned
    assert parse_status("wishlist") is SceneStatus.planned
    assert parse_status("") is SceneStatus.planned


def test_set_colors_fall_back_to_default_blue():
    unknown = SceneSet(name="Odd", color="chartreuse-ish")
    record = SceneSetRecord.from_domain(unknown, T0)
    assert record.color_hex == "#007AFF"

    record.color_hex = "not-a-color"
    assert record.to_domain().color == "#007AFF"

    named = SceneSetRecord.from_domain(SceneSet(name="Red", color="red"), T0)
    assert named.color_hex == "#FF3B30"


def test_legacy_visit_date_becomes_single_visit():
    record = TravelSceneRecord(
        id=uuid4(),
        name="Rome",
        country="Italy",
        description="",
        latitude=41.9,
        longitude=12.5,
        status="Visited",
        visit_date=T0,
        planned_date=None,
        notes="",
        created_at=T0,
        updated_at=T0,
    )

    scene = record.to_domain()

    assert scene.visits[0].start_date == scene.visits[0].end_date == T0
    assert scene.total_days_visited == 1


def test_update_keeps_created_at_and_orders_by_updated_at():
    repository = InMemoryRepository()
    older = TravelScene(name="A", country="X", latitude=0, longitude=0, status=SceneStatus.planned)
    newer = TravelScene(name="B", country="X", latitude=0, longitude=0, status=SceneStatus.planned)

    repository.save_scene(TravelSceneRecord.from_domain(older, T0))
    repository.save_scene(TravelSceneRecord.from_domain(newer, T0 + timedelta(days=1)))
    assert [r.name for r in repository.load_scenes()] == ["B", "A"]

    saved = repository.save_scene(TravelSceneRecord.from_domain(older, T0 + timedelta(days=2)))
    assert saved.created_at == T0
    assert [r.name for r in repository.load_scenes()] == ["A", "B"]


def test_photos_load_by_order_index():
    repository = InMemoryRepository()
    scene_id = uuid4()
    second = ScenePhotoRecord.from_domain(ScenePhoto(image_data=b"2", created_at=T0), scene_id, 1)
    first = ScenePhotoRecord.from_domain(ScenePhoto(image_data=b"1", created_at=T0 + timedelta(hours=1)), scene_id, 0)

    repository.save_photo(second)
    repository.save_photo(first)

    assert [p.image_data for p in repository.load_photos()] == [b"1", b"2"]


def test_delete_scene_cascades_to_photos_and_sets():
    repository = InMemoryRepository()
    scene = TravelScene(name="A", country="X", latitude=0, longitude=0, status=SceneStatus.planned)
    scene_set = SceneSet(name="S", scene_ids={scene.id})
    repository.save_scene(TravelSceneRecord.from_domain(scene, T0))
    repository.save_scene_set(SceneSetRecord.from_domain(scene_set, T0))
    repository.save_photo(ScenePhotoRecord.from_domain(ScenePhoto(image_data=b"x"), scene.id, 0))

    repository.delete_scene(scene.id)

    assert repository.load_scenes() == []
    assert repository.load_photos() == []
    assert repository.load_scene_sets()[0].scene_ids == []


@pytest.fixture
def sql_repository(tmp_path):
    return SqlRepository(f"sqlite:///{tmp_path / 'travelglass.db'}")


def test_first_start_seeds_examples_then_marks_store_initialized(clock):
    repository = InMemoryRepository()
    assert not repository.is_initialized()

    model_data = ModelData(repository=repository, clock=clock)
    assert len(model_data.travel_scenes) == 4

    model_data.save()
    assert repository.is_initialized()


@pytest.mark.parametrize("kind", ["memory", "sql"])
def test_deleted_examples_stay_deleted_after_restart(kind, clock, tmp_path):
    def open_repository():
        if kind == "memory":
            return shared
        return SqlRepository(f"sqlite:///{tmp_path / 'travelglass.db'}")

    shared = InMemoryRepository()
    model_data = ModelData(repository=open_repository(), clock=clock)
    for scene_set in list(model_data.scene_sets):
        model_data.remove_scene_set(scene_set)
    model_data.save()

    reloaded = ModelData(repository=open_repository(), clock=clock)
    assert reloaded.scene_sets == []
    assert len(reloaded.travel_scenes) == 4

    for scene in list(reloaded.travel_scenes):
        reloaded.remove_travel_scene(scene)
    reloaded.save()

    again = ModelData(repository=open_repository(), clock=clock)
    assert again.travel_scenes == []
    assert again.scene_sets == []


def test_sql_repository_round_trip(sql_repository, tmp_path, clock):
    model_data = ModelData(repository=sql_repository, clock=clock)
    tokyo = next(s for s in model_data.travel_scenes if s.name == "Tokyo")
    model_data.add_photo(tokyo, ScenePhoto(image_data=b"\x00\xffjpeg", caption="Shibuya", created_at=T0))
    recent = clock() - timedelta(days=3)
    model_data.add_visit(tokyo, Visit(start_date=recent, end_date=clock()))
    model_data.save()

    reopened = SqlRepository(f"sqlite:///{tmp_path / 'travelglass.db'}")
    reloaded = ModelData(repository=reopened, clock=clock)
    tokyo_again = reloaded.find_scene(tokyo.id)
    bucket_list = next(s for s in reloaded.scene_sets if s.name == "Bucket List")

    assert tokyo_again.photos[0].image_data == b"\x00\xffjpeg"
    assert tokyo_again.photos[0].caption == "Shibuya"
    assert tokyo_again.latest_visit.start_date == recent
    assert [s.name for s in reloaded.scene_sets] == sorted(s.name for s in model_data.scene_sets)
    assert {s.name for s in reloaded.scenes_for(bucket_list)} == {"Sydney", "Machu Picchu"}
    assert bucket_list.color == "#AF52DE"


def test_sql_save_commits_once(sql_repository, clock):
    model_data = ModelData(repository=sql_repository, clock=clock)
    commits = []
    event.listen(sql_repository.engine, "commit", commits.append)

    model_data.save()

    assert len(commits) == 1


def test_sql_sync_keeps_created_at_and_drops_stale_rows(sql_repository):
    scene = TravelScene(name="A", country="X", latitude=0, longitude=0, status=SceneStatus.planned)
    other = TravelScene(name="B", country="X", latitude=0, longitude=0, status=SceneStatus.planned)
    scene_set = SceneSet(name="S", scene_ids={scene.id, other.id})
    photo = ScenePhotoRecord.from_domain(ScenePhoto(image_data=b"x", created_at=T0), other.id, 0)

    sql_repository.sync(
        [TravelSceneRecord.from_domain(scene, T0), TravelSceneRecord.from_domain(other, T0)],
        [SceneSetRecord.from_domain(scene_set, T0)],
        [photo],
    )
    later = T0 + timedelta(days=1)
    sql_repository.sync(
        [TravelSceneRecord.from_domain(scene, later)],
        [SceneSetRecord.from_domain(scene_set, later)],
        [],
    )

    [stored] = sql_repository.load_scenes()
    assert stored.created_at == T0
    assert stored.updated_at == later
    assert sql_repository.load_photos() == []
    assert sql_repository.load_scene_sets()[0].scene_ids == [scene.id]
