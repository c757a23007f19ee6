import pytest

from travelglass.core.errors import ProtectedCollectionError, SeedDataError
from travelglass.models.domain import Activity, Badge, Continent, Landmark, LandmarkCollection
from travelglass.services.model_data import ModelData
from travelglass.storage.seed_data import example_landmarks


def _favorites() -> LandmarkCollection:
    return LandmarkCollection(id=1001, name="Favorites", description="")


def test_loads_example_catalog(model_data):
    assert len(model_data.landmarks) == 21
    assert model_data.featured_landmark.name == "Mount Fuji"
    assert model_data.favorites_collection.id == 1001
    assert [c.id for c in model_data.user_collections] == [1002, 1003, 1004, 1005]


def test_favorite_toggle_round_trip(model_data):
    serengeti = model_data.landmarks_by_id[1002]
    assert not model_data.is_favorite(serengeti)

    model_data.toggle_favorite(serengeti)
    assert model_data.is_favorite(serengeti)
    assert model_data.favorites_collection.landmark_ids.count(1002) == 1

    model_data.toggle_favorite(serengeti)
    assert not model_data.is_favorite(serengeti)


def test_add_favorite_is_idempotent(model_data):
    sahara = model_data.landmarks_by_id[1001]
    before = list(model_data.favorites_collection.landmark_ids)

    model_data.add_favorite(sahara)

    assert model_data.favorites_collection.landmark_ids == before


def test_collection_landmarks_follow_id_order(model_data):
    names = [l.name for l in model_data.collection_landmarks(model_data.favorites_collection)]

    assert names == ["Sahara Desert", "South Shetland Islands", "Rocky Mountains", "Uyuni Salt Flat"]


def test_next_collection_id_follows_highest_user_id(clock):
    collections = [
        _favorites(),
        LandmarkCollection(id=1002, name="a", description=""),
        LandmarkCollection(id=1005, name="b", description=""),
        LandmarkCollection(id=1003, name="c", description=""),
    ]
    model_data = ModelData(clock=clock, collections=collections)

    created = model_data.add_user_collection()

    assert created.id == 1006
    assert created.name == "New Collection"
    assert model_data.user_collections[-1] is created


def test_first_user_collection_gets_1002(clock):
    model_data = ModelData(clock=clock, collections=[_favorites()])

    assert model_data.add_user_collection().id == 1002


def test_favorites_cannot_be_removed(model_data):
    with pytest.raises(ProtectedCollectionError):
        model_data.remove_collection(model_data.favorites_collection)


def test_remove_collection_ignores_unknown(model_data):
    model_data.remove_collection(LandmarkCollection(id=4242, name="ghost", description=""))
    assert len(model_data.user_collections) == 4

    peaks = model_data.find_collection(1002)
    model_data.remove_collection(peaks)
    assert model_data.find_collection(1002) is None


def test_missing_favorites_is_fatal(clock):
    with pytest.raises(SeedDataError):
        ModelData(clock=clock, collections=[LandmarkCollection(id=1002, name="a", description="")])


def test_duplicate_landmark_ids_are_fatal(clock):
    landmarks = example_landmarks()
    landmarks.append(landmarks[0])

    with pytest.raises(SeedDataError):
        ModelData(clock=clock, landmarks=landmarks)


def test_landmarks_in_continent_sorted_by_name(model_data):
    names = [l.name for l in model_data.landmarks_in(Continent.asia)]

    assert names == ["Mount Everest", "Mount Fuji", "Wulingyuan"]
    assert model_data.landmarks_in("Atlantis") == []


def test_empty_continent_returns_empty_list(clock):
    only = Landmark(id=1, name="Fuji", continent="Asia", description="", latitude=0, longitude=0, span=1.0)
    model_data = ModelData(clock=clock, landmarks=[only])

    assert model_data.landmarks_in(Continent.europe) == []
    assert model_data.featured_landmark is None


def test_collection_membership_queries(model_data):
    sahara = model_data.landmarks_by_id[1001]
    icy = model_data.find_collection(1005)

    assert [c.name for c in model_data.collections_containing(sahara)] == ["Sweet Deserts"]

    model_data.add_to_collection(sahara, icy)
    model_data.add_to_collection(sahara, icy)
    assert icy.landmark_ids == [1001]
    assert model_data.collection_contains(icy, sahara)

    model_data.remove_from_collection(sahara, icy)
    model_data.remove_from_collection(sahara, icy)
    assert not model_data.collection_contains(icy, sahara)


def test_earned_badges(model_data):
    assert model_data.earned_badges == [
        Badge.sahara_desert,
        Badge.niagara_falls,
        Badge.mount_fuji,
        Badge.great_barrier_reef,
        Badge.south_shetland_islands,
    ]

    model_data.landmarks_by_id[1016].badge_progress.remove(Activity.draw_sketch)
    assert Badge.mount_fuji not in model_data.earned_badges

    rockies = model_data.landmarks_by_id[1007].badge_progress
    for activity in Activity:
        rockies.add(activity)
    assert Badge.rocky_mountains in model_data.earned_badges


def test_search_landmarks_is_case_insensitive(model_data):
    names = {l.name for l in model_data.search_landmarks("MOUNT")}

    assert names == {"Rocky Mountains", "Mount Fuji", "Mount Everest", "Kirkjufell Mountain"}
    assert len(model_data.search_landmarks("  ")) == 21
