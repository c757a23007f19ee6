from concurrent.futures import Future, ThreadPoolExecutor

from travelglass.models.domain import MapItem
from travelglass.services.map_items import CatalogMapItemResolver, fetch_map_items
from travelglass.services.model_data import ModelData


class FlakyResolver:
    def __init__(self, broken_place_id: str):
        self.broken_place_id = broken_place_id

    def resolve(self, place_id: str):
        if place_id == self.broken_place_id:
            raise ConnectionError("lookup failed")
        return MapItem(name=place_id, latitude=0.0, longitude=0.0, place_id=place_id)


class FailingExecutor:
    def submit(self, fn, *args, **kwargs):
        future = Future()
        future.set_exception(RuntimeError("offline"))
        return future


def test_catalog_resolver_uses_landmark_coordinates(model_data):
    fuji = model_data.landmarks_by_id[1016]

    item = CatalogMapItemResolver(model_data.landmarks).resolve(fuji.place_id)

    assert item.name == "Mount Fuji"
    assert (item.latitude, item.longitude) == (fuji.latitude, fuji.longitude)


def test_fetch_skips_failed_lookups(model_data):
    fuji = model_data.landmarks_by_id[1016]

    fetched = fetch_map_items(model_data.landmarks, FlakyResolver(fuji.place_id))

    assert 1016 not in fetched
    assert len(fetched) == len(model_data.landmarks) - 1


def test_background_fetch_publishes_all_items(clock):
    model_data = ModelData(clock=clock)
    assert model_data.map_items_by_landmark_id == {}

    with ThreadPoolExecutor(max_workers=1) as executor:
        model_data.start_map_item_fetch(executor)

    assert set(model_data.map_items_by_landmark_id) == set(model_data.landmarks_by_id)
    assert len(model_data.map_items_for_landmarks) == 21


def test_failed_background_fetch_leaves_index_empty(model_data):
    model_data.start_map_item_fetch(FailingExecutor())

    assert model_data.map_items_by_landmark_id == {}
