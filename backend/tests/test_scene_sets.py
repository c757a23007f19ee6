from travelglass.models.domain import SceneSet, SceneStatus, TravelScene


def _by_name(model_data, name: str):
    return next(s for s in model_data.travel_scenes if s.name == name)


def _set(model_data, name: str) -> SceneSet:
    return next(s for s in model_data.scene_sets if s.name == name)


def test_example_sets_start_with_members(model_data):
    bucket_list = _set(model_data, "Bucket List")

    assert {s.name for s in model_data.scenes_for(bucket_list)} == {"Sydney", "Machu Picchu"}
    assert {s.name for s in model_data.sets_for(_by_name(model_data, "Paris"))} == {
        "European Classics",
        "Historical Sites",
    }


def test_add_and_remove_scene(model_data):
    tokyo = _by_name(model_data, "Tokyo")
    beach = _set(model_data, "Beach & Coastal")

    model_data.add_scene_to_set(tokyo, beach)
    model_data.add_scene_to_set(tokyo, beach)
    assert beach.contains(tokyo)
    assert beach in model_data.sets_for(tokyo)
    assert len(beach.scene_ids) == 2

    model_data.remove_scene_from_set(tokyo, beach)
    model_data.remove_scene_from_set(tokyo, beach)
    assert tokyo not in model_data.scenes_for(beach)


def test_double_toggle_restores_membership(model_data):
    paris = _by_name(model_data, "Paris")
    scene_set = SceneSet(name="Food Trips", color="orange")
    model_data.add_scene_set(scene_set)

    model_data.toggle_scene_in_set(paris, scene_set)
    assert model_data.scenes_for(scene_set) == [paris]

    model_data.toggle_scene_in_set(paris, scene_set)
    assert model_data.scenes_for(scene_set) == []


def test_removed_scene_drops_out_of_set_queries(model_data):
    sydney = _by_name(model_data, "Sydney")
    bucket_list = _set(model_data, "Bucket List")

    model_data.remove_travel_scene(sydney)

    assert [s.name for s in model_data.scenes_for(bucket_list)] == ["Machu Picchu"]


def test_remove_scene_set(model_data):
    beach = _set(model_data, "Beach & Coastal")

    model_data.remove_scene_set(beach)

    assert model_data.find_scene_set(beach.id) is None
    assert len(model_data.scene_sets) == 4
    sydney = _by_name(model_data, "Sydney")
    assert beach not in model_data.sets_for(sydney)


def test_new_scene_belongs_to_no_set(model_data):
    scene = TravelScene(name="Seoul", country="South Korea", latitude=37.5, longitude=127.0, status=SceneStatus.planned)
    model_data.add_travel_scene(scene)

    assert model_data.sets_for(scene) == []
