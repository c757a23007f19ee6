import json
import os
from datetime import date
from enum import Enum
from typing import Callable, Dict, Iterator

import requests
import streamlit as st

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")


class NavigationOption(str, Enum):
    landmarks = "Landmarks"
    map = "Map"
    collections = "Collections"
    scenes_unlocked = "Scenes Unlocked"
    scenes_to_unlock = "Scenes to be Unlocked"
    sets = "Sets"
    badges = "Badges"


def api_get(path: str, **params) -> list | dict:
    resp = requests.get(f"{BACKEND_URL}{path}", params=params or None, timeout=10)
    resp.raise_for_status()
    return resp.json()


def api_send(method: str, path: str, payload: dict | None = None) -> dict | None:
    resp = requests.request(method, f"{BACKEND_URL}{path}", json=payload, timeout=15)
    resp.raise_for_status()
    return resp.json() if resp.content else None


def stream_recommendation(path: str) -> Iterator[dict]:
    with requests.get(f"{BACKEND_URL}{path}", stream=True, timeout=120) as resp:
        resp.raise_for_status()
        for line in resp.iter_lines():
            if line:
                yield json.loads(line)


def show_recommendation(path: str, key: str) -> None:
    if not st.button("Generate travel recommendation", key=key):
        return
    placeholder = st.empty()
    try:
        for snapshot in stream_recommendation(path):
            if "error" in snapshot:
                st.error(snapshot["error"])
                break
            with placeholder.container():
                render_recommendation(snapshot)
    except Exception as exc:  # noqa: BLE001
        st.error(f"Failed to generate recommendation: {exc}")


def render_recommendation(snapshot: dict) -> None:
    if snapshot.get("title"):
        st.markdown(f"#### {snapshot['title']}")
    if snapshot.get("description"):
        st.write(snapshot["description"])
    if snapshot.get("best_time_to_visit"):
        st.markdown(f"**Best time to visit:** {snapshot['best_time_to_visit']}")
    for key in ["activities", "local_cuisine", "travel_tips", "cultural_insights", "nearby_attractions"]:
        items = snapshot.get(key)
        if items:
            st.markdown(f"**{key.replace('_', ' ').title()}**")
            st.markdown("\n".join(f"- {item}" for item in items))


def render_landmarks() -> None:
    featured = api_get("/landmarks/featured")
    st.subheader(f"Featured: {featured['name']}")
    st.write(featured["description"])

    for continent in api_get("/landmarks/continents"):
        if not continent["landmarks"]:
            continue
        st.markdown(f"### {continent['name']}")
        for landmark in continent["landmarks"]:
            star = "★" if landmark["is_favorite"] else "☆"
            with st.expander(f"{star} {landmark['name']}"):
                st.write(landmark["description"])
                details = [landmark["formatted_location"], landmark["formatted_elevation"], landmark["formatted_total_area"]]
                st.caption(" | ".join(d for d in details if d))
                if st.button("Toggle favorite", key=f"fav-{landmark['id']}"):
                    api_send("POST", f"/landmarks/{landmark['id']}/favorite")
                    st.rerun()
                show_recommendation(f"/landmarks/{landmark['id']}/recommendation", key=f"rec-{landmark['id']}")


def render_map() -> None:
    items = api_get("/landmarks/map-items")
    scenes = api_get("/scenes")
    points = [(i["latitude"], i["longitude"]) for i in items] + [
        (s["latitude"], s["longitude"]) for s in scenes
    ]
    if not points:
        st.info("Map items are still loading.")
        return
    st.map({"lat": [p[0] for p in points], "lon": [p[1] for p in points]})


def render_collections() -> None:
    if st.button("New collection"):
        api_send("POST", "/collections")
        st.rerun()
    for collection in api_get("/collections"):
        with st.expander(f"{collection['name']} ({len(collection['landmarks'])})"):
            st.write(collection["description"])
            st.markdown("\n".join(f"- {l['name']}" for l in collection["landmarks"]) or "_Empty_")
            if not collection["is_favorites_collection"]:
                if st.button("Delete", key=f"del-col-{collection['id']}"):
                    api_send("DELETE", f"/collections/{collection['id']}")
                    st.rerun()


def render_scene(scene: dict) -> None:
    with st.expander(f"{scene['name']}, {scene['country']}"):
        if scene["description"]:
            st.write(scene["description"])
        if scene["latest_visit"]:
            st.caption(
                f"Visited {scene['visit_count']} time(s), {scene['total_days_visited']} day(s); "
                f"latest {scene['latest_visit']['start_date'][:10]}"
            )
        if scene["planned_date"]:
            st.caption(f"Planned for {scene['planned_date'][:10]}")
        target = "Planned" if scene["status"] == "Visited" else "Visited"
        if st.button(f"Mark as {target}", key=f"status-{scene['id']}"):
            api_send("PUT", f"/scenes/{scene['id']}/status", {"status": target})
            st.rerun()
        show_recommendation(f"/scenes/{scene['id']}/recommendation", key=f"rec-{scene['id']}")


def render_scenes_unlocked() -> None:
    for scene in api_get("/scenes", status="Visited"):
        render_scene(scene)


def render_scenes_to_unlock() -> None:
    # Kept outside the form; each list depends on the previous choice
    countries = api_get("/locations/countries")
    country = st.selectbox("Country", options=[c["name"] for c in countries])
    selected = next(c for c in countries if c["name"] == country)
    region = st.selectbox(selected["region_label"], options=[r["name"] for r in selected["regions"]])
    cities = next(r for r in selected["regions"] if r["name"] == region)["cities"]
    city = st.selectbox("City", options=[c["name"] for c in cities])
    with st.form("add_scene_form"):
        planned = st.date_input("Planned date (optional)", value=None)
        notes = st.text_area("Notes", height=80)
        submitted = st.form_submit_button("Add scene")
    if submitted:
        payload: dict = {"country": country, "region": region, "city": city, "notes": notes}
        if isinstance(planned, date):
            payload["planned_date"] = planned.isoformat()
        try:
            api_send("POST", "/scenes", payload)
            st.success("Scene added")
        except Exception as exc:  # noqa: BLE001
            st.error(f"Failed to add scene: {exc}")

    for scene in api_get("/scenes", status="Planned"):
        render_scene(scene)


def render_sets() -> None:
    with st.form("add_set_form"):
        name = st.text_input("Set name")
        color = st.selectbox("Color", options=["blue", "green", "orange", "pink", "purple", "red"])
        submitted = st.form_submit_button("Create set")
    if submitted and name:
        api_send("POST", "/sets", {"name": name, "color": color})

    for scene_set in api_get("/sets"):
        with st.expander(f"{scene_set['name']} ({len(scene_set['scene_ids'])})"):
            st.write(scene_set["description"])
            scenes = api_get(f"/sets/{scene_set['id']}/scenes")
            st.markdown("\n".join(f"- {s['name']}, {s['country']}" for s in scenes) or "_Empty_")


def render_badges() -> None:
    badges = api_get("/landmarks/badges")
    if not badges:
        st.info("No badges earned yet.")
    for badge in badges:
        st.markdown(f"- **{badge['name']}**")


PAGES: Dict[NavigationOption, Callable[[], None]] = {
    NavigationOption.landmarks: render_landmarks,
    NavigationOption.map: render_map,
    NavigationOption.collections: render_collections,
    NavigationOption.scenes_unlocked: render_scenes_unlocked,
    NavigationOption.scenes_to_unlock: render_scenes_to_unlock,
    NavigationOption.sets: render_sets,
    NavigationOption.badges: render_badges,
}
assert set(PAGES) == set(NavigationOption)


st.set_page_config(page_title="TravelGlass", layout="wide")
st.title("TravelGlass")
st.caption("Backend: FastAPI | UI: Streamlit")

choice = st.sidebar.radio("Navigate", options=list(NavigationOption), format_func=lambda o: o.value)
st.header(choice.value)
try:
    PAGES[choice]()
except requests.RequestException as exc:
    st.error(f"Backend unavailable: {exc}")
