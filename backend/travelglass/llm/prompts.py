from typing import List, Optional

from travelglass.models.domain import Landmark, SceneStatus, TravelScene

RECOMMENDATION_SYSTEM_PROMPT = """
You are an expert travel advisor. Answer with a single JSON object and no prose.
Use exactly the keys of the example object you are given; list values are arrays of short strings.
""".strip()


def _long_date(value) -> str:
    return f"{value:%B} {value.day}, {value:%Y}"


def landmark_instructions(landmark: Landmark, nearby: Optional[str] = None) -> str:
    lines: List[str] = [
        "You are an expert travel advisor specializing in helping visitors plan trips to amazing landmarks around the world.",
        f"Your job is to provide personalized travel recommendations for {landmark.name}.",
        "Always provide specific, actionable advice that will enhance the visitor's experience.",
        f"Here is detailed information about {landmark.name}:",
        f"Location: {landmark.continent}",
        f"Description: {landmark.description}",
    ]
    if landmark.location is not None:
        lines.append(f"Region: {landmark.formatted_location}")
    if landmark.elevation is not None:
        lines.append(f"Elevation: {landmark.formatted_elevation}")
    if landmark.total_area_km2 is not None:
        lines.append(f"Area: {landmark.formatted_total_area}")
    if nearby:
        lines.append(f"Landmarks on the same continent: {nearby}")
    return "\n".join(lines)


def landmark_prompt(landmark: Landmark) -> str:
    return "\n".join(
        [
            f"Generate a comprehensive travel recommendation for {landmark.name}.",
            "Include the best time to visit, recommended activities, practical travel tips, "
            "and nearby attractions that complement this destination.",
            "Be specific and engaging. Focus on what makes this landmark unique and special.",
            "Here is an example format, but adapt it for this specific landmark:",
        ]
    )


def scene_instructions(scene: TravelScene) -> str:
    lines: List[str] = [
        "You are an expert travel advisor specializing in helping travelers plan amazing trips.",
        f"Your job is to provide personalized travel recommendations for {scene.name}, {scene.country}.",
        "Always provide specific, actionable advice that will enhance the visitor's experience.",
        "Here is detailed information about this destination:",
        f"Location: {scene.name}, {scene.country}",
        f"Status: {scene.status.value}",
    ]
    if scene.description:
        lines.append(f"Description: {scene.description}")
    if scene.notes:
        lines.append(f"Traveler's notes: {scene.notes}")

    latest = scene.latest_visit
    if scene.status is SceneStatus.visited and latest is not None:
        lines.append(f"Previously visited on {_long_date(latest.start_date)}")
        if latest.notes:
            lines.append(f"Visit notes: {latest.notes}")
    if scene.status is SceneStatus.planned and scene.planned_date is not None:
        lines.append(f"Planned visit date: {_long_date(scene.planned_date)}")
    return "\n".join(lines)


def scene_prompt(scene: TravelScene) -> str:
    return "\n".join(
        [
            f"Generate a comprehensive travel recommendation for {scene.name}, {scene.country}.",
            "Include the best time to visit, recommended activities, practical travel tips, "
            "local cuisine suggestions, and cultural insights.",
            "Be specific and engaging. Focus on what makes this destination unique and special.",
            f"Consider the traveler's status: this is a {scene.status.value} destination.",
            "Here is an example format, but adapt it for this specific destination:",
        ]
    )
