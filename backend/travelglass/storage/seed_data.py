"""Bundled example data the store loads at startup."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict, List

from travelglass.models.domain import (
    Activity,
    Badge,
    BadgeProgress,
    ClosedRangeElevation,
    FixedElevation,
    Landmark,
    LandmarkCollection,
    OpenRangeElevation,
    SceneSet,
    SceneStatus,
    TravelScene,
    Visit,
)


def _progress(completed: bool) -> BadgeProgress:
    return BadgeProgress({activity: completed for activity in Activity})


def example_landmarks() -> List[Landmark]:
    return [
        Landmark(
            id=1001,
            name="Sahara Desert",
            continent="Africa",
            description="The largest hot desert in the world, a sea of dunes, plateaus and salt flats spanning North Africa.",
            latitude=23.90013,
            longitude=10.33569,
            span=40.0,
            place_id="IC6C65CA81B4B2772",
            total_area_km2=9_200_200,
            elevation=FixedElevation(300),
            location="North Africa",
            badge=Badge.sahara_desert,
            badge_progress=_progress(True),
        ),
        Landmark(
            id=1002,
            name="Serengeti",
            continent="Africa",
            description="Grasslands famous for the great migration of wildebeest and zebra across Tanzania.",
            latitude=-2.45469,
            longitude=34.88159,
            span=10.0,
            place_id="IB3A0184A4D301279",
            total_area_km2=14_763,
            elevation=FixedElevation(920),
            location="Tanzania",
        ),
        Landmark(
            id=1003,
            name="Deadvlei",
            continent="Africa",
            description="A white clay pan with dead camel thorn trees framed by some of the highest dunes on earth.",
            latitude=-24.7629,
            longitude=15.29429,
            span=10.0,
            place_id="IBD2966F32E73D261",
            elevation=FixedElevation(550),
            location="Namibia",
        ),
        Landmark(
            id=1004,
            name="Grand Canyon",
            continent="North America",
            description="A mile-deep gorge carved by the Colorado River, exposing nearly two billion years of rock.",
            latitude=36.21904,
            longitude=-113.16096,
            span=10.0,
            place_id="I55488B3D1D9B2D4B",
            elevation=ClosedRangeElevation(800, 2000),
            location="Arizona, United States",
        ),
        Landmark(
            id=1005,
            name="Niagara Falls",
            continent="North America",
            description="Three waterfalls on the border of Canada and the United States with a combined drop of over 50 meters.",
            latitude=43.07792,
            longitude=-79.07401,
            span=4.0,
            place_id="I433E22BD30C61C40",
            elevation=FixedElevation(108),
            location="Ontario, Canada and New York, United States",
            badge=Badge.niagara_falls,
            badge_progress=_progress(True),
        ),
        Landmark(
            id=1006,
            name="Joshua Tree",
            continent="North America",
            description="Where the Mojave and Colorado deserts meet, dotted with twisted Joshua trees and granite boulders.",
            latitude=33.88752,
            longitude=-115.80826,
            span=10.0,
            place_id="I34674B3D3B032AA2",
            total_area_km2=3218,
            elevation=ClosedRangeElevation(160, 1800),
            location="California, United States",
        ),
        Landmark(
            id=1007,
            name="Rocky Mountains",
            continent="North America",
            description="A mountain range stretching nearly 5,000 km from British Columbia to New Mexico.",
            latitude=47.62596,
            longitude=-112.99872,
            span=16.0,
            place_id="IBD757C9B53C92D9E",
            total_area_km2=780_000,
            elevation=OpenRangeElevation(4400),
            location="Western North America",
            badge=Badge.rocky_mountains,
            badge_progress=_progress(False),
        ),
        Landmark(
            id=1008,
            name="Monument Valley",
            continent="North America",
            description="Sandstone buttes rising from the desert floor on the Navajo Nation.",
            latitude=36.874,
            longitude=-110.348,
            span=10.0,
            place_id="IAB1F0D2360FAAD29",
            total_area_km2=370,
            elevation=ClosedRangeElevation(1500, 1800),
            location="Arizona and Utah, United States",
        ),
        Landmark(
            id=1009,
            name="Muir Woods",
            continent="North America",
            description="An old-growth coast redwood forest just north of San Francisco.",
            latitude=37.8922,
            longitude=-122.57482,
            span=2.0,
            place_id="I907589547EB05261",
            total_area_km2=2,
            elevation=FixedElevation(166),
            location="California, United States",
        ),
        Landmark(
            id=1010,
            name="Amazon Rainforest",
            continent="South America",
            description="The largest tropical rainforest on the planet, home to one in ten known species.",
            latitude=-3.50879,
            longitude=-62.80802,
            span=30.0,
            place_id="I76A1045FB9294971",
            total_area_km2=6_000_000,
            elevation=ClosedRangeElevation(20, 60),
            location="Amazon Basin",
            badge=Badge.amazon_rainforest,
            badge_progress=_progress(False),
        ),
        Landmark(
            id=1011,
            name="Lençóis Maranhenses",
            continent="South America",
            description="White dunes with seasonal freshwater lagoons that fill with the rains.",
            latitude=-2.57812,
            longitude=-43.03345,
            span=10.0,
            place_id="I292A37DAC754D6A0",
            total_area_km2=1550,
            elevation=ClosedRangeElevation(0, 40),
            location="Maranhão, Brazil",
        ),
        Landmark(
            id=1012,
            name="Uyuni Salt Flat",
            continent="South America",
            description="The world's largest salt flat, a giant mirror after the rainy season.",
            latitude=-20.13378,
            longitude=-67.48914,
            span=10.0,
            place_id="ID903C9A78EB0CAAD",
            total_area_km2=10_582,
            elevation=FixedElevation(3663),
            location="Potosí, Bolivia",
        ),
        Landmark(
            id=1014,
            name="White Cliffs of Dover",
            continent="Europe",
            description="Chalk cliffs facing the Strait of Dover, the closest point of Britain to mainland Europe.",
            latitude=51.13641,
            longitude=1.36351,
            span=4.0,
            place_id="I77B160572D5A2EB1",
            elevation=ClosedRangeElevation(0, 110),
            location="Kent, England",
        ),
        Landmark(
            id=1015,
            name="Alps",
            continent="Europe",
            description="Europe's highest mountain range, arcing across eight countries.",
            latitude=46.77367,
            longitude=10.54773,
            span=6.0,
            place_id="IE380E71D265F97C0",
            total_area_km2=200_000,
            elevation=OpenRangeElevation(4800),
            location="Central Europe",
        ),
        Landmark(
            id=1016,
            name="Mount Fuji",
            continent="Asia",
            description="Japan's tallest peak, an active stratovolcano with a near-perfect cone.",
            latitude=35.36072,
            longitude=138.72744,
            span=10.0,
            place_id="I2CC1DF519EDD7ACD",
            total_area_km2=207,
            elevation=FixedElevation(3776),
            location="Honshu, Japan",
            badge=Badge.mount_fuji,
            badge_progress=_progress(True),
        ),
        Landmark(
            id=1017,
            name="Wulingyuan",
            continent="Asia",
            description="Thousands of quartz-sandstone pillars rising above forested ravines.",
            latitude=29.35106,
            longitude=110.45242,
            span=10.0,
            place_id="I818C4BA5FE11BDD6",
            total_area_km2=264,
            elevation=FixedElevation(1050),
            location="Hunan, China",
        ),
        Landmark(
            id=1018,
            name="Mount Everest",
            continent="Asia",
            description="The highest mountain above sea level, on the border of Nepal and China.",
            latitude=27.98816,
            longitude=86.9251,
            span=10.0,
            place_id="IE16B9C217B9B0DC1",
            elevation=FixedElevation(8848),
            location="Nepal and China",
        ),
        Landmark(
            id=1019,
            name="Great Barrier Reef",
            continent="Australia/Oceania",
            description="The largest coral reef system in the world, visible from space.",
            latitude=-16.7599,
            longitude=145.97842,
            span=16.0,
            place_id="IF436B51611F3F9D1",
            total_area_km2=344_400,
            location="Queensland, Australia",
            badge=Badge.great_barrier_reef,
            badge_progress=_progress(True),
        ),
        Landmark(
            id=1020,
            name="Yellowstone National Park",
            continent="North America",
            description="The first national park, with geysers, hot springs and roaming bison.",
            latitude=44.6,
            longitude=-110.5,
            span=4.0,
            place_id="ICE88191F5D7094D0",
            total_area_km2=8991,
            elevation=FixedElevation(2470),
            location="Wyoming, United States",
        ),
        Landmark(
            id=1021,
            name="South Shetland Islands",
            continent="Antarctica",
            description="Glaciated islands off the Antarctic Peninsula, home to penguin colonies and research stations.",
            latitude=-61.79436,
            longitude=-58.70703,
            span=20.0,
            place_id="I1AAF5FE1DF954A59",
            total_area_km2=3687,
            elevation=ClosedRangeElevation(0, 2025),
            location="Antarctic Peninsula",
            badge=Badge.south_shetland_islands,
            badge_progress=_progress(True),
        ),
        Landmark(
            id=1022,
            name="Kirkjufell Mountain",
            continent="Europe",
            description="A steep, arrowhead-shaped mountain on Iceland's Snæfellsnes peninsula.",
            latitude=64.941,
            longitude=-23.305,
            span=2.0,
            place_id="I4E9DB8B46491DC5E",
            elevation=FixedElevation(463),
            location="Snæfellsnes, Iceland",
        ),
    ]


def example_collections() -> List[LandmarkCollection]:
    return [
        LandmarkCollection(id=1001, name="Favorites", description="", landmark_ids=[1001, 1021, 1007, 1012]),
        LandmarkCollection(
            id=1002,
            name="Towering Peaks",
            description="Mountains that make the rest of the world look small.",
            landmark_ids=[1016, 1018, 1007, 1022],
        ),
        LandmarkCollection(id=1003, name="2023 Trip", description="Places from last year's trip.", landmark_ids=[]),
        LandmarkCollection(
            id=1004,
            name="Sweet Deserts",
            description="Sand, rock and sky.",
            landmark_ids=[1006, 1001, 1008],
        ),
        LandmarkCollection(id=1005, name="Icy Wonderland", description="Cold places worth the trip.", landmark_ids=[]),
    ]


def example_scenes(now: datetime) -> List[TravelScene]:
    def days(n: int) -> datetime:
        return now + timedelta(days=n)

    return [
        TravelScene(
            name="Tokyo",
            country="Japan",
            description="Amazing city with blend of traditional and modern culture",
            latitude=35.6762,
            longitude=139.6503,
            status=SceneStatus.visited,
            visits=[
                Visit(days(-35), days(-30), "Spring trip - visited Mount Fuji, enjoyed incredible sushi!"),
                Visit(days(-200), days(-197), "Quick business trip"),
            ],
            notes="Love this city! Want to visit again.",
            associated_landmark_ids=[1016],
        ),
        TravelScene(
            name="Paris",
            country="France",
            description="The City of Light with iconic landmarks",
            latitude=48.8566,
            longitude=2.3522,
            status=SceneStatus.visited,
            visits=[Visit(days(-67), days(-60), "Week-long vacation - Eiffel Tower at sunset was breathtaking")],
            notes="Romantic city with amazing food and architecture",
            associated_landmark_ids=[1015],
        ),
        TravelScene(
            name="Sydney",
            country="Australia",
            description="Beautiful harbor city with iconic opera house",
            latitude=-33.8688,
            longitude=151.2093,
            status=SceneStatus.planned,
            planned_date=days(60),
            notes="Want to see Opera House and Bondi Beach",
            associated_landmark_ids=[1019],
        ),
        TravelScene(
            name="Machu Picchu",
            country="Peru",
            description="Ancient Incan city in the Andes",
            latitude=-13.1631,
            longitude=-72.5450,
            status=SceneStatus.planned,
            planned_date=days(120),
            notes="Need to book hiking permits in advance",
            associated_landmark_ids=[1010],
        ),
    ]


def example_scene_sets() -> List[SceneSet]:
    return [
        SceneSet(name="Asia Adventures", description="Exploring the wonders of Asia", color="red", icon_name="mountain.2.fill"),
        SceneSet(name="European Classics", description="Classic European destinations", color="blue", icon_name="building.columns.fill"),
        SceneSet(name="Bucket List", description="Must-visit places before I die", color="purple", icon_name="star.fill"),
        SceneSet(name="Beach & Coastal", description="Beautiful beaches and coastal cities", color="cyan", icon_name="beach.umbrella.fill"),
        SceneSet(name="Historical Sites", description="Ancient wonders and historical landmarks", color="orange", icon_name="building.2.fill"),
    ]


# Set name -> names of the example scenes it starts with
EXAMPLE_SET_MEMBERSHIP: Dict[str, List[str]] = {
    "Asia Adventures": ["Tokyo"],
    "European Classics": ["Paris"],
    "Bucket List": ["Sydney", "Machu Picchu"],
    "Beach & Coastal": ["Sydney"],
    "Historical Sites": ["Paris", "Machu Picchu"],
}
