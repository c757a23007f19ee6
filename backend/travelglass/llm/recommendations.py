from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

# All fields optional: one type holds partial snapshots and finished recommendations.


class LandmarkRecommendation(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None
    best_time_to_visit: Optional[str] = None
    activities: Optional[List[str]] = None
    travel_tips: Optional[List[str]] = None
    nearby_attractions: Optional[List[str]] = None

    @classmethod
    def example(cls) -> Dict[str, Any]:
        return {
            "title": "Experience the Majesty of This Natural Wonder",
            "description": "This landmark offers breathtaking views and unforgettable experiences for all types of travelers.",
            "best_time_to_visit": "Spring (April-May) or Fall (September-October) for ideal weather and fewer crowds",
            "activities": [
                "Sunrise photography from the viewpoint",
                "Guided nature walks with local experts",
                "Cultural tours of nearby villages",
                "Adventure hiking on marked trails",
            ],
            "travel_tips": [
                "Arrive early to avoid crowds and catch the best light",
                "Wear comfortable hiking shoes and bring layers",
                "Book accommodations in advance during peak season",
            ],
            "nearby_attractions": [
                "Historic temple complex 15 km away",
                "Traditional craft village",
                "Scenic mountain viewpoint",
            ],
        }


class SceneRecommendation(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None
    best_time_to_visit: Optional[str] = None
    activities: Optional[List[str]] = None
    local_cuisine: Optional[List[str]] = None
    travel_tips: Optional[List[str]] = None
    cultural_insights: Optional[List[str]] = None

    @classmethod
    def example(cls) -> Dict[str, Any]:
        return {
            "title": "Discover the Magic of This Destination",
            "description": "This destination offers unforgettable experiences, rich culture, and stunning landscapes.",
            "best_time_to_visit": "Spring (April-May) or Fall (September-October) for ideal weather and fewer crowds",
            "activities": [
                "Explore the historic old town",
                "Visit local markets and shops",
                "Take a guided food tour",
                "Enjoy scenic viewpoints",
            ],
            "local_cuisine": [
                "Traditional regional dishes",
                "Street food specialties",
                "Local desserts and beverages",
            ],
            "travel_tips": [
                "Learn a few local phrases",
                "Use public transportation to experience local life",
                "Book popular attractions in advance",
            ],
            "cultural_insights": [
                "Local customs and traditions",
                "Festival seasons and celebrations",
                "Cultural etiquette to observe",
            ],
        }
