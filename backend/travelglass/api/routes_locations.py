from typing import List

from fastapi import APIRouter, Depends, HTTPException

from travelglass.api import get_location_db
from travelglass.models.locations import LocationDatabase
from travelglass.models.schemas import CountrySchema

router = APIRouter()


@router.get("/countries", response_model=List[CountrySchema])
def list_countries(location_db: LocationDatabase = Depends(get_location_db)) -> List[CountrySchema]:
    return [CountrySchema.from_domain(c) for c in location_db.countries]


@router.get("/countries/{name}", response_model=CountrySchema)
def get_country(name: str, location_db: LocationDatabase = Depends(get_location_db)) -> CountrySchema:
    country = location_db.find_country(name)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return CountrySchema.from_domain(country)
