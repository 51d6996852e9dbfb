import geopandas as gpd
import pytest
import requests
from shapely.geometry import box
from nyc_assembly.fetch_acs import Config as AcsConfig
CRS = "EPSG:4269"
# two districts inside the city, one upstate near Albany
DISTRICT_SHAPES = {
    "36065": box(-74.02, 40.70, -73.98, 40.74),
    "36080": box(-73.90, 40.84, -73.86, 40.88),
    "36109": box(-73.80, 42.62, -73.70, 42.70),
}
DISTRICT_NAMES = {
    "36065": "Assembly District 65 (2022), New York",
    "36080": "Assembly District 80 (2022), New York",
    "36109": "Assembly District 109 (2022), New York",
}
ESTIMATES = {
    "36065": {
        "total_pop": 120000,
        "white": 60000,
        "black": 10000,
        "asian": 30000,
        "other": 8000,
        "total_poverty_universe": 118000,
        "below_poverty": 14000,
        "median_household_income": 145000,
    },
    "36080": {
        "total_pop": 130000,
        "white": 20000,
        "black": 40000,
        "asian": 9000,
        "other": 45000,
        "total_poverty_universe": 127000,
        "below_poverty": 33000,
        "median_household_income": 52000,
    },
    "36109": {
        "total_pop": 125000,
        "white": 95000,
        "black": 15000,
        "asian": 6000,
        "other": 2000,
        "total_poverty_universe": 115000,
        "below_poverty": 17000,
        "median_household_income": 71000,
    },
}
@pytest.fixture
def catalog():
    return dict(AcsConfig.VARIABLES)
@pytest.fixture
def long_acs(catalog):
    rows = []
    for geoid, values in ESTIMATES.items():
        for name, code in catalog.items():
            rows.append(
                {
                    "GEOID": geoid,
                    "NAME": DISTRICT_NAMES[geoid],
                    "variable": code,
                    "estimate": values[name],
                    "moe": 100,
                    "geometry": DISTRICT_SHAPES[geoid],
                }
            )
    return gpd.GeoDataFrame(rows, geometry="geometry", crs=CRS)
@pytest.fixture
def ny_counties():
    rows = [
        ("005", "Bronx", box(-73.94, 40.79, -73.75, 40.92)),
        ("047", "Kings", box(-74.05, 40.57, -73.83, 40.74)),
        ("061", "New York", box(-74.03, 40.68, -73.90, 40.88)),
        ("081", "Queens", box(-73.96, 40.54, -73.70, 40.80)),
        ("085", "Richmond", box(-74.26, 40.49, -74.05, 40.65)),
        ("001", "Albany", box(-74.27, 42.40, -73.67, 42.82)),
        ("119", "Westchester", box(-73.98, 40.88, -73.48, 41.37)),
    ]
    return gpd.GeoDataFrame(
        {
            "STATEFP": ["36"] * len(rows),
            "COUNTYFP": [r[0] for r in rows],
            "GEOID": ["36" + r[0] for r in rows],
            "NAME": [r[1] for r in rows],
            "geometry": [r[2] for r in rows],
        },
        geometry="geometry",
        crs=CRS,
    )
@pytest.fixture
def census_response(catalog):
    """Body of a Census Data API call, as returned by resp.json()."""
    codes = list(catalog.values())
    header = ["NAME"] + [f"{c}E" for c in codes] + [f"{c}M" for c in codes]
    header += ["state", "state legislative district (lower chamber)"]
    body = [header]
    for geoid, values in ESTIMATES.items():
        row = [DISTRICT_NAMES[geoid]]
        row += [str(values[name]) for name in catalog]
        row += ["250"] * len(codes)
        row += [geoid[:2], geoid[2:]]
        body.append(row)
    return body
class FakeResponse:
    def __init__(self, payload=None, content=b"", status_code=200):
        self._payload = payload
        self.content = content
        self.status_code = status_code
    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")
    def json(self):
        return self._payload
@pytest.fixture
def fake_response():
    return FakeResponse
