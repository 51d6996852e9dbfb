import os
import geopandas as gpd
import requests
class Config:
    CB_URL = "https://www2.census.gov/geo/tiger/GENZ{year}/shp"
    TIGER_URL = "https://www2.census.gov/geo/tiger/TIGER{year}/COUNTY"
    CACHE_DIR = "data/raw/boundaries"
    RESOLUTION = "500k"
def download_boundary(url: str, cache_dir: str = Config.CACHE_DIR) -> str:
    os.makedirs(cache_dir, exist_ok=True)
    path = os.path.join(cache_dir, url.rsplit("/", 1)[-1])
    if os.path.exists(path):
        print(f"using cached {path}")
        return path
    print(f"downloading boundaries from {url}")
    resp = requests.get(url, timeout=120)
    resp.raise_for_status()
    with open(path, "wb") as f:
        f.write(resp.content)
    print(f"saved to {path}")
    return path
def fetch_assembly_districts(year: int, state_fips: str = "36") -> gpd.GeoDataFrame:
    fname = f"cb_{year}_{state_fips}_sldl_{Config.RESOLUTION}.zip"
    url = f"{Config.CB_URL.format(year=year)}/{fname}"
    gdf = gpd.read_file(download_boundary(url))
    return gdf[["GEOID", "geometry"]]
def fetch_counties(state_fips: str, year: int, cb: bool = True) -> gpd.GeoDataFrame:
    if cb:
        fname = f"cb_{year}_us_county_{Config.RESOLUTION}.zip"
        url = f"{Config.CB_URL.format(year=year)}/{fname}"
    else:
        fname = f"tl_{year}_us_county.zip"
        url = f"{Config.TIGER_URL.format(year=year)}/{fname}"
    gdf = gpd.read_file(download_boundary(url))
    gdf = gdf[gdf["STATEFP"] == state_fips]
    print(f"loaded {len(gdf)} counties for state {state_fips}")
    return gdf[["STATEFP", "COUNTYFP", "GEOID", "NAME", "geometry"]].reset_index(drop=True)
