import os
from typing import Dict
import geopandas as gpd
import pandas as pd
import requests
from dotenv import load_dotenv
from nyc_assembly import fetch_boundaries
load_dotenv()
class Config:
    DATASET = "acs/acs5"
    GEOGRAPHY = "state legislative district (lower chamber)"
    STATE_FIPS = "36"
    # race (B02001), poverty (B17001), median household income (B19013)
    VARIABLES = {
        "total_pop": "B02001_001",
        "white": "B02001_002",
        "black": "B02001_003",
        "asian": "B02001_005",
        "other": "B02001_007",
        "total_poverty_universe": "B17001_001",
        "below_poverty": "B17001_002",
        "median_household_income": "B19013_001",
    }
    # census annotation values, e.g. -666666666 for "too few sample observations"
    SENTINELS = [
        -111111111,
        -222222222,
        -333333333,
        -555555555,
        -666666666,
        -888888888,
        -999999999,
    ]
def api_key() -> str:
    key = os.getenv("CENSUS_API_KEY")
    if not key:
        # one-time setup: put CENSUS_API_KEY=<your key> in .env
        raise SystemExit("missing env vars: CENSUS_API_KEY")
    return key
def _to_number(values: pd.Series) -> pd.Series:
    out = pd.to_numeric(values, errors="coerce")
    return out.mask(out.isin(Config.SENTINELS))
def fetch_acs_table(
    year: int, variables: Dict[str, str], state_fips: str = Config.STATE_FIPS
) -> pd.DataFrame:
    codes = list(variables.values())
    fields = ["NAME"] + [f"{c}E" for c in codes] + [f"{c}M" for c in codes]
    params = {
        "get": ",".join(fields),
        "for": f"{Config.GEOGRAPHY}:*",
        "in": f"state:{state_fips}",
        "key": api_key(),
    }
    url = f"https://api.census.gov/data/{year}/{Config.DATASET}"
    print(f"fetching ACS {year} {Config.DATASET} for state {state_fips} ({len(codes)} variables)")
    resp = requests.get(url, params=params, timeout=60)
    resp.raise_for_status()
    data = resp.json()
    if not data or len(data) < 2:
        raise ValueError(f"empty ACS response for state {state_fips}, year {year}")
    header = data[0]
    wide = pd.DataFrame(data[1:], columns=header)
    wide["GEOID"] = wide["state"] + wide[Config.GEOGRAPHY]
    records = []
    for code in codes:
        part = wide[["GEOID", "NAME"]].copy()
        part["variable"] = code
        part["estimate"] = _to_number(wide[f"{code}E"])
        part["moe"] = _to_number(wide[f"{code}M"])
        records.append(part)
    long = pd.concat(records, ignore_index=True)
    long = long.sort_values(["GEOID", "variable"]).reset_index(drop=True)
    print(f"got {wide['GEOID'].nunique()} districts, {len(long)} estimate rows")
    return long
def fetch_assembly_acs(
    year: int, variables: Dict[str, str], state_fips: str = Config.STATE_FIPS
) -> gpd.GeoDataFrame:
    """Long-format ACS estimates, one row per district per variable, with geometry."""
    table = fetch_acs_table(year, variables, state_fips)
    geom = fetch_boundaries.fetch_assembly_districts(year, state_fips)
    merged = geom[["GEOID", "geometry"]].merge(table, on="GEOID", how="inner")
    if merged.empty:
        raise ValueError(
            f"no ACS rows matched district boundaries for state {state_fips}, year {year}"
        )
    merged = merged[["GEOID", "NAME", "variable", "estimate", "moe", "geometry"]]
    return gpd.GeoDataFrame(merged, geometry="geometry", crs=geom.crs)
