import os
import geopandas as gpd
import pandas as pd
from nyc_assembly import fetch_acs, fetch_boundaries
from nyc_assembly.derive_percentages import add_percentages
from nyc_assembly.filter_nyc import filter_intersecting, nyc_counties
from nyc_assembly.reshape_acs import to_wide
class Config:
    # ACS 5-year release
    YEAR = 2022
    STATE = "NY"
    STATE_FIPS = "36"
    OUTPUT_FILE = "nyc_assembly_acs_race_poverty_income.csv"
    PREVIEW_ROWS = 20
OUTPUT_COLUMNS = [
    "GEOID",
    "NAME",
    "total_pop",
    "white",
    "black",
    "asian",
    "other",
    "below_poverty",
    "total_poverty_universe",
    "pct_white",
    "pct_black",
    "pct_asian",
    "pct_other",
    "pct_poverty",
    "median_household_income",
]
def build(year: int = Config.YEAR) -> gpd.GeoDataFrame:
    long = fetch_acs.fetch_assembly_acs(year, fetch_acs.Config.VARIABLES, Config.STATE_FIPS)
    districts = to_wide(long, fetch_acs.Config.VARIABLES)
    counties = fetch_boundaries.fetch_counties(Config.STATE_FIPS, year, cb=True)
    nyc = filter_intersecting(districts, nyc_counties(counties))
    return add_percentages(nyc)
def to_output_table(gdf: gpd.GeoDataFrame) -> pd.DataFrame:
    df = pd.DataFrame(gdf.drop(columns="geometry"))
    return df[OUTPUT_COLUMNS].sort_values("GEOID").reset_index(drop=True)
def write_output(df: pd.DataFrame, path: str = Config.OUTPUT_FILE):
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    df.to_csv(path, index=False)
    print(f"wrote {len(df)} rows to {path}")
def run(year: int = Config.YEAR, output_file: str = Config.OUTPUT_FILE):
    nyc_assembly = build(year)
    table = to_output_table(nyc_assembly)
    print(f"NYC Assembly districts, ACS {year} 5-year:")
    print(table.head(Config.PREVIEW_ROWS).to_string(index=False))
    write_output(table, output_file)
    # example map of median income:
    # import matplotlib.pyplot as plt
    # ax = nyc_assembly.plot(column="median_household_income", cmap="plasma", legend=True)
    # ax.set_title(f"Median Household Income by NY Assembly District in NYC, ACS {year} 5-year")
    # ax.set_axis_off()
    # plt.savefig("reports/figures/median_income_map.png")
    return nyc_assembly
if __name__ == "__main__":
    run()
