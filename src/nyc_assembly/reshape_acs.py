from typing import Dict
import geopandas as gpd
import pandas as pd
def variable_lookup(catalog: Dict[str, str]) -> pd.DataFrame:
    return pd.DataFrame(
        {"variable": list(catalog.values()), "var_name": list(catalog.keys())}
    )
def district_geometry(long_gdf: gpd.GeoDataFrame) -> gpd.GeoDataFrame:
    # one geometry per district, first one seen wins
    return long_gdf[["GEOID", "geometry"]].drop_duplicates(subset="GEOID", keep="first")
def to_wide(long_gdf: gpd.GeoDataFrame, catalog: Dict[str, str]) -> gpd.GeoDataFrame:
    """Pivot long ACS rows into one row per district and one column per variable.

    Variable codes are renamed through ``catalog`` (name -> code). The district
    geometry is joined back on ``GEOID``.
    """
    table = pd.DataFrame(long_gdf.drop(columns="geometry"))
    table = table[["GEOID", "NAME", "variable", "estimate"]].merge(
        variable_lookup(catalog), on="variable", how="left"
    )
    unknown = table.loc[table["var_name"].isna(), "variable"].unique()
    if len(unknown):
        raise ValueError(f"variables missing from catalog: {', '.join(map(str, unknown))}")
    wide = table.pivot(index=["GEOID", "NAME"], columns="var_name", values="estimate")
    wide.columns.name = None
    wide = wide.reset_index()
    geom = district_geometry(long_gdf)
    joined = geom.merge(wide, on="GEOID", how="left", validate="one_to_one")
    cols = [c for c in joined.columns if c != "geometry"] + ["geometry"]
    print(f"reshaped {len(table)} rows into {len(joined)} districts x {len(wide.columns) - 2} variables")
    return gpd.GeoDataFrame(joined[cols], geometry="geometry", crs=long_gdf.crs)
