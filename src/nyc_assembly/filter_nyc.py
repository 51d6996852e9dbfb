import geopandas as gpd
from shapely.ops import unary_union
# Bronx, Kings, New York, Queens, Richmond
NYC_COUNTY_FIPS = ("005", "047", "061", "081", "085")
def nyc_counties(counties: gpd.GeoDataFrame) -> gpd.GeoDataFrame:
    return counties[counties["COUNTYFP"].isin(NYC_COUNTY_FIPS)].reset_index(drop=True)
def filter_intersecting(
    districts: gpd.GeoDataFrame, boundaries: gpd.GeoDataFrame
) -> gpd.GeoDataFrame:
    """Keep districts touching any boundary polygon. Districts are not clipped."""
    if boundaries.crs is not None and districts.crs is not None:
        if boundaries.crs != districts.crs:
            boundaries = boundaries.to_crs(districts.crs)
    area = unary_union(list(boundaries.geometry))
    kept = districts[districts.geometry.intersects(area)]
    print(f"kept {len(kept)} of {len(districts)} districts intersecting {len(boundaries)} boundaries")
    return kept.reset_index(drop=True)
