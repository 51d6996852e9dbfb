import numpy as np
import pandas as pd
PERCENTAGES = {
    "pct_white": ("white", "total_pop"),
    "pct_black": ("black", "total_pop"),
    "pct_asian": ("asian", "total_pop"),
    "pct_other": ("other", "total_pop"),
    "pct_poverty": ("below_poverty", "total_poverty_universe"),
}
def add_percentages(df: pd.DataFrame) -> pd.DataFrame:
    print("adding percentage columns")
    df = df.copy()
    for col, (num, denom) in PERCENTAGES.items():
        df[col] = 100 * df[num].astype(float) / df[denom].astype(float)
    # zero denominators are left as inf/nan in the output
    bad = (~np.isfinite(df[list(PERCENTAGES)])).sum()
    bad = bad[bad > 0]
    if not bad.empty:
        print(f"non-finite percentages: {bad.to_dict()}")
    return df
