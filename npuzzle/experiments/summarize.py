#!/usr/bin/env python3
from __future__ import annotations
import argparse, glob, os
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd

METRICS = ["evaluated", "peak_states", "g", "time_sec"]


def load_many(patterns: List[str]) -> pd.DataFrame:
    dfs = []
    for pat in patterns:
        for fn in sorted(glob.glob(pat)):
            df = pd.read_csv(fn)
            df["__src__"] = os.path.basename(fn)
            dfs.append(df)
    if not dfs:
        return pd.DataFrame(columns=["algorithm", "heuristic", "termination"] + METRICS)
    return pd.concat(dfs, ignore_index=True, sort=False)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """
    Per (algorithm, heuristic): run counts plus mean/median of each metric over
    solved runs. Groups with no solved run keep their counts; their metrics are NaN.
    """
    if df.empty:
        return pd.DataFrame()
    df = df.copy()
    df["heuristic"] = df["heuristic"].fillna("")
    df["solved"] = df["termination"].fillna("ok") == "ok"
    for m in METRICS:
        df[m] = pd.to_numeric(df[m], errors="coerce").where(df["solved"])
    # geometric mean of evaluated states is less skewed by a few hard instances
    df["log_evaluated"] = np.log(df["evaluated"].clip(lower=1))

    grouped = df.groupby(["algorithm", "heuristic"])
    agg = grouped[METRICS].agg(["mean", "median"])
    agg.columns = [f"{m}_{stat}" for m, stat in agg.columns]
    agg["solved"] = grouped["solved"].sum().astype(int)
    agg["runs"] = grouped.size()
    agg["unsolved"] = agg["runs"] - agg["solved"]
    agg["evaluated_gmean"] = np.exp(grouped["log_evaluated"].mean())
    return agg.reset_index()


def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs by heuristic")
    ap.add_argument("csv", nargs="+", help="CSV files or glob patterns")
    ap.add_argument("--out", type=Path, default=None, help="Optional CSV output path")
    args = ap.parse_args(argv)

    table = summarize(load_many(args.csv))
    if table.empty:
        print("No rows found.")
        return
    if table["solved"].sum() == 0:
        print(f"No solved runs ({table['unsolved'].sum()} unsolved); metric columns are empty.")
    with pd.option_context("display.width", 160, "display.max_columns", None):
        print(table.to_string(index=False, float_format=lambda v: f"{v:.3f}"))
    if args.out:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Wrote {args.out}")


if __name__ == "__main__":
    main()
