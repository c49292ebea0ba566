import argparse
import os
import sys

import pandas as pd

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from backend.catalog import load_catalog
from backend.telemetry import analysis_ticker, camera_feed_ticker, dashboard_ticker, live_map_ticker
from backend.ticker import make_rng

SCREENS = ("dashboard", "live-map", "camera", "analysis")


def build_ticker(screen, catalog, rng, camera_id=None):
    if screen == "dashboard":
        return dashboard_ticker(rng=rng)
    if screen == "live-map":
        return live_map_ticker(catalog.records("map_junctions"), rng=rng)
    if screen == "camera":
        cameras = catalog.records("live_cameras")
        camera = next((c for c in cameras if c["id"] == camera_id), cameras[0])
        return camera_feed_ticker(camera, rng=rng)
    return analysis_ticker(rng=rng)


def replay(ticker, ticks):
    rows = [dict(tick=0, **ticker.values)]
    for i in range(1, ticks + 1):
        rows.append(dict(tick=i, **ticker.tick()))
    return pd.DataFrame(rows)


def main():
    parser = argparse.ArgumentParser(description="Print a seeded sequence of simulated telemetry ticks.")
    parser.add_argument("screen", choices=SCREENS, help="Which screen's ticker to replay")
    parser.add_argument("--ticks", type=int, default=10, help="Number of ticks to apply (default: 10)")
    parser.add_argument("--seed", type=int, default=0, help="Random seed (default: 0)")
    parser.add_argument("--camera", help="Live camera id for the camera screen (default: first camera)")
    parser.add_argument("--catalog", help="Path to an alternative catalog JSON file")
    parser.add_argument("--out", help="Optional CSV output path")
    args = parser.parse_args()

    catalog = load_catalog(args.catalog)
    ticker = build_ticker(args.screen, catalog, make_rng(args.seed), camera_id=args.camera)
    df = replay(ticker, max(0, args.ticks))

    if args.out:
        df.to_csv(args.out, index=False)
        print(f"Wrote {len(df)} rows to {args.out}")
    else:
        print(f"Replay of {args.screen} ticker (period {ticker.period:g}s, seed {args.seed})")
        print(df.to_string(index=False))


if __name__ == "__main__":
    main()
