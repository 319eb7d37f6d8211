#!/usr/bin/env python3
# Render generated levels to PNGs using Pillow.
# One image per level of a realm, or a single level with --level.

import argparse, logging, os
from mazerealm.mapgen.generator import generate_level
from mazerealm.progression import LEVELS_PER_REALM
from mazerealm.render.preview import save_preview

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--realm", type=int, required=True, help="Realm number (1-based)")
    ap.add_argument("--level", type=int, default=None, help="Only this level (default: all 10)")
    ap.add_argument("--seed", type=str, default="42", help="Numeric or text seed")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=8, help="Tile size in pixels")
    args = ap.parse_args()
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        seed = int(args.seed)
    except ValueError:
        seed = args.seed
    levels = [args.level] if args.level else range(1, LEVELS_PER_REALM + 1)
    for lvl in levels:
        desc = generate_level(args.realm, lvl, seed)
        png = os.path.join(args.outdir, str(args.realm), f"{lvl:02d}.png")
        save_preview(desc, png, tile_size=args.tile)
    print(f"Wrote PNGs to {os.path.join(args.outdir, str(args.realm))}")

if __name__ == "__main__":
    main()
