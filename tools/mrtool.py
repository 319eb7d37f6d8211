#!/usr/bin/env python3
import argparse, logging, os
from mazerealm.export import write_json, write_tsv
from mazerealm.mapgen.generator import generate_level
from mazerealm.progression import LEVELS_PER_REALM, TOTAL_LEVELS

def _seed(raw):
    # Digits are numeric seeds, anything else is folded as text
    try:
        return int(raw)
    except ValueError:
        return raw

def cmd_emit(args):
    desc = generate_level(args.realm, args.level, _seed(args.seed))
    write_tsv(desc.grid, args.out, include_header=args.header)
    print(f"Wrote {args.out} ({desc.mode}, {desc.width}x{desc.height}, seed {desc.seed})")

def cmd_json(args):
    desc = generate_level(args.realm, args.level, _seed(args.seed))
    write_json(desc, args.out)
    print(f"Wrote {args.out}")

def cmd_pack(args):
    base = os.path.join(args.outdir, str(args.seed))
    for total in range(1, TOTAL_LEVELS + 1):
        realm = (total - 1) // LEVELS_PER_REALM + 1
        level = (total - 1) % LEVELS_PER_REALM + 1
        desc = generate_level(realm, level, _seed(args.seed))
        write_tsv(desc.grid, os.path.join(base, f"{total:03d}.tsv"))
    print(f"Wrote level pack to {base}")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--realm', type=int, required=True)
    p1.add_argument('--level', type=int, required=True)
    p1.add_argument('--seed', type=str, required=True)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('json')
    p2.add_argument('--realm', type=int, required=True)
    p2.add_argument('--level', type=int, required=True)
    p2.add_argument('--seed', type=str, required=True)
    p2.add_argument('--out', type=str, required=True)
    p2.set_defaults(func=cmd_json)
    p3 = sub.add_parser('pack')
    p3.add_argument('--seed', type=str, required=True)
    p3.add_argument('--outdir', type=str, required=True)
    p3.set_defaults(func=cmd_pack)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    args.func(args)

if __name__ == '__main__':
    main()
