#!/usr/bin/env python3
import argparse, csv, logging, os
from roguegen import config
from roguegen.mapgen.generator import generate_map, marked_matrix
from roguegen.spawnables import Entrance, Exit

def write_tsv(mat, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(len(mat[0]))))
        for r in mat:
            w.writerow(r)

def cmd_emit(args):
    ctx = generate_map(args.seed)
    write_tsv(marked_matrix(ctx), args.out, include_header=args.header)
    print(f"Wrote {args.out} (seed {ctx.seed})")

def cmd_batch(args):
    os.makedirs(args.outdir, exist_ok=True)
    for seed in range(args.first, args.first + args.count):
        ctx = generate_map(seed)
        path = os.path.join(args.outdir, f"{seed:06d}.tsv")
        write_tsv(marked_matrix(ctx), path)
    print(f"Wrote {args.count} maps to {args.outdir}")

def cmd_rooms(args):
    ctx = generate_map(args.seed)
    plan = ctx.room_plan
    for ii in range(plan.room_count):
        room = plan.get_room_plan(ii)
        tags = ",".join(type(c).__name__ for c in room.components) or "-"
        print(f"room {ii:2d} {room.room_gen.draw} {tags}")
    for ii in range(plan.hall_count):
        print(f"hall {ii:2d} {plan.get_hall(ii).draw}")
    for kind, cls in (("entrance", Entrance), ("exit", Exit)):
        for loc, item in ctx.placed(cls):
            print(f"{kind:8s} {loc.as_tuple()} {item}")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=int, default=None)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('batch')
    p2.add_argument('--first', type=int, default=1)
    p2.add_argument('--count', type=int, default=10)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_batch)
    p3 = sub.add_parser('rooms')
    p3.add_argument('--seed', type=int, default=None)
    p3.set_defaults(func=cmd_rooms)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    config.load_env_flags()
    args.func(args)

if __name__ == '__main__':
    main()
