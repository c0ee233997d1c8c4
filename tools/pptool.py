#!/usr/bin/env python3
import argparse, csv, logging, sys
from pipepuzzle.engine.solver import solve
from pipepuzzle.mapgen.generator import generate_grid
from pipepuzzle.rng import make_rng

def write_tsv(mat, out, include_header=False):
    w = csv.writer(out, delimiter='\t', lineterminator='\n')
    if include_header:
        w.writerow(list(range(len(mat[0]))))
    for r in mat:
        w.writerow(r)

def cmd_emit(args):
    grid = generate_grid(args.size, make_rng(args.seed))
    if args.out == '-':
        write_tsv(grid.as_label_matrix(), sys.stdout, include_header=args.header)
        return
    with open(args.out, 'w', newline='') as f:
        write_tsv(grid.as_label_matrix(), f, include_header=args.header)
    print(f"Wrote {args.out}")

def cmd_solve(args):
    grid = generate_grid(args.size, make_rng(args.seed))
    write_tsv(grid.as_label_matrix(), sys.stdout)
    res = solve(grid)
    if res.reachable:
        print("reachable:", " -> ".join(f"({r},{c})" for r, c in res.path))
    else:
        print("not reachable")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--size', type=int, default=3)
    p1.add_argument('--seed', type=int, required=True)
    p1.add_argument('--out', type=str, default='-')
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('solve')
    p2.add_argument('--size', type=int, default=3)
    p2.add_argument('--seed', type=int, required=True)
    p2.set_defaults(func=cmd_solve)
    args = p.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    args.func(args)

if __name__ == '__main__':
    main()
