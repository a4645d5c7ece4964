#!/usr/bin/env python3
import argparse, csv, logging
from mazegame.mapgen.analysis import solve
from mazegame.mapgen.generator import new_maze
from mazegame.render.image import save_png
from mazegame.render.text import pretty_print

def write_tsv(board, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(board.width)))
        for row in board.as_matrix():
            w.writerow([int(t) for t in row])

def cmd_print(args):
    board = new_maze(args.width, args.height)
    print(pretty_print(board, show_player=args.player), end='')

def cmd_emit(args):
    board = new_maze(args.width, args.height)
    write_tsv(board, args.out, include_header=args.header)
    print(f"Wrote {args.out}")

def cmd_png(args):
    board = new_maze(args.width, args.height)
    save_png(board, args.out, tile_size=args.tile)
    print(f"Wrote {args.out}")

def cmd_solve(args):
    board = new_maze(args.width, args.height)
    print(pretty_print(board, show_player=True), end='')
    print(' '.join(solve(board)))

def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument('--width', type=int, default=21)
    p.add_argument('--height', type=int, default=21)
    p.add_argument('--log-level', type=str, default='WARNING')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('print')
    p1.add_argument('--player', action='store_true')
    p1.set_defaults(func=cmd_print)
    p2 = sub.add_parser('emit')
    p2.add_argument('--out', type=str, required=True)
    p2.add_argument('--header', action='store_true')
    p2.set_defaults(func=cmd_emit)
    p3 = sub.add_parser('png')
    p3.add_argument('--out', type=str, required=True)
    p3.add_argument('--tile', type=int, default=8, help="Tile size in pixels")
    p3.set_defaults(func=cmd_png)
    p4 = sub.add_parser('solve')
    p4.set_defaults(func=cmd_solve)
    args = p.parse_args(argv)
    if args.width < 1 or args.height < 1:
        p.error("--width and --height must be positive")
    logging.basicConfig(level=args.log_level.upper())
    args.func(args)

if __name__ == '__main__':
    main()
