# main.py
import argparse
import json
import math

from campus_nav.app.build import build
from campus_nav.domain.errors import UnknownLocation
from campus_nav.domain.routing.routing_all_pairs import FloydWarshallRouter
from campus_nav.domain.routing.routing_landmarks import route_via_landmarks


def _fmt_cost(c: float) -> str:
    return "unreachable" if math.isinf(c) else f"{c:.0f}"


def print_matrix(router: FloydWarshallRouter, width: int = 12) -> None:
    ids, dist = router.matrix()
    print(" " * (width + 1) + " ".join(f"{i[:width]:>{width}}" for i in ids))
    for i, row in zip(ids, dist):
        cells = " ".join(f"{('inf' if math.isinf(d) else f'{d:.0f}'):>{width}}" for d in row)
        print(f"{i[:width]:>{width}} {cells}")


def run(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Shortest routes between campus locations")
    ap.add_argument("--config", help="JSON navigator config; defaults to the landmark map")
    ap.add_argument("--from", dest="start")
    ap.add_argument("--to", dest="goal")
    ap.add_argument("--via", action="append", default=[], help="landmark to pass (repeatable)")
    ap.add_argument("--within", type=float, help="list locations within this cost of --from")
    ap.add_argument("--algo", help="router kind to use (default: first configured)")
    ap.add_argument("--matrix", action="store_true", help="print the all-pairs cost matrix")
    ap.add_argument("--quiet", action="store_true", help="disable JSON logs")
    args = ap.parse_args(argv)
    if (args.goal or args.within is not None) and not args.start:
        ap.error("--from is required with --to/--within")
    if args.via and not args.goal:
        ap.error("--via needs --to")
    if args.start and not (args.goal or args.within is not None or args.matrix):
        ap.error("--from needs --to or --within")

    cfg = {}
    if args.config:
        with open(args.config, encoding="utf-8") as f:
            cfg = json.load(f)
    if args.within is not None or args.matrix:
        cfg.setdefault("routers", [{"kind": "floyd_warshall"}])
    app = build(cfg, use_logging=not args.quiet)
    router = app.router(args.algo)

    if args.within is not None:
        if not isinstance(router, FloydWarshallRouter):
            ap.error("--within needs a floyd_warshall router")
        try:
            nearby = router.within_radius(args.start, args.within)
        except UnknownLocation as exc:
            print(exc)
            return 2
        for loc, d in nearby.items():
            print(f"  {loc}: {d:.0f}")

    if args.goal:
        if args.via:
            res = route_via_landmarks(router, args.start, args.goal, args.via)
        else:
            res = router.shortest_path(args.start, args.goal)
        if res.found:
            print(f"{_fmt_cost(res.total_cost)}: " + " -> ".join(res.node_sequence))
        elif res.missing:
            print("unknown location(s): " + ", ".join(res.missing))
            return 2
        else:
            print(f"no route from {args.start} to {args.goal}")
            return 1

    if args.matrix:
        if not isinstance(router, FloydWarshallRouter):
            ap.error("--matrix needs a floyd_warshall router")
        print_matrix(router)
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
