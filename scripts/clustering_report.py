"""
Clustering report - CLI tool.

Prints global, average and local clustering coefficients for standard
networkx graphs.

Usage:
    python scripts/clustering_report.py
    python scripts/clustering_report.py --graph star --size 6
    python scripts/clustering_report.py --graph cycle --directed --scores
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import argparse
import logging

import networkx as nx

from graphcluster.core.config import get_settings, load_dotenv_if_exists
from graphcluster.graph import clustering_summary

GRAPHS = {
    "karate": lambda n: nx.karate_club_graph(),
    "complete": nx.complete_graph,
    "path": nx.path_graph,
    "star": lambda n: nx.star_graph(n - 1),
    "cycle": nx.cycle_graph,
}


def main():
    parser = argparse.ArgumentParser(description="Report clustering coefficients of a sample graph")
    parser.add_argument("--graph", choices=sorted(GRAPHS), default="karate", help="Sample graph family")
    parser.add_argument("--size", type=int, default=5, help="Number of vertices (ignored for karate)")
    parser.add_argument("--directed", action="store_true", help="Analyse the directed version")
    parser.add_argument("--scores", action="store_true", help="Print every local coefficient")
    args = parser.parse_args()

    load_dotenv_if_exists()
    settings = get_settings()
    logging.basicConfig(level=settings.logging.level, format=settings.logging.format)

    G = GRAPHS[args.graph](args.size)
    if args.directed:
        G = nx.DiGraph(G) if args.graph != "cycle" else nx.cycle_graph(args.size, create_using=nx.DiGraph)

    summary = clustering_summary(G)

    print(f"\n📈 Clustering of '{args.graph}'\n" + "=" * 60)
    print(f"  Vertices : {summary.vertex_count}")
    print(f"  Directed : {summary.directed}")
    if summary.is_global_defined:
        print(f"  Global   : {summary.global_coefficient:.{settings.analysis.precision}f}")
    else:
        print(f"  Global   : undefined ({summary.global_coefficient}, no triplets)")
    print(f"  Average  : {summary.average_coefficient}")

    if args.scores:
        print("\n  Local coefficients:")
        for vertex, score in summary.scores.items():
            print(f"    {vertex!s:>8}: {score}")


if __name__ == "__main__":
    main()
