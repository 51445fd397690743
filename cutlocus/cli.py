#!/usr/bin/env python
"""
Cut-locus command line

Computes the cut that opens a closed triangle mesh into a topological disk,
compares saved cuts, and renders a cut over its mesh.
"""

import argparse
import logging
import os
import time

from cutlocus.config import CutConfig
from cutlocus.core import compute_cut
from cutlocus.diff import cut_diff
from cutlocus.errors import CutLocusError
from cutlocus.policies import POLICIES
from cutlocus.surface import load_cut, load_mesh, save_cut
from cutlocus.topology import complement_euler_characteristic


def add_common_args(parser):
    """Add output and logging options shared by all subcommands."""
    parser.add_argument(
        "-o",
        "--output",
        help="Output path (default: derived from the input file name)",
    )
    parser.add_argument(
        "--overwrite", action="store_true", help="Overwrite existing files"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Print debug messages of each stage"
    )


def add_cut_args(parser):
    """Add the cut pipeline options."""
    parser.add_argument(
        "--policy",
        choices=sorted(POLICIES),
        default=None,
        help="Frontier ordering of the cut search (default: hop)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Triangle the search starts from (default: 0)",
    )
    parser.add_argument(
        "--no-trim",
        action="store_true",
        help="Keep dangling spurs in the cut",
    )
    parser.add_argument(
        "--no-reduce",
        action="store_true",
        help="Skip chord removal",
    )
    parser.add_argument(
        "--asymmetric-geodesic",
        action="store_true",
        help=(
            "With --policy geodesic, add a constant 1 on the 'next' branch "
            "instead of the centroid distance"
        ),
    )
    parser.add_argument(
        "--config",
        help="JSON file with a CutConfig; command line options override it",
    )
    parser.add_argument(
        "--plot",
        help="Also render the cut to this PNG file",
    )


def config_from_args(args):
    """Build a CutConfig from a config file and command line overrides."""
    if args.config:
        config = CutConfig.from_json_file(args.config)
    else:
        config = CutConfig()
    if args.policy is not None:
        config.policy = args.policy
    if args.seed is not None:
        config.seed = args.seed
    if args.no_trim:
        config.trim = False
    if args.no_reduce:
        config.reduce = False
    if args.asymmetric_geodesic:
        config.symmetric_geodesic = False
    if args.verbose:
        config.verbose = True
    return config


def run_cut(args):
    """Compute and save the cut of a mesh file."""
    start_time = time.time()
    output = args.output or f"{os.path.splitext(args.mesh)[0]}.cut.json"
    if os.path.exists(output) and not args.overwrite:
        print(f"Error: {output} exists. Use --overwrite to replace it.")
        return 1

    try:
        config = config_from_args(args)
        print(f"Loading mesh from {args.mesh}")
        mesh = load_mesh(args.mesh)
        print(
            f"Mesh has {mesh.number_of_vertices()} vertices and "
            f"{mesh.number_of_triangles()} triangles"
        )
        result = compute_cut(mesh, config)
    except (CutLocusError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Raw cut: {len(result.raw)} edges")
    if config.trim:
        print(f"Trimmed cut: {len(result.trimmed)} edges")
    if result.reduced is not None:
        print(
            f"Reduced cut: {len(result.reduced)} edges "
            f"({len(result.diff.added)} new, {len(result.diff.removed)} removed)"
        )
    chi = complement_euler_characteristic(mesh, result.cut)
    print(f"Euler characteristic of the cut-open surface: {chi}")

    save_cut(output, result.cut)
    print(f"Saved cut to {output}")

    if args.plot:
        from cutlocus.viz import plot_cut

        plot_cut(mesh, result.trimmed, reduced=result.reduced, output=args.plot)
        print(f"Saved plot to {args.plot}")

    print(f"Completed in {time.time() - start_time:.2f} seconds")
    return 0


def run_diff(args):
    """Print the edges that differ between two saved cuts."""
    try:
        old = load_cut(args.old)
        new = load_cut(args.new)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    diff = cut_diff(old, new)
    print(f"Old cut: {len(old)} edges, new cut: {len(new)} edges")
    print(f"New edges ({len(diff.added)}): {' '.join(map(str, diff.added))}")
    print(f"Old edges ({len(diff.removed)}): {' '.join(map(str, diff.removed))}")
    return 0


def run_plot(args):
    """Render a saved cut over its mesh."""
    output = args.output or f"{os.path.splitext(args.cut)[0]}.png"
    if os.path.exists(output) and not args.overwrite:
        print(f"Error: {output} exists. Use --overwrite to replace it.")
        return 1

    from cutlocus.viz import plot_cut

    try:
        mesh = load_mesh(args.mesh)
        cut = load_cut(args.cut)
        reduced = load_cut(args.reduced) if args.reduced else None
        plot_cut(mesh, cut, reduced=reduced, output=output)
    except (CutLocusError, FileNotFoundError, IndexError, KeyError, ValueError) as e:
        print(f"Failed to generate plot: {e}")
        return 1
    print(f"Successfully saved plot: {output}")
    return 0


def main(argv=None):
    """Main function to parse arguments and dispatch subcommands."""
    parser = argparse.ArgumentParser(
        description="cutlocus: cut closed triangle meshes into topological disks"
    )
    subparsers = parser.add_subparsers(
        dest="command", required=True, help="Subcommand to run"
    )

    parser_run = subparsers.add_parser("run", help="Compute the cut of a mesh")
    parser_run.add_argument(
        "mesh", help="Mesh file (OFF, OBJ, PLY, STL or FreeSurfer geometry)"
    )
    add_cut_args(parser_run)
    add_common_args(parser_run)
    parser_run.set_defaults(func=run_cut)

    parser_diff = subparsers.add_parser("diff", help="Compare two saved cuts")
    parser_diff.add_argument("old", help="Cut file of the old cut")
    parser_diff.add_argument("new", help="Cut file of the new cut")
    parser_diff.add_argument(
        "--verbose", action="store_true", help="Print debug messages"
    )
    parser_diff.set_defaults(func=run_diff)

    parser_plot = subparsers.add_parser("plot", help="Render a saved cut")
    parser_plot.add_argument("mesh", help="Mesh file the cut belongs to")
    parser_plot.add_argument("cut", help="Cut file")
    parser_plot.add_argument(
        "--reduced", help="Reduced cut file to highlight differences against"
    )
    add_common_args(parser_plot)
    parser_plot.set_defaults(func=run_plot)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    exit(main())
