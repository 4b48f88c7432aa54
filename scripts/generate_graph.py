#!/usr/bin/env python3
"""Generate random graphs from a specification string."""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
from loguru import logger
from pydantic import ValidationError
from tqdm import tqdm

from config.schemas import GenerationConfig, list_presets, load_config, load_preset, merge_overrides
from generator import describe_models, generator_from_str, get_graph_statistics
from models import EdgeDirection, GraphSpecError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate random graphs, e.g. 'ba/100,3' or 'ws/50,4,0.1'",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "spec",
        nargs="?",
        help="Model specification: name[/param,param,...]",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration YAML file",
    )
    parser.add_argument(
        "--preset",
        type=str,
        choices=list_presets(),
        help="Bundled configuration to start from",
    )
    parser.add_argument(
        "--directed",
        action="store_true",
        default=None,
        help="Generate directed graphs",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--samples",
        type=int,
        help="Number of graphs to draw",
    )
    parser.add_argument(
        "--edges",
        action="store_true",
        default=None,
        help="Print the edges of each graph on stdout",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available models and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        # Load or create configuration
        if args.config:
            config = load_config(args.config)
        elif args.preset:
            config = load_preset(args.preset)
        else:
            config = GenerationConfig()

        # Override with command line arguments
        config = merge_overrides(
            config,
            spec=args.spec,
            directed=args.directed,
            seed=args.seed,
            num_samples=args.samples,
            show_edges=args.edges,
            log_level="DEBUG" if args.verbose else None,
        )
    except ValidationError as exc:
        logger.error(f"Invalid configuration: {exc}")
        return 2

    # Configure logging
    logger.remove()
    logger.add(sys.stderr, level=config.log_level)

    direction = EdgeDirection.DIRECTED if config.directed else EdgeDirection.UNDIRECTED
    if args.list:
        print(f"Available {direction} models:")
        for line in describe_models(direction):
            print(f"  {line}")
        return 0

    try:
        generator = generator_from_str(config.spec, directed=config.directed)
    except GraphSpecError as exc:
        logger.error(f"Invalid specification '{config.spec}': {exc}")
        return 2

    logger.info(f"Configuration: {config.name}")
    logger.info(f"  Generator: {generator} ({direction})")
    logger.info(f"  Samples: {config.num_samples}")
    logger.info(f"  Seed: {config.seed}")

    rng = np.random.default_rng(config.seed)
    samples = generator.sample_many(rng, config.num_samples)
    if config.num_samples > 1:
        samples = tqdm(samples, total=config.num_samples, desc="Sampling", unit="graph")

    for index, graph in enumerate(samples):
        stats = get_graph_statistics(graph)
        logger.info(
            f"Sample {index}: {stats['num_nodes']} nodes, {stats['num_edges']} edges, "
            f"density={stats['density']:.4f}, components={stats['num_components']}"
        )

        if config.show_edges:
            print(f"# sample {index}")
            for u, v in graph.edges():
                print(f"{u} {v}")

    logger.info("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
