#!/usr/bin/env python3
"""
genetic: evolutionary optimization runner

Evolves one of the bundled genomes with a Population and prints the best
genome found.

Usage:
    python run_evolution.py --genome bits --length 64 --generations 50
    python run_evolution.py --genome phrase --target "hello world" --config config/evolution.yaml
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

import numpy as np

from genetic.exceptions import ConfigurationError
from genetic.genomes import BitStringGenome, PhraseGenome
from genetic.optimization.config import EvolutionConfig
from genetic.optimization.engine import EvolutionEngine
from genetic.utils.evolution_logger import EvolutionLogger

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)


def load_config(config_path: str) -> EvolutionConfig:
    """
    Load the run configuration.

    Args:
        config_path: Path to a YAML configuration file

    Returns:
        EvolutionConfig (built-in defaults if the file is missing)
    """
    config_file = Path(config_path)
    if not config_file.exists():
        logger.warning(f"Config not found: {config_path}, using built-in defaults")
        return EvolutionConfig()

    config = EvolutionConfig.from_yaml(config_file)
    logger.info(f"Loaded config from: {config_path}")
    return config


def parse_arguments():
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a genetic algorithm on a bundled genome",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Maximise the number of ones in a 64-bit string
  python run_evolution.py --genome bits --length 64

  # Evolve a phrase with a larger population
  python run_evolution.py --genome phrase --target "to be or not to be" --population-size 200
        """
    )

    parser.add_argument("--config", type=str, default="config/evolution.yaml",
                        help="Path to evolution config YAML (default: config/evolution.yaml)")
    parser.add_argument("--genome", choices=["bits", "phrase"], default="bits",
                        help="Genome encoding to evolve (default: bits)")
    parser.add_argument("--length", type=int, default=32,
                        help="Bit-string length for --genome bits (default: 32)")
    parser.add_argument("--target", type=str, default="hello world",
                        help="Target phrase for --genome phrase")
    parser.add_argument("--population-size", type=int, default=None,
                        help="Override population_size from config")
    parser.add_argument("--mutation-rate", type=float, default=None,
                        help="Override mutation_rate from config")
    parser.add_argument("--generations", type=int, default=None,
                        help="Override n_generations from config")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible runs")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Directory for history.json (optional)")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Override log_level from config")

    return parser.parse_args()


def build_config(args) -> EvolutionConfig:
    """Merge command-line overrides into the file configuration."""
    config = load_config(args.config)
    overrides = config.to_dict()

    if args.population_size is not None:
        overrides["population_size"] = args.population_size
    if args.mutation_rate is not None:
        overrides["mutation_rate"] = args.mutation_rate
    if args.generations is not None:
        overrides["n_generations"] = args.generations
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.log_level is not None:
        overrides["log_level"] = args.log_level

    return EvolutionConfig(**overrides)


def main() -> int:
    args = parse_arguments()

    try:
        config = build_config(args)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    logging.getLogger().setLevel(getattr(logging, config.log_level))

    genome_rng = np.random.default_rng(config.seed)
    if args.genome == "bits":
        seed_genome = BitStringGenome(args.length, rng=genome_rng)
    else:
        seed_genome = PhraseGenome(args.target, rng=genome_rng)

    if config.target_fitness is None:
        config.target_fitness = seed_genome.max_fitness

    evo_logger = EvolutionLogger(Path(args.output_dir) if args.output_dir else None)
    engine = EvolutionEngine(seed_genome, config, evo_logger=evo_logger)

    try:
        best = engine.run()
    except ZeroDivisionError:
        logger.error("Evolution stopped: total fitness of a generation was zero")
        return 1

    print(f"Best genome: {best!r}")
    print(f"Best fitness: {best.get_fitness()}")
    print(f"Epochs: {engine.population.get_epoch()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
