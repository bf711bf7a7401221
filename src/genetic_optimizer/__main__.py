"""Command line interface for genetic-optimizer."""

from pathlib import Path

import click
import numpy as np

from .config import load_run_config
from .engine import GeneticAlgorithm
from .logging import get_logger, set_level
from .report import population_frame
from .settings import get_settings
from .utils import load_callable, timer

logger = get_logger(__name__)


@click.group()
def cli():
    """Genetic Optimizer CLI."""


@cli.command()
def info():
    """Display current settings."""

    settings = get_settings()
    click.echo(f"Environment: {settings.env_name}")
    click.echo(f"Log level: {settings.log_level}")


@cli.command()
@click.option("--config", "config_path", type=click.Path(), default="conf/run.yaml", show_default=True)
@click.option("--fitness", required=True, type=str, help="Fitness function as module:function")
@click.option("--context", type=str, default=None, help="Opaque value passed to the fitness function")
@click.option("--seed", type=int, default=None, help="Overrides the configured seed")
@click.option("--top", type=int, default=5, show_default=True, help="Rows of the final ranking to print")
def run(config_path, fitness, context, seed, top):
    """Evolve the configured genes against a fitness function."""

    set_level(get_settings().log_level.upper())
    cfg = load_run_config(Path(config_path))
    template = cfg.template()
    if not template:
        raise click.UsageError("the run configuration defines no genes")
    fitness_fn = load_callable(fitness)
    rng = np.random.default_rng(seed if seed is not None else cfg.seed)

    engine = GeneticAlgorithm(
        template,
        cfg.population_size,
        cfg.epochs,
        cfg.num_parents,
        cfg.num_genes_to_modify,
        context,
        fitness_fn,
        rng=rng,
    )

    def report(ga: GeneticAlgorithm) -> None:
        click.echo(f"epoch {ga.current_epoch}/{ga.epochs} [{ga.progress()}%] best={ga.best_score():.6g}")

    with timer("evolution"):
        best = engine.run(on_epoch=report)

    click.echo(f"Best score: {engine.best_score():.6g}")
    click.echo("Best solution: " + ", ".join(str(gene.current) for gene in best))
    click.echo(population_frame(engine).head(top).to_string(index=False))


if __name__ == "__main__":
    cli()
