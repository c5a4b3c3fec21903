"""
Command-line interface for gridmaze.

Provides commands to generate mazes, display saved maze files and list the
available algorithms.
"""

import sys

import click
from pydantic import ValidationError

from gridmaze.config import MazeConfig, load_config_file
from gridmaze.generators import algorithm_names
from gridmaze.utils.exceptions import ConfigurationError, MazeInvariantError
from gridmaze.utils.logging import configure_logging

EXIT_INVARIANT_VIOLATION = 1
EXIT_CONFIGURATION_ERROR = 2


def _write_image(grid, image, cell_size):
    import matplotlib

    matplotlib.use("Agg")

    from gridmaze.visualization import render_maze

    render_maze(grid, cell_size=cell_size, filename=image)
    click.echo(f"Saved image to: {image}", err=True)


def _build_config(config_path, overrides):
    data = load_config_file(config_path) if config_path else {}
    data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return MazeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(str(e), generator_name="cli", suggested_action="Fix the listed options") from e


@click.group()
@click.version_option(package_name="gridmaze", prog_name="gridmaze")
def main():
    """
    gridmaze: rectangular grid maze generator

    Generates perfect mazes with classic algorithms and stores them in a
    compact binary format.
    """


@main.command()
@click.option("--width", "-w", type=int, default=None, help="Number of columns (default 20)")
@click.option("--height", "-h", type=int, default=None, help="Number of rows (default 20)")
@click.option("--algorithm", "-a", type=str, default=None, help="Generation algorithm (see 'gridmaze algorithms')")
@click.option("--seed", "-s", type=int, default=None, help="Random seed for reproducible mazes")
@click.option("--config", "-c", "config_path", type=click.Path(), default=None, help="JSON or YAML config file")
@click.option("--output", "-o", type=click.Path(), default=None, help="Write the binary maze file here")
@click.option("--image", "-i", type=click.Path(), default=None, help="Render a PNG image here")
@click.option("--cell-size", type=int, default=None, help="Cell edge length in pixels for --image")
@click.option("--print/--no-print", "print_maze", default=True, help="Print the text rendering")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def generate(width, height, algorithm, seed, config_path, output, image, cell_size, print_maze, verbose):
    """
    Generate a maze.

    Command-line options override values from --config.

    Examples:
        gridmaze generate --width 30 --height 15 --algorithm kruskal
        gridmaze generate -a hunt -s 42 --output maze.maze --image maze.png
        gridmaze generate --config maze.yaml --no-print
    """
    if verbose:
        configure_logging(level="INFO", component_levels={"generators": "DEBUG"})
    else:
        configure_logging(level="WARNING")

    try:
        config = _build_config(
            config_path,
            {
                "width": width,
                "height": height,
                "algorithm": algorithm,
                "seed": seed,
                "cell_size": cell_size,
            },
        )

        if verbose:
            click.echo(f"Grid: {config.width}x{config.height}", err=True)
            click.echo(f"Algorithm: {config.algorithm.value}", err=True)
            click.echo(f"Seed: {config.seed}", err=True)

        grid = config.create_generator().generate(seed=config.seed)

        if print_maze:
            from gridmaze.visualization.text_render import format_maze

            click.echo(format_maze(grid))

        if output:
            from gridmaze.io import save_maze

            save_maze(output, grid)
            click.echo(f"Saved maze to: {output}", err=True)

        if image:
            _write_image(grid, image, config.cell_size)

    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIGURATION_ERROR)
    except MazeInvariantError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_INVARIANT_VIOLATION)


@main.command()
@click.argument("maze_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--image", "-i", type=click.Path(), default=None, help="Render a PNG image here")
@click.option("--cell-size", type=click.IntRange(1, 200), default=10, help="Cell edge length in pixels")
@click.option("--interactive", is_flag=True, help="Open an interactive matplotlib window")
def show(maze_file, image, cell_size, interactive):
    """
    Display a saved maze file.

    Examples:
        gridmaze show maze.maze
        gridmaze show maze.maze --image maze.png --cell-size 16
    """
    from gridmaze.io import load_maze
    from gridmaze.visualization.text_render import format_maze

    try:
        grid = load_maze(maze_file)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIGURATION_ERROR)

    click.echo(format_maze(grid))

    if image:
        _write_image(grid, image, cell_size)

    if interactive:
        from gridmaze.visualization import render_maze

        render_maze(grid, cell_size=cell_size, show=True)


@main.command()
def algorithms():
    """List the accepted algorithm names and aliases."""
    for name in algorithm_names():
        click.echo(name)


if __name__ == "__main__":
    main()
