#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for ASMplot.

This module provides the ``asmplot`` entry point, which draws k-mer spectra
plots of a reads table against one or two assemblies. Flags follow the
FastK tool family: single dash, value attached (``-w8.0 -T8 -P/scratch``).
"""

import logging
import sys
import tempfile
from pathlib import Path

import click

from .config import (
    ConfigParser,
    OutputFormat,
    RunConfig,
    resolve_axis,
    resolve_styles,
    save_config_template,
    split_positionals,
)
from .errors import AsmPlotError, ConfigValidationError
from .pipeline import SpectraOrchestrator, ToolSettings
from .version import __version__

logger = logging.getLogger(__name__)


class SpectraCommand(click.Command):
    """
    Click command reporting parse and validation errors as ``<prog>: <message>``.

    Every such error exits with status 1 before any external tool is run.
    """

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            click.echo(f"{info_name}: {e.format_message()}", err=True)
            raise click.exceptions.Exit(1)


# ============================================================================
# Option callbacks
# ============================================================================

def _check_dimension(ctx, param, value):
    if value is not None and value <= 0:
        raise click.BadParameter("plot dimensions must be > 0")
    return value


def _check_scale_factor(ctx, param, value):
    if value is not None and value <= 0:
        raise click.BadParameter(f"max {param.name[0]} scaling factor must be > 0")
    return value


def _check_positive(label):
    def callback(ctx, param, value):
        if value is not None and value <= 0:
            raise click.BadParameter(f"{label} must be a positive integer")
        return value
    return callback


def _write_config(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    save_config_template(Path(value))
    click.echo(f"✓ Configuration file created: {value}")
    ctx.exit(0)


# ============================================================================
# Main command
# ============================================================================

@click.command(name='asmplot', cls=SpectraCommand)
@click.option('-w', 'width', type=float, default=None, callback=_check_dimension,
              help='width in inches of plots [6.0]')
@click.option('-h', 'height', type=float, default=None, callback=_check_dimension,
              help='height in inches of plots [4.5]')
@click.option('-x', 'x_relative', type=float, default=None, callback=_check_scale_factor,
              help="max x as a real-valued multiple of x* with max count 'peak' away from the origin [2.1]")
@click.option('-X', 'x_max', type=int, default=None, callback=_check_positive("x max"),
              help='max x as an int value in absolute terms')
@click.option('-y', 'y_relative', type=float, default=None, callback=_check_scale_factor,
              help="max y as a real-valued multiple of max count 'peak' away from the origin [1.1]")
@click.option('-Y', 'y_max', type=int, default=None, callback=_check_positive("y max"),
              help='max y as an int value in absolute terms')
@click.option('-l', 'line', is_flag=True, help='draw line plot')
@click.option('-f', 'fill', is_flag=True, help='draw fill plot')
@click.option('-s', 'stack', is_flag=True,
              help='draw stack plot (any combo of -lfs allowed, none => draw all)')
@click.option('-pdf', 'pdf', is_flag=True, help='output .pdf (default is .png)')
@click.option('-z', 'unique_kmers', is_flag=True,
              help='plot counts of k-mers unique to one or both assemblies')
@click.option('-v', 'verbose', is_flag=True, help='verbose output to stderr')
@click.option('-T', 'threads', type=int, default=None, callback=_check_positive("Number of threads"),
              help='number of threads to use [4]')
@click.option('-P', 'scratch_dir', type=click.Path(file_okay=False), default=None,
              help='place all temporary files in this directory [system temp dir]')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='Configuration file (YAML) with defaults and tool locations')
@click.option('--write-config', type=click.Path(dir_okay=False), callback=_write_config,
              is_eager=True, expose_value=False,
              help='Write a template configuration file and exit')
@click.version_option(version=__version__, prog_name='ASMplot')
@click.argument('paths', nargs=-1, type=click.Path())
@click.pass_context
def main(ctx, width, height, x_relative, x_max, y_relative, y_max, line, fill, stack,
         pdf, unique_kmers, verbose, threads, scratch_dir, config_file, paths):
    """
    ASMplot: k-mer spectra plots of reads against assemblies

    \b
    Usage: asmplot [options] <reads>[.ktab] <asm1> [<asm2>] <out>

    The reads table must already exist (built with FastK). A table is built
    with the reads table's k-mer size for every assembly that has none and
    is removed again when plotting is done.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S',
        stream=sys.stderr,
    )
    prog = ctx.info_name

    try:
        reads, assemblies, output = split_positionals(paths)
    except ConfigValidationError as e:
        click.echo(f"{prog}: {e}", err=True)
        click.echo(ctx.get_usage(), err=True)
        sys.exit(1)

    try:
        settings = ConfigParser(config_file)
        settings.merge_cli_overrides({
            'plot.width': width,
            'plot.height': height,
            'execution.threads': threads,
            'execution.scratch_dir': scratch_dir,
        })
        settings.validate()
        logger.debug(f"Effective configuration: {settings.to_dict()}")

        plot = settings.get_plot_config()
        execution = settings.get_execution_config()
        run_config = RunConfig(
            reads=reads,
            assemblies=assemblies,
            output=output,
            width=plot['width'],
            height=plot['height'],
            x_scale=resolve_axis('x', x_relative, x_max, plot['x_relative']),
            y_scale=resolve_axis('y', y_relative, y_max, plot['y_relative']),
            styles=resolve_styles(line, fill, stack),
            unique_kmers=unique_kmers,
            verbose=verbose,
            output_format=OutputFormat.PDF if pdf else OutputFormat.PNG,
            threads=execution['threads'],
            scratch_dir=execution['scratch_dir'] or tempfile.gettempdir(),
        )

        orchestrator = SpectraOrchestrator(run_config, tools=ToolSettings.from_config(settings))
        result = orchestrator.run()
    except AsmPlotError as e:
        click.echo(f"{prog}: {e}", err=True)
        sys.exit(1)

    logger.info(
        f"Done: k={result.kmer}, built {len(result.built)} table(s), "
        f"removed {len(result.removed)} table(s)"
    )


if __name__ == '__main__':
    sys.exit(main())
