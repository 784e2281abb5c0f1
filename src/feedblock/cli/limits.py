"""
CLI Limits Commands

derive, from-xml, defaults.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from feedblock.exceptions import FeedBlockError, LimitOutOfRangeError, ResourceLimitsNotAllowedError
from feedblock.limits import (
    ClusterResourceLimits,
    ClusterResourceLimitsBuilder,
    Dimension,
    ResourceLimitsBuilder,
    get_limits_config,
    load_cluster_xml,
)
from feedblock.logging_config import logger
from feedblock.schemas import ClusterResourceLimitsModel
from .config import CLIConfig
from .output import echo, print_error, print_json, print_table

app = typer.Typer()


def _error_code(error: FeedBlockError) -> str:
    if isinstance(error, LimitOutOfRangeError):
        return "LIMIT_OUT_OF_RANGE"
    if isinstance(error, ResourceLimitsNotAllowedError):
        return "LIMITS_NOT_ALLOWED"
    return "CONFIG_ERROR"


def _fail(error: FeedBlockError) -> None:
    logger.debug(f"Failed to derive resource limits: {error}")
    print_error(str(error), code=_error_code(error))
    raise typer.Exit(code=1)


def _builder_for(defaults_disk, defaults_memory, defaults_address_space,
                 low_watermark_difference, hosted=None) -> ClusterResourceLimitsBuilder:
    config = get_limits_config()
    return ClusterResourceLimitsBuilder(
        config.hosted if hosted is None else hosted,
        config.resource_limit_disk if defaults_disk is None else defaults_disk,
        config.resource_limit_memory if defaults_memory is None else defaults_memory,
        (config.resource_limit_low_watermark_difference
         if low_watermark_difference is None else low_watermark_difference),
        config.resource_limit_address_space if defaults_address_space is None else defaults_address_space,
    )


def _print_limits(limits: ClusterResourceLimits, json_output: bool) -> None:
    if json_output:
        print_json(ClusterResourceLimitsModel.from_limits(limits).model_dump())
        return

    sides = [
        ("cluster_controller", limits.cluster_controller_limits),
        ("content_node", limits.content_node_limits),
    ]

    if CLIConfig.is_machine_mode():
        for side, side_limits in sides:
            for key, value in side_limits.to_dict().items():
                echo(f"{side}.{key}={value}")
        return

    table = Table(title="Resource Limits")
    table.add_column("Resource", style="cyan")
    table.add_column("Cluster controller", style="green")
    table.add_column("Content node", style="magenta")
    for dimension in Dimension:
        table.add_row(
            dimension.display_name,
            f"{limits.cluster_controller_limits.get(dimension):.4g}",
            f"{limits.content_node_limits.get(dimension):.4g}",
        )
    table.add_row(
        "low watermark difference",
        f"{limits.cluster_controller_limits.low_watermark_difference:.4g}",
        f"{limits.content_node_limits.low_watermark_difference:.4g}",
    )
    print_table(table)


@app.command()
def derive(
    ctrl_disk: Optional[float] = typer.Option(None, "--ctrl-disk", help="Cluster controller disk limit."),
    ctrl_memory: Optional[float] = typer.Option(None, "--ctrl-memory", help="Cluster controller memory limit."),
    ctrl_address_space: Optional[float] = typer.Option(
        None, "--ctrl-address-space", help="Cluster controller address space limit."
    ),
    node_disk: Optional[float] = typer.Option(None, "--node-disk", help="Content node disk limit."),
    node_memory: Optional[float] = typer.Option(None, "--node-memory", help="Content node memory limit."),
    node_address_space: Optional[float] = typer.Option(
        None, "--node-address-space", help="Content node address space limit."
    ),
    default_disk: Optional[float] = typer.Option(
        None, "--default-disk", help="Default disk limit (overrides FEEDBLOCK_RESOURCE_LIMIT_DISK)."
    ),
    default_memory: Optional[float] = typer.Option(
        None, "--default-memory", help="Default memory limit (overrides FEEDBLOCK_RESOURCE_LIMIT_MEMORY)."
    ),
    default_address_space: Optional[float] = typer.Option(
        None, "--default-address-space",
        help="Default address space limit (overrides FEEDBLOCK_RESOURCE_LIMIT_ADDRESS_SPACE).",
    ),
    low_watermark_difference: Optional[float] = typer.Option(
        None, "--low-watermark-difference", help="Low watermark difference for both consumers."
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON."),
):
    """
    Derive cluster controller and content node limits from explicit values and defaults.
    """
    ctrl_builder = ResourceLimitsBuilder()
    node_builder = ResourceLimitsBuilder()
    explicit = [
        (ctrl_builder, Dimension.DISK, ctrl_disk),
        (ctrl_builder, Dimension.MEMORY, ctrl_memory),
        (ctrl_builder, Dimension.ADDRESS_SPACE, ctrl_address_space),
        (node_builder, Dimension.DISK, node_disk),
        (node_builder, Dimension.MEMORY, node_memory),
        (node_builder, Dimension.ADDRESS_SPACE, node_address_space),
    ]
    for builder, dimension, value in explicit:
        if value is not None:
            builder.set(dimension, value)

    try:
        builder = _builder_for(default_disk, default_memory, default_address_space, low_watermark_difference)
        builder.set_cluster_controller_builder(ctrl_builder)
        builder.set_content_node_builder(node_builder)
        limits = builder.build()
    except FeedBlockError as e:
        _fail(e)

    _print_limits(limits, json_output)


@app.command("from-xml")
def from_xml(
    cluster_xml: Path = typer.Argument(..., help="Content cluster XML file.", dir_okay=False),
    hosted: Optional[bool] = typer.Option(
        None, "--hosted/--no-hosted", help="Reject explicit limits (defaults to FEEDBLOCK_HOSTED)."
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON."),
):
    """
    Derive limits from the <resource-limits> elements of a content cluster XML file.
    """
    try:
        cluster_element = load_cluster_xml(cluster_xml)
        builder = _builder_for(None, None, None, None, hosted=hosted)
        limits = builder.build_from_element(cluster_element)
    except FeedBlockError as e:
        _fail(e)

    _print_limits(limits, json_output)


@app.command()
def defaults(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON."),
):
    """
    Show the effective default limits.
    """
    config = get_limits_config()

    if json_output:
        print_json(config.to_dict())
        return

    if CLIConfig.is_machine_mode():
        for key, value in config.to_dict().items():
            echo(f"{key}={value}")
        return

    table = Table(title="Default Resource Limits")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for key, value in config.to_dict().items():
        table.add_row(key, str(value))
    print_table(table)
