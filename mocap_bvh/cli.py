"""
Command-line inspector for BVH files.
"""

import argparse
import sys
from pathlib import Path

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from mocap_bvh.app import setup_logging
from mocap_bvh.config import AppConfig
from mocap_bvh.core.document import BvhDocument
from mocap_bvh.core.errors import BvhError
from mocap_bvh.core.hierarchy import Joint
from mocap_bvh.core.parser import load

console = Console()


def _label(joint: Joint) -> str:
    channels = " ".join(channel.value for channel in joint.channels)
    return f"[bold]{escape(joint.name)}[/bold] [cyan]{channels}[/cyan]"


def _add_children(branch: Tree, joint: Joint) -> None:
    for child in joint.children:
        _add_children(branch.add(_label(child)), child)
    for _ in joint.end_sites:
        branch.add("[dim]End Site[/dim]")


def build_tree(document: BvhDocument) -> Tree:
    """Render the joint hierarchy, End Sites dimmed."""
    tree = Tree(_label(document.root))
    _add_children(tree, document.root)
    return tree


def build_channel_table(document: BvhDocument) -> Table:
    table = Table(title="Channel layout")
    table.add_column("#", justify="right")
    table.add_column("Joint")
    table.add_column("Channel")
    for index, (joint, channel) in enumerate(document.channel_layout()):
        table.add_row(str(index), escape(joint), channel.value)
    return table


def build_frame_table(document: BvhDocument, frame: int) -> Table:
    table = Table(title=f"Frame {frame}")
    table.add_column("Joint")
    table.add_column("Channel")
    table.add_column("Value", justify="right")
    for joint, values in document.sample(frame).items():
        for channel, value in values.items():
            table.add_row(escape(joint), channel.value, f"{value:.6f}")
    return table


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Inspect a BVH motion capture file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the summary
  mocap-bvh walk.bvh

  # Show the joint tree and channel layout
  mocap-bvh walk.bvh --tree --channels

  # Show the values of frame 10
  mocap-bvh walk.bvh --frame 10
        """,
    )

    parser.add_argument("file", type=Path, help="BVH file to read")

    parser.add_argument(
        "--tree",
        action="store_true",
        help="Show the joint hierarchy",
    )

    parser.add_argument(
        "--channels",
        action="store_true",
        help="Show the channel layout",
    )

    parser.add_argument(
        "--frame",
        type=int,
        metavar="N",
        help="Show channel values of frame N",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Configuration file (YAML)",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    if args.config:
        try:
            config = AppConfig.from_yaml(args.config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            console.print(f"[red]Cannot load configuration:[/red] {escape(str(e))}")
            return 1
    else:
        config = AppConfig()
    if args.verbose:
        config.log_level = "DEBUG"

    issues = config.validate()
    if issues:
        console.print("[red]Invalid configuration:[/red]")
        for issue in issues:
            console.print(f"  - {escape(issue)}")
        return 1

    setup_logging(config.log_level)

    try:
        document = load(args.file, config.parser)
    except OSError as e:
        console.print(f"[red]Cannot read file:[/red] {escape(str(e))}")
        return 1
    except BvhError as e:
        console.print(f"[red]Invalid BVH:[/red] {type(e).__name__}: {escape(str(e))}")
        return 1

    console.print(f"[bold green]{args.file.name}[/bold green]: {document}")

    if args.tree:
        console.print(build_tree(document))

    if args.channels:
        console.print(build_channel_table(document))

    if args.frame is not None:
        try:
            console.print(build_frame_table(document, args.frame))
        except IndexError as e:
            console.print(f"[red]Error:[/red] {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
