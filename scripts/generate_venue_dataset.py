"""Generate a synthetic multi-floor venue graph snapshot.

Creates a venue with:
    - A main corridor per floor with exhibition halls on both sides
    - Booths inside the halls (obstacles, no nodes)
    - A lift and a staircase at opposite ends of every floor
    - Entrances and exits on the ground floor

The floor plans are turned into navigation graphs with the automatic
generator, and lifts/stairs are linked between consecutive floors.

Saves to: data/venues/[preset]/
    - floor_objects.json : floor-plan objects per floor
    - graph.json         : navigation graph snapshot
    - config.json        : generation parameters and graph statistics
"""

import argparse
import json
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List

import numpy as np

from wayfinding.generation import FloorObject, generate_graph
from wayfinding.graph import NavGraph, save_graph_snapshot, validate_graph


# ============================================================================
# PRESET CONFIGURATIONS
# ============================================================================

PRESETS = {
    'small': {
        'description': 'Single floor, two halls',
        'num_floors': 1,
        'halls_per_side': 1,
        'hall_width_m': 16.0,
        'booths_per_hall': 2,
    },
    'expo': {
        'description': 'Two-floor exhibition centre',
        'num_floors': 2,
        'halls_per_side': 3,
        'hall_width_m': 20.0,
        'booths_per_hall': 4,
    },
    'campus': {
        'description': 'Four floors with long corridors',
        'num_floors': 4,
        'halls_per_side': 5,
        'hall_width_m': 18.0,
        'booths_per_hall': 6,
    },
}

HALL_DEPTH_M = 12.0
CORRIDOR_WIDTH_M = 3.0
BOOTH_SIZE_M = 2.0


# ============================================================================
# DATA GENERATION FUNCTIONS
# ============================================================================

def generate_floor_objects(
    floor_index: int,
    halls_per_side: int,
    hall_width_m: float,
    booths_per_hall: int,
    pixels_per_meter: float,
    rng: np.random.Generator,
) -> List[FloorObject]:
    """Lay out one floor plan.

    Halls sit above and below a central corridor; the lift is at the east
    end of the corridor, the stairs at the west end.

    Args:
        floor_index: 0 for the ground floor.
        halls_per_side: Halls on each side of the corridor.
        hall_width_m: Hall width along the corridor (meters).
        booths_per_hall: Booths placed at random inside each hall.
        pixels_per_meter: Floor-plan scale.
        rng: Random generator for booth placement.

    Returns:
        List of FloorObject in floor-plan units.
    """
    s = pixels_per_meter
    prefix = f"f{floor_index}"
    length = halls_per_side * hall_width_m * s
    corridor_y = HALL_DEPTH_M * s
    corridor_h = CORRIDOR_WIDTH_M * s

    objects = [
        FloorObject(f"{prefix}-corridor", "infrastructure", 0, corridor_y, length, corridor_h,
                    "Main corridor"),
        FloorObject(f"{prefix}-lift", "booth", length - 1.5 * s, corridor_y + 0.5 * s, s, 2 * s,
                    "Lift"),
        FloorObject(f"{prefix}-stairs", "infrastructure", 0.5 * s, corridor_y + 0.5 * s, s, 2 * s,
                    "Stairs"),
    ]

    for side, y in (("north", 0.0), ("south", corridor_y + corridor_h)):
        for k in range(halls_per_side):
            x = k * hall_width_m * s
            hall_id = f"{prefix}-hall-{side}-{k}"
            objects.append(FloorObject(hall_id, "zone", x, y, hall_width_m * s, HALL_DEPTH_M * s,
                                       f"Hall {side[0].upper()}{floor_index}{k}"))

            for b in range(booths_per_hall):
                bx = x + rng.uniform(1.0, hall_width_m - 1.0 - BOOTH_SIZE_M) * s
                by = y + rng.uniform(1.0, HALL_DEPTH_M - 1.0 - BOOTH_SIZE_M) * s
                objects.append(FloorObject(f"{hall_id}-booth-{b}", "booth", bx, by,
                                           BOOTH_SIZE_M * s, BOOTH_SIZE_M * s, f"Booth {k}{b}"))

    if floor_index == 0:
        objects.append(FloorObject(f"{prefix}-entrance", "wall", length / 2 - 0.5 * s,
                                   corridor_y + corridor_h - 0.1 * s, s, 0.2 * s, "Main entrance"))
        objects.append(FloorObject(f"{prefix}-exit", "wall", length - 0.1 * s,
                                   corridor_y + 0.5 * s, 0.2 * s, 2 * s, "Emergency exit"))

    return objects


def link_floors(floor_graphs: List[NavGraph]) -> int:
    """Link lifts and stairs of consecutive floors.

    Each floor links upward; the top floor links back down so that its
    last link is declared on both ends.

    Returns:
        Number of links declared.
    """
    n_links = 0
    for kind in ("elevator", "stairs"):
        column = [next(n for n in g.nodes if n.kind == kind) for g in floor_graphs]
        for lower, upper in zip(column, column[1:]):
            lower.linked_node_id = upper.id
            n_links += 1
        if len(column) > 1:
            column[-1].linked_node_id = column[-2].id
    return n_links


def generate_dataset(
    output_dir: str = "data/venues/expo",
    seed: int = 42,
    num_floors: int = 2,
    halls_per_side: int = 3,
    hall_width_m: float = 20.0,
    booths_per_hall: int = 4,
    pixels_per_meter: float = 50.0,
) -> None:
    """Generate and save a venue snapshot.

    Args:
        output_dir: Output directory path.
        seed: Random seed for reproducibility.
        num_floors: Number of floors.
        halls_per_side: Halls on each side of every corridor.
        hall_width_m: Hall width (meters).
        booths_per_hall: Booths per hall.
        pixels_per_meter: Floor-plan scale.
    """
    rng = np.random.default_rng(seed)

    print(f"\n{'='*70}")
    print(f"Generating Venue Dataset")
    print(f"{'='*70}")

    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    # 1. Floor plans
    print(f"\n1. Laying out floor plans...")
    floor_ids = ["ground"] + [f"level-{k}" for k in range(1, num_floors)]
    floor_objects: Dict[str, List[FloorObject]] = {}
    for index, floor_id in enumerate(floor_ids):
        floor_objects[floor_id] = generate_floor_objects(
            index, halls_per_side, hall_width_m, booths_per_hall, pixels_per_meter, rng
        )
        print(f"   {floor_id}: {len(floor_objects[floor_id])} objects")

    with open(output_path / "floor_objects.json", "w") as f:
        json.dump({fid: [asdict(o) for o in objs] for fid, objs in floor_objects.items()},
                  f, indent=2)
    print(f"   Saved: floor_objects.json")

    # 2. Navigation graphs
    print(f"\n2. Generating navigation graphs...")
    floor_graphs = []
    for floor_id in floor_ids:
        draft = generate_graph(floor_objects[floor_id], pixels_per_meter=pixels_per_meter)
        floor_graphs.append(draft.to_nav_graph(floor_id))
        print(f"   {floor_id}: {len(draft.nodes)} nodes, {len(draft.edges)} edges")

    n_links = link_floors(floor_graphs)
    print(f"   Declared {n_links} vertical-transport links")

    graph = NavGraph(
        nodes=[n for g in floor_graphs for n in g.nodes],
        edges=[e for g in floor_graphs for e in g.edges],
    )
    save_graph_snapshot(graph, output_path / "graph.json")
    print(f"   Saved: graph.json")

    # 3. Validation and configuration
    print(f"\n3. Validating and saving configuration...")
    report = validate_graph(graph)
    for message in report["errors"]:
        print(f"   ERROR: {message}")
    for message in report["warnings"]:
        print(f"   Warning: {message}")

    config = {
        "dataset_info": {
            "description": "Synthetic venue navigation graph",
            "seed": seed,
            "num_floors": num_floors,
        },
        "layout": {
            "halls_per_side": halls_per_side,
            "hall_width_m": hall_width_m,
            "hall_depth_m": HALL_DEPTH_M,
            "corridor_width_m": CORRIDOR_WIDTH_M,
            "booths_per_hall": booths_per_hall,
        },
        "coordinate_frame": {
            "description": "Floor-plan canvas, y axis down",
            "pixels_per_meter": pixels_per_meter,
        },
        "stats": report["stats"],
    }

    with open(output_path / "config.json", "w") as f:
        json.dump(config, f, indent=2)

    print(f"   Saved: config.json")

    # Summary
    print(f"\n{'='*70}")
    print(f"Dataset generation complete!")
    print(f"{'='*70}")
    print(f"Output directory: {output_path.absolute()}")
    print(f"\nGraph statistics:")
    print(f"  Floors          : {len(floor_ids)}")
    print(f"  Nodes           : {report['stats']['n_nodes']}")
    print(f"  Edges           : {report['stats']['n_edges']}")
    print(f"  Isolated nodes  : {report['stats']['n_isolated_nodes']}")
    print(f"  Valid           : {report['valid']}")
    print(f"\n")


# ============================================================================
# COMMAND-LINE INTERFACE
# ============================================================================

def main():
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Generate a synthetic venue navigation graph snapshot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate with default parameters
  python %(prog)s

  # Use a preset configuration
  python %(prog)s --preset campus

  # Custom parameters
  python %(prog)s --num-floors 3 --halls-per-side 2 --output data/venues/custom

Available presets: """ + ", ".join(PRESETS.keys())
    )

    parser.add_argument(
        '--preset',
        type=str,
        choices=PRESETS.keys(),
        help='Use preset configuration (overrides individual parameters)'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Output directory (default: data/venues/<preset or custom>)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=42,
        help='Random seed for reproducibility (default: 42)'
    )

    layout_group = parser.add_argument_group('Layout Parameters')
    layout_group.add_argument(
        '--num-floors',
        type=int,
        default=2,
        help='Number of floors (default: 2)'
    )
    layout_group.add_argument(
        '--halls-per-side',
        type=int,
        default=3,
        help='Halls on each side of the corridor (default: 3)'
    )
    layout_group.add_argument(
        '--hall-width-m',
        type=float,
        default=20.0,
        help='Hall width in meters (default: 20.0)'
    )
    layout_group.add_argument(
        '--booths-per-hall',
        type=int,
        default=4,
        help='Booths per hall (default: 4)'
    )
    layout_group.add_argument(
        '--pixels-per-meter',
        type=float,
        default=50.0,
        help='Floor-plan scale (default: 50.0)'
    )

    args = parser.parse_args()

    if args.preset:
        preset_config = PRESETS[args.preset]
        print(f"\nUsing preset: '{args.preset}'")
        print(f"Description: {preset_config['description']}")

        for key, value in preset_config.items():
            if key != 'description' and hasattr(args, key):
                setattr(args, key, value)

    if args.num_floors < 1:
        parser.error("Number of floors must be at least 1")
    if args.halls_per_side < 1:
        parser.error("Halls per side must be at least 1")
    if args.hall_width_m < BOOTH_SIZE_M + 2.0:
        parser.error(f"Hall width must be at least {BOOTH_SIZE_M + 2.0} m")
    if args.pixels_per_meter <= 0:
        parser.error("Pixels per meter must be positive")

    output = args.output or f"data/venues/{args.preset or 'custom'}"

    generate_dataset(
        output_dir=output,
        seed=args.seed,
        num_floors=args.num_floors,
        halls_per_side=args.halls_per_side,
        hall_width_m=args.hall_width_m,
        booths_per_hall=args.booths_per_hall,
        pixels_per_meter=args.pixels_per_meter,
    )


if __name__ == "__main__":
    main()
