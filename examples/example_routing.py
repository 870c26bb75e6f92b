"""
Venue Routing Example.

This script builds a two-floor venue from floor-plan objects and walks
through the routing features:

    - Draft graph generation from zones, corridors, doors and lifts
    - Cross-floor routing through elevator/stairs links
    - Step-free (accessible) routing
    - Multi-stop tour ordering (nearest neighbour + 2-opt)
    - Evacuation to the nearest exit

Run from the repository root:
    python examples/example_routing.py
"""

import itertools
import math

import matplotlib.pyplot as plt

from wayfinding.directions import format_distance, format_walking_time
from wayfinding.eval import detour_ratio
from wayfinding.generation import FloorObject, generate_graph
from wayfinding.graph import NavGraph, validate_graph
from wayfinding.routing import (
    find_cross_floor_route,
    find_evacuation_route,
    optimize_route,
)

PIXELS_PER_METER = 50.0

GROUND_FLOOR = [
    FloorObject("g-corridor", "infrastructure", 0, 200, 1000, 100, "Main corridor"),
    FloorObject("g-hall-a", "zone", 0, 0, 400, 200, "Hall A"),
    FloorObject("g-hall-b", "zone", 600, 0, 400, 200, "Hall B"),
    FloorObject("g-booth-12", "booth", 420, 20, 160, 160, "Booth 12"),
    FloorObject("g-lift", "booth", 950, 220, 40, 60, "Lift"),
    FloorObject("g-stairs", "infrastructure", 10, 220, 30, 60, "Stairs"),
    FloorObject("g-entrance", "wall", 490, 295, 20, 10, "Main entrance"),
    FloorObject("g-exit", "wall", 995, 240, 10, 20, "Exit 1"),
]

MEZZANINE = [
    FloorObject("m-corridor", "infrastructure", 0, 200, 1000, 100, "Upper corridor"),
    FloorObject("m-hall-c", "zone", 300, 0, 400, 200, "Hall C"),
    FloorObject("m-lift", "booth", 950, 220, 40, 60, "Lift"),
    FloorObject("m-stairs", "infrastructure", 10, 220, 30, 60, "Stairs"),
]


def build_demo_venue():
    """Generate both floors and link their lifts and stairs."""
    floors = {}
    for floor_id, objects in (("ground", GROUND_FLOOR), ("mezzanine", MEZZANINE)):
        counter = itertools.count()
        prefix = floor_id[0]
        draft = generate_graph(objects, pixels_per_meter=PIXELS_PER_METER)
        floors[floor_id] = draft.to_nav_graph(
            floor_id, id_factory=lambda: f"{prefix}{next(counter)}"
        )

    for kind in ("elevator", "stairs"):
        lower = next(n for n in floors["ground"].nodes if n.kind == kind)
        upper = next(n for n in floors["mezzanine"].nodes if n.kind == kind)
        lower.linked_node_id = upper.id
        upper.linked_node_id = lower.id

    return NavGraph(
        nodes=floors["ground"].nodes + floors["mezzanine"].nodes,
        edges=floors["ground"].edges + floors["mezzanine"].edges,
    )


def node_for(graph, object_id):
    """First generated node that came from a floor object."""
    return next(n for n in graph.nodes if n.metadata.get("source_object_id") == object_id)


def print_route(route):
    for segment in route.segments:
        print(f"\n  Floor '{segment.floor_id}' ({format_distance(segment.distance_m)}):")
        for step in segment.directions:
            print(f"    - {step.text}")
    for transition in route.transitions:
        print(
            f"\n  Transition: {transition.from_floor_id} -> {transition.to_floor_id} "
            f"via {transition.via_kind}"
        )
    print(f"\n  Total distance: {route.total_distance_m:.1f} m")


def example_cross_floor(graph):
    """Example 1: Hall A (ground) to Hall C (mezzanine)."""
    print("=" * 70)
    print("Example 1: Cross-Floor Routing")
    print("=" * 70)

    start = node_for(graph, "g-hall-a")
    goal = node_for(graph, "m-hall-c")
    route = find_cross_floor_route(
        graph.nodes, graph.edges, start.id, goal.id, pixels_per_meter=PIXELS_PER_METER
    )
    print_route(route)
    return route


def example_step_free(graph):
    """Example 2: same trip, elevators only."""
    print("\n" + "=" * 70)
    print("Example 2: Step-Free Routing")
    print("=" * 70)

    start = node_for(graph, "g-hall-a")
    goal = node_for(graph, "m-hall-c")
    route = find_cross_floor_route(
        graph.nodes,
        graph.edges,
        start.id,
        goal.id,
        accessible_only=True,
        pixels_per_meter=PIXELS_PER_METER,
    )
    print_route(route)
    return route


def example_multi_stop(graph):
    """Example 3: visit three halls from the main entrance."""
    print("\n" + "=" * 70)
    print("Example 3: Multi-Stop Tour")
    print("=" * 70)

    start = node_for(graph, "g-entrance")
    stops = [node_for(graph, oid).id for oid in ("m-hall-c", "g-hall-b", "g-hall-a")]
    for optimize in (False, True):
        tour = optimize_route(
            graph.nodes,
            graph.edges,
            start.id,
            stops,
            optimize=optimize,
            pixels_per_meter=PIXELS_PER_METER,
        )
        label = "optimized" if optimize else "as given"
        print(f"\n  Tour ({label}): {' -> '.join(tour.ordered_node_ids)}")
        for leg in tour.legs:
            print(f"    {leg.from_id} -> {leg.to_id}: {leg.distance_m:.1f} m")
        print(f"  Total: {tour.total_distance_m:.1f} m")


def example_evacuation(graph):
    """Example 4: nearest exit from a point in Hall B."""
    print("\n" + "=" * 70)
    print("Example 4: Evacuation")
    print("=" * 70)

    evac = find_evacuation_route(
        graph.nodes, graph.edges, "ground", 820.0, 60.0, pixels_per_meter=PIXELS_PER_METER
    )
    print(f"\n  Exit: {evac.exit_node.label} ({evac.route.total_distance_m:.1f} m)")
    print(f"  Walking time: {format_walking_time(evac.walking_time_s)}")
    start, exit_node = evac.route.nodes[0], evac.exit_node
    straight = math.hypot(exit_node.x - start.x, exit_node.y - start.y) / PIXELS_PER_METER
    print(f"  Detour ratio: {detour_ratio(evac.route.total_distance_m, straight):.2f}")
    for step in evac.directions:
        print(f"    - {step.text}")
    return evac


def plot_floors(graph, routes):
    """Plot each floor's graph with the route segments on it."""
    node_map = graph.node_map()
    floor_ids = graph.floor_ids()
    fig, axes = plt.subplots(len(floor_ids), 1, figsize=(10, 4 * len(floor_ids)))

    for ax, floor_id in zip(axes, floor_ids):
        nodes, edges = graph.floor_subgraph(floor_id)
        for edge in edges:
            a, b = node_map[edge.from_node], node_map[edge.to_node]
            style = "-" if edge.accessible else ":"
            ax.plot([a.x, b.x], [a.y, b.y], style, color="lightgray", linewidth=1)

        for kind, marker in (("waypoint", "o"), ("elevator", "s"), ("stairs", "^"),
                             ("entrance", "D"), ("exit", "X")):
            pts = [n for n in nodes if n.kind == kind]
            if pts:
                ax.scatter([n.x for n in pts], [n.y for n in pts], marker=marker, label=kind, zorder=3)

        for name, route in routes.items():
            for segment in route.segments:
                if segment.floor_id != floor_id:
                    continue
                ax.plot(
                    [n.x for n in segment.nodes],
                    [n.y for n in segment.nodes],
                    linewidth=2.5,
                    label=name,
                )

        ax.set_title(f"Floor: {floor_id}")
        ax.set_aspect("equal")
        ax.invert_yaxis()
        ax.legend(loc="upper right", fontsize=8)
        ax.grid(True, alpha=0.3)

    plt.tight_layout()
    return fig


def main():
    """Run all routing examples."""
    graph = build_demo_venue()

    report = validate_graph(graph)
    print(f"Venue: {report['stats']['n_nodes']} nodes, {report['stats']['n_edges']} edges, "
          f"{report['stats']['n_transport_links']} transport links")
    for warning in report["warnings"]:
        print(f"  Warning: {warning}")
    print()

    route = example_cross_floor(graph)
    step_free = example_step_free(graph)
    example_multi_stop(graph)
    example_evacuation(graph)

    print("\n" + "=" * 70)
    print("Generating visualization...")
    print("=" * 70)

    plot_floors(graph, {"shortest": route, "step-free": step_free})
    plt.savefig("examples/routing_example.png", dpi=150, bbox_inches="tight")
    print("\nFigure saved: routing_example.png")

    plt.show()

    print("\n" + "=" * 70)
    print("Examples completed successfully!")
    print("=" * 70)


if __name__ == "__main__":
    main()
