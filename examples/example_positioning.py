"""
Signal-Strength Positioning Example.

This script demonstrates BLE-style positioning from received signal
strength, using the log-distance path-loss model:

    - RSS simulation with log-normal shadow fading
    - Single-anchor, weighted-centroid and trilateration estimates
    - Accuracy versus number of heard anchors
    - Publishing estimates to a live-position feed

Run from the repository root:
    python examples/example_positioning.py
"""

import matplotlib.pyplot as plt
import numpy as np

from wayfinding.eval import compute_error_stats, compute_position_errors
from wayfinding.rf import (
    Anchor,
    InMemoryPositionFeed,
    Reading,
    RSSPositioner,
    publish_estimate,
    rss_pathloss,
    rss_to_distance,
    simulate_rss_measurement,
)

ANCHORS = [
    Anchor("beacon-01", 0.0, 0.0, floor_id="ground"),
    Anchor("beacon-02", 20.0, 0.0, floor_id="ground"),
    Anchor("beacon-03", 20.0, 20.0, floor_id="ground"),
    Anchor("beacon-04", 0.0, 20.0, floor_id="ground"),
    Anchor("beacon-05", 10.0, 10.0, floor_id="mezzanine"),
]


def simulate_readings(position, anchors, sigma_db=0.0, rng=None):
    """RSS readings from every anchor at a true position."""
    readings = []
    for anchor in anchors:
        distance = float(np.hypot(position[0] - anchor.x, position[1] - anchor.y))
        rss = simulate_rss_measurement(max(distance, 0.1), sigma_long_db=sigma_db, rng=rng)
        readings.append(Reading(anchor.id, rss))
    return readings


def example_pathloss():
    """Example 1: RSS <-> distance with the log-distance model."""
    print("=" * 70)
    print("Example 1: Log-Distance Path Loss")
    print("=" * 70)

    for d in (1.0, 2.0, 5.0, 10.0, 20.0):
        rss = rss_pathloss(d)
        print(f"  {d:5.1f} m -> {rss:6.1f} dBm -> {rss_to_distance(rss):5.2f} m")
    print(f"  Invalid reading (0 dBm) -> {rss_to_distance(0.0)} m")


def example_anchor_count():
    """Example 2: methods chosen by number of heard anchors."""
    print("\n" + "=" * 70)
    print("Example 2: Estimate vs. Number of Anchors")
    print("=" * 70)

    true_pos = np.array([6.0, 8.0])
    positioner = RSSPositioner(ANCHORS, floor_id="ground")
    readings = simulate_readings(true_pos, ANCHORS[:4])

    print(f"\nTrue position: {true_pos}")
    for n in range(1, 5):
        est = positioner.solve(readings[:n])
        error = np.hypot(est.x - true_pos[0], est.y - true_pos[1])
        print(
            f"  {n} anchor(s): {est.method:18s} ({est.x:6.2f}, {est.y:6.2f})  "
            f"error {error:5.2f} m, accuracy {est.accuracy_m:5.2f} m"
        )

    # mezzanine beacon is ignored for a ground-floor positioner
    est = positioner.solve(simulate_readings(true_pos, ANCHORS))
    print(f"  all 5 readings:  {est.anchors_used} anchors used")


def example_walk(sigma_db=4.0, seed=7):
    """Example 3: noisy walk, published to a live feed."""
    print("\n" + "=" * 70)
    print(f"Example 3: Walking Trajectory (shadowing sigma = {sigma_db} dB)")
    print("=" * 70)

    rng = np.random.default_rng(seed)
    t = np.linspace(0, 2 * np.pi, 40)
    truth = np.column_stack([10 + 6 * np.cos(t), 10 + 6 * np.sin(t)])

    positioner = RSSPositioner(ANCHORS, floor_id="ground")
    feed = InMemoryPositionFeed()
    estimates = []
    for position in truth:
        est = positioner.solve(simulate_readings(position, ANCHORS[:4], sigma_db, rng))
        publish_estimate(feed, "attendee-42", "ground", est)
        estimates.append([est.x, est.y])
    estimates = np.array(estimates)

    stats = compute_error_stats(compute_position_errors(truth, estimates))
    print(f"\n  Mean error:   {stats['mean']:.2f} m")
    print(f"  Median error: {stats['median']:.2f} m")
    print(f"  90th pct:     {stats['p90']:.2f} m")
    print(f"  Live record:  {feed.live['attendee-42']}")
    print(f"  Trail length: {len(feed.trail('attendee-42'))}")

    return truth, estimates


def plot_walk(truth, estimates):
    fig, ax = plt.subplots(figsize=(7, 7))
    ground = [a for a in ANCHORS if a.floor_id == "ground"]
    ax.scatter([a.x for a in ground], [a.y for a in ground], marker="^", s=150, c="red", label="Anchors")
    ax.plot(truth[:, 0], truth[:, 1], "g-", linewidth=2, label="True path")
    ax.plot(estimates[:, 0], estimates[:, 1], "b.--", alpha=0.7, label="RSS estimates")
    ax.set_xlabel("x [m]")
    ax.set_ylabel("y [m]")
    ax.set_title("RSS Trilateration")
    ax.set_aspect("equal")
    ax.legend()
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    return fig


def main():
    """Run all positioning examples."""
    example_pathloss()
    example_anchor_count()
    truth, estimates = example_walk()

    print("\n" + "=" * 70)
    print("Generating visualization...")
    print("=" * 70)

    plot_walk(truth, estimates)
    plt.savefig("examples/positioning_example.png", dpi=150, bbox_inches="tight")
    print("\nFigure saved: positioning_example.png")

    plt.show()

    print("\n" + "=" * 70)
    print("Examples completed successfully!")
    print("=" * 70)


if __name__ == "__main__":
    main()
