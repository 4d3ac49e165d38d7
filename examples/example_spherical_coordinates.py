"""Example: Placing a simulated world on the WGS84 Earth.

This example walks through the SphericalCoordinates reference frame:
1. Default construction and a configured reference point
2. LOCAL <-> geodetic conversion of simulator positions
3. Effect of the heading offset on LOCAL axes
4. Velocity conversion between LOCAL and GLOBAL (ENU)
5. Great-circle distance on a spherical Earth
6. Plot of a simulated square path in LOCAL and GLOBAL frames

Run from repository root:
    python examples/example_spherical_coordinates.py
"""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from simgeo.coords import FRAMES, CoordinateType, SphericalCoordinates, SurfaceType


def print_frames() -> None:
    """List the supported frames."""
    print("\nSupported frames:")
    for frame in FRAMES.values():
        print(f"  {frame.frame_type.name:<9} {frame.description}")


def plot_square_path(sc: SphericalCoordinates) -> None:
    """Plot a square driven in LOCAL coordinates, as seen in both frames."""
    corners = np.array(
        [[0.0, 0.0, 0.0], [50.0, 0.0, 0.0], [50.0, 50.0, 0.0],
         [0.0, 50.0, 0.0], [0.0, 0.0, 0.0]]
    )
    path_global = np.array(
        [sc.position_transform(p, CoordinateType.LOCAL2, CoordinateType.GLOBAL)
         for p in corners]
    )

    fig, ax = plt.subplots(figsize=(7, 7))
    ax.plot(corners[:, 0], corners[:, 1], "b-o", label="LOCAL2 (simulator axes)")
    ax.plot(path_global[:, 0], path_global[:, 1], "r-s", label="GLOBAL (East/North)")
    ax.set_xlabel("x / East (m)", fontsize=12)
    ax.set_ylabel("y / North (m)", fontsize=12)
    ax.set_title(
        f"Square path with heading {np.rad2deg(sc.heading_offset):.0f}°",
        fontsize=12, fontweight="bold",
    )
    ax.legend(fontsize=9, loc="upper right")
    ax.grid(True, alpha=0.3)
    ax.set_aspect("equal")

    plt.tight_layout()

    output_dir = Path(__file__).parent / "figs"
    output_dir.mkdir(exist_ok=True)
    output_path = output_dir / "spherical_coordinates_square_path.png"
    plt.savefig(output_path, dpi=150, bbox_inches="tight")
    print(f"\nPlot saved as: {output_path}")
    plt.close(fig)


def main() -> None:
    """Run spherical coordinates examples."""
    print("=" * 70)
    print("Spherical Coordinates Examples")
    print("=" * 70)

    print_frames()

    # Example 1: Default and configured reference frames
    print("\n1. Reference Frames")
    print("-" * 70)

    default_sc = SphericalCoordinates()
    print(f"Default:    {default_sc}")

    # Zurich, 500 m above the ellipsoid, simulator x-axis pointing East
    sc = SphericalCoordinates(
        SurfaceType.EARTH_WGS84,
        np.deg2rad(47.3667),
        np.deg2rad(8.55),
        500.0,
        0.0,
    )
    print(f"Configured: {sc}")
    print(f"Origin ECEF: {sc.transform_cache.origin_ecef}")

    # Example 2: LOCAL <-> geodetic
    print("\n2. LOCAL <-> Geodetic")
    print("-" * 70)
    print("LOCAL input negates the outbound heading rotation, so x/y come back mirrored.")

    for name, local in [
        ("Origin", np.array([0.0, 0.0, 0.0])),
        ("100m along x", np.array([100.0, 0.0, 0.0])),
        ("50m up", np.array([0.0, 0.0, 50.0])),
    ]:
        llh = sc.spherical_from_local_position(local)
        back = sc.local_from_spherical_position(llh)
        print(f"\n{name}:")
        print(f"  LOCAL: [{local[0]:.2f}, {local[1]:.2f}, {local[2]:.2f}] m")
        print(f"  LLH:   [{llh[0]:.8f}°, {llh[1]:.8f}°, {llh[2]:.3f} m]")
        print(f"  Back:  [{back[0]:.3f}, {back[1]:.3f}, {back[2]:.3f}] m")

    # Example 3: Heading offset
    print("\n3. Heading Offset")
    print("-" * 70)

    point = np.array([10.0, 0.0, 0.0])
    for heading_deg in (0.0, 45.0, 90.0):
        sc.heading_offset = np.deg2rad(heading_deg)
        enu = sc.position_transform(point, CoordinateType.LOCAL2, CoordinateType.GLOBAL)
        print(f"  heading {heading_deg:5.1f}°: LOCAL2 {point} -> "
              f"ENU [{enu[0]:.3f}, {enu[1]:.3f}, {enu[2]:.3f}]")

    # Example 4: Velocities
    print("\n4. Velocity Conversion")
    print("-" * 70)

    sc.heading_offset = np.deg2rad(30.0)
    v_local = np.array([1.0, 0.0, 0.0])
    v_global = sc.global_from_local_velocity(v_local)
    v_ecef = sc.velocity_transform(v_global, CoordinateType.GLOBAL, CoordinateType.ECEF)
    print(f"  LOCAL:  {v_local} m/s")
    print(f"  GLOBAL: [{v_global[0]:.4f}, {v_global[1]:.4f}, {v_global[2]:.4f}] m/s")
    print(f"  ECEF:   [{v_ecef[0]:.4f}, {v_ecef[1]:.4f}, {v_ecef[2]:.4f}] m/s")
    print(f"  Speed preserved: {np.linalg.norm(v_ecef):.6f} m/s")

    # Example 5: Distance
    print("\n5. Great-circle Distance")
    print("-" * 70)

    d = SphericalCoordinates.distance(
        np.deg2rad(47.3667), np.deg2rad(8.55),
        np.deg2rad(46.2044), np.deg2rad(6.1432),
    )
    print(f"  Zurich -> Geneva: {d / 1000.0:.1f} km")

    # Example 6: Plot
    sc.heading_offset = np.deg2rad(30.0)
    plot_square_path(sc)

    print("\n" + "=" * 70)
    print("Examples completed successfully!")
    print("=" * 70)


if __name__ == "__main__":
    main()
