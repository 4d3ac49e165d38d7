"""
Generate Spherical Transforms Dataset.

This script generates simulator-frame positions and velocities around a
reference point and converts them into the world frames handled by
SphericalCoordinates. The output is a set of reference values for checking
other implementations of the same frame conventions.

Frames written:
    - LOCAL2: simulator positions (heading-rotated ENU, meters)
    - GLOBAL: East-North-Up positions relative to the reference (meters)
    - ECEF: Earth-Centered Earth-Fixed positions (meters)
    - SPHERICAL: latitude/longitude (degrees) and height (meters)
    - Velocities in LOCAL and GLOBAL (m/s)

Presets:
    gazebo_origin   Reference at 0°N 0°E, heading 0°
    san_francisco   San Francisco, heading 0°
    tokyo           Tokyo, heading 45°
    zurich          Zurich, 500 m, heading -90°
"""

import argparse
import json
from pathlib import Path
from typing import Dict, Optional, Tuple

import numpy as np

from simgeo.coords import CoordinateType, SphericalCoordinates


# ============================================================================
# PRESET CONFIGURATIONS
# ============================================================================

PRESETS = {
    "gazebo_origin": {
        "description": "Reference at the equator and prime meridian",
        "surface": "EARTH_WGS84",
        "latitude_deg": 0.0,
        "longitude_deg": 0.0,
        "elevation_m": 0.0,
        "heading_deg": 0.0,
    },
    "san_francisco": {
        "description": "San Francisco (37.77°N, 122.42°W)",
        "surface": "EARTH_WGS84",
        "latitude_deg": 37.7749,
        "longitude_deg": -122.4194,
        "elevation_m": 0.0,
        "heading_deg": 0.0,
    },
    "tokyo": {
        "description": "Tokyo (35.68°N, 139.65°E), simulator rotated 45°",
        "surface": "EARTH_WGS84",
        "latitude_deg": 35.6762,
        "longitude_deg": 139.6503,
        "elevation_m": 40.0,
        "heading_deg": 45.0,
    },
    "zurich": {
        "description": "Zurich (47.37°N, 8.55°E), x-axis pointing North",
        "surface": "EARTH_WGS84",
        "latitude_deg": 47.3667,
        "longitude_deg": 8.55,
        "elevation_m": 500.0,
        "heading_deg": -90.0,
    },
}


# ============================================================================
# DATA GENERATION FUNCTIONS
# ============================================================================

def generate_local_positions(
    extent_m: float = 1000.0,
    n_points: int = 50,
    seed: int = 42,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate random simulator positions and velocities.

    Args:
        extent_m: Half-width of the square area around the origin (m).
        n_points: Number of sample points.
        seed: Random seed.

    Returns:
        Tuple of (positions, velocities), each [N×3], in the LOCAL2 frame.
    """
    rng = np.random.default_rng(seed)

    xy = rng.uniform(-extent_m, extent_m, (n_points, 2))
    # Heights: ground level up to a few tens of meters
    z = rng.uniform(0.0, 50.0, (n_points, 1))
    positions = np.hstack([xy, z])

    # Ground vehicle speeds up to 20 m/s, small vertical component
    speed = rng.uniform(0.0, 20.0, n_points)
    course = rng.uniform(-np.pi, np.pi, n_points)
    climb = rng.normal(0.0, 0.5, n_points)
    velocities = np.column_stack([speed * np.cos(course), speed * np.sin(course), climb])

    return positions, velocities


def convert_positions(
    sc: SphericalCoordinates,
    positions_local: np.ndarray,
) -> Dict[str, np.ndarray]:
    """
    Convert LOCAL2 positions into the GLOBAL, ECEF and SPHERICAL frames.

    Args:
        sc: Configured reference frame.
        positions_local: Positions in the LOCAL2 frame [N×3].

    Returns:
        Dictionary of arrays keyed by frame name; SPHERICAL lat/lon in degrees.
    """
    global_ = np.array(
        [sc.position_transform(p, CoordinateType.LOCAL2, CoordinateType.GLOBAL)
         for p in positions_local]
    )
    ecef = np.array(
        [sc.position_transform(p, CoordinateType.LOCAL2, CoordinateType.ECEF)
         for p in positions_local]
    )
    spherical = np.array(
        [sc.position_transform(p, CoordinateType.LOCAL2, CoordinateType.SPHERICAL)
         for p in positions_local]
    )
    spherical[:, :2] = np.rad2deg(spherical[:, :2])

    return {"GLOBAL": global_, "ECEF": ecef, "SPHERICAL": spherical}


def save_dataset(
    output_dir: Path,
    positions_local: np.ndarray,
    converted: Dict[str, np.ndarray],
    velocities_local: np.ndarray,
    velocities_global: np.ndarray,
    config: Dict,
) -> None:
    """Save spherical transforms dataset to disk."""
    output_dir.mkdir(parents=True, exist_ok=True)

    np.savetxt(
        output_dir / "local2_positions.txt",
        positions_local,
        fmt="%.6f",
        header="x (m), y (m), z (m) in LOCAL2 frame",
    )
    np.savetxt(
        output_dir / "global_positions.txt",
        converted["GLOBAL"],
        fmt="%.6f",
        header="East (m), North (m), Up (m) relative to reference",
    )
    np.savetxt(
        output_dir / "ecef_positions.txt",
        converted["ECEF"],
        fmt="%.4f",
        header="X (m), Y (m), Z (m) in ECEF frame",
    )
    np.savetxt(
        output_dir / "spherical_positions.txt",
        converted["SPHERICAL"],
        fmt="%.10f %.10f %.4f",
        header="latitude (deg), longitude (deg), height (m)",
    )
    np.savetxt(
        output_dir / "local_velocities.txt",
        velocities_local,
        fmt="%.6f",
        header="vx (m/s), vy (m/s), vz (m/s) in LOCAL frame",
    )
    np.savetxt(
        output_dir / "global_velocities.txt",
        velocities_global,
        fmt="%.6f",
        header="vE (m/s), vN (m/s), vU (m/s) in GLOBAL frame",
    )

    with open(output_dir / "config.json", "w") as f:
        json.dump(config, f, indent=2)

    print(f"\n  Saved dataset to: {output_dir}")
    print(f"    Files: 7 files (LOCAL2, GLOBAL, ECEF, SPHERICAL, 2x velocity, config)")
    print(f"    Points: {len(positions_local)}")


def generate_dataset(
    output_dir: str,
    preset: Optional[str] = None,
    latitude_deg: float = 0.0,
    longitude_deg: float = 0.0,
    elevation_m: float = 0.0,
    heading_deg: float = 0.0,
    extent_m: float = 1000.0,
    n_points: int = 50,
    seed: int = 42,
) -> Dict:
    """
    Generate spherical transforms dataset.

    Args:
        output_dir: Output directory path.
        preset: Preset configuration name (overrides the reference arguments).
        latitude_deg: Reference latitude (degrees).
        longitude_deg: Reference longitude (degrees).
        elevation_m: Reference elevation (m).
        heading_deg: Heading offset (degrees).
        extent_m: Half-width of the sampled area (m).
        n_points: Number of sample points.
        seed: Random seed.

    Returns:
        The configuration dictionary written to config.json.
    """
    if preset is not None:
        reference = {k: v for k, v in PRESETS[preset].items() if k != "description"}
    else:
        reference = {
            "surface": "EARTH_WGS84",
            "latitude_deg": latitude_deg,
            "longitude_deg": longitude_deg,
            "elevation_m": elevation_m,
            "heading_deg": heading_deg,
        }

    print("\n" + "=" * 70)
    print(f"Generating Spherical Transforms Dataset: {Path(output_dir).name}")
    print("=" * 70)

    sc = SphericalCoordinates.from_dict(reference)
    print(f"  Reference: {sc}")

    print("\nStep 1: Generating simulator positions (LOCAL2)...")
    positions_local, velocities_local = generate_local_positions(extent_m, n_points, seed)
    print(f"  Extent: ±{extent_m:.0f} m, points: {n_points}")

    print("\nStep 2: Converting LOCAL2 -> GLOBAL, ECEF, SPHERICAL...")
    converted = convert_positions(sc, positions_local)
    ecef = converted["ECEF"]
    print(f"  ECEF X range: {ecef[:, 0].min()/1e3:.1f}km to {ecef[:, 0].max()/1e3:.1f}km")
    print(f"  ECEF Y range: {ecef[:, 1].min()/1e3:.1f}km to {ecef[:, 1].max()/1e3:.1f}km")
    print(f"  ECEF Z range: {ecef[:, 2].min()/1e3:.1f}km to {ecef[:, 2].max()/1e3:.1f}km")

    print("\nStep 3: Converting velocities LOCAL -> GLOBAL...")
    velocities_global = np.array(
        [sc.global_from_local_velocity(v) for v in velocities_local]
    )
    speed_error = np.abs(
        np.linalg.norm(velocities_global, axis=1) - np.linalg.norm(velocities_local, axis=1)
    )
    print(f"  Speed change: max {speed_error.max():.3e} m/s")

    print("\nStep 4: Verifying round-trip accuracy (SPHERICAL -> LOCAL2)...")
    recovered = np.array(
        [sc.position_transform(
            np.concatenate([np.deg2rad(llh[:2]), llh[2:]]),
            CoordinateType.SPHERICAL,
            CoordinateType.LOCAL2,
        ) for llh in converted["SPHERICAL"]]
    )
    roundtrip_error = np.linalg.norm(recovered - positions_local, axis=1)
    print(f"  Position error: max {roundtrip_error.max():.3e} m")

    config = {
        "dataset": "spherical_transforms",
        "preset": preset,
        "reference": sc.to_dict(),
        "sampling": {
            "extent_m": extent_m,
            "num_points": n_points,
        },
        "accuracy": {
            "roundtrip_position_m": float(roundtrip_error.max()),
            "velocity_speed_change_mps": float(speed_error.max()),
        },
        "seed": seed,
    }

    save_dataset(
        Path(output_dir),
        positions_local,
        converted,
        velocities_local,
        velocities_global,
        config,
    )

    print("\n" + "=" * 70)
    print("Dataset generation complete!")
    print("=" * 70)

    return config


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate Spherical Transforms Dataset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Presets:
  gazebo_origin   0°N 0°E, heading 0°
  san_francisco   San Francisco (37.77°N, 122.42°W)
  tokyo           Tokyo (35.68°N, 139.65°E), heading 45°
  zurich          Zurich (47.37°N, 8.55°E), 500 m, heading -90°

Examples:
  python scripts/generate_spherical_transforms_dataset.py --preset tokyo

  # Custom reference
  python scripts/generate_spherical_transforms_dataset.py \\
      --output data/sim/my_frames \\
      --latitude 40.7128 \\
      --longitude -74.0060 \\
      --heading 15
        """,
    )

    parser.add_argument(
        "--preset",
        type=str,
        choices=sorted(PRESETS),
        help="Use preset reference frame (overrides reference parameters)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="data/sim/spherical_transforms",
        help="Output directory (default: data/sim/spherical_transforms)",
    )

    ref_group = parser.add_argument_group("Reference Parameters")
    ref_group.add_argument(
        "--latitude", type=float, default=0.0, help="Reference latitude in degrees (default: 0.0)"
    )
    ref_group.add_argument(
        "--longitude", type=float, default=0.0, help="Reference longitude in degrees (default: 0.0)"
    )
    ref_group.add_argument(
        "--elevation", type=float, default=0.0, help="Reference elevation in meters (default: 0.0)"
    )
    ref_group.add_argument(
        "--heading", type=float, default=0.0, help="Heading offset in degrees (default: 0.0)"
    )

    sample_group = parser.add_argument_group("Sampling Parameters")
    sample_group.add_argument(
        "--extent", type=float, default=1000.0, help="Half-width of sampled area in meters (default: 1000.0)"
    )
    sample_group.add_argument(
        "--n-points", type=int, default=50, help="Number of sample points (default: 50)"
    )

    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")

    args = parser.parse_args()

    generate_dataset(
        output_dir=args.output,
        preset=args.preset,
        latitude_deg=args.latitude,
        longitude_deg=args.longitude,
        elevation_m=args.elevation,
        heading_deg=args.heading,
        extent_m=args.extent,
        n_points=args.n_points,
        seed=args.seed,
    )


if __name__ == "__main__":
    main()
