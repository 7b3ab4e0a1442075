"""
Example: Geodetic conversions between LLA, ECEF, and ENU frames.

This script demonstrates the geoconvert API:
    1. Convert geodetic coordinates (LLA) to ECEF and back
    2. Express a nearby point in a local ENU frame and back
    3. Invert the 4x4 ENU -> ECEF homogeneous transform
    4. Walk a square path in ENU and check the round-trip error

Can run with:
    - Default: python demos/example_geodetic_conversion.py
    - Save the figure only: python demos/example_geodetic_conversion.py --output figs/enu.png --no-show
"""

import argparse
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from geoconvert.coords import (
    ecef_from_lla,
    enu_from_lla,
    lla_from_ecef,
    lla_from_enu,
)
from geoconvert.coords.transforms import _ecef_from_enu_transform
from geoconvert.linalg import invert_matrix

# Red Square, Moscow
REF_LLA = (55.753708, 37.620034, 154.0)
POINT_LLA = (55.754066, 37.621734, 153.0)


def square_path(side: float = 200.0, n_per_side: int = 25) -> np.ndarray:
    """Generate a closed square path in ENU centered on the origin.

    Args:
        side: Side length in meters.
        n_per_side: Samples per side.

    Returns:
        ENU points of shape (4 * n_per_side, 3), all at up = 0.
    """
    h = side / 2.0
    corners = np.array([[-h, -h], [h, -h], [h, h], [-h, h], [-h, -h]])
    segments = []
    for start, end in zip(corners[:-1], corners[1:]):
        s = np.linspace(0.0, 1.0, n_per_side, endpoint=False)[:, None]
        segments.append(start + s * (end - start))
    en = np.vstack(segments)
    return np.column_stack([en, np.zeros(len(en))])


def run_round_trip(path_enu: np.ndarray) -> np.ndarray:
    """Map ENU -> LLA -> ENU and return the per-point error norm (m)."""
    errors = np.empty(len(path_enu))
    for i, (e, n, u) in enumerate(path_enu):
        lla = lla_from_enu(e, n, u, *REF_LLA)
        enu = enu_from_lla(*lla, *REF_LLA)
        errors[i] = np.linalg.norm(np.array(enu) - path_enu[i])
    return errors


def plot_results(path_enu: np.ndarray, errors: np.ndarray, output: str, show: bool) -> None:
    """Plot the ENU path and the round-trip error."""
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    fig.suptitle("ENU <-> LLA Round Trip", fontsize=14, fontweight="bold")

    ax = axes[0]
    ax.plot(path_enu[:, 0], path_enu[:, 1], "b.-", linewidth=1, label="Path")
    ax.scatter(0.0, 0.0, s=150, c="red", marker="^", label="Reference", zorder=3)
    ax.set_xlabel("East [m]")
    ax.set_ylabel("North [m]")
    ax.set_title("Path in Local ENU Frame")
    ax.legend()
    ax.grid(True, alpha=0.3)
    ax.axis("equal")

    ax = axes[1]
    ax.semilogy(np.maximum(errors, 1e-16), "r-", linewidth=2)
    ax.set_xlabel("Sample")
    ax.set_ylabel("Round-trip Error [m]")
    ax.set_title("ENU -> LLA -> ENU Error")
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output:
        output_file = Path(output)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(output_file, dpi=150, bbox_inches="tight")
        print(f"Plot saved: {output_file}")

    if show:
        plt.show()
    plt.close(fig)


def main():
    """Run the geodetic conversion example."""
    parser = argparse.ArgumentParser(
        description="Geodetic conversion example (LLA / ECEF / ENU)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print conversions and show the plot
  python demos/example_geodetic_conversion.py

  # Save the plot without opening a window
  python demos/example_geodetic_conversion.py --output figs/enu.png --no-show
        """,
    )
    parser.add_argument(
        "--output", type=str, default="",
        help="Path to save the figure (default: do not save)",
    )
    parser.add_argument(
        "--no-show", action="store_true",
        help="Do not open an interactive plot window",
    )
    args = parser.parse_args()

    print("=" * 70)
    print("Geodetic Conversion Examples")
    print("=" * 70)

    # Example 1: LLA <-> ECEF
    print("\n1. LLA -> ECEF -> LLA")
    print("-" * 70)
    lat, lon, alt = POINT_LLA
    print(f"  Latitude:  {lat:.6f}°")
    print(f"  Longitude: {lon:.6f}°")
    print(f"  Altitude:  {alt:.1f} m")

    xyz = ecef_from_lla(*POINT_LLA)
    print(f"\nECEF Coordinates:")
    print(f"  X: {xyz.x:,.3f} m")
    print(f"  Y: {xyz.y:,.3f} m")
    print(f"  Z: {xyz.z:,.3f} m")

    lla = lla_from_ecef(*xyz)
    print(f"\nRecovered LLA: {lla.lat:.9f}°, {lla.lon:.9f}°, {lla.alt:.6f} m")

    # Example 2: LLA <-> ENU
    print("\n2. LLA -> ENU -> LLA")
    print("-" * 70)
    print(f"  Reference: {REF_LLA[0]:.6f}°, {REF_LLA[1]:.6f}°, {REF_LLA[2]:.1f} m")
    enu = enu_from_lla(*POINT_LLA, *REF_LLA)
    print(f"  ENU: [{enu.east:.3f}, {enu.north:.3f}, {enu.up:.3f}] m")
    lla = lla_from_enu(*enu, *REF_LLA)
    err = np.abs(np.array(lla) - np.array(POINT_LLA))
    print(f"  Round-trip error: lat {err[0]:.2e}°, lon {err[1]:.2e}°, alt {err[2]:.2e} m")

    # Example 3: Homogeneous transform inverse
    print("\n3. ENU -> ECEF Homogeneous Transform")
    print("-" * 70)
    T = _ecef_from_enu_transform(*REF_LLA)
    T_inv = invert_matrix(T)
    np.set_printoptions(precision=6, suppress=True)
    print(f"T =\n{T}")
    print(f"T^-1 =\n{T_inv}")
    print(f"  max |T @ T^-1 - I| = {np.max(np.abs(T @ T_inv - np.eye(4))):.2e}")

    # Example 4: Square path
    print("\n4. Square Path Round Trip")
    print("-" * 70)
    path_enu = square_path()
    errors = run_round_trip(path_enu)
    print(f"  Points: {len(path_enu)}")
    print(f"  Max round-trip error: {np.max(errors):.2e} m")
    print(f"  Mean round-trip error: {np.mean(errors):.2e} m")

    if args.output or not args.no_show:
        print(f"\nCreating visualization...")
        plot_results(path_enu, errors, args.output, show=not args.no_show)

    print("\n" + "=" * 70)
    print("EXAMPLE COMPLETED")
    print("=" * 70)


if __name__ == "__main__":
    main()
