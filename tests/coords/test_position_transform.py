"""Unit tests for position transforms between all frame pairs.

Test cases include:
- Identity and round trips for every frame pair
- ECEF pivot consistency
- Heading sign convention (regression against explicit formulas)
- LOCAL input convention, which is not the inverse of LOCAL output
- Degree-based geodetic entry points
- Unknown frame identifiers
"""

import itertools
import unittest
import warnings

import numpy as np

from simgeo.coords import CoordinateType, SphericalCoordinates, SurfaceType

ALL_FRAMES = list(CoordinateType)
REVERSIBLE_FRAMES = [
    CoordinateType.LOCAL2,
    CoordinateType.GLOBAL,
    CoordinateType.SPHERICAL,
    CoordinateType.ECEF,
]


def assert_position_close(testcase, actual, desired, frame) -> None:
    """Compare positions with a tolerance suited to the frame."""
    if frame == CoordinateType.SPHERICAL:
        np.testing.assert_allclose(actual[:2], desired[:2], atol=1e-9)
        testcase.assertAlmostEqual(actual[2], desired[2], delta=1e-3)
    else:
        np.testing.assert_allclose(actual, desired, atol=1e-3)


class TestPositionTransformFramePairs(unittest.TestCase):
    """Test transforms across every pair of frames."""

    def setUp(self) -> None:
        self.sc = SphericalCoordinates(
            SurfaceType.EARTH_WGS84,
            np.deg2rad(47.3667),
            np.deg2rad(8.55),
            500.0,
            np.deg2rad(30.0),
        )
        self.samples_local2 = [
            np.array([0.0, 0.0, 0.0]),
            np.array([100.0, 200.0, 10.0]),
            np.array([-500.0, 300.0, -20.0]),
            np.array([1234.5, -987.6, 55.0]),
        ]

    def sample_in(self, frame):
        """Express the sample points in the given frame."""
        return [
            self.sc.position_transform(p, CoordinateType.LOCAL2, frame)
            for p in self.samples_local2
        ]

    def test_identity(self) -> None:
        """Test that transforming into the same frame returns the input."""
        for frame in ALL_FRAMES:
            for p in self.sample_in(frame):
                with self.subTest(frame=frame, p=p):
                    result = self.sc.position_transform(p, frame, frame)
                    np.testing.assert_array_equal(result, p)
                    self.assertIsNot(result, p)

    def test_round_trip(self) -> None:
        """Test F -> G -> F for every pair of reversible frames."""
        for in_frame, out_frame in itertools.permutations(REVERSIBLE_FRAMES, 2):
            for p in self.sample_in(in_frame):
                with self.subTest(in_frame=in_frame, out_frame=out_frame, p=p):
                    there = self.sc.position_transform(p, in_frame, out_frame)
                    back = self.sc.position_transform(there, out_frame, in_frame)
                    assert_position_close(self, back, p, in_frame)

    def test_ecef_pivot_consistency(self) -> None:
        """Test that F -> ECEF -> G equals F -> G directly."""
        for in_frame, out_frame in itertools.permutations(ALL_FRAMES, 2):
            for p in self.sample_in(in_frame):
                with self.subTest(in_frame=in_frame, out_frame=out_frame, p=p):
                    direct = self.sc.position_transform(p, in_frame, out_frame)
                    ecef = self.sc.position_transform(p, in_frame, CoordinateType.ECEF)
                    pivot = self.sc.position_transform(ecef, CoordinateType.ECEF, out_frame)
                    np.testing.assert_allclose(pivot, direct, rtol=1e-12, atol=1e-9)

    def test_origin_maps_to_reference(self) -> None:
        """Test that the frame origin is the reference point."""
        origin = np.zeros(3)

        llh = self.sc.position_transform(origin, CoordinateType.GLOBAL, CoordinateType.SPHERICAL)
        self.assertAlmostEqual(llh[0], self.sc.latitude_reference, delta=1e-9)
        self.assertAlmostEqual(llh[1], self.sc.longitude_reference, delta=1e-9)
        self.assertAlmostEqual(llh[2], self.sc.elevation_reference, delta=1e-3)

        ecef = self.sc.position_transform(origin, CoordinateType.LOCAL, CoordinateType.ECEF)
        np.testing.assert_allclose(ecef, self.sc.transform_cache.origin_ecef, atol=1e-6)

    def test_global_matches_rotation(self) -> None:
        """Test GLOBAL <-> ECEF against the cached rotation and origin."""
        cache = self.sc.transform_cache
        enu = np.array([10.0, -20.0, 3.0])

        ecef = self.sc.position_transform(enu, CoordinateType.GLOBAL, CoordinateType.ECEF)

        np.testing.assert_allclose(ecef, cache.origin_ecef + cache.rot_global_to_ecef @ enu)

    def test_accepts_integer_and_name_frames(self) -> None:
        """Test that frames can be given as integers or names."""
        p = np.array([10.0, 20.0, 30.0])

        expected = self.sc.position_transform(p, CoordinateType.GLOBAL, CoordinateType.ECEF)
        np.testing.assert_array_equal(self.sc.position_transform(p, 3, 2), expected)
        np.testing.assert_array_equal(self.sc.position_transform(p, "global", "ECEF"), expected)

    def test_accepts_numpy_integer_frames(self) -> None:
        """Test frame ids read from a numpy array, without warnings."""
        p = np.array([10.0, 20.0, 30.0])
        ids = np.array([3, 2])

        expected = self.sc.position_transform(p, CoordinateType.GLOBAL, CoordinateType.ECEF)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = self.sc.position_transform(p, ids[0], ids[1])
            velocity = self.sc.velocity_transform(p, ids[0], ids[1])

        np.testing.assert_array_equal(result, expected)
        self.assertGreater(np.linalg.norm(result), 6.0e6)
        np.testing.assert_array_equal(
            velocity,
            self.sc.velocity_transform(p, CoordinateType.GLOBAL, CoordinateType.ECEF),
        )

    def test_does_not_mutate_input(self) -> None:
        """Test that the input array is left untouched."""
        p = np.array([1.0, 2.0, 3.0])
        self.sc.position_transform(p, CoordinateType.LOCAL, CoordinateType.SPHERICAL)
        np.testing.assert_array_equal(p, [1.0, 2.0, 3.0])


class TestHeadingConvention(unittest.TestCase):
    """Regression tests for the negated heading convention."""

    def setUp(self) -> None:
        self.sc = SphericalCoordinates(
            SurfaceType.EARTH_WGS84,
            np.deg2rad(-35.0),
            np.deg2rad(149.0),
            600.0,
            np.deg2rad(90.0),
        )

    def test_global_to_local_heading_90(self) -> None:
        """Test that GLOBAL North maps to LOCAL +x at heading 90°."""
        north = np.array([0.0, 1.0, 0.0])
        east = np.array([1.0, 0.0, 0.0])

        local_north = self.sc.position_transform(north, CoordinateType.GLOBAL, CoordinateType.LOCAL)
        local_east = self.sc.position_transform(east, CoordinateType.GLOBAL, CoordinateType.LOCAL)

        np.testing.assert_allclose(local_north, [1.0, 0.0, 0.0], atol=1e-6)
        np.testing.assert_allclose(local_east, [0.0, -1.0, 0.0], atol=1e-6)

        # An un-negated heading would send North to LOCAL -x
        self.assertGreater(local_north[0], 0.0)

    def test_local2_to_global_heading_90(self) -> None:
        """Test that LOCAL2 +x points North at heading 90°."""
        result = self.sc.position_transform(
            np.array([1.0, 0.0, 0.0]), CoordinateType.LOCAL2, CoordinateType.GLOBAL
        )
        np.testing.assert_allclose(result, [0.0, 1.0, 0.0], atol=1e-6)

    def test_local_to_global_explicit_formula(self) -> None:
        """Test LOCAL -> GLOBAL against x' = -x·c + y·s, y' = -x·s - y·c."""
        heading = np.deg2rad(90.0)
        c = np.cos(-heading)
        s = np.sin(-heading)
        x, y, z = 3.0, 4.0, 5.0

        result = self.sc.position_transform(
            np.array([x, y, z]), CoordinateType.LOCAL, CoordinateType.GLOBAL
        )

        np.testing.assert_allclose(result, [-x * c + y * s, -x * s - y * c, z], atol=1e-6)
        np.testing.assert_allclose(result, [-4.0, 3.0, 5.0], atol=1e-6)

    def test_global_to_local_explicit_formula(self) -> None:
        """Test GLOBAL -> LOCAL and LOCAL2 against x' = x·c - y·s, y' = x·s + y·c."""
        for heading_deg in (0.0, 30.0, 90.0, -135.0):
            self.sc.heading_offset = np.deg2rad(heading_deg)
            c = np.cos(-self.sc.heading_offset)
            s = np.sin(-self.sc.heading_offset)
            x, y, z = 7.0, -2.0, 1.5

            for out_frame in (CoordinateType.LOCAL, CoordinateType.LOCAL2):
                with self.subTest(heading=heading_deg, out_frame=out_frame):
                    result = self.sc.position_transform(
                        np.array([x, y, z]), CoordinateType.GLOBAL, out_frame
                    )
                    np.testing.assert_allclose(
                        result, [x * c - y * s, x * s + y * c, z], atol=1e-6
                    )

    def test_local_input_is_negated_output(self) -> None:
        """Test that LOCAL -> GLOBAL -> LOCAL negates x and y at heading 0."""
        self.sc.heading_offset = 0.0
        p = np.array([12.0, -7.0, 3.0])

        g = self.sc.position_transform(p, CoordinateType.LOCAL, CoordinateType.GLOBAL)
        back = self.sc.position_transform(g, CoordinateType.GLOBAL, CoordinateType.LOCAL)

        np.testing.assert_allclose(g, [-12.0, 7.0, 3.0], atol=1e-6)
        np.testing.assert_allclose(back, [-12.0, 7.0, 3.0], atol=1e-6)


class TestGeodeticEntryPoints(unittest.TestCase):
    """Test the degree-based LOCAL <-> SPHERICAL wrappers."""

    def setUp(self) -> None:
        self.sc = SphericalCoordinates()

    def test_reference_maps_to_local_origin(self) -> None:
        """Test that the reference point is the LOCAL origin."""
        local = self.sc.local_from_spherical_position([0.0, 0.0, 0.0])
        np.testing.assert_allclose(local, [0.0, 0.0, 0.0], atol=1e-6)

    def test_one_degree_east_at_equator(self) -> None:
        """Test a point 1° of longitude east of the reference."""
        local = self.sc.local_from_spherical_position([0.0, 1.0, 0.0])
        glob = self.sc.position_transform(
            np.deg2rad([0.0, 1.0]).tolist() + [0.0],
            CoordinateType.SPHERICAL,
            CoordinateType.GLOBAL,
        )

        # Chord on the equator of radius a
        self.assertAlmostEqual(np.linalg.norm(local), 111318.0, delta=5.0)
        self.assertGreater(glob[0], 111000.0)
        self.assertAlmostEqual(glob[1], 0.0, delta=1e-6)
        np.testing.assert_allclose(local, glob, atol=1e-6)

    def test_spherical_from_local_in_degrees(self) -> None:
        """Test that the geodetic output is in degrees."""
        self.sc.latitude_reference = np.deg2rad(47.0)
        self.sc.longitude_reference = np.deg2rad(8.0)
        self.sc.elevation_reference = 400.0

        llh = self.sc.spherical_from_local_position([0.0, 0.0, 0.0])

        np.testing.assert_allclose(llh[:2], [47.0, 8.0], atol=1e-8)
        self.assertAlmostEqual(llh[2], 400.0, delta=1e-3)

    def test_wrappers_round_trip_vertical_offset(self) -> None:
        """Test LOCAL -> degrees -> LOCAL for a point above the origin."""
        self.sc.latitude_reference = np.deg2rad(-12.0)
        self.sc.heading_offset = np.deg2rad(60.0)
        p = np.array([0.0, 0.0, 25.0])

        llh = self.sc.spherical_from_local_position(p)
        back = self.sc.local_from_spherical_position(llh)

        np.testing.assert_allclose(back, p, atol=1e-3)

    def test_heading_zero_local_x_is_mirrored(self) -> None:
        """Test that LOCAL -x input lands East when heading is zero."""
        llh = self.sc.spherical_from_local_position([-1000.0, 0.0, 0.0])
        # LOCAL input negates x, so -1000 lands 1000 m East
        self.assertGreater(llh[1], 0.0)
        self.assertAlmostEqual(llh[0], 0.0, delta=1e-9)


class TestInvalidFrames(unittest.TestCase):
    """Test handling of unknown frame identifiers."""

    def setUp(self) -> None:
        self.sc = SphericalCoordinates()
        self.p = np.array([1.0, 2.0, 3.0])

    def test_unknown_input_frame(self) -> None:
        """Test that an unknown input frame returns the input with a warning."""
        with self.assertWarns(RuntimeWarning):
            result = self.sc.position_transform(self.p, 42, CoordinateType.ECEF)
        np.testing.assert_array_equal(result, self.p)

    def test_unknown_output_frame(self) -> None:
        """Test that an unknown output frame returns the input with a warning."""
        with self.assertWarns(RuntimeWarning):
            result = self.sc.position_transform(self.p, CoordinateType.GLOBAL, "NED")
        np.testing.assert_array_equal(result, self.p)


if __name__ == "__main__":
    unittest.main()
