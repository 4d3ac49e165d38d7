"""Reference frame state and transforms between simulator and world frames.

``SphericalCoordinates`` holds a reference point on an ellipsoidal surface
(latitude, longitude, elevation) and the heading of the simulator x-axis
from East. Positions and velocities are converted between the SPHERICAL,
ECEF, GLOBAL, LOCAL and LOCAL2 frames by routing through ECEF.

Every property setter rebuilds the transformation cache, so the cached
rotation matrices, heading terms and origin always match the current
reference. Transforms never mutate the instance.

Unknown frame or surface values are reported with ``RuntimeWarning`` and
a safe default is used; no exception is raised for them.

Example:
    >>> import numpy as np
    >>> sc = SphericalCoordinates(
    ...     SurfaceType.EARTH_WGS84,
    ...     np.deg2rad(47.3667), np.deg2rad(8.55), 500.0, 0.0)
    >>> llh = sc.spherical_from_local_position([100.0, 0.0, 0.0])
    >>> local = sc.local_from_spherical_position(llh)
"""

import warnings
from typing import Any, Dict, Optional, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from simgeo.coords.ellipsoid import WGS84, EllipsoidParameters, ellipsoid_for_surface
from simgeo.coords.frames import (
    CoordinateType,
    SurfaceType,
    as_coordinate_type,
    surface_type_from_string,
    surface_type_to_string,
)
from simgeo.coords.transforms import (
    TransformCache,
    build_transform_cache,
    ecef_to_llh,
    enu_to_heading_frame,
    llh_to_ecef,
    local2_to_enu,
    local_to_enu,
)
from simgeo.utils.angles import (
    angles_equal,
    degrees_to_radians,
    radians_to_degrees,
    values_equal,
)
from simgeo.utils.geometry import great_circle_distance

FrameLike = Union[CoordinateType, int, str]


class SphericalCoordinates:
    """Reference frame on a planetary surface, with cached transforms.

    Attributes:
        surface: Reference surface type.
        latitude_reference: Reference latitude in radians.
        longitude_reference: Reference longitude in radians.
        elevation_reference: Reference height above the ellipsoid in meters.
        heading_offset: Angle from East to the simulator x-axis in radians.
        ellipsoid: Ellipsoid parameters of the current surface (read-only).
        transform_cache: Derived rotation/heading/origin values (read-only).
    """

    def __init__(
        self,
        surface: SurfaceType = SurfaceType.EARTH_WGS84,
        latitude: float = 0.0,
        longitude: float = 0.0,
        elevation: float = 0.0,
        heading: float = 0.0,
    ) -> None:
        """Initialize the reference frame.

        Args:
            surface: Reference surface type (default EARTH_WGS84).
            latitude: Reference latitude in radians.
            longitude: Reference longitude in radians.
            elevation: Reference height above the ellipsoid in meters.
            heading: Heading offset in radians.
        """
        # Unsupported surfaces keep these parameters
        self._ellipsoid: EllipsoidParameters = WGS84
        self._surface = SurfaceType.EARTH_WGS84
        self._latitude_reference = float(latitude)
        self._longitude_reference = float(longitude)
        self._elevation_reference = float(elevation)
        self._heading_offset = float(heading)
        self._cache: Optional[TransformCache] = None

        self.set_surface(surface)

    @classmethod
    def from_other(cls, other: "SphericalCoordinates") -> "SphericalCoordinates":
        """Create an independent instance with the same reference frame.

        The surface and ellipsoid are copied as they are, so an unknown
        surface is not reported again.
        """
        result = cls.__new__(cls)
        result._ellipsoid = other._ellipsoid
        result._surface = other._surface
        result._latitude_reference = other._latitude_reference
        result._longitude_reference = other._longitude_reference
        result._elevation_reference = other._elevation_reference
        result._heading_offset = other._heading_offset
        result._update_transformation_matrix()
        return result

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "SphericalCoordinates":
        """Create an instance from a configuration dictionary.

        Keys (all optional): ``surface`` (name, default "EARTH_WGS84"),
        ``latitude_deg``, ``longitude_deg``, ``elevation_m``, ``heading_deg``.
        Unknown surface names fall back to EARTH_WGS84 with a warning.

        Args:
            config: Configuration mapping, e.g. loaded from JSON.

        Returns:
            Configured SphericalCoordinates.
        """
        surface = surface_type_from_string(config.get("surface", "EARTH_WGS84"))
        return cls(
            surface,
            degrees_to_radians(float(config.get("latitude_deg", 0.0))),
            degrees_to_radians(float(config.get("longitude_deg", 0.0))),
            float(config.get("elevation_m", 0.0)),
            degrees_to_radians(float(config.get("heading_deg", 0.0))),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable description of the reference frame."""
        return {
            "surface": surface_type_to_string(self._surface),
            "latitude_deg": float(radians_to_degrees(self._latitude_reference)),
            "longitude_deg": float(radians_to_degrees(self._longitude_reference)),
            "elevation_m": self._elevation_reference,
            "heading_deg": float(radians_to_degrees(self._heading_offset)),
        }

    # ------------------------------------------------------------------
    # Reference frame state
    # ------------------------------------------------------------------

    @property
    def surface(self) -> SurfaceType:
        return self._surface

    @surface.setter
    def surface(self, surface: SurfaceType) -> None:
        self.set_surface(surface)

    def set_surface(self, surface: SurfaceType) -> None:
        """Set the reference surface and install its ellipsoid parameters.

        Unsupported surfaces are stored but leave the current ellipsoid
        parameters unchanged, with a warning.
        """
        self._surface = surface

        ellipsoid = ellipsoid_for_surface(surface)
        if ellipsoid is None:
            warnings.warn(f"Unknown surface type[{surface}]", RuntimeWarning)
        else:
            self._ellipsoid = ellipsoid

        self._update_transformation_matrix()

    @property
    def latitude_reference(self) -> float:
        return self._latitude_reference

    @latitude_reference.setter
    def latitude_reference(self, angle: float) -> None:
        self._latitude_reference = float(angle)
        self._update_transformation_matrix()

    @property
    def longitude_reference(self) -> float:
        return self._longitude_reference

    @longitude_reference.setter
    def longitude_reference(self, angle: float) -> None:
        self._longitude_reference = float(angle)
        self._update_transformation_matrix()

    @property
    def elevation_reference(self) -> float:
        return self._elevation_reference

    @elevation_reference.setter
    def elevation_reference(self, elevation: float) -> None:
        self._elevation_reference = float(elevation)
        self._update_transformation_matrix()

    @property
    def heading_offset(self) -> float:
        return self._heading_offset

    @heading_offset.setter
    def heading_offset(self, angle: float) -> None:
        self._heading_offset = float(angle)
        self._update_transformation_matrix()

    @property
    def ellipsoid(self) -> EllipsoidParameters:
        return self._ellipsoid

    @property
    def transform_cache(self) -> TransformCache:
        return self._cache

    def _update_transformation_matrix(self) -> None:
        self._cache = build_transform_cache(
            self._latitude_reference,
            self._longitude_reference,
            self._elevation_reference,
            self._heading_offset,
            self._ellipsoid,
        )

    # ------------------------------------------------------------------
    # Convenience entry points
    # ------------------------------------------------------------------

    def spherical_from_local_position(self, xyz: ArrayLike) -> NDArray[np.float64]:
        """Convert a LOCAL position to geodetic coordinates.

        Args:
            xyz: Position in the LOCAL frame (m).

        Returns:
            [latitude (deg), longitude (deg), height (m)].
        """
        result = self.position_transform(
            xyz, CoordinateType.LOCAL, CoordinateType.SPHERICAL
        )
        result[:2] = radians_to_degrees(result[:2])
        return result

    def local_from_spherical_position(self, llh: ArrayLike) -> NDArray[np.float64]:
        """Convert geodetic coordinates to a LOCAL position.

        Args:
            llh: [latitude (deg), longitude (deg), height (m)].

        Returns:
            Position in the LOCAL frame (m).
        """
        spherical = np.array(llh, dtype=np.float64).reshape(3)
        spherical[:2] = degrees_to_radians(spherical[:2])
        return self.position_transform(
            spherical, CoordinateType.SPHERICAL, CoordinateType.LOCAL
        )

    def global_from_local_velocity(self, velocity: ArrayLike) -> NDArray[np.float64]:
        """Convert a LOCAL velocity to the GLOBAL (ENU) frame."""
        return self.velocity_transform(
            velocity, CoordinateType.LOCAL, CoordinateType.GLOBAL
        )

    def local_from_global_velocity(self, velocity: ArrayLike) -> NDArray[np.float64]:
        """Convert a GLOBAL (ENU) velocity to the LOCAL frame."""
        return self.velocity_transform(
            velocity, CoordinateType.GLOBAL, CoordinateType.LOCAL
        )

    @staticmethod
    def distance(lat_a: float, lon_a: float, lat_b: float, lon_b: float) -> float:
        """Great-circle distance in meters between two points given in radians.

        Uses a spherical Earth of mean radius, not the reference ellipsoid.
        """
        return great_circle_distance(lat_a, lon_a, lat_b, lon_b)

    # ------------------------------------------------------------------
    # General transforms
    # ------------------------------------------------------------------

    def position_transform(
        self,
        position: ArrayLike,
        in_type: FrameLike,
        out_type: FrameLike,
    ) -> NDArray[np.float64]:
        """Convert a position between two coordinate frames.

        SPHERICAL positions are [latitude (rad), longitude (rad), height (m)];
        all other frames are Cartesian in meters. Conversion goes through ECEF.

        Args:
            position: Position expressed in ``in_type``.
            in_type: Frame of the input position.
            out_type: Requested output frame.

        Returns:
            Position expressed in ``out_type``. If either frame is not
            recognized, a copy of the input is returned and a warning issued.
        """
        pos = np.array(position, dtype=np.float64).reshape(3)

        in_frame = as_coordinate_type(in_type)
        if in_frame is None:
            warnings.warn(f"Invalid coordinate type[{in_type}]", RuntimeWarning)
            return pos
        out_frame = as_coordinate_type(out_type)
        if out_frame is None:
            warnings.warn(f"Unknown coordinate type[{out_type}]", RuntimeWarning)
            return pos

        if in_frame == out_frame:
            return pos

        cache = self._cache

        # Convert whatever arrives to ECEF
        if in_frame == CoordinateType.LOCAL:
            enu = local_to_enu(pos, cache.cos_heading, cache.sin_heading)
            ecef = cache.origin_ecef + cache.rot_global_to_ecef @ enu
        elif in_frame == CoordinateType.LOCAL2:
            enu = local2_to_enu(pos, cache.cos_heading, cache.sin_heading)
            ecef = cache.origin_ecef + cache.rot_global_to_ecef @ enu
        elif in_frame == CoordinateType.GLOBAL:
            ecef = cache.origin_ecef + cache.rot_global_to_ecef @ pos
        elif in_frame == CoordinateType.SPHERICAL:
            ecef = llh_to_ecef(pos[0], pos[1], pos[2], self._ellipsoid)
        else:
            ecef = pos

        # Convert ECEF to the requested frame
        if out_frame == CoordinateType.SPHERICAL:
            return ecef_to_llh(ecef[0], ecef[1], ecef[2], self._ellipsoid)
        if out_frame == CoordinateType.GLOBAL:
            return cache.rot_ecef_to_global @ (ecef - cache.origin_ecef)
        if out_frame in (CoordinateType.LOCAL, CoordinateType.LOCAL2):
            enu = cache.rot_ecef_to_global @ (ecef - cache.origin_ecef)
            return enu_to_heading_frame(enu, cache.cos_heading, cache.sin_heading)
        return np.array(ecef, dtype=np.float64)

    def velocity_transform(
        self,
        velocity: ArrayLike,
        in_type: FrameLike,
        out_type: FrameLike,
    ) -> NDArray[np.float64]:
        """Convert a velocity between two Cartesian coordinate frames.

        Only the rotational part of each frame change applies; the origin
        translation does not. Velocities have no SPHERICAL form, so a
        SPHERICAL frame on either side returns the input unchanged.

        Args:
            velocity: Velocity expressed in ``in_type`` (m/s).
            in_type: Frame of the input velocity.
            out_type: Requested output frame.

        Returns:
            Velocity expressed in ``out_type``.
        """
        vel = np.array(velocity, dtype=np.float64).reshape(3)

        in_frame = as_coordinate_type(in_type)
        out_frame = as_coordinate_type(out_type)
        if CoordinateType.SPHERICAL in (in_frame, out_frame):
            return vel
        if in_frame is None:
            warnings.warn(f"Unknown coordinate type[{in_type}]", RuntimeWarning)
            return vel
        if out_frame is None:
            warnings.warn(f"Unknown coordinate type[{out_type}]", RuntimeWarning)
            return vel

        if in_frame == out_frame:
            return vel

        cache = self._cache

        # First, rotate into ECEF
        if in_frame == CoordinateType.LOCAL:
            ecef = cache.rot_global_to_ecef @ local_to_enu(
                vel, cache.cos_heading, cache.sin_heading
            )
        elif in_frame == CoordinateType.LOCAL2:
            ecef = cache.rot_global_to_ecef @ local2_to_enu(
                vel, cache.cos_heading, cache.sin_heading
            )
        elif in_frame == CoordinateType.GLOBAL:
            ecef = cache.rot_global_to_ecef @ vel
        else:
            ecef = vel

        # Then rotate into the requested frame
        if out_frame == CoordinateType.GLOBAL:
            return cache.rot_ecef_to_global @ ecef
        if out_frame in (CoordinateType.LOCAL, CoordinateType.LOCAL2):
            enu = cache.rot_ecef_to_global @ ecef
            return enu_to_heading_frame(enu, cache.cos_heading, cache.sin_heading)
        return np.array(ecef, dtype=np.float64)

    # ------------------------------------------------------------------
    # Comparison and copying
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SphericalCoordinates):
            return NotImplemented
        return (
            self._surface == other._surface
            and angles_equal(self._latitude_reference, other._latitude_reference)
            and angles_equal(self._longitude_reference, other._longitude_reference)
            and values_equal(self._elevation_reference, other._elevation_reference)
            and angles_equal(self._heading_offset, other._heading_offset)
        )

    __hash__ = None

    def __copy__(self) -> "SphericalCoordinates":
        return type(self).from_other(self)

    def __deepcopy__(self, memo: Dict[int, Any]) -> "SphericalCoordinates":
        result = type(self).from_other(self)
        memo[id(self)] = result
        return result

    def __repr__(self) -> str:
        """Return string representation of the reference frame."""
        return (
            f"SphericalCoordinates(surface={self._surface}, "
            f"latitude={np.rad2deg(self._latitude_reference):.6f}°, "
            f"longitude={np.rad2deg(self._longitude_reference):.6f}°, "
            f"elevation={self._elevation_reference:.3f} m, "
            f"heading={np.rad2deg(self._heading_offset):.3f}°)"
        )
