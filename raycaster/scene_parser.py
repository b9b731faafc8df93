"""
Scene description language parser.

Supports a YAML (or JSON) scene description format with:
- Camera configuration (eyepoint and viewport)
- Render settings
- Materials library
- Objects (spheres with materials)
- Directional lights

Example scene file:
```yaml
camera:
  eye: [0, 0, 0]
  viewport:
    width: 2
    height: 2
    center: [0, 0, 2]

render:
  width: 500
  height: 500
  threads: 1

materials:
  red:
    ambient: [0.1, 0.1, 0.1]
    diffuse: [1.0, 0.0, 0.0]
    specular: [1.0, 1.0, 1.0]
    specular_exponent: 500

objects:
  - type: sphere
    center: [0, 0, 20]
    radius: 3
    material: red

lights:
  - direction: [0.57735027, -0.57735027, 0.57735027]
    color: [1, 1, 1]
```
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Dict, Any, Tuple

import yaml

from .vec3 import Vector, Point, Color
from .camera import Camera
from .lights import Light
from .renderer import RenderSettings
from .scene import Scene
from .shading import BlinnPhongShadingStrategy, ShadingStrategy
from .shapes import Properties, Sphere
from .viewport import Viewport, Window

logger = logging.getLogger(__name__)

_CORNERS = ('upper_left', 'upper_right', 'lower_left', 'lower_right')


class SceneParseError(Exception):
    """Error during scene parsing."""
    pass


class SceneParser:
    """Parser for scene description files."""

    def __init__(self):
        self.materials: Dict[str, Properties] = {}
        self.scene: Scene = Scene()
        self.settings: RenderSettings = RenderSettings()
        self.shading_strategy: ShadingStrategy = BlinnPhongShadingStrategy()

    def parse_file(self, filepath: str) -> Tuple[Scene, Camera, RenderSettings]:
        """Parse a scene file.

        Args:
            filepath: Path to the scene file (YAML or JSON)

        Returns:
            Tuple of (scene, camera, settings)
        """
        path = Path(filepath)
        if not path.exists():
            raise SceneParseError(f"Scene file not found: {filepath}")

        content = path.read_text()
        logger.debug("Parsing scene file %s", path)

        try:
            if path.suffix == '.json':
                data = json.loads(content)
            else:
                # YAML is a superset of JSON, so this covers both
                data = yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise SceneParseError(f"Cannot read scene file {filepath}: {exc}") from exc

        if not isinstance(data, dict):
            raise SceneParseError(f"Scene file must contain a mapping: {filepath}")

        return self.parse_dict(data)

    def parse_dict(self, data: Dict[str, Any]) -> Tuple[Scene, Camera, RenderSettings]:
        """Parse a scene from a dictionary.

        Args:
            data: Scene description dictionary

        Returns:
            Tuple of (scene, camera, settings)
        """
        # Settings first: the light switch option decides the shading strategy
        if 'render' in data:
            self._parse_settings(self._require_mapping(data['render'], 'render'))
        self.shading_strategy = BlinnPhongShadingStrategy(
            honor_light_switch=self.settings.honor_light_switch
        )

        # Parse materials next (objects reference them)
        if 'materials' in data:
            self._parse_materials(self._require_mapping(data['materials'], 'materials'))

        if 'objects' in data:
            self._parse_objects(self._require_list(data['objects'], 'objects'))

        if 'lights' in data:
            self._parse_lights(self._require_list(data['lights'], 'lights'))

        camera = self._parse_camera(self._require_mapping(data.get('camera', {}), 'camera'))

        logger.debug("Parsed %r", self.scene)
        return self.scene, camera, self.settings

    @staticmethod
    def _require_mapping(data: Any, where: str) -> Dict[str, Any]:
        if not isinstance(data, dict):
            raise SceneParseError(f"{where} must be a mapping, got {data!r}")
        return data

    @staticmethod
    def _require_list(data: Any, where: str) -> list:
        if not isinstance(data, list):
            raise SceneParseError(f"{where} must be a list, got {data!r}")
        return data

    @staticmethod
    def _parse_number(value: Any, where: str, kind: type = float):
        """Convert a scalar with ``kind``; booleans are rejected."""
        if isinstance(value, bool):
            raise SceneParseError(f"{where} must be a number, got {value!r}")
        try:
            return kind(value)
        except (TypeError, ValueError) as exc:
            raise SceneParseError(f"{where} must be a number, got {value!r}") from exc

    @staticmethod
    def _parse_flag(value: Any, where: str) -> bool:
        if not isinstance(value, bool):
            raise SceneParseError(f"{where} must be true or false, got {value!r}")
        return value

    def _parse_point(self, data: Any, where: str = 'point') -> Point:
        """Parse a Point from a list or an {x, y, z} mapping."""
        return Point(*self._parse_triple(data, 'xyz', where))

    def _parse_vector(self, data: Any, where: str = 'vector') -> Vector:
        """Parse a Vector from a list or an {x, y, z} mapping."""
        return Vector(*self._parse_triple(data, 'xyz', where))

    def _parse_triple(self, data: Any, keys: str, where: str) -> Tuple[float, float, float]:
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"{where} must have 3 components, got {len(data)}")
            return tuple(self._parse_number(v, where) for v in data)
        elif isinstance(data, dict):
            return tuple(self._parse_number(data.get(k, 0), f"{where}.{k}") for k in keys)
        else:
            raise SceneParseError(f"Cannot parse {where} from: {data!r}")

    def _parse_color(self, data: Any, where: str = 'color') -> Color:
        """Parse a Color from various formats."""
        if isinstance(data, str):
            # Handle hex colors
            if data.startswith('#') and len(data) == 7:
                try:
                    r = int(data[1:3], 16) / 255.0
                    g = int(data[3:5], 16) / 255.0
                    b = int(data[5:7], 16) / 255.0
                except ValueError as exc:
                    raise SceneParseError(f"{where}: bad hex color {data!r}") from exc
                return Color(r, g, b)
            raise SceneParseError(f"{where}: cannot parse color from string {data!r}")
        return Color(*self._parse_triple(data, 'rgb', where))

    def _parse_properties(self, mat_data: Dict[str, Any], where: str) -> Properties:
        return Properties(
            ambient=self._parse_color(mat_data.get('ambient', [0.0, 0.0, 0.0]), f"{where}.ambient"),
            diffuse=self._parse_color(mat_data.get('diffuse', [0.0, 0.0, 0.0]), f"{where}.diffuse"),
            specular=self._parse_color(mat_data.get('specular', [0.0, 0.0, 0.0]), f"{where}.specular"),
            specular_exponent=self._parse_number(
                mat_data.get('specular_exponent', 0), f"{where}.specular_exponent", int),
            reflection_coefficient=self._parse_number(
                mat_data.get('reflection', 0), f"{where}.reflection", int),
            refraction_coefficient=self._parse_number(
                mat_data.get('refraction', 0), f"{where}.refraction", int)
        )

    def _parse_materials(self, materials_data: Dict[str, Any]) -> None:
        """Parse materials section."""
        for name, mat_data in materials_data.items():
            where = f"materials.{name}"
            self.materials[name] = self._parse_properties(
                self._require_mapping(mat_data, where), where
            )

    def _get_material(self, mat_ref: Any, where: str) -> Properties:
        """Get material properties by name or inline definition."""
        if mat_ref is None:
            return Properties()
        if isinstance(mat_ref, str):
            if mat_ref not in self.materials:
                raise SceneParseError(f"{where}: unknown material {mat_ref!r}")
            return self.materials[mat_ref]
        elif isinstance(mat_ref, dict):
            return self._parse_properties(mat_ref, where)
        else:
            raise SceneParseError(f"{where}: invalid material reference {mat_ref!r}")

    def _parse_objects(self, objects_data: list) -> None:
        """Parse objects section."""
        for index, obj_data in enumerate(objects_data):
            where = f"objects[{index}]"
            obj_data = self._require_mapping(obj_data, where)
            obj_type = str(obj_data.get('type', 'sphere')).lower()
            properties = self._get_material(obj_data.get('material'), f"{where}.material")

            if obj_type == 'sphere':
                center = self._parse_point(obj_data.get('center', [0, 0, 0]), f"{where}.center")
                radius = self._parse_number(obj_data.get('radius', 1.0), f"{where}.radius")
                if radius <= 0:
                    raise SceneParseError(f"{where}: sphere radius must be positive, got {radius}")
                self.scene.add_shape(
                    Sphere(center, radius, properties, self.shading_strategy)
                )

            else:
                raise SceneParseError(f"{where}: unknown object type {obj_type!r}")

    def _parse_lights(self, lights_data: list) -> None:
        """Parse lights section."""
        for index, light_data in enumerate(lights_data):
            where = f"lights[{index}]"
            light_data = self._require_mapping(light_data, where)
            light_type = str(light_data.get('type', 'directional')).lower()
            if light_type != 'directional':
                raise SceneParseError(f"{where}: unknown light type {light_type!r}")

            direction = self._parse_vector(
                light_data.get('direction', [0, -1, 0]), f"{where}.direction")
            if direction.length() == 0:
                raise SceneParseError(f"{where}: light direction must not be zero")
            color = self._parse_color(light_data.get('color', [1, 1, 1]), f"{where}.color")
            on = self._parse_flag(self._switch_value(light_data), f"{where}.on")
            self.scene.add_light(Light(direction, color, on))

    @staticmethod
    def _switch_value(light_data: Dict[Any, Any]) -> Any:
        # YAML 1.1 reads a bare `on` key as the boolean True
        if 'on' in light_data:
            return light_data['on']
        return light_data.get(True, True)

    def _parse_viewport(self, viewport_data: Dict[str, Any]) -> Viewport:
        if all(corner in viewport_data for corner in _CORNERS):
            corners = [
                self._parse_point(viewport_data[corner], f"camera.viewport.{corner}")
                for corner in _CORNERS
            ]
            width = corners[1].x - corners[0].x
            height = corners[0].y - corners[2].y
            if width <= 0 or height <= 0:
                raise SceneParseError(f"Viewport corners give a {width}x{height} rectangle")
            return Viewport.from_corners(*corners)

        width = self._parse_number(viewport_data.get('width', 2.0), 'camera.viewport.width')
        height = self._parse_number(viewport_data.get('height', 2.0), 'camera.viewport.height')
        if width <= 0 or height <= 0:
            raise SceneParseError(f"Viewport size must be positive, got {width}x{height}")
        center = self._parse_point(viewport_data.get('center', [0, 0, 2]), 'camera.viewport.center')
        return Viewport(width, height, center)

    def _parse_camera(self, camera_data: Dict[str, Any]) -> Camera:
        """Parse camera section."""
        eye = self._parse_point(camera_data.get('eye', [0, 0, 0]), 'camera.eye')
        viewport = self._parse_viewport(
            self._require_mapping(camera_data.get('viewport', {}), 'camera.viewport')
        )
        window = Window(self.settings.width, self.settings.height)
        return Camera(eye, viewport, window)

    def _parse_settings(self, settings_data: Dict[str, Any]) -> None:
        """Parse render settings section."""
        width = self._parse_number(settings_data.get('width', 500), 'render.width', int)
        height = self._parse_number(settings_data.get('height', 500), 'render.height', int)
        threads = self._parse_number(settings_data.get('threads', 1), 'render.threads', int)
        honor = self._parse_flag(
            settings_data.get('honor_light_switch', False), 'render.honor_light_switch'
        )
        try:
            self.settings = RenderSettings(
                width=width,
                height=height,
                num_threads=threads,
                honor_light_switch=honor
            )
        except ValueError as exc:
            raise SceneParseError(f"Invalid render settings: {exc}") from exc



def load_scene(filepath: str) -> Tuple[Scene, Camera, RenderSettings]:
    """Convenience function to load a scene file.

    Args:
        filepath: Path to the scene file

    Returns:
        Tuple of (scene, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_file(filepath)


def parse_scene(data: Dict[str, Any]) -> Tuple[Scene, Camera, RenderSettings]:
    """Convenience function to parse a scene from a dictionary.

    Args:
        data: Scene description dictionary

    Returns:
        Tuple of (scene, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_dict(data)
