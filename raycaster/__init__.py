"""
Raycaster - A Python Ray Casting Renderer

Casts one ray per pixel from a single eyepoint through a viewport and
shades the nearest hit with a Blinn-Phong local illumination model:
- Sphere primitives
- Directional lights with on/off switches
- Pluggable per-shape shading strategies
- YAML/JSON scene descriptions
- PNG output
"""

__version__ = "0.1.0"
__author__ = "Raycaster Team"

from .vec3 import Vector, Point, Color, DegenerateVectorError
from .ray import Ray
from .shapes import Shape, Sphere, Properties, LocalCalculations
from .lights import Light
from .shading import ShadingStrategy, BlinnPhongShadingStrategy
from .viewport import Viewport, Window
from .sampler import Sample, Sampler, SampleIterator
from .scene import Scene
from .camera import Camera, Pixel
from .renderer import Renderer, RenderSettings
from .scene_parser import SceneParser, SceneParseError, load_scene, parse_scene
