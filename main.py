#!/usr/bin/env python3
"""
Raycaster - A Python Ray Casting Renderer

Main entry point for rendering scenes.
"""

import argparse
import logging
import sys
import time
from dataclasses import replace
from pathlib import Path

from raycaster.vec3 import Vector, Color, Point
from raycaster.camera import Camera
from raycaster.lights import Light
from raycaster.renderer import Renderer, RenderSettings
from raycaster.scene import Scene
from raycaster.scene_parser import SceneParseError, load_scene
from raycaster.shading import BlinnPhongShadingStrategy
from raycaster.shapes import Properties, Sphere
from raycaster.viewport import Viewport, Window


def create_demo_scene(settings: RenderSettings) -> Scene:
    """A red sphere lit by one white light from the upper left, behind the eye."""
    scene = Scene()
    shading = BlinnPhongShadingStrategy(honor_light_switch=settings.honor_light_switch)

    red = Properties(
        ambient=Color(0.1, 0.1, 0.1),
        diffuse=Color(1.0, 0.0, 0.0),
        specular=Color(1.0, 1.0, 1.0),
        specular_exponent=500
    )
    scene.add_shape(Sphere(Point(0, 0, 20), 3.0, red, shading))

    scene.add_light(Light(Vector(0.57735027, -0.57735027, 0.57735027), Color(1, 1, 1)))
    return scene


def create_demo_camera(settings: RenderSettings) -> Camera:
    """Eye at the origin looking down +z through a 2x2 viewport at z = 2."""
    viewport = Viewport(2, 2, Point(0, 0, 2))
    window = Window(settings.width, settings.height)
    return Camera(Point(0, 0, 0), viewport, window)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='Raycaster - A Python Ray Casting Renderer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --output render.png
  python main.py --width 1024 --height 1024 --threads 4
  python main.py --scene scenes/two_spheres.yaml --output two.png
        '''
    )

    parser.add_argument('--scene', type=str, default=None,
                        help='Scene file (YAML or JSON); renders the demo scene if omitted')
    parser.add_argument('--width', type=int, default=None, help='Image width (default: 500)')
    parser.add_argument('--height', type=int, default=None, help='Image height (default: 500)')
    parser.add_argument('--threads', type=int, default=None, help='Number of threads (0=auto)')
    parser.add_argument('--output', type=str, default='output.png', help='Output filename')
    parser.add_argument('--honor-light-switch', action='store_true',
                        help='Skip lights that are switched off')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log render details')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )

    print("=" * 60)
    print("Raycaster")
    print("=" * 60)

    try:
        if args.scene:
            print(f"\nLoading scene: {args.scene}")
            scene, camera, settings = load_scene(args.scene)
        else:
            print("\nCreating demo scene")
            settings = RenderSettings()
            scene = None
    except SceneParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    # Command line options override the scene file
    overrides = {}
    if args.width is not None:
        overrides['width'] = args.width
    if args.height is not None:
        overrides['height'] = args.height
    if args.threads is not None:
        overrides['num_threads'] = args.threads
    if args.honor_light_switch:
        overrides['honor_light_switch'] = True

    try:
        settings = replace(settings, **overrides)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if scene is None:
        scene = create_demo_scene(settings)
        camera = create_demo_camera(settings)
    else:
        camera.window = Window(settings.width, settings.height)
        if args.honor_light_switch:
            for shape in scene.shapes():
                shape.shading_strategy = BlinnPhongShadingStrategy(honor_light_switch=True)

    print(f"\nRender Settings:")
    print(f"  Resolution: {settings.width}x{settings.height}")
    print(f"  Threads: {settings.num_threads}")
    print(f"  Shapes in scene: {len(scene.shapes())}")
    print(f"  Lights in scene: {len(scene.lights())}")

    renderer = Renderer(settings)

    # Progress tracking
    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '█' * filled + '░' * (bar_len - filled)
            print(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    renderer.set_progress_callback(progress_callback)

    print("\nRendering...")
    start_time = time.time()

    pixels = renderer.render(scene, camera)

    elapsed = time.time() - start_time
    print(f"\nRender completed in {elapsed:.2f} seconds")
    if elapsed > 0:
        print(f"  Rays per second: {len(pixels) / elapsed:.0f}")

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    print(f"\nSaving to: {args.output}")
    renderer.save_image(pixels, str(output_path), settings.width, settings.height)

    print("\nDone!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
