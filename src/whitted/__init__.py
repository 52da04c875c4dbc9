"""Deterministic Whitted-style ray tracer.

This package renders scenes of transformed primitives by recursive ray
tracing, with support for:
- Phong lighting with hard shadows from point lights
- Recursive reflection and refraction with Fresnel (Schlick) blending
- Geometric primitives (spheres, planes, cubes, cylinders, cones, triangles)
- Groups with bounding-box pruning
- Parallel pixel rendering over a shared read-only scene

Subpackages:
    core: Tuples, matrices, transformations, rays, canvas and the render driver
    geometry: Bounding boxes, the shape abstraction and its primitives
    materials: Phong materials and procedural patterns
    scene: Lights, intersection bookkeeping, world shading and canonical scenes
    camera: Pinhole camera mapping pixels to primary rays
    preview: Image export utilities
"""

__version__ = "0.1.0"
