"""ray_tracer.core — Foundation layer.

Contains the tuple algebra, colour model, canvas, PPM serialization,
settings loading, shared types and the report builder.
This module has NO dependencies on ray_tracer.scenes or ray_tracer.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
