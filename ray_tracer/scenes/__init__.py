"""Demo scenes built on the core types.

Every module here that defines a module-level `scene` (a Scene) is picked
up by ray_tracer.registry.discover(); no registration list to maintain.
"""
