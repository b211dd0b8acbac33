"""Rendering subpackage.

Turns immutable ``State`` snapshots into Pillow images for a presentation
layer. Nothing in the engine depends on it; a session listener typically
calls :meth:`push_grid.renderer.image.ImageRenderer.render` after every
accepted tick and redraws the whole board.

See :mod:`push_grid.renderer.image` for palette and layering rules.
"""
