"""Selection Visualizer: settings for a region-selection particle outline.

Loads the visualizer's YAML settings document into a typed, reloadable
registry and exposes per-player visualizer toggles.

Modules:
    context: Application context factory (create_visualizer_context)
"""

from .context import VisualizerContext, create_visualizer_context

__all__ = ["VisualizerContext", "create_visualizer_context"]
