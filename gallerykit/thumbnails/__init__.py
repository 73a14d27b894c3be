"""
Thumbnail module: directory planning and the parallel generation pipeline.
"""
from .planner import ThumbnailDirectoryPlanner, safe_directory_name, source_directory
from .runner import PipelineRunner, generate_thumbnail

__all__ = [
    'ThumbnailDirectoryPlanner',
    'safe_directory_name',
    'source_directory',
    'PipelineRunner',
    'generate_thumbnail',
]
